"""Parsing exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ngreflect.domain.exceptions.base import NgReflectError

if TYPE_CHECKING:
    from ngreflect.domain.model.location import Span


class ParsingError(NgReflectError):
    """Error during source code parsing.

    Attributes:
        path: File that failed to parse
        reason: Why parsing failed
        span: Position of the first offending node, None if unknown
    """

    def __init__(self, path: str, reason: str, span: Span | None = None) -> None:
        # FAIL-FIRST: validate required parameters
        if path is None:
            raise TypeError("path must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.path = path
        self.reason = reason
        self.span = span

        where = f"{path}:{span}" if span is not None else path
        super().__init__(f"Failed to parse {where}: {reason}")
