"""Shared helpers for reflection hosts."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ngreflect.domain.model.query_result import NotRecognized, Recovered

if TYPE_CHECKING:
    from ngreflect.domain.model.query_result import QueryResult

logger = logging.getLogger(__name__)


def absorb[T](result: QueryResult[T], empty: T, operation: str) -> QueryResult[T]:
    """Answer NotRecognized with an empty value.

    Missing tables and unexpected shapes mean "no decorators".
    NotSupported passes through unchanged.

    Args:
        result: Result of a query function
        empty: Empty answer for this query
        operation: Host operation name (for logging)

    Returns:
        Recovered(empty) for NotRecognized, result otherwise
    """
    match result:
        case NotRecognized(reason=reason):
            logger.debug("%s: %s", operation, reason)
            return Recovered(empty)
        case _:
            return result
