"""Unsupported recovery exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ngreflect.domain.exceptions.base import NgReflectError

if TYPE_CHECKING:
    from ngreflect.domain.model.enums import EmitFormat


class NotSupportedError(NgReflectError):
    """Recovery is not possible for this emit format.

    Raised when a NotSupported query result is unwrapped.
    Callers should treat it as a package-level failure.

    Attributes:
        operation: Host operation that was requested
        emit_format: Emit format of the host
        reason: Why the operation is unsupported
    """

    def __init__(self, operation: str, emit_format: EmitFormat, reason: str) -> None:
        # FAIL-FIRST validation
        if not operation:
            raise ValueError("operation must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.operation = operation
        self.emit_format = emit_format
        self.reason = reason
        super().__init__(f"{operation} is not supported for {emit_format.name}: {reason}")


class UnknownEmitFormatError(NgReflectError):
    """No reflection host is registered for an entry-point format.

    Attributes:
        property_name: Entry-point property that could not be mapped
    """

    def __init__(self, property_name: str) -> None:
        self.property_name = property_name
        super().__init__(f"Unknown emit format for entry point '{property_name}'")
