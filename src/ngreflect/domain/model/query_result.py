"""Tagged query results.

Every host query returns one of three outcomes, so callers branch on
the outcome instead of catching exceptions:

    Recovered      - query answered (value may be empty)
    NotRecognized  - expected shape absent; no decorator concept applies
    NotSupported   - recovery impossible for this emit format

Example:
    match host.get_class_decorators(symbol, program):
        case Recovered(value=decorators):
            ...
        case NotSupported(reason=reason):
            fail_package(reason)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, NoReturn

from ngreflect.domain.exceptions.unsupported import NotSupportedError

if TYPE_CHECKING:
    from ngreflect.domain.model.enums import EmitFormat


@dataclass(frozen=True, slots=True)
class Recovered[T]:
    """Successful query.

    Attributes:
        value: Query answer
    """

    value: T

    def unwrap(self) -> T:
        """Return the recovered value."""
        return self.value


@dataclass(frozen=True, slots=True)
class NotRecognized:
    """Expected structure is absent.

    Attributes:
        reason: What was looked for and not found
    """

    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.reason:
            raise ValueError("reason must not be empty")

    def unwrap(self) -> None:
        """Not recognized unwraps to None."""
        return None


@dataclass(frozen=True, slots=True)
class NotSupported:
    """Recovery is not implementable for this emit format.

    Never coerce this into an empty result: downstream metadata
    regeneration cannot tell it apart from "no decorators".

    Attributes:
        operation: Host operation that was requested
        emit_format: Emit format of the host
        reason: Why the operation is unsupported
    """

    operation: str
    emit_format: EmitFormat
    reason: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.operation:
            raise ValueError("operation must not be empty")
        if not self.reason:
            raise ValueError("reason must not be empty")

    def unwrap(self) -> NoReturn:
        """Raise NotSupportedError."""
        raise NotSupportedError(self.operation, self.emit_format, self.reason)


type QueryResult[T] = Recovered[T] | NotRecognized | NotSupported
