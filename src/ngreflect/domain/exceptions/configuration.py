"""Configuration exceptions."""

from ngreflect.domain.exceptions.base import NgReflectError


class ConfigurationError(NgReflectError):
    """Error in reflection configuration.

    Attributes:
        field: Name of the invalid field (must not be empty)
        reason: Why the value is invalid (must not be empty)
    """

    def __init__(self, field: str, reason: str) -> None:
        # FAIL-FIRST validation
        if not field:
            raise ValueError("field must not be empty")
        if not reason:
            raise ValueError("reason must not be empty")

        self.field = field
        self.reason = reason
        super().__init__(f"Invalid configuration '{field}': {reason}")
