"""Base exceptions for ngreflect domain."""


class NgReflectError(Exception):
    """Root exception for all ngreflect errors.

    All domain exceptions inherit from this.
    Allows catching all ngreflect-specific errors.
    """
