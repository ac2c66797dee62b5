"""Domain exceptions."""

from ngreflect.domain.exceptions.base import NgReflectError
from ngreflect.domain.exceptions.configuration import ConfigurationError
from ngreflect.domain.exceptions.parsing import ParsingError
from ngreflect.domain.exceptions.unsupported import NotSupportedError, UnknownEmitFormatError

__all__ = [
    "NgReflectError",
    "ParsingError",
    "NotSupportedError",
    "UnknownEmitFormatError",
    "ConfigurationError",
]
