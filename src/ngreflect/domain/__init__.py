"""ngreflect domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, re, types, collections.abc
"""

from ngreflect.domain.exceptions import (
    ConfigurationError,
    NgReflectError,
    NotSupportedError,
    ParsingError,
    UnknownEmitFormatError,
)
from ngreflect.domain.model import (
    ClassMember,
    ClassSymbol,
    DecoratedClass,
    Decorator,
    EmitFormat,
    ImportProvenance,
    MemberKind,
    NotRecognized,
    NotSupported,
    Parameter,
    QueryResult,
    Recovered,
    ReflectionConfig,
    Span,
)
from ngreflect.domain.ports import ImportResolver, ProgramContext, ReflectionHost

__all__ = [
    # Exceptions
    "NgReflectError",
    "ParsingError",
    "NotSupportedError",
    "UnknownEmitFormatError",
    "ConfigurationError",
    # Enums
    "EmitFormat",
    "MemberKind",
    # Value objects
    "Span",
    "ImportProvenance",
    "Decorator",
    "Parameter",
    # Entities
    "ClassMember",
    "ClassSymbol",
    "DecoratedClass",
    # Results
    "Recovered",
    "NotRecognized",
    "NotSupported",
    "QueryResult",
    # Configuration
    "ReflectionConfig",
    # Ports
    "ImportResolver",
    "ProgramContext",
    "ReflectionHost",
]
