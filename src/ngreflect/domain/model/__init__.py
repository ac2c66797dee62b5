"""Domain model entities."""

from ngreflect.domain.model.class_member import ClassMember
from ngreflect.domain.model.class_symbol import ClassSymbol
from ngreflect.domain.model.configuration import ReflectionConfig
from ngreflect.domain.model.decorated_class import DecoratedClass
from ngreflect.domain.model.decorator import Decorator, ImportProvenance
from ngreflect.domain.model.enums import EmitFormat, MemberKind
from ngreflect.domain.model.location import Span
from ngreflect.domain.model.parameter import Parameter
from ngreflect.domain.model.query_result import (
    NotRecognized,
    NotSupported,
    QueryResult,
    Recovered,
)

__all__ = [
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
]
