"""Domain ports (interfaces/protocols)."""

from ngreflect.domain.ports.program import ImportResolver, ProgramContext
from ngreflect.domain.ports.reflection_host import DecoratorMap, ReflectionHost

__all__ = [
    "ImportResolver",
    "ProgramContext",
    "ReflectionHost",
    "DecoratorMap",
]
