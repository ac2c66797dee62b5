"""Reflection host registry.

Selects a host by emit format instead of a class hierarchy.

The "typescript" entry point selects the canonical host, which only
needs a ProgramContext over source in decorator syntax. The shipped
front end (TreeSitterParser) parses JavaScript: decorators are
accepted, type annotations raise ParsingError. TypeScript sources
need a TypeScript-capable ProgramContext.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, assert_never

from ngreflect.application.hosts.canonical import CanonicalReflectionHost
from ngreflect.application.hosts.static_properties import Esm2015ReflectionHost
from ngreflect.application.hosts.wrapped_functions import Esm5ReflectionHost
from ngreflect.domain.exceptions.unsupported import UnknownEmitFormatError
from ngreflect.domain.model.enums import EmitFormat

if TYPE_CHECKING:
    from ngreflect.domain.model.configuration import ReflectionConfig
    from ngreflect.domain.ports.reflection_host import ReflectionHost

# Package entry-point property → emit format of the file it points to
ENTRY_POINT_FORMATS = MappingProxyType(
    {
        "fesm2015": EmitFormat.STATIC_PROPERTIES,
        "esm2015": EmitFormat.STATIC_PROPERTIES,
        "fesm5": EmitFormat.WRAPPED_FUNCTIONS,
        "esm5": EmitFormat.WRAPPED_FUNCTIONS,
        "module": EmitFormat.WRAPPED_FUNCTIONS,
        # Needs a TypeScript-capable ProgramContext (see module docstring)
        "typescript": EmitFormat.DECORATOR_SYNTAX,
    }
)


def format_for_entry_point(property_name: str) -> EmitFormat:
    """Map a package entry-point property to its emit format.

    Args:
        property_name: Entry-point property (e.g., "fesm2015")

    Returns:
        Emit format of files behind that entry point

    Raises:
        UnknownEmitFormatError: If the property is not known
    """
    try:
        return ENTRY_POINT_FORMATS[property_name]
    except KeyError as e:
        raise UnknownEmitFormatError(property_name) from e


def create_reflection_host(
    emit_format: EmitFormat,
    config: ReflectionConfig | None = None,
) -> ReflectionHost:
    """Create the reflection host for an emit format.

    Args:
        emit_format: Emit format of the package files
        config: Reflection configuration. Uses defaults if None.

    Returns:
        New host for that format
    """
    match emit_format:
        case EmitFormat.DECORATOR_SYNTAX:
            return CanonicalReflectionHost(config)
        case EmitFormat.STATIC_PROPERTIES:
            return Esm2015ReflectionHost(config)
        case EmitFormat.WRAPPED_FUNCTIONS:
            return Esm5ReflectionHost(config)
        case _:
            assert_never(emit_format)
