"""Object-literal property resolution.

Only simple ``name: value`` properties take part. Computed keys,
shorthand properties, spreads and method shorthands are ignored.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, assert_never

from ngreflect.domain.model.syntax import (
    ComputedPropertyAssignment,
    MethodShorthand,
    PropertyAssignment,
    ShorthandPropertyAssignment,
    SpreadAssignment,
)

if TYPE_CHECKING:
    from ngreflect.domain.model.syntax import Expression, ObjectLiteral, ObjectMember


def _simple_property(member: ObjectMember) -> PropertyAssignment | None:
    """Return member if it is a simple property assignment."""
    match member:
        case PropertyAssignment():
            return member
        case (
            ComputedPropertyAssignment()
            | ShorthandPropertyAssignment()
            | SpreadAssignment()
            | MethodShorthand()
        ):
            return None
        case _:
            assert_never(member)


def find_property_value(obj: ObjectLiteral, name: str) -> Expression | None:
    """Find the initializer of a named property.

    Identifier and string keys match by their unquoted name, so
    ``{ type: X }`` and ``{ "type": X }`` both answer ``type``.

    Args:
        obj: Object literal to search
        name: Property name

    Returns:
        Initializer of the first matching property, None if absent
    """
    for member in obj.properties:
        prop = _simple_property(member)
        if prop is not None and prop.name == name:
            return prop.initializer
    return None


def reflect_object_literal(obj: ObjectLiteral) -> Mapping[str, Expression]:
    """Reflect an object literal into an ordered name → initializer mapping.

    Keys keep the order of their first appearance. A repeated key
    takes the last initializer, as evaluating the literal would.

    Args:
        obj: Object literal to reflect

    Returns:
        Read-only mapping of property name to initializer expression
    """
    reflected: dict[str, Expression] = {}
    for member in obj.properties:
        prop = _simple_property(member)
        if prop is not None:
            reflected[prop.name] = prop.initializer
    return MappingProxyType(reflected)
