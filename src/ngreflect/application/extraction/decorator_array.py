"""Decorator-array extraction.

Turns an array of descriptor objects::

    [
        { type: Directive, args: [{ selector: '[ngFor][ngForOf]' },] },
        { type: Input },
    ]

into Decorator records. Elements that are not object literals, or
whose ``type`` is not a bare identifier, are dropped in place.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ngreflect.application.extraction.object_literal import find_property_value
from ngreflect.domain.model.decorator import Decorator
from ngreflect.domain.model.syntax import ArrayLiteral, Identifier, ObjectLiteral

if TYPE_CHECKING:
    from ngreflect.domain.model.syntax import Expression
    from ngreflect.domain.ports.program import ImportResolver

logger = logging.getLogger(__name__)

TYPE_PROPERTY = "type"
ARGS_PROPERTY = "args"


def extract_decorators(
    expression: Expression | None,
    resolver: ImportResolver,
) -> tuple[Decorator, ...]:
    """Extract decorators from an array of descriptor objects.

    Args:
        expression: Expression expected to be an array literal
        resolver: Import provenance lookup for the ``type`` identifiers

    Returns:
        Decorators in array order; empty if expression is not an array
    """
    if not isinstance(expression, ArrayLiteral):
        return ()

    decorators: list[Decorator] = []

    for element in expression.elements:
        decorator = extract_decorator(element, resolver)
        if decorator is not None:
            decorators.append(decorator)

    return tuple(decorators)


def extract_decorator(
    element: Expression,
    resolver: ImportResolver,
) -> Decorator | None:
    """Extract a single decorator from one descriptor object.

    Args:
        element: Array element expected to be ``{ type: X, args?: [...] }``
        resolver: Import provenance lookup

    Returns:
        Decorator, or None if the element does not match the shape
    """
    match element:
        case ObjectLiteral():
            pass
        case _:
            logger.debug("dropping non-object decorator descriptor at %s", element.span)
            return None

    type_value = find_property_value(element, TYPE_PROPERTY)
    match type_value:
        case Identifier(name=name):
            pass
        case _:
            logger.debug("dropping decorator descriptor without 'type' at %s", element.span)
            return None

    args_value = find_property_value(element, ARGS_PROPERTY)
    match args_value:
        case ArrayLiteral(elements=elements):
            args: tuple[Expression, ...] | None = elements
        case _:
            args = None

    return Decorator(
        name=name,
        provenance=resolver.import_of_identifier(type_value),
        node=element,
        args=args,
    )
