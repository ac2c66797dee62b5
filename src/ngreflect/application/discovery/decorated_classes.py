"""Decorated class discovery."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ngreflect.domain.model.decorated_class import DecoratedClass
from ngreflect.domain.model.query_result import NotRecognized, NotSupported, Recovered
from ngreflect.domain.model.syntax import walk

if TYPE_CHECKING:
    from ngreflect.domain.model.query_result import QueryResult
    from ngreflect.domain.model.syntax import SourceFile
    from ngreflect.domain.ports.program import ProgramContext
    from ngreflect.domain.ports.reflection_host import ReflectionHost

logger = logging.getLogger(__name__)


def find_decorated_classes(
    source_file: SourceFile,
    host: ReflectionHost,
    program: ProgramContext,
) -> QueryResult[tuple[DecoratedClass, ...]]:
    """Find every class-like declaration that carries class decorators.

    Nested scopes (e.g. IIFE bodies) are searched too. Classes without
    decorators are left out.

    Args:
        source_file: Parsed source file
        host: Reflection host for the file's emit format
        program: Program context the file belongs to

    Returns:
        Recovered(decorated classes in source order), or the first
        NotSupported answer (no partial result is returned)
    """
    found: list[DecoratedClass] = []

    for node in walk(source_file):
        if not host.is_class(node):
            continue

        symbol = program.symbol_of(node)  # type: ignore[arg-type]
        if symbol is None:
            logger.debug("class-like node at %s has no symbol", node.span)
            continue

        match host.get_class_decorators(symbol, program):
            case Recovered(value=decorators) if decorators:
                found.append(
                    DecoratedClass(
                        name=symbol.name,
                        node=symbol.declaration,
                        decorators=decorators,
                    )
                )
            case Recovered():
                pass
            case NotRecognized(reason=reason):
                logger.debug("skipping '%s': %s", symbol.name, reason)
            case NotSupported() as unsupported:
                logger.debug("aborting discovery in %s: %s", source_file.path, unsupported.reason)
                return unsupported

    logger.debug("found %d decorated class(es) in %s", len(found), source_file.path)
    return Recovered(tuple(found))
