"""Canonical reflection host.

Reads decorators written in decorator syntax, attached directly to
the declarations::

    @Directive({ selector: '[ngFor][ngForOf]' })
    class NgForOf {
        @Input() ngForOf;
    }

Format-specific hosts hold one as a delegate for the operations whose
recognition does not differ.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, assert_never

from ngreflect.application.hosts._base import absorb
from ngreflect.domain.model.class_member import ClassMember
from ngreflect.domain.model.configuration import ReflectionConfig
from ngreflect.domain.model.decorator import Decorator
from ngreflect.domain.model.enums import EmitFormat, MemberKind
from ngreflect.domain.model.parameter import Parameter
from ngreflect.domain.model.query_result import NotRecognized, Recovered
from ngreflect.domain.model.syntax import (
    CallExpression,
    ClassDeclaration,
    ConstructorDeclaration,
    FunctionDeclaration,
    Identifier,
    MethodDeclaration,
    MethodKind,
    ParameterDeclaration,
    PropertyDeclaration,
    VariableDeclaration,
)

if TYPE_CHECKING:
    from ngreflect.domain.model.class_symbol import ClassSymbol
    from ngreflect.domain.model.query_result import QueryResult
    from ngreflect.domain.model.syntax import (
        ClassElement,
        Declaration,
        DecoratorNode,
        Node,
    )
    from ngreflect.domain.ports.program import ImportResolver, ProgramContext
    from ngreflect.domain.ports.reflection_host import DecoratorMap

logger = logging.getLogger(__name__)

_METHOD_KINDS: dict[MethodKind, MemberKind] = {
    MethodKind.METHOD: MemberKind.METHOD,
    MethodKind.GETTER: MemberKind.GETTER,
    MethodKind.SETTER: MemberKind.SETTER,
}


def reflect_decorator(node: DecoratorNode, resolver: ImportResolver) -> Decorator | None:
    """Reflect one attached decorator.

    Supports ``@Name`` (args None) and ``@Name(...)`` (args = call
    arguments). Other decorator expressions are dropped.

    Args:
        node: Decorator syntax node
        resolver: Import provenance lookup

    Returns:
        Decorator, None for unsupported decorator expressions
    """
    match node.expression:
        case Identifier(name=name) as identifier:
            return Decorator(
                name=name,
                provenance=resolver.import_of_identifier(identifier),
                node=node,
                args=None,
            )
        case CallExpression(callee=Identifier(name=name) as identifier, arguments=arguments):
            return Decorator(
                name=name,
                provenance=resolver.import_of_identifier(identifier),
                node=node,
                args=arguments,
            )
        case _:
            logger.debug("dropping decorator expression '%s' at %s", node.text, node.span)
            return None


def reflect_decorators(
    nodes: tuple[DecoratorNode, ...],
    resolver: ImportResolver,
) -> tuple[Decorator, ...]:
    """Reflect attached decorators, dropping unsupported ones in place."""
    decorators: list[Decorator] = []
    for node in nodes:
        decorator = reflect_decorator(node, resolver)
        if decorator is not None:
            decorators.append(decorator)
    return tuple(decorators)


def reflect_member(element: ClassElement, resolver: ImportResolver) -> ClassMember:
    """Reflect a class body element into a ClassMember."""
    match element:
        case ConstructorDeclaration():
            return ClassMember(
                name="constructor",
                kind=MemberKind.CONSTRUCTOR,
                node=element,
                decorators=(),
            )
        case MethodDeclaration(name=name, kind=kind, is_static=is_static, decorators=decorators):
            return ClassMember(
                name=name,
                kind=_METHOD_KINDS[kind],
                node=element,
                is_static=is_static,
                decorators=reflect_decorators(decorators, resolver),
            )
        case PropertyDeclaration(
            name=name, is_static=is_static, initializer=initializer, decorators=decorators
        ):
            return ClassMember(
                name=name,
                kind=MemberKind.PROPERTY,
                node=element,
                is_static=is_static,
                value=initializer,
                decorators=reflect_decorators(decorators, resolver),
            )
        case _:
            assert_never(element)


def reflect_parameter(node: ParameterDeclaration, resolver: ImportResolver) -> Parameter:
    """Reflect a formal parameter into a Parameter."""
    return Parameter(
        name=node.name,
        node=node,
        initializer=node.initializer,
        decorators=reflect_decorators(node.decorators, resolver),
    )


class CanonicalReflectionHost:
    """Reflection host for code still in decorator syntax.

    Stateless host - no state between queries.
    """

    def __init__(self, config: ReflectionConfig | None = None) -> None:
        """Initialize host.

        Args:
            config: Reflection configuration. Uses defaults if None.
        """
        self._config = config or ReflectionConfig()

    @property
    def emit_format(self) -> EmitFormat:
        """Emit format this host recognizes."""
        return EmitFormat.DECORATOR_SYNTAX

    @property
    def config(self) -> ReflectionConfig:
        """Reflection configuration."""
        return self._config

    def is_class(self, node: Node) -> bool:
        """Check if node is a class declaration."""
        return isinstance(node, ClassDeclaration)

    def get_decorators_of_declaration(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[Decorator, ...]]:
        """Find decorators attached to a declaration.

        A constructor answers the decorators of all its parameters.
        Functions and variables have no decorator concept.
        """
        match declaration:
            case (
                ClassDeclaration(decorators=decorators)
                | MethodDeclaration(decorators=decorators)
                | PropertyDeclaration(decorators=decorators)
                | ParameterDeclaration(decorators=decorators)
            ):
                return Recovered(reflect_decorators(decorators, program))
            case ConstructorDeclaration(parameters=parameters):
                return Recovered(
                    tuple(
                        decorator
                        for parameter in parameters
                        for decorator in reflect_decorators(parameter.decorators, program)
                    )
                )
            case FunctionDeclaration() | VariableDeclaration():
                return NotRecognized(f"{type(declaration).__name__} cannot carry decorators")
            case _:
                assert_never(declaration)

    def get_class_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[tuple[Decorator, ...]]:
        """Find decorators attached to the class declaration of symbol."""
        return absorb(self._class_decorators(symbol, program), (), "get_class_decorators")

    def get_member_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[DecoratorMap]:
        """Map decorated member names to their decorators."""
        return absorb(
            self._member_decorators(symbol, program),
            MappingProxyType({}),
            "get_member_decorators",
        )

    def get_constructor_param_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[DecoratorMap]:
        """Map decorated constructor parameter names to their decorators."""
        return absorb(
            self._constructor_param_decorators(symbol, program),
            MappingProxyType({}),
            "get_constructor_param_decorators",
        )

    def get_members_of_class(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[ClassMember, ...]]:
        """List members declared in the class body, in source order."""
        match declaration:
            case ClassDeclaration(members=members):
                return Recovered(tuple(reflect_member(member, program) for member in members))
            case _:
                return absorb(
                    NotRecognized(f"{type(declaration).__name__} is not a class"),
                    (),
                    "get_members_of_class",
                )

    def get_constructor_parameters(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[Parameter, ...] | None]:
        """List constructor parameters. Recovered(None) without constructor."""
        match declaration:
            case ClassDeclaration(constructor=ConstructorDeclaration(parameters=parameters)):
                return Recovered(tuple(reflect_parameter(p, program) for p in parameters))
            case ClassDeclaration():
                return Recovered(None)
            case _:
                return absorb(
                    NotRecognized(f"{type(declaration).__name__} is not a class"),
                    None,
                    "get_constructor_parameters",
                )

    # -------------------------------------------------------------------------
    # Query functions
    # -------------------------------------------------------------------------

    def _class_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[tuple[Decorator, ...]]:
        match symbol.declaration:
            case ClassDeclaration(decorators=decorators):
                return Recovered(reflect_decorators(decorators, program))
            case _:
                return NotRecognized(f"'{symbol.name}' is not a class")

    def _member_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[DecoratorMap]:
        match symbol.declaration:
            case ClassDeclaration(members=members):
                pass
            case _:
                return NotRecognized(f"'{symbol.name}' is not a class")

        decorated: dict[str, tuple[Decorator, ...]] = {}
        for member in members:
            match member:
                case (
                    MethodDeclaration(name=name, decorators=nodes)
                    | PropertyDeclaration(name=name, decorators=nodes)
                ) if nodes:
                    # A getter/setter pair shares one name
                    decorated[name] = decorated.get(name, ()) + reflect_decorators(
                        nodes, program
                    )
        return Recovered(MappingProxyType(decorated))

    def _constructor_param_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[DecoratorMap]:
        match symbol.declaration:
            case ClassDeclaration(constructor=ConstructorDeclaration(parameters=parameters)):
                pass
            case ClassDeclaration():
                return Recovered(MappingProxyType({}))
            case _:
                return NotRecognized(f"'{symbol.name}' is not a class")

        decorated = {
            parameter.name: reflect_decorators(parameter.decorators, program)
            for parameter in parameters
            if parameter.decorators
        }
        return Recovered(MappingProxyType(decorated))
