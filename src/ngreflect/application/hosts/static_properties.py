"""Static-property reflection host (ES2015 output).

ES2015 packages contain real classes. Decorators are static properties
assigned on the class after its declaration::

    class NgForOf {
    }
    NgForOf.decorators = [
        { type: Directive, args: [{ selector: '[ngFor][ngForOf]' },] }
    ];
    NgForOf.ctorParameters = () => [
        { type: ViewContainerRef, },
        { type: TemplateRef, },
        { type: IterableDiffers, },
    ];
    NgForOf.propDecorators = {
        "ngForOf": [{ type: Input },],
        "ngForTrackBy": [{ type: Input },],
        "ngForTemplate": [{ type: Input },],
    };

A class is decorated if its static table has a ``decorators`` entry.
Constructor parameter decorators (``ctorParameters``) are not recovered.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, assert_never

from ngreflect.application.extraction.decorator_array import extract_decorators
from ngreflect.application.extraction.object_literal import reflect_object_literal
from ngreflect.application.hosts._base import absorb
from ngreflect.application.hosts.canonical import CanonicalReflectionHost
from ngreflect.domain.model.configuration import ReflectionConfig
from ngreflect.domain.model.enums import EmitFormat
from ngreflect.domain.model.query_result import NotRecognized, NotSupported, Recovered
from ngreflect.domain.model.syntax import (
    ArrayLiteral,
    ClassDeclaration,
    ConstructorDeclaration,
    FunctionDeclaration,
    MethodDeclaration,
    ObjectLiteral,
    ParameterDeclaration,
    PropertyDeclaration,
    VariableDeclaration,
)

if TYPE_CHECKING:
    from ngreflect.domain.model.class_member import ClassMember
    from ngreflect.domain.model.class_symbol import ClassSymbol
    from ngreflect.domain.model.decorator import Decorator
    from ngreflect.domain.model.parameter import Parameter
    from ngreflect.domain.model.query_result import QueryResult
    from ngreflect.domain.model.syntax import Declaration, Expression, Node
    from ngreflect.domain.ports.program import ProgramContext
    from ngreflect.domain.ports.reflection_host import DecoratorMap

logger = logging.getLogger(__name__)


# =============================================================================
# QUERY FUNCTIONS - program context passed explicitly
# =============================================================================


def static_property_value(
    symbol: ClassSymbol,
    property_name: str,
    program: ProgramContext,
) -> QueryResult[Expression]:
    """Find the value assigned to a static property of a class.

    Follows ``symbol.exports[property_name]`` (the ``Name.prop`` node)
    to its enclosing assignment and returns the right-hand side.

    Args:
        symbol: Class symbol
        property_name: Static property name
        program: Program context

    Returns:
        Recovered(value expression), NotRecognized if absent
    """
    access = symbol.export(property_name)
    if access is None:
        return NotRecognized(f"'{symbol.name}' has no static '{property_name}' property")

    assignment = program.enclosing_assignment(access)
    if assignment is None:
        return NotRecognized(f"'{access.text}' is not assigned")

    return Recovered(assignment.value)


def class_decorators(
    symbol: ClassSymbol,
    program: ProgramContext,
    config: ReflectionConfig,
) -> QueryResult[tuple[Decorator, ...]]:
    """Recover class decorators from the static ``decorators`` array.

    Args:
        symbol: Class symbol
        program: Program context
        config: Static property names

    Returns:
        Recovered(decorators), NotRecognized if the table or shape is absent
    """
    if not isinstance(symbol.declaration, ClassDeclaration):
        return NotRecognized(f"'{symbol.name}' is not a class")

    match static_property_value(symbol, config.decorators_property, program):
        case Recovered(value=ArrayLiteral() as array):
            return Recovered(extract_decorators(array, program))
        case Recovered(value=value):
            return NotRecognized(
                f"'{symbol.name}.{config.decorators_property}' is not an array literal "
                f"({type(value).__name__})"
            )
        case other:
            return other


def member_decorators(
    symbol: ClassSymbol,
    program: ProgramContext,
    config: ReflectionConfig,
) -> QueryResult[DecoratorMap]:
    """Recover member decorators from the static ``propDecorators`` object.

    Entries whose value is not an array literal are skipped.

    Args:
        symbol: Class symbol
        program: Program context
        config: Static property names

    Returns:
        Recovered(member name → decorators) in table order,
        NotRecognized if the table or shape is absent
    """
    if not isinstance(symbol.declaration, ClassDeclaration):
        return NotRecognized(f"'{symbol.name}' is not a class")

    match static_property_value(symbol, config.prop_decorators_property, program):
        case Recovered(value=ObjectLiteral() as table):
            pass
        case Recovered(value=value):
            return NotRecognized(
                f"'{symbol.name}.{config.prop_decorators_property}' is not an object literal "
                f"({type(value).__name__})"
            )
        case other:
            return other

    decorators: dict[str, tuple[Decorator, ...]] = {}
    for name, initializer in reflect_object_literal(table).items():
        if not isinstance(initializer, ArrayLiteral):
            logger.debug("skipping '%s' in %s: not an array literal", name, symbol.name)
            continue
        decorators[name] = extract_decorators(initializer, program)

    return Recovered(MappingProxyType(decorators))


# =============================================================================
# HOST
# =============================================================================


class Esm2015ReflectionHost:
    """Reflection host for static-property (ES2015) output.

    Stateless host - no state between queries.
    Class recognition, members and constructor parameters are
    answered by a canonical delegate.
    """

    def __init__(
        self,
        config: ReflectionConfig | None = None,
        delegate: CanonicalReflectionHost | None = None,
    ) -> None:
        """Initialize host.

        Args:
            config: Reflection configuration. Uses defaults if None.
            delegate: Host for operations that read class syntax directly.
                Uses a CanonicalReflectionHost with the same config if None.
        """
        self._config = config or ReflectionConfig()
        self._delegate = delegate or CanonicalReflectionHost(self._config)

    @property
    def emit_format(self) -> EmitFormat:
        """Emit format this host recognizes."""
        return EmitFormat.STATIC_PROPERTIES

    @property
    def config(self) -> ReflectionConfig:
        """Reflection configuration."""
        return self._config

    def is_class(self, node: Node) -> bool:
        """Check if node is a class declaration."""
        return self._delegate.is_class(node)

    def get_decorators_of_declaration(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[Decorator, ...]]:
        """Find decorators of a class, class member or constructor.

        Args:
            declaration: Declaration whose decorators we want
            program: Program context

        Returns:
            Recovered(decorators) for classes and members,
            NotSupported for constructors and their parameters,
            NotRecognized for functions and variables
        """
        match declaration:
            case ClassDeclaration():
                symbol = program.symbol_of(declaration)
                if symbol is None:
                    return Recovered(())
                return self.get_class_decorators(symbol, program)
            case MethodDeclaration() | PropertyDeclaration():
                return self._get_decorators_of_member(declaration, program)
            case ConstructorDeclaration() | ParameterDeclaration():
                return self._constructor_unsupported("get_decorators_of_declaration")
            case FunctionDeclaration() | VariableDeclaration():
                return NotRecognized(f"{type(declaration).__name__} cannot carry decorators")
            case _:
                assert_never(declaration)

    def get_class_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[tuple[Decorator, ...]]:
        """Find class decorators. Recovered(()) when none."""
        return absorb(
            class_decorators(symbol, program, self._config),
            (),
            "get_class_decorators",
        )

    def get_member_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[DecoratorMap]:
        """Find member decorators. Empty mapping when none."""
        return absorb(
            member_decorators(symbol, program, self._config),
            MappingProxyType({}),
            "get_member_decorators",
        )

    def get_constructor_param_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[DecoratorMap]:
        """Not supported for static-property output."""
        return self._constructor_unsupported("get_constructor_param_decorators")

    def get_members_of_class(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[ClassMember, ...]]:
        """List members declared in the class body."""
        return self._delegate.get_members_of_class(declaration, program)

    def get_constructor_parameters(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[Parameter, ...] | None]:
        """List constructor parameters."""
        return self._delegate.get_constructor_parameters(declaration, program)

    def _get_decorators_of_member(
        self,
        member: MethodDeclaration | PropertyDeclaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[Decorator, ...]]:
        """Look up a member in the static table of its containing class."""
        class_declaration = program.containing_class(member)
        if class_declaration is None:
            logger.debug("member '%s' at %s has no containing class", member.name, member.span)
            return Recovered(())

        symbol = program.symbol_of(class_declaration)
        if symbol is None:
            return Recovered(())

        match self.get_member_decorators(symbol, program):
            case Recovered(value=table):
                return Recovered(table.get(member.name, ()))
            case other:
                return other

    def _constructor_unsupported(self, operation: str) -> NotSupported:
        return NotSupported(
            operation=operation,
            emit_format=self.emit_format,
            reason=(
                f"constructor parameter decorators ('{self._config.ctor_parameters_property}') "
                "are not recovered from static-property output"
            ),
        )
