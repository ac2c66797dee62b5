"""Reflection host port (capability-set contract)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ngreflect.domain.model.class_member import ClassMember
    from ngreflect.domain.model.class_symbol import ClassSymbol
    from ngreflect.domain.model.decorator import Decorator
    from ngreflect.domain.model.enums import EmitFormat
    from ngreflect.domain.model.parameter import Parameter
    from ngreflect.domain.model.query_result import QueryResult
    from ngreflect.domain.model.syntax import Declaration, Node
    from ngreflect.domain.ports.program import ProgramContext

type DecoratorMap = Mapping[str, tuple[Decorator, ...]]


class ReflectionHost(Protocol):
    """Contract every format-specific analyzer answers.

    Queries are stateless: each call walks from symbol to declaring
    assignment to initializer and pattern-matches the result. Nothing
    is cached between calls.
    """

    @property
    def emit_format(self) -> EmitFormat:
        """Emit format this host recognizes."""
        ...

    def is_class(self, node: Node) -> bool:
        """Check if node denotes a class-like binding in this format."""
        ...

    def get_decorators_of_declaration(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[Decorator, ...]]:
        """Find decorators of a class, class member or constructor.

        Returns:
            NotRecognized for declaration kinds without a decorator concept
        """
        ...

    def get_class_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[tuple[Decorator, ...]]:
        """Find class decorators. Empty when none or symbol is not a class."""
        ...

    def get_member_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[DecoratorMap]:
        """Find decorators per member name. Empty mapping when none."""
        ...

    def get_constructor_param_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> QueryResult[DecoratorMap]:
        """Find decorators per constructor parameter name."""
        ...

    def get_members_of_class(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[ClassMember, ...]]:
        """List members declared by a class."""
        ...

    def get_constructor_parameters(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> QueryResult[tuple[Parameter, ...] | None]:
        """List constructor parameters. Recovered(None) without constructor."""
        ...
