"""Wrapped-function reflection host (ES5 output).

ES5 packages contain functions that act like classes, usually wrapped
in an immediately-invoked function expression::

    var CommonModule = (function () {
        function CommonModule() {
        }
        CommonModule.decorators = [ ... ];
        return CommonModule;
    }());

Class-like functions are recognized by naming convention only.
Decorator recovery is not available for this format: every query
answers NotSupported, never an empty result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ngreflect.domain.model.configuration import ReflectionConfig
from ngreflect.domain.model.enums import EmitFormat
from ngreflect.domain.model.query_result import NotSupported
from ngreflect.domain.model.syntax import FunctionDeclaration, Identifier

if TYPE_CHECKING:
    from ngreflect.domain.model.class_symbol import ClassSymbol
    from ngreflect.domain.model.syntax import Declaration, Node
    from ngreflect.domain.ports.program import ProgramContext

_UNSUPPORTED_REASON = "decorators are not recoverable from wrapped-function output"


class Esm5ReflectionHost:
    """Reflection host for wrapped-function (ES5) output.

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
        return EmitFormat.WRAPPED_FUNCTIONS

    @property
    def config(self) -> ReflectionConfig:
        """Reflection configuration."""
        return self._config

    def is_class(self, node: Node) -> bool:
        """Check if node is a function declaration with a class-like name.

        Only the name is checked (``class_name_pattern``, by default a
        leading uppercase letter). The IIFE wrapper is not verified.
        """
        match node:
            case FunctionDeclaration(name=Identifier(name=name)):
                return self._config.looks_like_class_name(name)
            case _:
                return False

    def get_decorators_of_declaration(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> NotSupported:
        """Not supported for wrapped-function output."""
        return self._unsupported("get_decorators_of_declaration")

    def get_class_decorators(self, symbol: ClassSymbol, program: ProgramContext) -> NotSupported:
        """Not supported for wrapped-function output."""
        return self._unsupported("get_class_decorators")

    def get_member_decorators(self, symbol: ClassSymbol, program: ProgramContext) -> NotSupported:
        """Not supported for wrapped-function output."""
        return self._unsupported("get_member_decorators")

    def get_constructor_param_decorators(
        self,
        symbol: ClassSymbol,
        program: ProgramContext,
    ) -> NotSupported:
        """Not supported for wrapped-function output."""
        return self._unsupported("get_constructor_param_decorators")

    def get_members_of_class(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> NotSupported:
        """Not supported for wrapped-function output."""
        return self._unsupported("get_members_of_class")

    def get_constructor_parameters(
        self,
        declaration: Declaration,
        program: ProgramContext,
    ) -> NotSupported:
        """Not supported for wrapped-function output."""
        return self._unsupported("get_constructor_parameters")

    def _unsupported(self, operation: str) -> NotSupported:
        return NotSupported(
            operation=operation,
            emit_format=self.emit_format,
            reason=_UNSUPPORTED_REASON,
        )
