"""Program context ports.

The front end that parses emitted code and resolves bindings is an
external collaborator. Hosts only see it through these Protocols, and
every query receives it as an explicit argument.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ngreflect.domain.model.class_symbol import ClassSymbol
    from ngreflect.domain.model.decorator import ImportProvenance
    from ngreflect.domain.model.syntax import (
        Assignment,
        ClassDeclaration,
        ClassElement,
        Declaration,
        Identifier,
        Node,
    )


class ImportResolver(Protocol):
    """Contract for import provenance lookup."""

    def import_of_identifier(self, identifier: Identifier) -> ImportProvenance | None:
        """Find where an identifier's binding was imported from.

        Args:
            identifier: Identifier reference

        Returns:
            Provenance of the import, None for local or ambient bindings
        """
        ...


class ProgramContext(ImportResolver, Protocol):
    """Contract for the parsed program and its resolved symbols.

    Read-only: hosts never mutate anything reachable from it.
    """

    def symbol_of(self, declaration: Declaration) -> ClassSymbol | None:
        """Resolve a declaration's binding to its symbol handle.

        Args:
            declaration: Named declaration

        Returns:
            Symbol with its static table, None if the declaration binds no name
        """
        ...

    def enclosing_assignment(self, node: Node) -> Assignment | None:
        """Find the innermost assignment expression containing node.

        Args:
            node: Any syntax node

        Returns:
            Enclosing assignment, None if node is not inside one
        """
        ...

    def containing_class(self, member: ClassElement) -> ClassDeclaration | None:
        """Find the class declaration whose body declares member."""
        ...
