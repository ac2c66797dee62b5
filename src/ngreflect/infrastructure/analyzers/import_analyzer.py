"""Import declaration analyzer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ngreflect.domain.model.decorator import ImportProvenance
from ngreflect.domain.model.syntax import ImportDeclaration, ImportKind

if TYPE_CHECKING:
    from ngreflect.domain.model.syntax import Identifier, SourceFile


@dataclass(slots=True)
class ImportTable:
    """Tracks imported local names for provenance lookup.

    Mutable - filled during analysis.

    Handles:
    - import { A } from 'm'        (A → A from 'm')
    - import { A as B } from 'm'   (B → A from 'm')
    - import A from 'm'            (known, not resolvable)
    - import * as A from 'm'       (known, not resolvable)

    Lookup is by name at module level. Shadowing by local bindings in
    nested blocks is checked by the program before it consults the table.

    Attributes:
        _named: Local name → provenance
        _opaque: Local names bound by default or namespace imports
    """

    _named: dict[str, ImportProvenance] = field(default_factory=dict)
    _opaque: dict[str, str] = field(default_factory=dict)

    def add(self, declaration: ImportDeclaration) -> None:
        """Register all bindings of an import declaration.

        Args:
            declaration: Import declaration node
        """
        for specifier in declaration.specifiers:
            local = specifier.local.name
            match specifier.kind:
                case ImportKind.NAMED:
                    self._named[local] = ImportProvenance(
                        name=specifier.imported,
                        from_module=declaration.module,
                    )
                case ImportKind.DEFAULT | ImportKind.NAMESPACE:
                    self._opaque[local] = declaration.module

    def resolve(self, name: str) -> ImportProvenance | None:
        """Resolve a local name to its import provenance.

        Args:
            name: Local identifier name

        Returns:
            Provenance for named imports, None otherwise
        """
        # FAIL-FIRST: empty name
        if not name:
            raise ValueError("name must not be empty")

        return self._named.get(name)

    def import_of_identifier(self, identifier: Identifier) -> ImportProvenance | None:
        """Resolve an identifier reference (ImportResolver port)."""
        return self.resolve(identifier.name)

    def is_imported(self, name: str) -> bool:
        """Check if name is bound by any import, resolvable or not."""
        return name in self._named or name in self._opaque

    def all_names(self) -> frozenset[str]:
        """Get all locally bound import names."""
        return frozenset(self._named) | frozenset(self._opaque)

    @property
    def size(self) -> int:
        """Total number of imported local names."""
        return len(self._named) + len(self._opaque)


class ImportAnalyzer:
    """Extracts imports from a parsed source file.

    Stateless analyzer - no state between analyze() calls.
    Only top-level import declarations are considered.
    """

    def analyze(self, source_file: SourceFile) -> ImportTable:
        """Build the import table of a source file.

        Args:
            source_file: Parsed source file

        Returns:
            ImportTable with every top-level import binding
        """
        table = ImportTable()
        for statement in source_file.statements:
            if isinstance(statement, ImportDeclaration):
                table.add(statement)
        return table
