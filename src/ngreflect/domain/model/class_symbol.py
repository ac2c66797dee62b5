"""Class symbol handle."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ngreflect.domain.model.syntax import Declaration, PropertyAccess


@dataclass(frozen=True, slots=True)
class ClassSymbol:
    """Resolved binding of a (possibly) class-like declaration.

    The static table holds every ``Name.prop = value`` assignment found
    next to the declaration, keyed by property name in source order.
    Values are the ``Name.prop`` property-access nodes; the assignment
    itself is found through ``ProgramContext.enclosing_assignment``.

    Attributes:
        name: Binding name
        declaration: Declaration node the binding resolves to
        exports: Static table, property name → assigned property access
    """

    name: str
    declaration: Declaration
    exports: Mapping[str, PropertyAccess] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("symbol name must not be empty")
        if self.declaration is None:
            raise TypeError("declaration must not be None")

        # Read-only view, even if caller passed a dict
        if not isinstance(self.exports, MappingProxyType):
            object.__setattr__(self, "exports", MappingProxyType(dict(self.exports)))

    def export(self, name: str) -> PropertyAccess | None:
        """Look up a static table entry by property name."""
        return self.exports.get(name)

    def __hash__(self) -> int:
        """Hash by name and declaration (exports view is unhashable)."""
        return hash((self.name, self.declaration))
