"""Decorator value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ngreflect.domain.model.syntax import Expression, Node


@dataclass(frozen=True, slots=True)
class ImportProvenance:
    """Where an identifier's binding was imported from.

    Attributes:
        name: Exported name in the source module (e.g., "Directive")
        from_module: Module specifier (e.g., "@angular/core")
    """

    name: str
    from_module: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("import name must not be empty")
        if not self.from_module:
            raise ValueError("from_module must not be empty")

    def __str__(self) -> str:
        """Format as name from 'module'."""
        return f"{self.name} from '{self.from_module}'"


@dataclass(frozen=True, slots=True)
class Decorator:
    """Decorator recovered from emitted code.

    Arguments are never evaluated: ``args`` holds the original
    expression nodes.

    Attributes:
        name: Decorator name as written (e.g., "Directive")
        provenance: Import the name was bound by, None for local bindings
        node: Syntax node the decorator was recovered from
            (descriptor object literal or attached decorator syntax)
        args: Argument expressions. None = no arguments given,
            () = empty argument list
    """

    name: str
    provenance: ImportProvenance | None
    node: Node
    args: tuple[Expression, ...] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("decorator name must not be empty")
        if self.node is None:
            raise TypeError("node must not be None")

    @property
    def is_imported(self) -> bool:
        """Check if the decorator name is bound by an import."""
        return self.provenance is not None
