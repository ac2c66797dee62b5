"""Decorated class aggregate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ngreflect.domain.model.decorator import Decorator
    from ngreflect.domain.model.syntax import Declaration


@dataclass(frozen=True, slots=True)
class DecoratedClass:
    """Class declaration together with its recovered class decorators.

    Attributes:
        name: Class binding name
        node: Class-like declaration node
        decorators: Class decorators in declaration order (never empty)
    """

    name: str
    node: Declaration
    decorators: tuple[Decorator, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("class name must not be empty")
        if not self.decorators:
            raise ValueError(f"decorated class '{self.name}' requires at least one decorator")

    def has_decorator(self, name: str) -> bool:
        """Check if a decorator with given name is applied."""
        return any(decorator.name == name for decorator in self.decorators)
