"""Constructor parameter value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ngreflect.domain.model.decorator import Decorator
    from ngreflect.domain.model.syntax import Expression, ParameterDeclaration


@dataclass(frozen=True, slots=True)
class Parameter:
    """Constructor parameter.

    Attributes:
        name: Parameter name
        node: Declaring parameter node
        initializer: Default value, None if required
        decorators: Attached decorators, None if the format cannot tell
    """

    name: str
    node: ParameterDeclaration
    initializer: Expression | None = None
    decorators: tuple[Decorator, ...] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("parameter name must not be empty")
