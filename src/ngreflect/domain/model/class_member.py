"""Class member entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ngreflect.domain.model.enums import MemberKind

if TYPE_CHECKING:
    from ngreflect.domain.model.decorator import Decorator
    from ngreflect.domain.model.syntax import ClassElement, Expression


@dataclass(frozen=True, slots=True)
class ClassMember:
    """Member declared in a class body.

    Attributes:
        name: Member name ("constructor" for constructors)
        kind: CONSTRUCTOR/METHOD/GETTER/SETTER/PROPERTY
        node: Declaring class element
        is_static: Declared with ``static``
        value: Field initializer, None for methods and bare fields
        decorators: Attached decorators, None if the format cannot tell
    """

    name: str
    kind: MemberKind
    node: ClassElement
    is_static: bool = False
    value: Expression | None = None
    decorators: tuple[Decorator, ...] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("member name must not be empty")

        if self.kind is MemberKind.CONSTRUCTOR and self.is_static:
            raise ValueError("constructor cannot be static")

        if self.value is not None and self.kind is not MemberKind.PROPERTY:
            raise ValueError(f"only properties have a value, got {self.kind.name}")
