"""Base reporter class for output formatting.

Concrete reporters inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ngreflect.domain.model.decorated_class import DecoratedClass


class BaseReporter(ABC):
    """Base class for decorated-class reporters.

    Concrete reporters must implement the report() method.
    ngreflect provides ConsoleReporter and JSONReporter as defaults.

    Example:
        class CountReporter(BaseReporter):
            def report(self, classes: tuple[DecoratedClass, ...]) -> None:
                print(f"Decorated classes: {len(classes)}")
    """

    @abstractmethod
    def report(self, classes: tuple[DecoratedClass, ...]) -> object:
        """Report recovered decorated classes.

        Implementation decides output format and destination.

        Args:
            classes: Decorated classes of one source file or package
        """
