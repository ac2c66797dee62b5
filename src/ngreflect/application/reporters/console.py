"""Console reporter: decorated classes → rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ngreflect.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from ngreflect.domain.model.decorated_class import DecoratedClass
    from ngreflect.domain.model.decorator import Decorator


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        title: Table title.
        show_args: Show argument source text column.
        width: Console width in characters.
    """

    title: str = "DECORATED CLASSES"
    show_args: bool = True
    width: int = 120

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")


class ConsoleReporter(BaseReporter):
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, classes: tuple[DecoratedClass, ...]) -> str:
        """Format decorated classes as rich formatted string.

        Args:
            classes: Decorated classes to format.

        Returns:
            Formatted string with a summary line and one table row per decorator.
        """
        output = StringIO()
        console = Console(file=output, force_terminal=True, width=self._config.width)

        decorator_count = sum(len(cls.decorators) for cls in classes)

        console.print()
        console.rule(f"[bold]{self._config.title}[/bold]")
        console.print()
        console.print(
            f"[bold]Classes:[/bold] {len(classes)} [bold]Decorators:[/bold] {decorator_count}"
        )
        console.print()

        if classes:
            console.print(self._build_table(classes))

        return output.getvalue()

    def _build_table(self, classes: tuple[DecoratedClass, ...]) -> Table:
        """Build one row per (class, decorator)."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Class")
        table.add_column("Decorator")
        table.add_column("Import")
        table.add_column("Location")
        if self._config.show_args:
            table.add_column("Args")

        for cls in classes:
            for decorator in cls.decorators:
                row = [
                    cls.name,
                    decorator.name,
                    _format_provenance(decorator),
                    str(decorator.node.span),
                ]
                if self._config.show_args:
                    row.append(_format_args(decorator))
                table.add_row(*row)

        return table


def _format_provenance(decorator: Decorator) -> str:
    """Format import provenance, '-' for local names."""
    if decorator.provenance is None:
        return "-"
    return escape(str(decorator.provenance))


def _format_args(decorator: Decorator) -> str:
    """Format argument source text, '-' when no args given."""
    if decorator.args is None:
        return "-"
    # Selectors like '[ngFor]' would otherwise parse as markup
    return escape(", ".join(arg.text for arg in decorator.args))
