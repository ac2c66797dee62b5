"""JSON reporter for machine-readable output.

Stdlib-only reporter for JSON output.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, TextIO

from ngreflect.application.reporters._base import BaseReporter

if TYPE_CHECKING:
    from ngreflect.domain.model.decorated_class import DecoratedClass
    from ngreflect.domain.model.decorator import Decorator


class JSONReporter(BaseReporter):
    """JSON reporter for machine-readable output.

    Outputs recovered decorators for consumption by the metadata
    regeneration pass or other tools.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        indent: int | None = 2,
    ) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            indent: JSON indentation (default: 2, None for compact)
        """
        self._output = output if output is not None else sys.stdout
        self._indent = indent

    def report(self, classes: tuple[DecoratedClass, ...]) -> None:
        """Report decorated classes as JSON.

        Args:
            classes: Decorated classes to report
        """
        data = {
            "class_count": len(classes),
            "classes": [self._class_to_dict(cls) for cls in classes],
        }
        json.dump(data, self._output, indent=self._indent)
        self._output.write("\n")

    def _class_to_dict(self, cls: DecoratedClass) -> dict[str, object]:
        """Convert DecoratedClass to JSON-serializable dict."""
        return {
            "name": cls.name,
            "line": cls.node.span.line,
            "decorators": [self._decorator_to_dict(d) for d in cls.decorators],
        }

    def _decorator_to_dict(self, decorator: Decorator) -> dict[str, object]:
        """Convert Decorator to JSON-serializable dict.

        Args stay unevaluated: their source text is emitted.
        """
        provenance = decorator.provenance
        return {
            "name": decorator.name,
            "import": (
                None
                if provenance is None
                else {"name": provenance.name, "from": provenance.from_module}
            ),
            "args": None if decorator.args is None else [arg.text for arg in decorator.args],
            "line": decorator.node.span.line,
            "column": decorator.node.span.column,
        }
