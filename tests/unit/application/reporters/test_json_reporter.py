"""Tests for application/reporters/json_reporter.py."""

import json
from io import StringIO

from ngreflect.application.reporters.json_reporter import JSONReporter
from ngreflect.domain.model.decorated_class import DecoratedClass
from ngreflect.domain.model.decorator import Decorator, ImportProvenance
from tests.factories import CORE, class_decl, descriptor, obj, string


def _report(classes: tuple[DecoratedClass, ...], indent: int | None = 2) -> str:
    output = StringIO()
    JSONReporter(output, indent=indent).report(classes)
    return output.getvalue()


class TestJSONReporter:
    """Tests for JSONReporter."""

    def test_empty(self) -> None:
        data = json.loads(_report(()))
        assert data == {"class_count": 0, "classes": []}

    def test_trailing_newline(self) -> None:
        assert _report(()).endswith("\n")

    def test_compact(self) -> None:
        assert "\n" not in _report((), indent=None).rstrip("\n")

    def test_decorator_fields(self) -> None:
        config = obj(selector=string("[ngFor][ngForOf]"))
        node = descriptor("Directive", config)
        decorator = Decorator(
            name="Directive",
            provenance=ImportProvenance(name="Directive", from_module=CORE),
            node=node,
            args=(config,),
        )
        decl = class_decl("NgForOf")

        data = json.loads(
            _report((DecoratedClass(name="NgForOf", node=decl, decorators=(decorator,)),))
        )

        assert data["class_count"] == 1
        cls = data["classes"][0]
        assert cls["name"] == "NgForOf"
        assert cls["line"] == decl.span.line
        assert cls["decorators"] == [
            {
                "name": "Directive",
                "import": {"name": "Directive", "from": "@angular/core"},
                "args": ["{ selector: '[ngFor][ngForOf]' }"],
                "line": node.span.line,
                "column": node.span.column,
            }
        ]

    def test_local_decorator_without_args(self) -> None:
        decorator = Decorator(name="Local", provenance=None, node=descriptor("Local"))

        data = json.loads(
            _report(
                (DecoratedClass(name="Foo", node=class_decl("Foo"), decorators=(decorator,)),)
            )
        )

        reported = data["classes"][0]["decorators"][0]
        assert reported["import"] is None
        assert reported["args"] is None

    def test_empty_args_list(self) -> None:
        decorator = Decorator(name="Input", provenance=None, node=descriptor("Input"), args=())

        data = json.loads(
            _report(
                (DecoratedClass(name="Foo", node=class_decl("Foo"), decorators=(decorator,)),)
            )
        )

        assert data["classes"][0]["decorators"][0]["args"] == []
