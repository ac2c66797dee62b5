"""Integration tests: canonical host over source still in decorator syntax."""

import pytest

from ngreflect import (
    ImportProvenance,
    Recovered,
    TreeSitterProgram,
    create_reflection_host,
    find_decorated_classes,
    format_for_entry_point,
)
from ngreflect.application.reporters.console import ConsoleReporter
from ngreflect.domain.model.enums import MemberKind
from ngreflect.domain.model.syntax import ClassDeclaration
from ngreflect.domain.ports.reflection_host import ReflectionHost

SOURCE = """\
import { Component, Input, HostListener } from '@angular/core';
@Component({ selector: '[ngFor]' })
export class AppComponent {
  @Input() name;
  plain = 1;
  @HostListener('click', ['$event'])
  onClick(event) {}
}
class Undecorated {}
"""


@pytest.fixture(scope="module")
def program() -> TreeSitterProgram:
    return TreeSitterProgram.from_source(SOURCE, "app.component.js")


@pytest.fixture
def host() -> ReflectionHost:
    return create_reflection_host(format_for_entry_point("typescript"))


class TestCanonicalHost:
    """Decorators attached to declarations."""

    def test_class_decorators(self, host: ReflectionHost, program: TreeSitterProgram) -> None:
        symbol = program.symbol_named("AppComponent")
        assert symbol is not None

        decorators = host.get_class_decorators(symbol, program).unwrap()

        assert len(decorators) == 1
        assert decorators[0].name == "Component"
        assert decorators[0].provenance == ImportProvenance(
            name="Component", from_module="@angular/core"
        )
        assert decorators[0].args is not None
        assert [arg.text for arg in decorators[0].args] == ["{ selector: '[ngFor]' }"]

    def test_member_decorators(self, host: ReflectionHost, program: TreeSitterProgram) -> None:
        symbol = program.symbol_named("AppComponent")
        assert symbol is not None

        members = host.get_member_decorators(symbol, program).unwrap()

        assert list(members) == ["name", "onClick"]
        listener = members["onClick"][0]
        assert listener.args is not None
        assert [arg.text for arg in listener.args] == ["'click'", "['$event']"]

    def test_members(self, host: ReflectionHost, program: TreeSitterProgram) -> None:
        declaration = program.find_declaration("AppComponent")
        assert isinstance(declaration, ClassDeclaration)

        members = host.get_members_of_class(declaration, program).unwrap()

        assert [(m.name, m.kind) for m in members] == [
            ("name", MemberKind.PROPERTY),
            ("plain", MemberKind.PROPERTY),
            ("onClick", MemberKind.METHOD),
        ]
        assert members[1].value is not None
        assert members[1].value.text == "1"

    def test_undecorated(self, host: ReflectionHost, program: TreeSitterProgram) -> None:
        symbol = program.symbol_named("Undecorated")
        assert symbol is not None
        assert host.get_class_decorators(symbol, program) == Recovered(())

    def test_discovery_and_console_report(
        self, host: ReflectionHost, program: TreeSitterProgram
    ) -> None:
        classes = find_decorated_classes(program.source_file, host, program).unwrap()

        assert [cls.name for cls in classes] == ["AppComponent"]
        output = ConsoleReporter().report(classes)
        assert "AppComponent" in output
        assert "[ngFor]" in output
