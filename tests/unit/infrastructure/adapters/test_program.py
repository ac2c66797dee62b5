"""Tests for infrastructure/adapters/program.py."""

import logging
from pathlib import Path

import pytest

from ngreflect.domain.exceptions.parsing import ParsingError
from ngreflect.domain.model.decorator import ImportProvenance
from ngreflect.domain.model.syntax import (
    ArrayLiteral,
    ArrowFunction,
    ClassDeclaration,
    FunctionDeclaration,
    Identifier,
    ObjectLiteral,
    PropertyAccess,
    VariableDeclaration,
    walk,
)
from ngreflect.infrastructure.adapters.program import TreeSitterProgram
from tests.factories import ident

STATIC_SOURCE = """\
import { Directive, Input } from '@angular/core';
class NgForOf {
  ngOnChanges() {}
}
NgForOf.decorators = [{ type: Directive }];
NgForOf.ctorParameters = () => [];
NgForOf.propDecorators = { "ngForOf": [{ type: Input }] };
class SimpleClass {
}
function foo() {
}
"""

WRAPPED_SOURCE = """\
var CommonModule = (function () {
    function CommonModule() {
    }
    CommonModule.decorators = [{ type: NgModule }];
    return CommonModule;
}());
"""


class TestSymbols:
    """Tests for symbol resolution."""

    def test_static_table_in_source_order(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        symbol = program.symbol_named("NgForOf")

        assert symbol is not None
        assert isinstance(symbol.declaration, ClassDeclaration)
        assert list(symbol.exports) == ["decorators", "ctorParameters", "propDecorators"]

    def test_class_without_table(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        symbol = program.symbol_named("SimpleClass")

        assert symbol is not None
        assert len(symbol.exports) == 0

    def test_function_symbol(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        symbol = program.symbol_named("foo")

        assert symbol is not None
        assert isinstance(symbol.declaration, FunctionDeclaration)

    def test_symbol_of_declaration(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        declaration = program.find_declaration("NgForOf")

        assert declaration is not None
        symbol = program.symbol_of(declaration)
        assert symbol is not None
        assert symbol.name == "NgForOf"

    def test_symbols_in_document_order(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        assert [s.name for s in program.symbols] == ["NgForOf", "SimpleClass", "foo"]

    def test_first_assignment_wins(self) -> None:
        program = TreeSitterProgram.from_source(
            "class A {}\nA.decorators = [1];\nA.decorators = [2];\n"
        )
        symbol = program.symbol_named("A")
        assert symbol is not None

        access = symbol.export("decorators")
        assert access is not None
        assignment = program.enclosing_assignment(access)
        assert assignment is not None
        assert assignment.value.text == "[1]"

    def test_assignment_in_other_scope_ignored(self) -> None:
        program = TreeSitterProgram.from_source(
            "class A {}\nfunction setup() {\n  A.decorators = [];\n}\n"
        )
        symbol = program.symbol_named("A")
        assert symbol is not None
        assert symbol.export("decorators") is None

    def test_exported_class(self) -> None:
        program = TreeSitterProgram.from_source("export class A {}\nA.decorators = [];\n")
        symbol = program.symbol_named("A")
        assert symbol is not None
        assert symbol.export("decorators") is not None

    def test_wrapped_function_bound_in_iife(self) -> None:
        program = TreeSitterProgram.from_source(WRAPPED_SOURCE)
        inner = next(
            node
            for node in walk(program.source_file)
            if isinstance(node, FunctionDeclaration)
        )

        symbol = program.symbol_of(inner)

        assert symbol is not None
        assert symbol.name == "CommonModule"
        assert list(symbol.exports) == ["decorators"]

    def test_outer_variable_bound(self) -> None:
        program = TreeSitterProgram.from_source(WRAPPED_SOURCE)
        declaration = program.find_declaration("CommonModule")

        # Variable declarator precedes the inner function in document order
        assert isinstance(declaration, VariableDeclaration)
        symbol = program.symbol_of(declaration)
        assert symbol is not None
        assert len(symbol.exports) == 0

    def test_unknown_node_has_no_symbol(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        other = TreeSitterProgram.from_source("\n\nclass Elsewhere {}")
        declaration = other.find_declaration("Elsewhere")
        assert declaration is not None
        assert program.symbol_of(declaration) is None


class TestEnclosingAssignment:
    """Tests for enclosing_assignment()."""

    def test_value_of_static_property(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        symbol = program.symbol_named("NgForOf")
        assert symbol is not None

        values = {}
        for name, access in symbol.exports.items():
            assignment = program.enclosing_assignment(access)
            assert assignment is not None
            values[name] = type(assignment.value)

        assert values == {
            "decorators": ArrayLiteral,
            "ctorParameters": ArrowFunction,
            "propDecorators": ObjectLiteral,
        }

    def test_node_outside_assignment(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        declaration = program.find_declaration("SimpleClass")
        assert declaration is not None
        assert program.enclosing_assignment(declaration) is None

    def test_innermost_assignment(self) -> None:
        program = TreeSitterProgram.from_source("var a, b;\na = b.x = 1;\n")
        target = next(
            node
            for node in walk(program.source_file)
            if isinstance(node, PropertyAccess) and node.name == "x"
        )
        assignment = program.enclosing_assignment(target)
        assert assignment is not None
        assert assignment.text == "b.x = 1"


class TestContainingClass:
    """Tests for containing_class()."""

    def test_member(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        declaration = program.find_declaration("NgForOf")
        assert isinstance(declaration, ClassDeclaration)

        member = declaration.members[0]
        assert program.containing_class(member) == declaration


class TestImports:
    """Tests for import_of_identifier()."""

    def test_named_import(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        identifier = next(
            node
            for node in walk(program.source_file)
            if isinstance(node, Identifier) and node.name == "Directive"
        )
        assert program.import_of_identifier(identifier) == ImportProvenance(
            name="Directive", from_module="@angular/core"
        )

    def test_local_name(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        identifier = next(
            node
            for node in walk(program.source_file)
            if isinstance(node, Identifier) and node.name == "SimpleClass"
        )
        assert program.import_of_identifier(identifier) is None

    @pytest.mark.parametrize(
        "source",
        [
            "import { Input } from 'm';\nconst f = (Input) => [Input];\n",
            "import { Input } from 'm';\nconst f = function Input() { return Input; };\n",
            "import { Input } from 'm';\nfunction f() { var Input = 1; g(() => Input); }\n",
        ],
    )
    def test_shadowed_in_nested_block(self, source: str) -> None:
        program = TreeSitterProgram.from_source(source)
        references = [
            node
            for node in walk(program.source_file)
            if isinstance(node, Identifier) and node.name == "Input"
        ]

        # The last reference sits inside the shadowing block
        assert program.import_of_identifier(references[-1]) is None

    def test_sibling_block_does_not_shadow(self) -> None:
        program = TreeSitterProgram.from_source(
            "import { Input } from 'm';\n"
            "function a() { var Input = 1; }\n"
            "function b() { return Input; }\n"
        )
        reference = [
            node
            for node in walk(program.source_file)
            if isinstance(node, Identifier) and node.name == "Input"
        ][-1]

        assert program.import_of_identifier(reference) == ImportProvenance(
            name="Input", from_module="m"
        )

    def test_identifier_from_elsewhere_resolves_at_file_level(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        assert program.import_of_identifier(ident("Input")) == ImportProvenance(
            name="Input", from_module="@angular/core"
        )


class TestFindDeclaration:
    """Tests for find_declaration()."""

    def test_missing(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        assert program.find_declaration("Missing") is None
        assert program.symbol_named("Missing") is None

    def test_empty_name_raises(self) -> None:
        program = TreeSitterProgram.from_source(STATIC_SOURCE)
        with pytest.raises(ValueError, match="name must not be empty"):
            program.find_declaration("")


class TestLoading:
    """Tests for program construction."""

    def test_none_source_file_raises(self) -> None:
        with pytest.raises(TypeError, match="source_file must not be None"):
            TreeSitterProgram(None)  # type: ignore[arg-type]

    def test_from_path(self, tmp_path: Path) -> None:
        path = tmp_path / "index.js"
        path.write_text(STATIC_SOURCE, encoding="utf-8")

        program = TreeSitterProgram.from_path(path)

        assert program.source_file.path == str(path)
        assert program.symbol_named("NgForOf") is not None

    def test_from_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ParsingError, match="file not found"):
            TreeSitterProgram.from_path(tmp_path / "missing.js")

    def test_syntax_error_raises(self) -> None:
        with pytest.raises(ParsingError, match="syntax error"):
            TreeSitterProgram.from_source("class {", "broken.js")

    def test_load_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="ngreflect"):
            TreeSitterProgram.from_source(STATIC_SOURCE, "index.js")
        assert "loaded index.js" in caplog.text
