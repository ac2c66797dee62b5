"""Tree-sitter program adapter.

Implements ProgramContext over one parsed JavaScript file. All tables
are built once at construction; the program is read-only afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ngreflect.domain.exceptions.parsing import ParsingError
from ngreflect.domain.model.class_symbol import ClassSymbol
from ngreflect.domain.model.syntax import (
    ArrowFunction,
    Assignment,
    ClassDeclaration,
    ExportDeclaration,
    ExpressionStatement,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    PropertyAccess,
    SourceFile,
    VariableDeclaration,
    VariableStatement,
    iter_children,
    walk,
)
from ngreflect.infrastructure.adapters.tree_sitter_parser import TreeSitterParser
from ngreflect.infrastructure.analyzers.import_analyzer import ImportAnalyzer

if TYPE_CHECKING:
    from pathlib import Path

    from ngreflect.domain.model.decorator import ImportProvenance
    from ngreflect.domain.model.syntax import (
        ClassElement,
        Declaration,
        Node,
        ParameterDeclaration,
        Statement,
    )

logger = logging.getLogger(__name__)

type _NodeKey = tuple[str, int, int]


def _key(node: Node) -> _NodeKey:
    """Identity of a node within one file: variant and byte range."""
    return (type(node).__name__, node.span.start, node.span.end)


@dataclass(frozen=True, slots=True)
class _Scope:
    """Names bound in one block, chained to the enclosing block.

    Attributes:
        names: Declarations, parameters and own function name of the block
        parent: Enclosing scope, None for the file body
    """

    names: frozenset[str]
    parent: _Scope | None = None


class TreeSitterProgram:
    """ProgramContext for a single parsed JavaScript file.

    Bindings are collected per statement block (the file body and
    every function body). A static table entry is an expression
    statement ``Name.prop = value`` in the same block as the
    declaration of ``Name``. Every identifier records the block it
    sits in, so import lookup sees local declarations that shadow
    an imported name.
    """

    def __init__(self, source_file: SourceFile) -> None:
        """Build symbol, assignment and import tables.

        Args:
            source_file: Parsed source file

        Raises:
            TypeError: If source_file is None (FAIL-FIRST)
        """
        if source_file is None:
            raise TypeError("source_file must not be None")

        self._source_file = source_file
        self._imports = ImportAnalyzer().analyze(source_file)
        self._symbols: dict[_NodeKey, ClassSymbol] = {}
        self._assignments: dict[_NodeKey, Assignment] = {}
        self._containing: dict[_NodeKey, ClassDeclaration] = {}
        self._scopes: dict[_NodeKey, _Scope] = {}

        self._build()

        logger.info(
            "loaded %s: %d symbol(s), %d import(s)",
            source_file.path,
            len(self._symbols),
            self._imports.size,
        )

    @classmethod
    def from_source(
        cls,
        source: str,
        path: str = "<source>",
        parser: TreeSitterParser | None = None,
    ) -> TreeSitterProgram:
        """Parse JavaScript source and build a program.

        Raises:
            ParsingError: If the source has syntax errors
        """
        return cls((parser or TreeSitterParser()).parse(source, path))

    @classmethod
    def from_path(cls, path: Path, parser: TreeSitterParser | None = None) -> TreeSitterProgram:
        """Read and parse a JavaScript file.

        Raises:
            ParsingError: If the file cannot be read or parsed
        """
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(str(path), "file not found") from e
        except PermissionError as e:
            raise ParsingError(str(path), "permission denied") from e
        except UnicodeDecodeError as e:
            raise ParsingError(str(path), f"encoding error: {e}") from e

        return cls.from_source(source, str(path), parser)

    @property
    def source_file(self) -> SourceFile:
        """Parsed source file."""
        return self._source_file

    # -------------------------------------------------------------------------
    # ProgramContext
    # -------------------------------------------------------------------------

    def symbol_of(self, declaration: Declaration) -> ClassSymbol | None:
        """Resolve a declaration to its symbol."""
        return self._symbols.get(_key(declaration))

    def enclosing_assignment(self, node: Node) -> Assignment | None:
        """Find the innermost assignment containing node."""
        return self._assignments.get(_key(node))

    def containing_class(self, member: ClassElement) -> ClassDeclaration | None:
        """Find the class declaring member."""
        return self._containing.get(_key(member))

    def import_of_identifier(self, identifier: Identifier) -> ImportProvenance | None:
        """Find the named import binding identifier, if any.

        Walks outward from the block of identifier. A declaration or
        parameter of the same name in a nested block shadows the import.
        Identifiers not from this file resolve at file level.
        """
        scope = self._scopes.get(_key(identifier))
        while scope is not None and scope.parent is not None:
            if identifier.name in scope.names:
                logger.debug(
                    "'%s' at %s is shadowed by a local binding",
                    identifier.name,
                    identifier.span,
                )
                return None
            scope = scope.parent
        return self._imports.import_of_identifier(identifier)

    # -------------------------------------------------------------------------
    # Lookup helpers
    # -------------------------------------------------------------------------

    def find_declaration(self, name: str) -> Declaration | None:
        """Find the first class, function or variable declaration named name.

        Searches the whole file in document order, nested scopes included.
        """
        if not name:
            raise ValueError("name must not be empty")

        for node in walk(self._source_file):
            match node:
                case (
                    ClassDeclaration(name=Identifier(name=found))
                    | FunctionDeclaration(name=Identifier(name=found))
                    | VariableDeclaration(name=Identifier(name=found))
                ) if found == name:
                    return node
        return None

    def symbol_named(self, name: str) -> ClassSymbol | None:
        """Resolve the first declaration named name to its symbol."""
        declaration = self.find_declaration(name)
        if declaration is None:
            return None
        return self.symbol_of(declaration)

    @property
    def symbols(self) -> tuple[ClassSymbol, ...]:
        """All symbols in document order of their declarations."""
        return tuple(
            sorted(self._symbols.values(), key=lambda symbol: symbol.declaration.span.start)
        )

    # -------------------------------------------------------------------------
    # Table building
    # -------------------------------------------------------------------------

    def _build(self) -> None:
        self._bind_scopes()

        for node in walk(self._source_file):
            match node:
                case Assignment():
                    # Pre-order: inner assignments overwrite, innermost wins
                    for inner in walk(node):
                        self._assignments[_key(inner)] = node
                case ClassDeclaration(members=members):
                    for member in members:
                        self._containing[_key(member)] = node

    def _bind_scopes(self) -> None:
        """Bind every block and record the scope of every identifier."""
        stack: list[tuple[Node, _Scope]] = [
            (self._source_file, self._bind_block(self._source_file.statements))
        ]

        while stack:
            node, scope = stack.pop()
            match node:
                case Identifier():
                    self._scopes[_key(node)] = scope
                case FunctionDeclaration(parameters=parameters, body=body):
                    scope = self._bind_block(body, parameters, scope)
                case FunctionExpression(name=name, parameters=parameters, body=body):
                    # A named function expression binds its name inside itself
                    own = (name.name,) if name is not None else ()
                    scope = self._bind_block(body, parameters, scope, own)
                case ArrowFunction(parameters=parameters, body=body):
                    scope = self._bind_block(body, parameters, scope)
            stack.extend((child, scope) for child in iter_children(node))

    def _bind_block(
        self,
        statements: tuple[Statement, ...],
        parameters: tuple[ParameterDeclaration, ...] = (),
        parent: _Scope | None = None,
        extra: tuple[str, ...] = (),
    ) -> _Scope:
        """Create symbols for the declarations of one statement block.

        Returns:
            Scope of the block, chained to parent
        """
        bindings: dict[str, Declaration] = {}

        # Class and function declarations take precedence over variables
        for statement in _unwrap_exports(statements):
            match statement:
                case (
                    ClassDeclaration(name=Identifier(name=name))
                    | FunctionDeclaration(name=Identifier(name=name))
                ):
                    bindings.setdefault(name, statement)

        for statement in _unwrap_exports(statements):
            match statement:
                case VariableStatement(declarations=declarations):
                    for declaration in declarations:
                        if declaration.name is not None:
                            bindings.setdefault(declaration.name.name, declaration)

        exports: dict[str, dict[str, PropertyAccess]] = {name: {} for name in bindings}

        for statement in statements:
            match statement:
                case ExpressionStatement(
                    expression=Assignment(
                        target=PropertyAccess(target=Identifier(name=owner), name=prop) as access
                    )
                ) if owner in exports:
                    exports[owner].setdefault(prop, access)

        for name, declaration in bindings.items():
            self._symbols[_key(declaration)] = ClassSymbol(
                name=name,
                declaration=declaration,
                exports=exports[name],
            )

        names = frozenset(bindings) | {parameter.name for parameter in parameters} | set(extra)
        return _Scope(names=names, parent=parent)


def _unwrap_exports(statements: tuple[Statement, ...]) -> list[Statement]:
    """Replace ``export <declaration>`` with the declaration."""
    unwrapped: list[Statement] = []
    for statement in statements:
        match statement:
            case ExportDeclaration(declaration=declaration) if declaration is not None:
                unwrapped.append(declaration)
            case _:
                unwrapped.append(statement)
    return unwrapped
