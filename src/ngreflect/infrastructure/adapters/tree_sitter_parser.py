"""Tree-sitter JavaScript parser adapter.

Parses emitted JavaScript with tree-sitter and converts the concrete
syntax tree into the immutable syntax model. Shapes the hosts never
inspect become OtherExpression/OtherStatement nodes carrying their
tree-sitter node type.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import tree_sitter_javascript
from tree_sitter import Language, Parser

from ngreflect.domain.exceptions.parsing import ParsingError
from ngreflect.domain.model.location import Span
from ngreflect.domain.model.syntax import (
    ArrayLiteral,
    ArrowFunction,
    Assignment,
    CallExpression,
    ClassDeclaration,
    ComputedPropertyAssignment,
    ConstructorDeclaration,
    DecoratorNode,
    ExportDeclaration,
    ExpressionStatement,
    FunctionDeclaration,
    FunctionExpression,
    Identifier,
    ImportDeclaration,
    ImportKind,
    ImportSpecifier,
    Literal,
    LiteralKind,
    MethodDeclaration,
    MethodKind,
    MethodShorthand,
    ObjectLiteral,
    OtherExpression,
    OtherStatement,
    ParameterDeclaration,
    PropertyAccess,
    PropertyAssignment,
    PropertyDeclaration,
    ReturnStatement,
    ShorthandPropertyAssignment,
    SourceFile,
    SpreadAssignment,
    SpreadElement,
    VariableDeclaration,
    VariableStatement,
)

if TYPE_CHECKING:
    from tree_sitter import Node as TSNode

    from ngreflect.domain.model.syntax import (
        ClassElement,
        Expression,
        ObjectMember,
        Statement,
    )

logger = logging.getLogger(__name__)

JAVASCRIPT = Language(tree_sitter_javascript.language())

_LITERAL_KINDS: dict[str, LiteralKind] = {
    "string": LiteralKind.STRING,
    "number": LiteralKind.NUMBER,
    "true": LiteralKind.BOOLEAN,
    "false": LiteralKind.BOOLEAN,
    "null": LiteralKind.NULL,
    "undefined": LiteralKind.UNDEFINED,
    "regex": LiteralKind.REGEX,
    "template_string": LiteralKind.TEMPLATE,
}

_FUNCTION_EXPRESSIONS = frozenset(
    {"function_expression", "function", "generator_function"}
)
_FUNCTION_DECLARATIONS = frozenset(
    {"function_declaration", "generator_function_declaration"}
)


class TreeSitterParser:
    """JavaScript source → SourceFile.

    Stateless between parse() calls.
    FAIL-FIRST: raises ParsingError on any syntax error.
    """

    def __init__(self) -> None:
        self._parser = Parser(JAVASCRIPT)

    def parse(self, source: str, path: str = "<source>") -> SourceFile:
        """Parse JavaScript source.

        Args:
            source: JavaScript source text
            path: File path used in nodes and error messages

        Returns:
            Parsed SourceFile

        Raises:
            ParsingError: If the source has syntax errors
        """
        data = source.encode("utf-8")
        tree = self._parser.parse(data)
        root = tree.root_node

        if root.has_error:
            error = _first_error(root)
            span = _span(error, data) if error is not None else None
            raise ParsingError(path, "syntax error", span)

        source_file = _Converter(data).source_file(root, path)
        logger.debug("parsed %s: %d top-level statements", path, len(source_file.statements))
        return source_file


def _first_error(node: TSNode) -> TSNode | None:
    """Find the first ERROR or missing node in document order."""
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _span(node: TSNode, data: bytes) -> Span:
    """Span with byte offsets and a character column.

    tree-sitter reports the column in bytes; it is recounted in
    characters from the start of the line.
    """
    row, byte_column = node.start_point
    line_start = node.start_byte - byte_column
    column = len(data[line_start : node.start_byte].decode("utf-8", errors="replace"))
    return Span(start=node.start_byte, end=node.end_byte, line=row + 1, column=column)


def _named(node: TSNode) -> list[TSNode]:
    """Named children without comments."""
    return [child for child in node.named_children if child.type != "comment"]


def _has_token(node: TSNode, token: str) -> bool:
    """Check for an anonymous keyword child (e.g. 'static', 'get')."""
    return any(not child.is_named and child.type == token for child in node.children)


def _unquote(text: str) -> str:
    """Strip the surrounding quotes of a string literal."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in "'\"`":
        return text[1:-1]
    return text


class _Converter:
    """Converts one tree-sitter tree into syntax model nodes."""

    def __init__(self, data: bytes) -> None:
        self._data = data

    def _text(self, node: TSNode) -> str:
        return self._data[node.start_byte : node.end_byte].decode("utf-8")

    # -------------------------------------------------------------------------
    # Statements
    # -------------------------------------------------------------------------

    def source_file(self, root: TSNode, path: str) -> SourceFile:
        return SourceFile(
            path=path,
            statements=self._statements(root),
            text=self._data.decode("utf-8"),
            span=Span(start=0, end=len(self._data), line=1, column=0),
        )

    def _statements(self, block: TSNode) -> tuple[Statement, ...]:
        return tuple(self.statement(child) for child in _named(block))

    def statement(self, node: TSNode) -> Statement:
        text = self._text(node)
        span = _span(node, self._data)

        match node.type:
            case "class_declaration":
                return self._class(node)
            case kind if kind in _FUNCTION_DECLARATIONS:
                return FunctionDeclaration(
                    name=self._optional_identifier(node.child_by_field_name("name")),
                    parameters=self._parameters(node.child_by_field_name("parameters")),
                    body=self._block(node.child_by_field_name("body")),
                    text=text,
                    span=span,
                )
            case "lexical_declaration" | "variable_declaration":
                return VariableStatement(
                    keyword=node.children[0].type,
                    declarations=tuple(
                        self._variable(child)
                        for child in _named(node)
                        if child.type == "variable_declarator"
                    ),
                    text=text,
                    span=span,
                )
            case "expression_statement":
                return ExpressionStatement(
                    expression=self.expression(_named(node)[0]),
                    text=text,
                    span=span,
                )
            case "return_statement":
                children = _named(node)
                return ReturnStatement(
                    expression=self.expression(children[0]) if children else None,
                    text=text,
                    span=span,
                )
            case "import_statement":
                return self._import(node)
            case "export_statement":
                return self._export(node)
            case _:
                return OtherStatement(kind=node.type, text=text, span=span)

    def _block(self, node: TSNode | None) -> tuple[Statement, ...]:
        if node is None or node.type != "statement_block":
            return ()
        return self._statements(node)

    def _variable(self, node: TSNode) -> VariableDeclaration:
        name_node = node.child_by_field_name("name")
        value_node = node.child_by_field_name("value")
        return VariableDeclaration(
            name=self._optional_identifier(name_node),
            initializer=self.expression(value_node) if value_node is not None else None,
            text=self._text(node),
            span=_span(node, self._data),
        )

    def _import(self, node: TSNode) -> ImportDeclaration:
        source = node.child_by_field_name("source")
        module = _unquote(self._text(source)) if source is not None else ""

        specifiers: list[ImportSpecifier] = []
        for clause in _named(node):
            if clause.type != "import_clause":
                continue
            for child in _named(clause):
                match child.type:
                    case "identifier":
                        specifiers.append(
                            self._specifier(child, ImportKind.DEFAULT, "default", child)
                        )
                    case "namespace_import":
                        local = _named(child)[0]
                        specifiers.append(self._specifier(child, ImportKind.NAMESPACE, "*", local))
                    case "named_imports":
                        for spec in _named(child):
                            if spec.type != "import_specifier":
                                continue
                            name = spec.child_by_field_name("name")
                            alias = spec.child_by_field_name("alias")
                            specifiers.append(
                                self._specifier(
                                    spec,
                                    ImportKind.NAMED,
                                    _unquote(self._text(name)),
                                    alias if alias is not None else name,
                                )
                            )

        return ImportDeclaration(
            module=module,
            specifiers=tuple(specifiers),
            text=self._text(node),
            span=_span(node, self._data),
        )

    def _specifier(
        self,
        node: TSNode,
        kind: ImportKind,
        imported: str,
        local: TSNode,
    ) -> ImportSpecifier:
        return ImportSpecifier(
            kind=kind,
            imported=imported,
            local=self._identifier(local),
            text=self._text(node),
            span=_span(node, self._data),
        )

    def _export(self, node: TSNode) -> ExportDeclaration:
        declaration_node = node.child_by_field_name("declaration")
        declaration: Statement | None = None

        if declaration_node is not None:
            if declaration_node.type == "class_declaration":
                # @Dec export class X {} - decorators precede the export keyword
                leading = self._decorators(node)
                declaration = self._class(declaration_node, leading)
            else:
                declaration = self.statement(declaration_node)

        return ExportDeclaration(
            declaration=declaration,
            text=self._text(node),
            span=_span(node, self._data),
        )

    # -------------------------------------------------------------------------
    # Classes
    # -------------------------------------------------------------------------

    def _class(
        self,
        node: TSNode,
        leading: tuple[DecoratorNode, ...] = (),
    ) -> ClassDeclaration:
        heritage: Expression | None = None
        members: list[ClassElement] = []

        for child in _named(node):
            if child.type == "class_heritage":
                parts = _named(child)
                if parts:
                    heritage = self.expression(parts[0])

        body = node.child_by_field_name("body")
        if body is not None:
            for child in _named(body):
                match child.type:
                    case "method_definition":
                        members.append(self._method(child))
                    case "field_definition":
                        members.append(self._field(child))

        return ClassDeclaration(
            name=self._optional_identifier(node.child_by_field_name("name")),
            heritage=heritage,
            members=tuple(members),
            decorators=leading + self._decorators(node),
            text=self._text(node),
            span=_span(node, self._data),
        )

    def _decorators(self, node: TSNode) -> tuple[DecoratorNode, ...]:
        return tuple(
            DecoratorNode(
                expression=self.expression(_named(child)[0]),
                text=self._text(child),
                span=_span(child, self._data),
            )
            for child in node.children
            if child.type == "decorator"
        )

    def _method(self, node: TSNode) -> MethodDeclaration | ConstructorDeclaration:
        name = self._property_name(node.child_by_field_name("name"))
        is_static = _has_token(node, "static")
        parameters = self._parameters(node.child_by_field_name("parameters"))

        if name == "constructor" and not is_static:
            return ConstructorDeclaration(
                parameters=parameters,
                text=self._text(node),
                span=_span(node, self._data),
            )

        kind = MethodKind.METHOD
        if _has_token(node, "get"):
            kind = MethodKind.GETTER
        elif _has_token(node, "set"):
            kind = MethodKind.SETTER

        return MethodDeclaration(
            name=name,
            kind=kind,
            is_static=is_static,
            parameters=parameters,
            decorators=self._decorators(node),
            text=self._text(node),
            span=_span(node, self._data),
        )

    def _field(self, node: TSNode) -> PropertyDeclaration:
        value = node.child_by_field_name("value")
        return PropertyDeclaration(
            name=self._property_name(node.child_by_field_name("property")),
            is_static=_has_token(node, "static"),
            initializer=self.expression(value) if value is not None else None,
            decorators=self._decorators(node),
            text=self._text(node),
            span=_span(node, self._data),
        )

    def _property_name(self, node: TSNode | None) -> str:
        if node is None:
            return ""
        if node.type == "string":
            return _unquote(self._text(node))
        return self._text(node)

    def _parameters(self, node: TSNode | None) -> tuple[ParameterDeclaration, ...]:
        if node is None:
            return ()
        if node.type == "identifier":
            # Arrow function with a single bare parameter: x => ...
            return (self._parameter(node),)
        return tuple(self._parameter(child) for child in _named(node))

    def _parameter(self, node: TSNode) -> ParameterDeclaration:
        initializer: Expression | None = None
        name_node = node

        if node.type == "assignment_pattern":
            name_node = node.child_by_field_name("left") or node
            right = node.child_by_field_name("right")
            initializer = self.expression(right) if right is not None else None

        return ParameterDeclaration(
            name=self._text(name_node),
            initializer=initializer,
            decorators=self._decorators(node),
            text=self._text(node),
            span=_span(node, self._data),
        )

    # -------------------------------------------------------------------------
    # Expressions
    # -------------------------------------------------------------------------

    def expression(self, node: TSNode) -> Expression:
        text = self._text(node)
        span = _span(node, self._data)

        match node.type:
            case "identifier":
                return Identifier(name=text, text=text, span=span)
            case "parenthesized_expression":
                return self.expression(_named(node)[0])
            case kind if kind in _LITERAL_KINDS:
                value = _unquote(text) if kind in ("string", "template_string") else text
                return Literal(kind=_LITERAL_KINDS[kind], value=value, text=text, span=span)
            case "array":
                return ArrayLiteral(
                    elements=tuple(self.expression(child) for child in _named(node)),
                    text=text,
                    span=span,
                )
            case "object":
                return ObjectLiteral(
                    properties=tuple(
                        member
                        for child in _named(node)
                        if (member := self._object_member(child)) is not None
                    ),
                    text=text,
                    span=span,
                )
            case "member_expression":
                return PropertyAccess(
                    target=self.expression(node.child_by_field_name("object")),
                    name=self._text(node.child_by_field_name("property")),
                    text=text,
                    span=span,
                )
            case "call_expression":
                arguments = node.child_by_field_name("arguments")
                return CallExpression(
                    callee=self.expression(node.child_by_field_name("function")),
                    arguments=(
                        tuple(self.expression(child) for child in _named(arguments))
                        if arguments is not None and arguments.type == "arguments"
                        else ()
                    ),
                    text=text,
                    span=span,
                )
            case "assignment_expression":
                return Assignment(
                    target=self.expression(node.child_by_field_name("left")),
                    value=self.expression(node.child_by_field_name("right")),
                    text=text,
                    span=span,
                )
            case kind if kind in _FUNCTION_EXPRESSIONS:
                return FunctionExpression(
                    name=self._optional_identifier(node.child_by_field_name("name")),
                    parameters=self._parameters(node.child_by_field_name("parameters")),
                    body=self._block(node.child_by_field_name("body")),
                    text=text,
                    span=span,
                )
            case "arrow_function":
                parameters = node.child_by_field_name("parameters")
                if parameters is None:
                    parameters = node.child_by_field_name("parameter")
                body = node.child_by_field_name("body")
                is_block = body is not None and body.type == "statement_block"
                return ArrowFunction(
                    parameters=self._parameters(parameters),
                    expression=(
                        self.expression(body) if body is not None and not is_block else None
                    ),
                    body=self._block(body) if is_block else (),
                    text=text,
                    span=span,
                )
            case "spread_element":
                return SpreadElement(
                    expression=self.expression(_named(node)[0]),
                    text=text,
                    span=span,
                )
            case _:
                return OtherExpression(kind=node.type, text=text, span=span)

    def _object_member(self, node: TSNode) -> ObjectMember | None:
        text = self._text(node)
        span = _span(node, self._data)

        match node.type:
            case "pair":
                key = node.child_by_field_name("key")
                value = self.expression(node.child_by_field_name("value"))
                if key.type == "computed_property_name":
                    return ComputedPropertyAssignment(
                        key=self.expression(_named(key)[0]),
                        initializer=value,
                        text=text,
                        span=span,
                    )
                return PropertyAssignment(
                    name=self._property_name(key),
                    initializer=value,
                    text=text,
                    span=span,
                )
            case "shorthand_property_identifier":
                return ShorthandPropertyAssignment(name=text, text=text, span=span)
            case "spread_element":
                return SpreadAssignment(
                    expression=self.expression(_named(node)[0]),
                    text=text,
                    span=span,
                )
            case "method_definition":
                return MethodShorthand(
                    name=self._property_name(node.child_by_field_name("name")),
                    text=text,
                    span=span,
                )
            case _:
                logger.debug("ignoring object member of type %s at %s", node.type, span)
                return None

    def _identifier(self, node: TSNode) -> Identifier:
        text = self._text(node)
        return Identifier(name=_unquote(text), text=text, span=_span(node, self._data))

    def _optional_identifier(self, node: TSNode | None) -> Identifier | None:
        if node is None or node.type != "identifier":
            return None
        return self._identifier(node)
