"""Syntax model for emitted JavaScript.

Closed set of immutable node variants produced by the front end.
Hosts pattern-match on these classes (``match``/``case``) instead of
probing untyped parser nodes at runtime.

Every node carries:
    text: Exact source text of the node (the ``getText()`` of the node)
    span: Position of the node in the source file

Nodes compare structurally (including span), so two queries over the
same program return equal results.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ngreflect.domain.model.location import Span


class LiteralKind(Enum):
    """Kind of a literal expression."""

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    UNDEFINED = auto()
    REGEX = auto()
    TEMPLATE = auto()


class MethodKind(Enum):
    """Kind of a method-like class element."""

    METHOD = auto()
    GETTER = auto()
    SETTER = auto()


class ImportKind(Enum):
    """How a local name is bound by an import declaration."""

    NAMED = auto()  # import { A } / import { A as B }
    DEFAULT = auto()  # import A
    NAMESPACE = auto()  # import * as A


# =============================================================================
# EXPRESSIONS
# =============================================================================


@dataclass(frozen=True, slots=True)
class Identifier:
    """Bare identifier reference."""

    name: str
    text: str
    span: Span

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("identifier name must not be empty")


@dataclass(frozen=True, slots=True)
class Literal:
    """Literal value. ``value`` is unquoted for strings."""

    kind: LiteralKind
    value: str
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ArrayLiteral:
    """Array literal ``[a, b, ...]``. Holes are not represented."""

    elements: tuple[Expression, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ObjectLiteral:
    """Object literal ``{ ... }``."""

    properties: tuple[ObjectMember, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class PropertyAccess:
    """Property access ``target.name``."""

    target: Expression
    name: str
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class CallExpression:
    """Call ``callee(arguments...)``."""

    callee: Expression
    arguments: tuple[Expression, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class Assignment:
    """Simple assignment ``target = value``."""

    target: Expression
    value: Expression
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class FunctionExpression:
    """Function expression ``function name?(...) { ... }``."""

    name: Identifier | None
    parameters: tuple[ParameterDeclaration, ...]
    body: tuple[Statement, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ArrowFunction:
    """Arrow function. Exactly one of ``expression``/``body`` is meaningful.

    Attributes:
        expression: Concise body (``() => expr``), None for block bodies
        body: Block body statements, empty for concise bodies
    """

    parameters: tuple[ParameterDeclaration, ...]
    expression: Expression | None
    body: tuple[Statement, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class SpreadElement:
    """Spread ``...expression`` inside array literals and call arguments."""

    expression: Expression
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class OtherExpression:
    """Any expression shape the hosts never inspect.

    Attributes:
        kind: Parser node type (e.g. "new_expression", "binary_expression")
    """

    kind: str
    text: str
    span: Span


# =============================================================================
# OBJECT LITERAL MEMBERS
# =============================================================================


@dataclass(frozen=True, slots=True)
class PropertyAssignment:
    """Simple ``name: initializer`` property.

    Attributes:
        name: Property name (unquoted for string keys)
        initializer: Value expression
    """

    name: str
    initializer: Expression
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ComputedPropertyAssignment:
    """Property with computed key ``[key]: initializer``."""

    key: Expression
    initializer: Expression
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ShorthandPropertyAssignment:
    """Shorthand property ``{ name }``."""

    name: str
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class SpreadAssignment:
    """Object spread ``{ ...expression }``."""

    expression: Expression
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class MethodShorthand:
    """Method shorthand ``{ name() { ... } }``."""

    name: str
    text: str
    span: Span


# =============================================================================
# DECLARATIONS
# =============================================================================


@dataclass(frozen=True, slots=True)
class DecoratorNode:
    """Decorator syntax ``@expression`` attached to a declaration."""

    expression: Expression
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ParameterDeclaration:
    """Formal parameter.

    Attributes:
        name: Parameter name (source text for destructuring patterns)
        initializer: Default value, None if absent
        decorators: Attached decorator syntax
    """

    name: str
    initializer: Expression | None
    decorators: tuple[DecoratorNode, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class MethodDeclaration:
    """Method, getter or setter in a class body."""

    name: str
    kind: MethodKind
    is_static: bool
    parameters: tuple[ParameterDeclaration, ...]
    decorators: tuple[DecoratorNode, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class PropertyDeclaration:
    """Field definition in a class body."""

    name: str
    is_static: bool
    initializer: Expression | None
    decorators: tuple[DecoratorNode, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ConstructorDeclaration:
    """Class constructor."""

    parameters: tuple[ParameterDeclaration, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ClassDeclaration:
    """Class declaration ``class Name extends Base { ... }``."""

    name: Identifier | None
    heritage: Expression | None
    members: tuple[ClassElement, ...]
    decorators: tuple[DecoratorNode, ...]
    text: str
    span: Span

    @property
    def constructor(self) -> ConstructorDeclaration | None:
        """Declared constructor, None if the class has none."""
        for member in self.members:
            if isinstance(member, ConstructorDeclaration):
                return member
        return None


@dataclass(frozen=True, slots=True)
class FunctionDeclaration:
    """Function declaration ``function Name(...) { ... }``."""

    name: Identifier | None
    parameters: tuple[ParameterDeclaration, ...]
    body: tuple[Statement, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class VariableDeclaration:
    """Single declarator of a ``var``/``let``/``const`` statement.

    Attributes:
        name: Bound identifier, None for destructuring patterns
        initializer: Initial value, None if absent
    """

    name: Identifier | None
    initializer: Expression | None
    text: str
    span: Span


# =============================================================================
# STATEMENTS
# =============================================================================


@dataclass(frozen=True, slots=True)
class VariableStatement:
    """``var``/``let``/``const`` statement."""

    keyword: str
    declarations: tuple[VariableDeclaration, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ExpressionStatement:
    """Expression used as statement."""

    expression: Expression
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ReturnStatement:
    """``return expression?``."""

    expression: Expression | None
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ImportSpecifier:
    """One local binding introduced by an import declaration.

    Attributes:
        kind: NAMED, DEFAULT or NAMESPACE
        imported: Exported name in the source module ("default"/"*" for
            default and namespace imports)
        local: Local identifier the binding is known by
    """

    kind: ImportKind
    imported: str
    local: Identifier
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ImportDeclaration:
    """``import ... from 'module'``."""

    module: str
    specifiers: tuple[ImportSpecifier, ...]
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class ExportDeclaration:
    """``export <declaration>``. ``declaration`` is None for export clauses."""

    declaration: Statement | None
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class OtherStatement:
    """Any statement shape the hosts never inspect."""

    kind: str
    text: str
    span: Span


@dataclass(frozen=True, slots=True)
class SourceFile:
    """Parsed source file (root node)."""

    path: str
    statements: tuple[Statement, ...]
    text: str
    span: Span


# =============================================================================
# VARIANT SETS
# =============================================================================

type Expression = (
    Identifier
    | Literal
    | ArrayLiteral
    | ObjectLiteral
    | PropertyAccess
    | CallExpression
    | Assignment
    | FunctionExpression
    | ArrowFunction
    | SpreadElement
    | OtherExpression
)

type ObjectMember = (
    PropertyAssignment
    | ComputedPropertyAssignment
    | ShorthandPropertyAssignment
    | SpreadAssignment
    | MethodShorthand
)

type ClassElement = MethodDeclaration | PropertyDeclaration | ConstructorDeclaration

type Statement = (
    ClassDeclaration
    | FunctionDeclaration
    | VariableStatement
    | ExpressionStatement
    | ReturnStatement
    | ImportDeclaration
    | ExportDeclaration
    | OtherStatement
)

type Declaration = (
    ClassDeclaration
    | FunctionDeclaration
    | VariableDeclaration
    | MethodDeclaration
    | PropertyDeclaration
    | ConstructorDeclaration
    | ParameterDeclaration
)

type Node = (
    Expression
    | ObjectMember
    | Statement
    | Declaration
    | DecoratorNode
    | ImportSpecifier
    | SourceFile
)

_NODE_CLASSES: tuple[type, ...] = (
    Identifier,
    Literal,
    ArrayLiteral,
    ObjectLiteral,
    PropertyAccess,
    CallExpression,
    Assignment,
    FunctionExpression,
    ArrowFunction,
    SpreadElement,
    OtherExpression,
    PropertyAssignment,
    ComputedPropertyAssignment,
    ShorthandPropertyAssignment,
    SpreadAssignment,
    MethodShorthand,
    DecoratorNode,
    ParameterDeclaration,
    MethodDeclaration,
    PropertyDeclaration,
    ConstructorDeclaration,
    ClassDeclaration,
    FunctionDeclaration,
    VariableDeclaration,
    VariableStatement,
    ExpressionStatement,
    ReturnStatement,
    ImportSpecifier,
    ImportDeclaration,
    ExportDeclaration,
    OtherStatement,
    SourceFile,
)


def is_node(value: object) -> bool:
    """Check if value is one of the syntax node variants."""
    return isinstance(value, _NODE_CLASSES)


def iter_children(node: Node) -> Iterator[Node]:
    """Yield direct child nodes in field order.

    Args:
        node: Any syntax node

    Yields:
        Child nodes (fields holding a node or a tuple of nodes)
    """
    for f in fields(node):  # type: ignore[arg-type]
        value = getattr(node, f.name)
        if isinstance(value, tuple):
            for item in value:
                if is_node(item):
                    yield item
        elif is_node(value):
            yield value


def walk(node: Node) -> Iterator[Node]:
    """Walk the subtree rooted at node in depth-first pre-order.

    Args:
        node: Root of the subtree (yielded first)

    Yields:
        Every node of the subtree
    """
    stack: list[Node] = [node]

    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(list(iter_children(current))))
