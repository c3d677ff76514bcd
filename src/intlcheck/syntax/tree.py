"""Parsed source units and syntax-node classification.

Wraps tree-sitter parse trees for TypeScript/JavaScript sources and
provides the small vocabulary of node categories the usage resolver
reasons about.

Components:
    SourceUnit - One parsed source file (path, source bytes, tree)
    NodeCategory - Closed set of syntax categories relevant to key resolution
    categorize - Map a tree-sitter node onto a NodeCategory
    node_key - Stable identity for a node (tree-sitter nodes are re-created
        on every access, so object identity cannot be used)

Grammar selection:
    .ts/.mts/.cts use the ``typescript`` grammar (angle-bracket type
    assertions are legal there). Everything else uses ``tsx``, which also
    accepts plain JavaScript and JSX.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

from intlcheck.diagnostics import SourceSpan

__all__ = [
    "FUNCTION_TYPES",
    "NodeCategory",
    "NodeKey",
    "SourceUnit",
    "argument_nodes",
    "categorize",
    "field_is",
    "node_key",
    "node_span",
    "node_text",
    "parse_source",
    "parse_file",
    "property_key_name",
    "same_node",
    "string_literal_value",
]

logger = logging.getLogger(__name__)

# Stable identity of a syntax node: (unit path, start byte, end byte, node type)
type NodeKey = tuple[str, int, int, str]

# Function-like declarations whose parameters can receive a forwarded translator.
# "function" and "generator_function" are the expression forms in older grammars.
FUNCTION_TYPES: frozenset[str] = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "function_expression",
        "function",
        "generator_function",
        "arrow_function",
        "method_definition",
    }
)

_TYPESCRIPT_SUFFIXES: frozenset[str] = frozenset({".ts", ".mts", ".cts"})

_NAME_KEY_TYPES: frozenset[str] = frozenset(
    {
        "property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "identifier",
        "number",
    }
)

_SIMPLE_ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}


class NodeCategory(StrEnum):
    """Syntax categories the resolver distinguishes.

    Anything outside this set is OTHER and never influences resolution.
    """

    CALL = "call"
    """Call expression: f(a, b)"""

    MEMBER_ACCESS = "member_access"
    """Property access expression: t.rich"""

    OBJECT_LITERAL = "object_literal"
    """Object literal expression: { t, other: x }"""

    PROPERTY_ASSIGNMENT = "property_assignment"
    """Explicit property inside an object literal: { t: translator }"""

    ARGUMENT_LIST = "argument_list"
    """Parenthesized argument list of a call: f(a, b)"""

    BINDING_PATTERN = "binding_pattern"
    """Object destructuring pattern: function f({ t }) {}"""

    STRING_LITERAL = "string_literal"
    """Quoted string literal: 'key' (template literals are excluded)"""

    FUNCTION_LIKE = "function_like"
    """Function, arrow, function expression, or method declaration"""

    VARIABLE_DECLARATOR = "variable_declarator"
    """const t = ... (one declarator of a declaration list)"""

    IMPORT_SPECIFIER = "import_specifier"
    """Named import: import { a as b } from '...'"""

    IDENTIFIER = "identifier"
    """Identifier in expression position, including object shorthand"""

    OTHER = "other"


_CATEGORY_BY_TYPE: dict[str, NodeCategory] = {
    "call_expression": NodeCategory.CALL,
    "member_expression": NodeCategory.MEMBER_ACCESS,
    "object": NodeCategory.OBJECT_LITERAL,
    "pair": NodeCategory.PROPERTY_ASSIGNMENT,
    "arguments": NodeCategory.ARGUMENT_LIST,
    "object_pattern": NodeCategory.BINDING_PATTERN,
    "string": NodeCategory.STRING_LITERAL,
    "variable_declarator": NodeCategory.VARIABLE_DECLARATOR,
    "import_specifier": NodeCategory.IMPORT_SPECIFIER,
    "identifier": NodeCategory.IDENTIFIER,
    "shorthand_property_identifier": NodeCategory.IDENTIFIER,
} | dict.fromkeys(FUNCTION_TYPES, NodeCategory.FUNCTION_LIKE)


def categorize(node: Node | None) -> NodeCategory:
    """Classify a node into the closed set of resolver categories.

    Args:
        node: Syntax node (None is accepted and classified as OTHER)

    Returns:
        NodeCategory of the node
    """
    if node is None:
        return NodeCategory.OTHER
    return _CATEGORY_BY_TYPE.get(node.type, NodeCategory.OTHER)


@functools.lru_cache(maxsize=2)
def _language(typescript: bool) -> Language:
    if typescript:
        return Language(tree_sitter_typescript.language_typescript())
    return Language(tree_sitter_typescript.language_tsx())


@dataclass(frozen=True, slots=True)
class SourceUnit:
    """One parsed source file.

    Attributes:
        path: Path used for identity and reporting (absolute for files
            loaded from disk, arbitrary for in-memory sources)
        source: UTF-8 encoded source text
        tree: tree-sitter parse tree
    """

    path: str
    source: bytes = field(repr=False)
    tree: Tree = field(repr=False, compare=False)

    @property
    def root(self) -> Node:
        """Root ``program`` node."""
        return self.tree.root_node

    @property
    def has_errors(self) -> bool:
        """True when the parser had to recover from syntax errors."""
        return self.tree.root_node.has_error


def parse_source(source: str | bytes, path: str = "<memory>.tsx") -> SourceUnit:
    """Parse source text into a SourceUnit.

    The grammar is chosen from the suffix of ``path``. Syntax errors never
    raise: tree-sitter recovers and the affected regions simply yield fewer
    usages.

    Args:
        source: Source text (str is encoded as UTF-8)
        path: Path used for grammar selection, identity and reporting

    Returns:
        Parsed SourceUnit

    Example:
        >>> unit = parse_source("const t = useTranslations('common');", "App.ts")
        >>> unit.root.type
        'program'
    """
    data = source.encode("utf-8") if isinstance(source, str) else source
    typescript = Path(path).suffix.lower() in _TYPESCRIPT_SUFFIXES
    parser = Parser(_language(typescript))
    tree = parser.parse(data)
    if tree.root_node.has_error:
        logger.debug("Recovered from syntax errors in %s", path)
    return SourceUnit(path=path, source=data, tree=tree)


def parse_file(path: Path) -> SourceUnit:
    """Read and parse a source file.

    Args:
        path: File to parse

    Returns:
        Parsed SourceUnit keyed by the resolved absolute path

    Raises:
        OSError: If the file cannot be read
    """
    resolved = path.resolve()
    return parse_source(resolved.read_bytes(), str(resolved))


def node_key(unit: SourceUnit, node: Node) -> NodeKey:
    """Return the stable identity of ``node`` within ``unit``."""
    return (unit.path, node.start_byte, node.end_byte, node.type)


def node_text(node: Node | None) -> str:
    """Return the source text of a node ("" for None)."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def node_span(unit: SourceUnit, node: Node) -> SourceSpan:
    """Return the SourceSpan of a node (1-indexed line and column)."""
    row, column = node.start_point[0], node.start_point[1]
    return SourceSpan(
        start=node.start_byte,
        end=node.end_byte,
        line=row + 1,
        column=column + 1,
        path=unit.path,
    )


def field_is(parent: Node | None, field_name: str, child: Node) -> bool:
    """True when ``child`` is the node stored in ``parent``'s field."""
    if parent is None:
        return False
    value = parent.child_by_field_name(field_name)
    return value is not None and same_node(value, child)


def same_node(left: Node, right: Node) -> bool:
    """True when both handles point at the same syntax node."""
    return (
        left.start_byte == right.start_byte
        and left.end_byte == right.end_byte
        and left.type == right.type
    )


def argument_nodes(call: Node) -> list[Node]:
    """Return the argument expressions of a call (comments excluded).

    Tagged template calls (t`key`) have no argument list and return [].
    """
    arguments = call.child_by_field_name("arguments")
    if arguments is None or arguments.type != "arguments":
        return []
    return [child for child in arguments.named_children if child.type != "comment"]


def string_literal_value(node: Node | None) -> str | None:
    """Return the value of a quoted string literal, or None.

    Template strings are never literals here, even without substitutions:
    they are reported as dynamic like any other non-literal key.

    Args:
        node: Candidate node

    Returns:
        Decoded string value, or None when ``node`` is not a string literal
    """
    if categorize(node) != NodeCategory.STRING_LITERAL:
        return None
    assert node is not None  # narrowed by categorize()
    parts: list[str] = []
    for child in node.named_children:
        match child.type:
            case "string_fragment":
                parts.append(node_text(child))
            case "escape_sequence":
                parts.append(_decode_escape(node_text(child)))
            case _:
                parts.append(node_text(child))
    return "".join(parts)


def _decode_escape(sequence: str) -> str:
    """Decode one JavaScript escape sequence (including the backslash)."""
    body = sequence[1:]
    if not body:
        return ""
    head = body[0]
    if head in _SIMPLE_ESCAPES and len(body) == 1:
        return _SIMPLE_ESCAPES[head]
    if head == "x" and len(body) == 3:
        return chr(int(body[1:], 16))
    if head == "u":
        digits = body[2:-1] if body.startswith("u{") else body[1:]
        try:
            return chr(int(digits, 16))
        except ValueError:
            return sequence
    if head in "\r\n":
        # Line continuation
        return ""
    return body


def property_key_name(node: Node | None) -> str | None:
    """Return the static name of an object property key or pattern key.

    Handles identifiers, quoted strings and numbers; computed keys return None.
    """
    if node is None:
        return None
    if node.type in _NAME_KEY_TYPES:
        return node_text(node)
    if node.type == "string":
        return string_literal_value(node)
    return None
