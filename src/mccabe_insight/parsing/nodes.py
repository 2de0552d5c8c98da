"""Cursor-like view over tree-sitter nodes.

Exposes only what the complexity walk needs: a closed ``NodeKind``,
ordered children, a 1-based source location, the spelling of function
names and the tokens spanned by a node. Everything the walk does not care
about is ``NodeKind.OTHER``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, Optional

if TYPE_CHECKING:
    from .treesitter_parser import Node


class NodeKind(Enum):
    """Syntactic categories relevant to cyclomatic complexity."""

    IF_STATEMENT = "if_statement"
    FOR_STATEMENT = "for_statement"
    WHILE_STATEMENT = "while_statement"
    SWITCH_CASE = "switch_case"
    SWITCH_DEFAULT = "switch_default"
    CONDITIONAL_EXPRESSION = "conditional_expression"
    BINARY_OPERATOR = "binary_operator"
    FUNCTION_DEFINITION = "function_definition"
    OTHER = "other"


# tree-sitter node types that map one-to-one onto a kind.
# case_statement is resolved separately (case vs default label).
_DIRECT_KINDS: dict[str, NodeKind] = {
    "if_statement": NodeKind.IF_STATEMENT,
    "for_statement": NodeKind.FOR_STATEMENT,
    "for_range_loop": NodeKind.FOR_STATEMENT,
    "while_statement": NodeKind.WHILE_STATEMENT,
    "conditional_expression": NodeKind.CONDITIONAL_EXPRESSION,
    "binary_expression": NodeKind.BINARY_OPERATOR,
    "function_definition": NodeKind.FUNCTION_DEFINITION,
}

# Declarator wrappers around a function declarator's return type.
# A function returning a function pointer nests its named declarator as
# function_declarator > parenthesized_declarator > pointer_declarator > function_declarator.
_WRAPPER_DECLARATORS = ("pointer_declarator", "reference_declarator", "parenthesized_declarator")

# Declarations that can introduce a function prototype
_PROTOTYPE_PARENTS = ("declaration", "field_declaration")

# Nodes naming a function (anything else, e.g. a parenthesized
# declarator, is a function pointer rather than a function)
_NAME_TYPES = (
    "identifier",
    "field_identifier",
    "qualified_identifier",
    "destructor_name",
    "operator_name",
    "template_function",
)

# Lexed as a single token even though tree-sitter splits them
_ATOMIC_TOKEN_TYPES = frozenset(
    {"string_literal", "char_literal", "raw_string_literal", "system_lib_string"}
)

_SKIPPED_TYPES = frozenset({"comment"})


@dataclass(frozen=True)
class Token:
    """A lexical token inside a node's extent."""

    text: str
    line: int
    column: int


class SyntaxNode:
    """Adapter over a tree-sitter node bound to its source bytes."""

    __slots__ = ("_node", "_source", "_encoding")

    def __init__(self, node: Node, source: bytes, encoding: str = "utf-8") -> None:
        self._node = node
        self._source = source
        self._encoding = encoding

    def __repr__(self) -> str:
        line, column = self.location()
        return f"SyntaxNode({self._node.type!r}, {line}:{column})"

    @property
    def type(self) -> str:
        """Raw tree-sitter node type."""
        return self._node.type

    def kind(self) -> NodeKind:
        node = self._node
        kind = _DIRECT_KINDS.get(node.type)
        if kind is not None:
            return kind
        if node.type == "case_statement":
            if node.child_by_field_name("value") is None:
                return NodeKind.SWITCH_DEFAULT
            return NodeKind.SWITCH_CASE
        if node.type == "function_declarator" and _is_prototype(node):
            return NodeKind.FUNCTION_DEFINITION
        return NodeKind.OTHER

    def children(self) -> list[SyntaxNode]:
        return [
            SyntaxNode(child, self._source, self._encoding)
            for child in self._node.named_children
            if child.type not in _SKIPPED_TYPES
        ]

    def location(self) -> tuple[int, int]:
        """1-based (line, column) of the node, or of a function's name."""
        anchor = self._name_node() if self.kind() is NodeKind.FUNCTION_DEFINITION else None
        row, column = (anchor or self._node).start_point
        return row + 1, column + 1

    def spelling(self) -> str:
        """Function name for function nodes; empty for everything else."""
        name = self._name_node()
        if name is None:
            return ""
        return self._text(name)

    def has_body(self) -> bool:
        return self._node.child_by_field_name("body") is not None

    def tokens_in_extent(self) -> list[Token]:
        return [
            Token(self._text(leaf), leaf.start_point[0] + 1, leaf.start_point[1] + 1)
            for leaf in _iter_token_nodes(self._node)
        ]

    def _text(self, node: Node) -> str:
        return self._source[node.start_byte : node.end_byte].decode(
            self._encoding, errors="replace"
        )

    def _name_node(self) -> Optional[Node]:
        node = self._node
        if node.type == "function_definition":
            node = _named_function_declarator(node.child_by_field_name("declarator"))
            if node is None:
                return None
        elif node.type != "function_declarator":
            return None
        return _simple_name(node.child_by_field_name("declarator"))


def _inner_declarator(node: Node) -> Optional[Node]:
    # reference and parenthesized declarators carry no "declarator" field
    inner = node.child_by_field_name("declarator")
    if inner is not None:
        return inner
    named = [child for child in node.named_children if child.type not in _SKIPPED_TYPES]
    return named[-1] if named else None


def _named_function_declarator(node: Optional[Node]) -> Optional[Node]:
    """Innermost function declarator whose declarator is a name, if any."""
    while node is not None:
        if node.type == "function_declarator":
            if _simple_name(node.child_by_field_name("declarator")) is not None:
                return node
            node = node.child_by_field_name("declarator")
        elif node.type in _WRAPPER_DECLARATORS:
            node = _inner_declarator(node)
        else:
            return None
    return None


def _simple_name(node: Optional[Node]) -> Optional[Node]:
    """Reduce qualified/template names to the unqualified name node."""
    while node is not None and node.type in ("qualified_identifier", "template_function"):
        node = node.child_by_field_name("name")
    if node is None or node.type not in _NAME_TYPES:
        return None
    return node


def _is_prototype(node: Node) -> bool:
    """True for a function declarator that declares a function (not a pointer).

    ``int (*cb)(int);`` has no named function declarator and is a variable;
    ``void (*signal(int, void (*)(int)))(int);`` declares ``signal``.
    """
    if _simple_name(node.child_by_field_name("declarator")) is None:
        return False
    parent = node.parent
    while parent is not None and (
        parent.type in _WRAPPER_DECLARATORS or parent.type == "function_declarator"
    ):
        parent = parent.parent
    return parent is not None and parent.type in _PROTOTYPE_PARENTS


def _iter_token_nodes(root: Any) -> Iterator[Any]:
    """Yield token-level nodes of ``root`` in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type in _SKIPPED_TYPES:
            continue
        if node.type in _ATOMIC_TOKEN_TYPES or node.child_count == 0:
            # Zero-width leaves are MISSING nodes from error recovery
            if node.end_byte > node.start_byte:
                yield node
            continue
        stack.extend(reversed(node.children))
