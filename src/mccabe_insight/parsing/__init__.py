"""Parser adapter: tree-sitter C/C++ grammars behind a cursor-like node API."""

from .nodes import NodeKind, SyntaxNode, Token
from .treesitter_parser import TREE_SITTER_AVAILABLE, TreeSitterParser, get_supported_languages
from .unit import SourceUnit, parse_source

__all__ = [
    "NodeKind",
    "SyntaxNode",
    "Token",
    "SourceUnit",
    "parse_source",
    "TreeSitterParser",
    "TREE_SITTER_AVAILABLE",
    "get_supported_languages",
]
