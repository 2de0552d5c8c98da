"""Parse one source unit into a ``SyntaxNode`` tree."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Union

from ..exceptions import ParseError, UnsupportedLanguageError
from ..logging_config import get_logger
from .nodes import SyntaxNode
from .treesitter_parser import TREE_SITTER_AVAILABLE, TreeSitterParser

logger = get_logger(__name__)

KNOWN_LANGUAGES = ("c", "cpp")

# tree-sitter parsers are not thread-safe; one per worker thread
_local = threading.local()


def _get_parser() -> TreeSitterParser:
    parser = getattr(_local, "parser", None)
    if parser is None:
        parser = _local.parser = TreeSitterParser()
    return parser


@dataclass(frozen=True)
class SourceUnit:
    """A parsed translation unit: its root node and the bytes it spans."""

    name: str
    language: str
    source: bytes
    root: SyntaxNode


def parse_source(
    source: Union[str, bytes],
    language: str = "c",
    name: str = "<stdin>",
    encoding: str = "utf-8",
    strict_syntax: bool = False,
) -> SourceUnit:
    """Parse a complete in-memory source unit.

    Args:
        source: Full source text, as str or undecoded bytes
        language: "c" or "cpp"
        name: Label used in diagnostics (file path or "<stdin>")
        encoding: Encoding of ``source`` when given as bytes
        strict_syntax: Reject trees containing syntax errors

    Returns:
        SourceUnit whose root is the translation-unit node

    Raises:
        UnsupportedLanguageError: If ``language`` is not c or cpp
        ParseError: If no syntax tree can be built for the source, or (with
            ``strict_syntax``) the source has syntax errors or undecodable bytes
    """
    if language not in KNOWN_LANGUAGES:
        raise UnsupportedLanguageError(language, list(KNOWN_LANGUAGES))

    if not TREE_SITTER_AVAILABLE:
        raise ParseError(name, language, "tree-sitter is not installed")

    parser = _get_parser()
    if not parser.is_language_supported(language):
        raise ParseError(name, language, f"tree-sitter grammar for '{language}' is not installed")

    if isinstance(source, str):
        code = source.encode(encoding, errors="surrogateescape")
    else:
        code = source
        try:
            code.decode(encoding)
        except UnicodeDecodeError as e:
            reason = f"cannot decode input as {encoding}: {e.reason} at byte {e.start}"
            if strict_syntax:
                raise ParseError(name, language, reason)
            # tree-sitter works on raw bytes; only identifier text is affected
            logger.warning(f"{name}: {reason}, continuing with raw bytes")

    tree = parser.parse(code, language)
    if tree is None:
        raise ParseError(name, language, "parser produced no syntax tree")

    root = tree.root_node
    if root.has_error:
        line = _first_error_line(root)
        if strict_syntax:
            raise ParseError(name, language, f"syntax error near line {line}")
        logger.warning(
            f"{name}: syntax error near line {line}, continuing with recovered tree",
            extra={"source_line": line},
        )

    logger.debug(f"Parsed {name} ({len(code)} bytes, language={language})")
    return SourceUnit(
        name=name, language=language, source=code, root=SyntaxNode(root, code, encoding)
    )


def _first_error_line(root) -> int:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node.start_point[0] + 1
        if node.has_error:
            stack.extend(reversed(node.children))
    return root.start_point[0] + 1
