"""Tree-sitter parser wrapper.

Provides a unified interface for tree-sitter parsing of C and C++.
Handles missing tree-sitter dependency gracefully.

Usage:
    if TREE_SITTER_AVAILABLE:
        parser = TreeSitterParser()
        tree = parser.parse(code_bytes, "c")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..logging_config import get_logger

logger = get_logger(__name__)

# Try to import tree-sitter
TREE_SITTER_AVAILABLE = False
_tree_sitter_module: Any = None
_language_modules: dict[str, Any] = {}

try:
    import tree_sitter as _tree_sitter_module  # type: ignore[no-redef]

    TREE_SITTER_AVAILABLE = True

    # Try to import language grammars
    try:
        import tree_sitter_c

        _language_modules["c"] = tree_sitter_c
    except ImportError:
        pass

    try:
        import tree_sitter_cpp

        _language_modules["cpp"] = tree_sitter_cpp
    except ImportError:
        pass

except ImportError:
    TREE_SITTER_AVAILABLE = False


if TYPE_CHECKING:
    # Type stubs for tree-sitter (not installed, just for type checking)
    class Node:
        type: str
        start_byte: int
        end_byte: int
        start_point: tuple[int, int]
        end_point: tuple[int, int]
        children: list[Node]
        named_children: list[Node]
        child_count: int
        has_error: bool
        is_missing: bool
        parent: Node | None

        def child_by_field_name(self, name: str) -> Node | None: ...

    class Tree:
        root_node: Node


def get_supported_languages() -> list[str]:
    """Get list of languages with installed grammars."""
    if not TREE_SITTER_AVAILABLE:
        return []
    return list(_language_modules.keys())


class TreeSitterParser:
    """Wrapper around tree-sitter for C/C++ parsing.

    Handles missing dependencies gracefully. Check TREE_SITTER_AVAILABLE
    before using, or check if parse() returns None.
    """

    def __init__(self) -> None:
        """Initialize parser with available languages."""
        self._parsers: dict[str, Any] = {}

        if not TREE_SITTER_AVAILABLE:
            return

        for lang_name, lang_module in _language_modules.items():
            try:
                lang_fn = getattr(lang_module, "language", None)
                if lang_fn is None:
                    continue

                # tree-sitter >= 0.23 returns PyCapsule; wrap in Language()
                lang_obj = _tree_sitter_module.Language(lang_fn())
                self._parsers[lang_name] = _tree_sitter_module.Parser(lang_obj)
            except (TypeError, ValueError) as e:
                # Grammar built against an incompatible tree-sitter ABI
                logger.debug(f"Skipping {lang_name} grammar: {e}")

    def parse(self, code: bytes, language: str) -> Tree | None:
        """Parse code and return syntax tree.

        Args:
            code: Source code as bytes
            language: Language name ("c" or "cpp")

        Returns:
            Tree object if successful, None if language not supported
            or tree-sitter not available
        """
        parser = self._parsers.get(language)
        if parser is None:
            return None

        result: Tree | None = parser.parse(code)
        return result

    def is_language_supported(self, language: str) -> bool:
        """Check if a language is supported."""
        return language in self._parsers
