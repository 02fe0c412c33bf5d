# Tree-sitter setup and AST parsing: parse JavaScript/TypeScript source into AST trees.

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import tree_sitter
import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language

logger = logging.getLogger(__name__)


class Dialect(str, Enum):
    """Source dialect a file is parsed under."""

    JAVASCRIPT = "javascript"  # JSX allowed
    TYPESCRIPT = "typescript"  # no markup
    TSX = "tsx"


# Grammars wrapped once for use with tree_sitter.Parser
_LANGUAGES = {
    Dialect.JAVASCRIPT: Language(tree_sitter_javascript.language()),
    Dialect.TYPESCRIPT: Language(tree_sitter_typescript.language_typescript()),
    Dialect.TSX: Language(tree_sitter_typescript.language_tsx()),
}

_EXTENSION_DIALECTS = {
    ".js": Dialect.JAVASCRIPT,
    ".jsx": Dialect.JAVASCRIPT,
    ".mjs": Dialect.JAVASCRIPT,
    ".cjs": Dialect.JAVASCRIPT,
    ".ts": Dialect.TYPESCRIPT,
    ".mts": Dialect.TYPESCRIPT,
    ".cts": Dialect.TYPESCRIPT,
    ".tsx": Dialect.TSX,
}

SOURCE_EXTENSIONS = frozenset(_EXTENSION_DIALECTS)


def dialect_for_path(path: Path) -> Dialect:
    """
    Infer the dialect from the file extension (case-insensitive).

    Unknown extensions fall back to plain TypeScript.

    Examples:
        >>> dialect_for_path(Path("App.tsx"))
        <Dialect.TSX: 'tsx'>
        >>> dialect_for_path(Path("api.mjs"))
        <Dialect.JAVASCRIPT: 'javascript'>
    """
    return _EXTENSION_DIALECTS.get(path.suffix.lower(), Dialect.TYPESCRIPT)


def get_language(dialect: Dialect) -> Language:
    """Return the Tree-sitter Language object for a dialect."""
    return _LANGUAGES[dialect]


def create_parser(dialect: Dialect = Dialect.TSX) -> tree_sitter.Parser:
    """Create and return a Tree-sitter Parser configured for the dialect."""
    return tree_sitter.Parser(get_language(dialect))


def parse_bytes(
    source: bytes,
    dialect: Dialect = Dialect.TSX,
    parser: Optional[tree_sitter.Parser] = None,
) -> tree_sitter.Tree:
    """
    Parse source bytes into an AST.

    Args:
        source: UTF-8 encoded source code.
        dialect: Grammar to use when no parser is given.
        parser: Optional parser instance; if None, a new one is created.

    Returns:
        The parse tree. Check tree.root_node.has_error for syntax errors.
    """
    if parser is None:
        parser = create_parser(dialect)
    tree = parser.parse(source)
    if tree.root_node.has_error:
        logger.warning(
            "Parse completed with errors: dialect=%s root=%s",
            dialect.value,
            tree.root_node.type,
        )
    else:
        logger.debug(
            "Parse succeeded: dialect=%s root=%s",
            dialect.value,
            tree.root_node.type,
        )
    return tree
