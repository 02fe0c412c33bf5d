# Per-file analysis context: store file path, source code, dialect and AST.
# Handles reading/parsing source files, turns unreadable files and syntax
# errors into fatal AnalysisErrors, and logs node/function counts.

import logging
from pathlib import Path
from typing import Optional, Union

from tree_sitter import Node as TSNode
from tree_sitter import Parser, Tree

from guardian.errors import SourceReadError, SourceSyntaxError
from guardian.findings.models import Location
from guardian.parser import Dialect, dialect_for_path, parse_bytes
from guardian.syntax import NodeKind, kind_of

logger = logging.getLogger(__name__)


def count_tree_stats(root: TSNode) -> tuple[int, int]:
    """
    Return (total node count, function-like node count) for the tree.

    Useful for logging how much was parsed.
    """
    nodes = 0
    functions = 0
    stack = [root]
    while stack:
        node = stack.pop()
        nodes += 1
        if kind_of(node) is NodeKind.FUNCTION_LIKE:
            functions += 1
        stack.extend(node.children)
    return nodes, functions


def find_first_error(root: TSNode) -> Optional[TSNode]:
    """Return the first ERROR or MISSING node in document order, or None."""
    if not root.has_error:
        return None
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    return None


class FileContext:
    """
    Per-file state for analysis: path, raw source bytes, dialect and AST.

    The extractor uses context.root_node to walk the AST, and
    get_source_span()/node_location() for names and positions.
    """

    def __init__(
        self,
        path: Optional[Path],
        source: bytes,
        tree: Tree,
        dialect: Dialect,
    ) -> None:
        self.path = path
        self.source = source
        self.tree = tree
        self.dialect = dialect

    @property
    def root_node(self) -> TSNode:
        """Convenience access to the AST root."""
        return self.tree.root_node


def get_source_span(context: FileContext, node: TSNode) -> str:
    """
    Return the substring of context.source for the given node's byte range.

    Decodes with errors="replace" so bad UTF-8 does not crash.
    """
    return context.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def node_location(context: FileContext, node: TSNode) -> Location:
    """
    Return the Location of the node's first character.

    Tree-sitter columns are byte offsets; the reported column counts UTF-16
    code units from the start of the line, which is what editors use and is
    the plain character offset for ASCII lines.
    """
    row, byte_col = node.start_point
    line_start = node.start_byte - byte_col
    prefix = context.source[line_start : node.start_byte].decode("utf-8", errors="replace")
    return Location(line=row + 1, column=len(prefix.encode("utf-16-le")) // 2)


def context_from_source(
    source: Union[str, bytes],
    dialect: Dialect = Dialect.TSX,
    path: Optional[Path] = None,
    parser: Optional[Parser] = None,
) -> FileContext:
    """
    Parse in-memory source into a FileContext.

    Raises:
        SourceSyntaxError: the source does not parse cleanly under dialect.
    """
    if isinstance(source, str):
        source = source.encode("utf-8")

    tree = parse_bytes(source, dialect=dialect, parser=parser)
    context = FileContext(path=path, source=source, tree=tree, dialect=dialect)

    error_node = find_first_error(tree.root_node)
    if error_node is not None:
        location = node_location(context, error_node)
        if error_node.is_missing:
            detail = f"missing {error_node.type!r}"
        else:
            snippet = get_source_span(context, error_node).strip().splitlines()
            detail = f"unexpected {snippet[0][:40]!r}" if snippet else "unexpected input"
        logger.error(
            "Syntax error in %s at %d:%d (%s): %s",
            path or "<source>",
            location.line,
            location.column,
            dialect.value,
            detail,
        )
        raise SourceSyntaxError(path, location.line, location.column, detail)

    node_count, func_count = count_tree_stats(tree.root_node)
    logger.info(
        "Parsed %s: %d nodes, %d function-like node(s)",
        path or "<source>",
        node_count,
        func_count,
    )
    return context


def create_context(
    path: Path,
    dialect: Optional[Dialect] = None,
    parser: Optional[Parser] = None,
) -> FileContext:
    """
    Read a source file and parse it into a FileContext (path, source, AST).

    The dialect is inferred from the file extension when not given. The file
    is read once, fully, before parsing.

    Raises:
        SourceReadError: the file is missing or unreadable.
        SourceSyntaxError: the file does not parse cleanly.
    """
    if dialect is None:
        dialect = dialect_for_path(path)

    try:
        source = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read file %s: %s", path, e)
        raise SourceReadError(path, e.strerror or str(e)) from e

    return context_from_source(source, dialect=dialect, path=path, parser=parser)
