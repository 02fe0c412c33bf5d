"""
Closed node-kind view over tree-sitter JavaScript/TypeScript trees, plus an
explicit depth-first walk.

Only the handful of node kinds the extractor inspects are modelled; every
other grammar node is NodeKind.OTHER. The walk asks a visitor what to do with
each node (Visit.CONTINUE descends into its children, Visit.SKIP does not),
and walk_own_scope() adds the guard that keeps a function's analysis out of
the bodies of functions nested inside it.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from tree_sitter import Node as TSNode


class NodeKind(Enum):
    CALL = "call"
    RETURN = "return"
    MARKUP = "markup"
    FUNCTION_LIKE = "function-like"
    OTHER = "other"


class Visit(Enum):
    CONTINUE = "continue"
    SKIP = "skip"


_CALL_TYPES = frozenset({"call_expression"})
_RETURN_TYPES = frozenset({"return_statement"})

# Fragments (<>...</>) parse as jsx_element with a nameless opening tag;
# older grammar releases emit jsx_fragment instead.
_MARKUP_TYPES = frozenset({"jsx_element", "jsx_self_closing_element", "jsx_fragment"})

# "function" and "generator_function" are the expression node names used by
# older tree-sitter-javascript releases.
_FUNCTION_LIKE_TYPES = frozenset(
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

FUNCTION_EXPRESSION_TYPES = frozenset(
    {"function_expression", "function", "generator_function", "arrow_function"}
)


def _is_tagged_template(node: TSNode) -> bool:
    args = node.child_by_field_name("arguments")
    return args is not None and args.type != "arguments"


def _is_accessor_or_constructor(node: TSNode) -> bool:
    # get/set accessors and constructors are walked as part of the enclosing scope
    if any(not child.is_named and child.type in ("get", "set") for child in node.children):
        return True
    name = node.child_by_field_name("name")
    return name is not None and name.text == b"constructor"


def kind_of(node: TSNode) -> NodeKind:
    """Classify a node into the closed set of kinds the analysis cares about."""
    if not node.is_named:
        return NodeKind.OTHER
    node_type = node.type
    if node_type in _CALL_TYPES:
        # fetch`x` parses as a call_expression with a template_string argument
        return NodeKind.OTHER if _is_tagged_template(node) else NodeKind.CALL
    if node_type in _RETURN_TYPES:
        return NodeKind.RETURN
    if node_type in _MARKUP_TYPES:
        return NodeKind.MARKUP
    if node_type == "method_definition" and _is_accessor_or_constructor(node):
        return NodeKind.OTHER
    if node_type in _FUNCTION_LIKE_TYPES:
        return NodeKind.FUNCTION_LIKE
    return NodeKind.OTHER


def walk(root: TSNode, visit: Callable[[TSNode], Visit]) -> None:
    """Visit root and its named descendants in document order (pre-order DFS)."""
    stack = [root]
    while stack:
        node = stack.pop()
        if visit(node) is Visit.SKIP:
            continue
        stack.extend(reversed(node.named_children))


def walk_own_scope(root: TSNode, visit: Callable[[TSNode], Visit]) -> None:
    """
    Like walk(), but never enters a function-like node other than root itself.

    root may be function-like (e.g. the concise body of `() => () => ...`);
    it is still walked.
    """

    def guarded(node: TSNode) -> Visit:
        if node != root and kind_of(node) is NodeKind.FUNCTION_LIKE:
            return Visit.SKIP
        return visit(node)

    walk(root, guarded)


def first_named_child(node: TSNode) -> TSNode | None:
    """Return the first named child that is not a comment, or None."""
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None
