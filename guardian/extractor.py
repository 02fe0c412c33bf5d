"""
Function extraction: turn a parsed file into FunctionDescriptors.

A descriptor is produced for every named function declaration and for every
variable whose initializer is (or wraps, through parentheses and call
arguments such as memo()/forwardRef()) a function or arrow function. Each
descriptor carries the function's role, judged from its name, and the
locations of direct network calls and markup returns in its own body.

Typical usage:
    from pathlib import Path
    from guardian.extractor import parse_file

    for fn in parse_file(Path("src/App.tsx")):
        print(fn.name, fn.role.value, len(fn.api_calls))
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from tree_sitter import Node as TSNode

from guardian.context import FileContext, context_from_source, create_context, get_source_span, node_location
from guardian.findings.models import FunctionDescriptor, Location, Role
from guardian.parser import Dialect
from guardian.syntax import (
    FUNCTION_EXPRESSION_TYPES,
    NodeKind,
    Visit,
    first_named_child,
    kind_of,
    walk,
    walk_own_scope,
)

logger = logging.getLogger(__name__)

# Bare callee names treated as network calls: fetch(...), axios(...)
NETWORK_CALL_NAMES = frozenset({"fetch", "axios"})

# Objects whose members are all network calls: axios.get(...), axios?.post(...)
HTTP_CLIENT_OBJECTS = frozenset({"axios"})

# Declarations that bind a name to a function directly. function_signature
# covers TypeScript overloads and `declare function`, which have no body.
_FUNCTION_DECLARATION_TYPES = frozenset(
    {"function_declaration", "generator_function_declaration", "function_signature"}
)


def _is_ascii_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def is_hook_name(name: str) -> bool:
    """
    True for names shaped like useSomething.

    Examples:
        >>> is_hook_name("useEffect")
        True
        >>> is_hook_name("user")
        False
    """
    return name.startswith("use") and len(name) > 3 and _is_ascii_upper(name[3])


def is_component_name(name: str) -> bool:
    """True for names starting with an uppercase ASCII letter."""
    return bool(name) and _is_ascii_upper(name[0])


def classify_role(name: str) -> Role:
    """Map a function name to its Role. Hook shape wins over component shape."""
    if is_hook_name(name):
        return Role.HOOK
    if is_component_name(name):
        return Role.COMPONENT
    return Role.UTILITY


def unwrap_function(expr: Optional[TSNode]) -> Optional[TSNode]:
    """
    Resolve a variable initializer to the function it defines, if any.

    Parentheses are stripped; for call expressions the arguments are searched
    in order and the first one that resolves to a function wins, so
    memo(forwardRef((props, ref) => ...)) yields the inner arrow function.
    """
    if expr is None:
        return None
    if expr.type == "parenthesized_expression":
        return unwrap_function(first_named_child(expr))
    if expr.type in FUNCTION_EXPRESSION_TYPES:
        return expr
    if expr.type == "call_expression":
        args = expr.child_by_field_name("arguments")
        if args is None or args.type != "arguments":
            return None
        for arg in args.named_children:
            found = unwrap_function(arg)
            if found is not None:
                return found
    return None


def _callee_is_network_api(context: FileContext, call_node: TSNode) -> bool:
    callee = call_node.child_by_field_name("function")
    if callee is None:
        return False
    if callee.type == "identifier":
        return get_source_span(context, callee) in NETWORK_CALL_NAMES
    if callee.type == "member_expression":
        # Optional chaining (axios?.get) is still a member_expression.
        obj = callee.child_by_field_name("object")
        return (
            obj is not None
            and obj.type == "identifier"
            and get_source_span(context, obj) in HTTP_CLIENT_OBJECTS
        )
    return False


def find_api_calls(context: FileContext, body: Optional[TSNode]) -> list[Location]:
    """Locations of direct network calls made by the function owning body."""
    if body is None:
        return []

    calls: list[Location] = []

    def visit(node: TSNode) -> Visit:
        if kind_of(node) is NodeKind.CALL and _callee_is_network_api(context, node):
            calls.append(node_location(context, node))
        return Visit.CONTINUE

    walk_own_scope(body, visit)
    return calls


def find_first_markup(root: TSNode) -> Optional[TSNode]:
    """Return the first markup node met walking root, ignoring nested functions."""
    found: list[TSNode] = []

    def visit(node: TSNode) -> Visit:
        if found:
            return Visit.SKIP
        if kind_of(node) is NodeKind.MARKUP:
            found.append(node)
            return Visit.SKIP
        return Visit.CONTINUE

    walk_own_scope(root, visit)
    return found[0] if found else None


def find_jsx_returns(context: FileContext, body: Optional[TSNode]) -> list[Location]:
    """
    Locations of markup returned by the function owning body.

    An expression body is an implicit return: at most one location. A block
    body yields one location per return statement whose argument holds markup.
    """
    if body is None:
        return []

    if body.type != "statement_block":
        markup = find_first_markup(body)
        return [node_location(context, markup)] if markup is not None else []

    locations: list[Location] = []

    def visit(node: TSNode) -> Visit:
        if kind_of(node) is NodeKind.RETURN:
            argument = first_named_child(node)
            if argument is not None:
                markup = find_first_markup(argument)
                if markup is not None:
                    locations.append(node_location(context, markup))
        return Visit.CONTINUE

    walk_own_scope(body, visit)
    return locations


def build_descriptor(
    context: FileContext,
    name_node: TSNode,
    body: Optional[TSNode],
) -> FunctionDescriptor:
    """Create the descriptor for one declaration given its name token and body."""
    name = get_source_span(context, name_node)
    return FunctionDescriptor(
        name=name,
        role=classify_role(name),
        location=node_location(context, name_node),
        api_calls=tuple(find_api_calls(context, body)),
        jsx_returns=tuple(find_jsx_returns(context, body)),
    )


def _descriptor_for(context: FileContext, node: TSNode) -> Optional[FunctionDescriptor]:
    """Return a descriptor if node is a qualifying declaration, else None."""
    if node.type in _FUNCTION_DECLARATION_TYPES:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        return build_descriptor(context, name_node, node.child_by_field_name("body"))

    if node.type == "variable_declarator":
        name_node = node.child_by_field_name("name")
        if name_node is None or name_node.type != "identifier":
            return None
        function_node = unwrap_function(node.child_by_field_name("value"))
        if function_node is None:
            return None
        return build_descriptor(context, name_node, function_node.child_by_field_name("body"))

    return None


def extract_functions(context: FileContext) -> list[FunctionDescriptor]:
    """
    Collect descriptors for every qualifying declaration, at any depth.

    Results are in document order; a name declared twice yields two
    descriptors.
    """
    functions: list[FunctionDescriptor] = []

    def visit(node: TSNode) -> Visit:
        descriptor = _descriptor_for(context, node)
        if descriptor is not None:
            logger.debug(
                "Found %s %r at %d:%d (api calls=%d, markup returns=%d)",
                descriptor.role.value,
                descriptor.name,
                descriptor.location.line,
                descriptor.location.column,
                len(descriptor.api_calls),
                len(descriptor.jsx_returns),
            )
            functions.append(descriptor)
        return Visit.CONTINUE

    walk(context.root_node, visit)
    logger.info("Extracted %d function(s) from %s", len(functions), context.path or "<source>")
    return functions


def extract_from_source(
    source: Union[str, bytes],
    dialect: Dialect = Dialect.TSX,
) -> list[FunctionDescriptor]:
    """Parse in-memory source and extract its function descriptors."""
    return extract_functions(context_from_source(source, dialect=dialect))


def parse_file(path: Path, dialect: Optional[Dialect] = None) -> list[FunctionDescriptor]:
    """
    Read, parse and extract one file.

    Raises:
        SourceReadError: the file cannot be read.
        SourceSyntaxError: the file does not parse under its dialect.
    """
    return extract_functions(create_context(path, dialect=dialect))
