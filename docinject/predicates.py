"""Default heuristics for recognising React component definitions.

These are pure predicates over tree-sitter nodes. The classifier accepts
replacements, so projects with unusual base classes or render helpers can
plug in their own checks.
"""

from __future__ import annotations

from typing import Callable, Iterator, Optional

from tree_sitter import Node

from .syntax.traversal import callee_matches, identifier_name, node_text, unwrap_parentheses

NodePredicate = Callable[[Node], bool]

CLASS_NODE_KINDS = ("class_declaration", "class")
FUNCTION_NODE_KINDS = (
    "function_declaration",
    "function_expression",
    "function",
    "arrow_function",
)

_COMPONENT_BASES = {"Component", "PureComponent"}
_JSX_KINDS = {"jsx_element", "jsx_self_closing_element", "jsx_fragment"}
_NESTED_SCOPES = set(FUNCTION_NODE_KINDS) | {
    "generator_function_declaration",
    "generator_function",
    "method_definition",
    "class_declaration",
    "class",
}


def is_component_class(node: Node) -> bool:
    """Return True for classes extending a React component base.

    A class qualifies when it has a superclass and either defines a
    ``render`` method or extends ``Component``/``PureComponent`` (bare or
    through a namespace such as ``React.Component``).
    """
    if node.type not in CLASS_NODE_KINDS:
        return False
    superclass = _superclass(node)
    if superclass is None:
        return False
    if _has_render_method(node):
        return True
    name = identifier_name(superclass)
    if name is None and superclass.type == "member_expression":
        prop = superclass.child_by_field_name("property")
        name = node_text(prop) if prop is not None else None
    return name in _COMPONENT_BASES


def is_stateless_component(node: Node) -> bool:
    """Return True for functions that return JSX or ``createElement`` calls."""
    if node.type not in FUNCTION_NODE_KINDS:
        return False
    body = node.child_by_field_name("body")
    if body is None:
        return False
    if body.type != "statement_block":
        return _renders_element(body)
    return any(_renders_element(value) for value in _returned_values(body))


def _superclass(node: Node) -> Optional[Node]:
    for child in node.named_children:
        if child.type == "class_heritage":
            named = child.named_children
            return unwrap_parentheses(named[0]) if named else None
    return None


def _has_render_method(node: Node) -> bool:
    body = node.child_by_field_name("body")
    if body is None:
        return False
    for member in body.named_children:
        if member.type == "method_definition":
            name = member.child_by_field_name("name")
        elif member.type == "field_definition":
            name = member.child_by_field_name("property")
        else:
            continue
        if name is not None and node_text(name) == "render":
            return True
    return False


def _returned_values(block: Node) -> Iterator[Node]:
    stack = list(block.named_children)
    while stack:
        node = stack.pop()
        if node.type in _NESTED_SCOPES:
            continue
        if node.type == "return_statement":
            yield from node.named_children
            continue
        stack.extend(node.named_children)


def _renders_element(node: Optional[Node]) -> bool:
    node = unwrap_parentheses(node)
    if node is None:
        return False
    if node.type in _JSX_KINDS:
        return True
    if node.type == "ternary_expression":
        return _renders_element(node.child_by_field_name("consequence")) or _renders_element(
            node.child_by_field_name("alternative")
        )
    if node.type == "binary_expression":
        operator = node.child_by_field_name("operator")
        if operator is not None and node_text(operator) in {"&&", "||", "??"}:
            return _renders_element(node.child_by_field_name("right"))
        return False
    if node.type == "call_expression":
        return callee_matches(node.child_by_field_name("function"), ("createElement",))
    return False


__all__ = [
    "CLASS_NODE_KINDS",
    "FUNCTION_NODE_KINDS",
    "NodePredicate",
    "is_component_class",
    "is_stateless_component",
]
