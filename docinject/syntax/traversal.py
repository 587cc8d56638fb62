"""Read-only helpers over tree-sitter nodes and the visitor driver."""

from __future__ import annotations

from typing import Callable, Iterable, Mapping, Optional

from tree_sitter import Node

# Handlers return True to stop the walk.
Visitor = Callable[[Node], Optional[bool]]

_NON_STATEMENTS = {"comment", "hash_bang_line"}


def walk(root: Node, handlers: Mapping[str, Visitor]) -> bool:
    """Visit ``root`` and its named descendants in document order.

    Each node whose type has an entry in ``handlers`` is passed to that
    handler. Returns True when a handler stopped the walk early.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        handler = handlers.get(node.type)
        if handler is not None and handler(node):
            return True
        stack.extend(reversed(node.named_children))
    return False


def node_text(node: Node) -> str:
    return (node.text or b"").decode("utf-8", errors="replace")


def same_node(left: Optional[Node], right: Optional[Node]) -> bool:
    if left is None or right is None:
        return False
    return (
        left.type == right.type
        and left.start_byte == right.start_byte
        and left.end_byte == right.end_byte
    )


def unwrap_parentheses(node: Optional[Node]) -> Optional[Node]:
    while node is not None and node.type == "parenthesized_expression":
        inner = node.named_children
        node = inner[0] if inner else None
    return node


def identifier_name(node: Optional[Node]) -> Optional[str]:
    """Return the name of a plain identifier node, else None."""
    if node is None or node.type != "identifier":
        return None
    return node_text(node)


def callee_matches(callee: Optional[Node], names: Iterable[str]) -> bool:
    """Case-insensitively match a callee against ``names``.

    Matches a bare identifier (``createReactClass``) or the property of a
    non-computed member access (``React.createClass``). Imports are not
    resolved.
    """
    callee = unwrap_parentheses(callee)
    if callee is None:
        return False
    if callee.type == "identifier":
        candidate = node_text(callee)
    elif callee.type == "member_expression":
        prop = callee.child_by_field_name("property")
        if prop is None or prop.type != "property_identifier":
            return False
        candidate = node_text(prop)
    else:
        return False
    wanted = {name.lower() for name in names}
    return candidate.lower() in wanted


def top_level_statements(root: Node) -> list[Node]:
    return [child for child in root.named_children if child.type not in _NON_STATEMENTS]


def declarator_for(node: Node) -> Optional[Node]:
    """Return the variable declarator that ``node`` initialises, if any."""
    child = node
    parent = node.parent
    while parent is not None and parent.type == "parenthesized_expression":
        child = parent
        parent = parent.parent
    if parent is None or parent.type != "variable_declarator":
        return None
    if not same_node(parent.child_by_field_name("value"), child):
        return None
    return parent


def declarator_name(node: Node) -> Optional[str]:
    declarator = declarator_for(node)
    if declarator is None:
        return None
    return identifier_name(declarator.child_by_field_name("name"))


__all__ = [
    "Visitor",
    "callee_matches",
    "declarator_for",
    "declarator_name",
    "identifier_name",
    "node_text",
    "same_node",
    "top_level_statements",
    "unwrap_parentheses",
    "walk",
]
