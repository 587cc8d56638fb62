"""Detection of modules that already carry documentation metadata."""

from __future__ import annotations

from typing import Optional

from tree_sitter import Node

from .models import METADATA_PROPERTY
from .syntax.module import Module
from .syntax.nodes import AssignmentExpression, ExpressionStatement, MemberExpression
from .syntax.traversal import node_text


def already_instrumented(module: Module, property_name: str = METADATA_PROPERTY) -> bool:
    """Return True if a top-level statement assigns ``<expr>.<property_name>``."""
    for statement in module.body:
        if isinstance(statement, ExpressionStatement):
            assigned = _synthesized_target(statement)
        elif isinstance(statement, Node):
            assigned = _parsed_target(statement)
        else:
            continue
        if assigned == property_name:
            return True
    return False


def _synthesized_target(statement: ExpressionStatement) -> Optional[str]:
    expression = statement.expression
    if not isinstance(expression, AssignmentExpression):
        return None
    if not isinstance(expression.left, MemberExpression):
        return None
    return expression.left.property_name


def _parsed_target(statement: Node) -> Optional[str]:
    if statement.type != "expression_statement" or not statement.named_children:
        return None
    expression = statement.named_children[0]
    if expression.type != "assignment_expression":
        return None
    left = expression.child_by_field_name("left")
    if left is None:
        return None
    if left.type == "member_expression":
        prop = left.child_by_field_name("property")
        return node_text(prop) if prop is not None else None
    if left.type == "subscript_expression":
        index = left.child_by_field_name("index")
        if index is not None and index.type == "string":
            return node_text(index)[1:-1]
    return None


__all__ = ["already_instrumented"]
