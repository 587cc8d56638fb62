"""Export reachability of component definitions."""

from __future__ import annotations

from typing import Iterable, Optional

from tree_sitter import Node

from .models import CandidateDefinition
from .syntax.traversal import (
    declarator_for,
    identifier_name,
    node_text,
    unwrap_parentheses,
)

MAX_UNWRAP_DEPTH = 32

_VARIABLE_DECLARATIONS = {"lexical_declaration", "variable_declaration"}
_NAMED_DECLARATIONS = {
    "class_declaration",
    "function_declaration",
    "generator_function_declaration",
}


def is_exported(candidate: CandidateDefinition) -> bool:
    """Return True when the candidate is reachable from the module exports.

    Checked in order: the definition sits directly in an export statement;
    a named export lists or declares the bound name; the default export
    resolves to the bound name (through nested call arguments such as
    ``connect(...)(Foo)``); ``module.exports`` is assigned the bound name.
    """
    if _directly_exported(candidate.node):
        return True
    name = candidate.bound_name
    if not name:
        return False
    for statement in candidate.module.body.parsed:
        if statement.type == "export_statement":
            if _is_default_export(statement):
                if _default_export_resolves_to(statement, name):
                    return True
            elif _named_export_includes(statement, name):
                return True
        elif statement.type == "expression_statement":
            if _module_exports_assigns(statement, name):
                return True
    return False


def _directly_exported(node: Node) -> bool:
    parent = node.parent
    if parent is not None and parent.type == "export_statement":
        return True
    declarator = declarator_for(node)
    if declarator is None:
        return False
    declaration = declarator.parent
    if declaration is None or declaration.type not in _VARIABLE_DECLARATIONS:
        return False
    return declaration.parent is not None and declaration.parent.type == "export_statement"


def _is_default_export(statement: Node) -> bool:
    return any(child.type == "default" for child in statement.children)


def _named_export_includes(statement: Node, name: str) -> bool:
    if statement.child_by_field_name("source") is not None:
        return False
    for child in statement.named_children:
        if child.type == "export_clause":
            for specifier in child.named_children:
                if specifier.type != "export_specifier":
                    continue
                local = specifier.child_by_field_name("name")
                if local is not None and node_text(local) == name:
                    return True
    declaration = statement.child_by_field_name("declaration")
    return declaration is not None and name in _declared_names(declaration)


def _declared_names(declaration: Node) -> Iterable[str]:
    if declaration.type in _NAMED_DECLARATIONS:
        declared = identifier_name(declaration.child_by_field_name("name"))
        if declared:
            yield declared
    elif declaration.type in _VARIABLE_DECLARATIONS:
        for declarator in declaration.named_children:
            if declarator.type != "variable_declarator":
                continue
            declared = identifier_name(declarator.child_by_field_name("name"))
            if declared:
                yield declared


def _default_export_resolves_to(statement: Node, name: str) -> bool:
    declaration = statement.child_by_field_name("declaration")
    if declaration is not None:
        return name in _declared_names(declaration)
    return resolve_exported_identifier(statement.child_by_field_name("value")) == name


def resolve_exported_identifier(node: Optional[Node], depth: int = 0) -> Optional[str]:
    """Follow first call arguments down to an identifier.

    ``withRouter(connect(mapState)(Foo))`` resolves to ``Foo``. Gives up
    after ``MAX_UNWRAP_DEPTH`` nested calls.
    """
    node = unwrap_parentheses(node)
    if node is None or depth > MAX_UNWRAP_DEPTH:
        return None
    if node.type == "identifier":
        return node_text(node)
    if node.type != "call_expression":
        return None
    arguments = node.child_by_field_name("arguments")
    if arguments is None or arguments.type != "arguments":
        return None
    values = [child for child in arguments.named_children if child.type != "comment"]
    if not values:
        return None
    return resolve_exported_identifier(values[0], depth + 1)


def _module_exports_assigns(statement: Node, name: str) -> bool:
    expressions = statement.named_children
    if not expressions or expressions[0].type != "assignment_expression":
        return False
    assignment = expressions[0]
    left = assignment.child_by_field_name("left")
    if left is None or left.type != "member_expression":
        return False
    target = left.child_by_field_name("object")
    prop = left.child_by_field_name("property")
    if identifier_name(target) != "module" or prop is None or node_text(prop) != "exports":
        return False
    return identifier_name(unwrap_parentheses(assignment.child_by_field_name("right"))) == name


__all__ = ["MAX_UNWRAP_DEPTH", "is_exported", "resolve_exported_identifier"]
