"""Classification of syntax nodes into component definition shapes."""

from __future__ import annotations

from typing import Optional

from tree_sitter import Node

from .models import CandidateDefinition, ShapeKind
from .predicates import (
    CLASS_NODE_KINDS,
    FUNCTION_NODE_KINDS,
    NodePredicate,
    is_component_class,
    is_stateless_component,
)
from .syntax.module import Module
from .syntax.traversal import callee_matches, declarator_name, identifier_name

FACTORY_CALLEES = ("createClass", "createReactClass")
ELEMENT_CALLEES = ("createElement",)


class ComponentClassifier:
    """Tags nodes with a :class:`ShapeKind` and resolves their bound name."""

    NODE_KINDS = CLASS_NODE_KINDS + FUNCTION_NODE_KINDS + ("call_expression",)

    def __init__(
        self,
        *,
        component_class: NodePredicate = is_component_class,
        stateless_component: NodePredicate = is_stateless_component,
    ) -> None:
        self._component_class = component_class
        self._stateless_component = stateless_component

    def shape_of(self, node: Node) -> Optional[ShapeKind]:
        """Return the component shape of ``node``, or None."""
        if node.type in CLASS_NODE_KINDS:
            return ShapeKind.CLASS_COMPONENT if self._component_class(node) else None
        if node.type in FUNCTION_NODE_KINDS:
            return ShapeKind.FUNCTION_COMPONENT if self._stateless_component(node) else None
        if node.type == "call_expression":
            callee = node.child_by_field_name("function")
            if callee_matches(callee, FACTORY_CALLEES):
                return ShapeKind.FACTORY_CALL_COMPONENT
            if callee_matches(callee, ELEMENT_CALLEES):
                return ShapeKind.ELEMENT_ASSIGNMENT_COMPONENT
        return None

    def classify(self, node: Node, module: Module) -> Optional[CandidateDefinition]:
        """Return a candidate for component definitions with a bound name."""
        shape = self.shape_of(node)
        if shape is None:
            return None
        name = self.bound_name(node, shape)
        if not name:
            return None
        return CandidateDefinition(shape=shape, bound_name=name, node=node, module=module)

    @staticmethod
    def bound_name(node: Node, shape: ShapeKind) -> Optional[str]:
        if shape in (ShapeKind.FACTORY_CALL_COMPONENT, ShapeKind.ELEMENT_ASSIGNMENT_COMPONENT):
            return declarator_name(node)
        return declarator_name(node) or identifier_name(node.child_by_field_name("name"))


__all__ = ["ComponentClassifier", "ELEMENT_CALLEES", "FACTORY_CALLEES"]
