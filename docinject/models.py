"""Core data models shared across docinject components."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:  # pragma: no cover - typing only
    from tree_sitter import Node

    from .syntax.module import Module


class _Undefined:
    """Marker for a JavaScript ``undefined`` value inside a documentation record."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_Undefined":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_Undefined":
        return self


UNDEFINED = _Undefined()

DocumentationRecord = Dict[str, Any]

METADATA_PROPERTY = "__docgenInfo"


class ShapeKind(Enum):
    """Component definition idioms recognised by the classifier."""

    CLASS_COMPONENT = "class"
    FUNCTION_COMPONENT = "function"
    FACTORY_CALL_COMPONENT = "factory_call"
    ELEMENT_ASSIGNMENT_COMPONENT = "element_assignment"


@dataclass
class CandidateDefinition:
    """A syntax node classified as a component definition."""

    shape: ShapeKind
    bound_name: Optional[str]
    node: "Node"
    module: "Module"
