"""Synthesized JavaScript syntax nodes appended to a module.

Tree-sitter trees are read-only, so statements produced by the pass are kept
as small immutable node objects that know how to render themselves back to
source text. Literal nodes also convert back into plain Python values.
"""

from __future__ import annotations

import json
import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_WORD_OPERATORS = {"typeof", "void", "delete"}
_RESERVED_WORDS = frozenset(
    """
    await break case catch class const continue debugger default delete do else
    enum export extends false finally for function if implements import in
    instanceof interface let new null package private protected public return
    static super switch this throw true try typeof var void while with yield
    """.split()
)
_PROTO_KEY = "__proto__"
_INDENT = "  "


def is_identifier_name(name: object) -> bool:
    """Return True when ``name`` can stand alone as a binding reference."""
    return (
        isinstance(name, str)
        and _IDENTIFIER_RE.match(name) is not None
        and name not in _RESERVED_WORDS
    )


class SyntaxElement:
    """Base class for every synthesized node."""

    def render(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError


class Expression(SyntaxElement):
    pass


class Literal(Expression):
    """An expression denoting a constant value."""

    def to_value(self) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError


@dataclass(frozen=True)
class StringLiteral(Literal):
    value: str

    def render(self) -> str:
        return json.dumps(self.value)

    def to_value(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumericLiteral(Literal):
    value: float

    def render(self) -> str:
        value = self.value
        if isinstance(value, float):
            if math.isnan(value):
                return "NaN"
            if math.isinf(value):
                return "Infinity" if value > 0 else "-Infinity"
        return repr(value)

    def to_value(self) -> float:
        return self.value


@dataclass(frozen=True)
class BooleanLiteral(Literal):
    value: bool

    def render(self) -> str:
        return "true" if self.value else "false"

    def to_value(self) -> bool:
        return self.value


@dataclass(frozen=True)
class NullLiteral(Literal):
    def render(self) -> str:
        return "null"

    def to_value(self) -> None:
        return None


@dataclass(frozen=True)
class ArrayExpression(Literal):
    elements: Tuple[Expression, ...] = ()

    def render(self) -> str:
        return "[" + ", ".join(element.render() for element in self.elements) + "]"

    def to_value(self) -> List[Any]:
        return [_literal_value(element) for element in self.elements]


@dataclass(frozen=True)
class ObjectProperty(SyntaxElement):
    key: str
    value: Expression

    def render(self) -> str:
        if self.key == _PROTO_KEY:
            # a literal __proto__ key sets the prototype instead of an own property
            key = f"[{json.dumps(self.key)}]"
        elif _IDENTIFIER_RE.match(self.key):
            key = self.key
        else:
            key = json.dumps(self.key)
        return f"{key}: {self.value.render()}"


@dataclass(frozen=True)
class ObjectExpression(Literal):
    properties: Tuple[ObjectProperty, ...] = ()

    def render(self) -> str:
        if not self.properties:
            return "{}"
        return "{" + ", ".join(prop.render() for prop in self.properties) + "}"

    def to_value(self) -> Dict[str, Any]:
        return {prop.key: _literal_value(prop.value) for prop in self.properties}


@dataclass(frozen=True)
class Identifier(Expression):
    name: str

    def render(self) -> str:
        return self.name


@dataclass(frozen=True)
class MemberExpression(Expression):
    object: Expression
    property: Expression
    computed: bool = False

    def render(self) -> str:
        if self.computed:
            return f"{self.object.render()}[{self.property.render()}]"
        return f"{self.object.render()}.{self.property.render()}"

    @property
    def property_name(self) -> str | None:
        if not self.computed and isinstance(self.property, Identifier):
            return self.property.name
        if isinstance(self.property, StringLiteral):
            return self.property.value
        return None


@dataclass(frozen=True)
class UnaryExpression(Expression):
    operator: str
    argument: Expression

    def render(self) -> str:
        separator = " " if self.operator in _WORD_OPERATORS else ""
        return f"{self.operator}{separator}{self.argument.render()}"


@dataclass(frozen=True)
class BinaryExpression(Expression):
    operator: str
    left: Expression
    right: Expression

    def render(self) -> str:
        return f"{self.left.render()} {self.operator} {self.right.render()}"


@dataclass(frozen=True)
class AssignmentExpression(Expression):
    left: Expression
    right: Expression
    operator: str = "="

    def render(self) -> str:
        return f"{self.left.render()} {self.operator} {self.right.render()}"


class Statement(SyntaxElement):
    def render(self, indent: str = "") -> str:  # pragma: no cover - abstract
        raise NotImplementedError


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: Expression

    def render(self, indent: str = "") -> str:
        return f"{indent}{self.expression.render()};"


@dataclass(frozen=True)
class BlockStatement(Statement):
    body: Tuple[Statement, ...] = ()

    def render(self, indent: str = "") -> str:
        if not self.body:
            return "{}"
        inner = "\n".join(statement.render(indent + _INDENT) for statement in self.body)
        return "{\n" + inner + "\n" + indent + "}"


@dataclass(frozen=True)
class IfStatement(Statement):
    test: Expression
    consequent: BlockStatement

    def render(self, indent: str = "") -> str:
        return f"{indent}if ({self.test.render()}) {self.consequent.render(indent)}"


def _literal_value(node: Expression) -> Any:
    if not isinstance(node, Literal):
        raise TypeError(f"{type(node).__name__} is not a literal expression")
    return node.to_value()


__all__ = [
    "ArrayExpression",
    "AssignmentExpression",
    "BinaryExpression",
    "BlockStatement",
    "BooleanLiteral",
    "Expression",
    "ExpressionStatement",
    "Identifier",
    "IfStatement",
    "Literal",
    "MemberExpression",
    "NullLiteral",
    "NumericLiteral",
    "ObjectExpression",
    "ObjectProperty",
    "Statement",
    "StringLiteral",
    "SyntaxElement",
    "UnaryExpression",
    "is_identifier_name",
]
