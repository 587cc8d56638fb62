"""Conversion of JSON-like values into JavaScript literal expressions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

from .models import UNDEFINED
from .syntax.nodes import (
    ArrayExpression,
    BooleanLiteral,
    Literal,
    NullLiteral,
    NumericLiteral,
    ObjectExpression,
    ObjectProperty,
    StringLiteral,
)


class _Absent:
    """Returned by :func:`serialize` when a value has no literal form."""

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def serialize(value: Any) -> Union[Literal, _Absent]:
    """Build the literal expression equivalent to ``value``.

    Mappings keep their insertion order and drop entries whose value is
    ``UNDEFINED``. A top-level ``UNDEFINED`` yields ``ABSENT``, which callers
    must check for. Unsupported types raise ``TypeError``.
    """
    if value is UNDEFINED:
        return ABSENT
    return _serialize(value)


def _serialize(value: Any) -> Literal:
    if isinstance(value, Mapping):
        properties = []
        for key, item in value.items():
            if item is UNDEFINED:
                continue
            properties.append(ObjectProperty(str(key), _serialize(item)))
        return ObjectExpression(tuple(properties))
    if isinstance(value, str):
        return StringLiteral(value)
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return BooleanLiteral(value)
    if isinstance(value, (int, float)):
        return NumericLiteral(value)
    if isinstance(value, (list, tuple)):
        if any(item is UNDEFINED for item in value):
            raise TypeError("undefined is not allowed inside a sequence")
        return ArrayExpression(tuple(_serialize(item) for item in value))
    if value is None:
        return NullLiteral()
    raise TypeError(f"Cannot serialize value of type {type(value).__name__}")


def deserialize(node: Literal) -> Any:
    """Return the plain value a literal expression denotes."""
    return node.to_value()


__all__ = ["ABSENT", "deserialize", "serialize"]
