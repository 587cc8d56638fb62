"""Synthesis of ``__docgenInfo`` statements appended to a module."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Union

from .logging import get_logger
from .models import METADATA_PROPERTY, UNDEFINED, DocumentationRecord
from .serializer import ABSENT, serialize
from .syntax.module import Module
from .syntax.nodes import (
    AssignmentExpression,
    BinaryExpression,
    BlockStatement,
    Expression,
    ExpressionStatement,
    Identifier,
    IfStatement,
    MemberExpression,
    ObjectExpression,
    ObjectProperty,
    Statement,
    StringLiteral,
    UnaryExpression,
    is_identifier_name,
)


def metadata_target(name: str) -> MemberExpression:
    return MemberExpression(Identifier(name), Identifier(METADATA_PROPERTY))


def build_assignment(name: str, value: Expression) -> ExpressionStatement:
    """``<name>.__docgenInfo = <value>;``"""
    return ExpressionStatement(AssignmentExpression(metadata_target(name), value))


def build_registry_statement(global_name: str, name: str, module_path: str) -> IfStatement:
    """Guarded registration of a component in a global collection object.

    Renders as::

        if (typeof G !== "undefined") {
          G["src/Foo.js"] = {name: "Foo", docgenInfo: Foo.__docgenInfo, path: "src/Foo.js"};
        }
    """
    test = BinaryExpression(
        "!==",
        UnaryExpression("typeof", Identifier(global_name)),
        StringLiteral("undefined"),
    )
    entry = ObjectExpression(
        (
            ObjectProperty("name", StringLiteral(name)),
            ObjectProperty("docgenInfo", metadata_target(name)),
            ObjectProperty("path", StringLiteral(module_path)),
        )
    )
    registration = ExpressionStatement(
        AssignmentExpression(
            MemberExpression(Identifier(global_name), StringLiteral(module_path), computed=True),
            entry,
        )
    )
    return IfStatement(test, BlockStatement((registration,)))


class InstrumentationEmitter:
    """Appends metadata statements for documentation records to a module."""

    def __init__(
        self,
        *,
        collection_name: Optional[str] = None,
        root: Union[str, Path] = ".",
    ) -> None:
        self.collection_name = collection_name or None
        self.root = root
        self.logger = get_logger("emitter")

    def emit(
        self,
        module: Module,
        records: Sequence[DocumentationRecord],
        fallback_name: Optional[str],
    ) -> int:
        """Append statements for ``records`` and return how many were emitted.

        Records are named by ``displayName`` when it is a plain identifier.
        The first record without one takes ``fallback_name``; later ones are
        skipped.
        """
        module_path: Optional[str] = None
        if self.collection_name:
            module_path = module.relative_path(self.root)
            if module_path is None:
                self.logger.debug("No filename for module; skipping %s registration", self.collection_name)

        fallback_available = bool(fallback_name)
        emitted = 0
        for record in records:
            name = _display_name(record)
            if name is not None and not is_identifier_name(name):
                self.logger.debug(
                    "displayName %r in %s is not an identifier", name, module.filename
                )
                name = None
            if name is None:
                if not fallback_available:
                    self.logger.debug("Skipping unnamed documentation record in %s", module.filename)
                    continue
                name = fallback_name
                fallback_available = False

            statements = self._statements_for(name, record, module_path)
            if not statements:
                continue
            for statement in statements:
                module.body.append(statement)
            emitted += 1
        return emitted

    def _statements_for(
        self, name: str, record: DocumentationRecord, module_path: Optional[str]
    ) -> List[Statement]:
        try:
            literal = serialize(record)
        except TypeError as exc:
            self.logger.debug("Cannot serialize documentation for %s: %s", name, exc)
            return []
        if literal is ABSENT:
            return []

        statements: List[Statement] = [build_assignment(name, literal)]
        if self.collection_name and module_path is not None:
            statements.append(build_registry_statement(self.collection_name, name, module_path))
        return statements


def _display_name(record: DocumentationRecord) -> Optional[str]:
    value = record.get("displayName", UNDEFINED)
    if isinstance(value, str) and value:
        return value
    return None


__all__ = [
    "InstrumentationEmitter",
    "build_assignment",
    "build_registry_statement",
    "metadata_target",
]
