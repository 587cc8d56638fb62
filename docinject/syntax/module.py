"""Module representation: parsed tree plus an append-only statement list."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Union

from tree_sitter import Node, Tree

from .nodes import Statement
from .parser import JavaScriptParser
from .traversal import top_level_statements

TopLevelStatement = Union[Node, Statement]


class StatementList:
    """Ordered top-level statements of a module.

    Parsed statements come first and are never modified; synthesized
    statements can only be appended after them.
    """

    def __init__(self, parsed: Sequence[Node]) -> None:
        self._parsed = tuple(parsed)
        self._appended: List[Statement] = []

    @property
    def parsed(self) -> tuple[Node, ...]:
        return self._parsed

    @property
    def appended(self) -> tuple[Statement, ...]:
        return tuple(self._appended)

    def append(self, statement: Statement) -> None:
        if not isinstance(statement, Statement):
            raise TypeError(f"Cannot append {type(statement).__name__} to a module body")
        self._appended.append(statement)

    def __iter__(self) -> Iterator[TopLevelStatement]:
        yield from self._parsed
        yield from self._appended

    def __len__(self) -> int:
        return len(self._parsed) + len(self._appended)


class Module:
    """A parsed JavaScript module undergoing instrumentation."""

    def __init__(self, source: str, tree: Tree, filename: Optional[str] = None) -> None:
        self.source = source
        self.tree = tree
        self.filename = filename
        self.body = StatementList(top_level_statements(tree.root_node))

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def modified(self) -> bool:
        return bool(self.body.appended)

    def relative_path(self, root: Union[str, Path] = ".") -> Optional[str]:
        """Return the module path relative to ``root`` in POSIX form."""
        if not self.filename:
            return None
        path = os.path.realpath(os.path.expanduser(self.filename))
        base = os.path.realpath(os.path.expanduser(str(root)))
        return Path(os.path.relpath(path, base)).as_posix()

    def render(self) -> str:
        """Return the module source followed by any appended statements."""
        appended = self.body.appended
        if not appended:
            return self.source
        text = self.source
        if text and not text.endswith("\n"):
            text += "\n"
        return text + "\n".join(statement.render() for statement in appended) + "\n"


def parse_module(
    source: str,
    filename: Optional[str] = None,
    *,
    parser: Optional[JavaScriptParser] = None,
) -> Module:
    parser = parser or JavaScriptParser()
    return Module(source, parser.parse(source), filename=filename)


def render_module(module: Module) -> str:
    return module.render()


__all__ = ["Module", "StatementList", "TopLevelStatement", "parse_module", "render_module"]
