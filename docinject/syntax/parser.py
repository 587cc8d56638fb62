"""Tree-sitter powered JavaScript/JSX parser."""

from __future__ import annotations

from typing import Optional

import tree_sitter_javascript
from tree_sitter import Language, Parser, Tree


class JavaScriptParser:
    """Parses JavaScript (including JSX) source into tree-sitter trees.

    Only the compiled grammar is cached; every :meth:`parse` call gets its
    own ``tree_sitter.Parser`` so an instance can be shared freely.
    """

    def __init__(self) -> None:
        self._language: Optional[Language] = None

    @property
    def language(self) -> Language:
        if self._language is None:
            self._language = Language(tree_sitter_javascript.language())
        return self._language

    def parse(self, source: str) -> Tree:
        return self._new_parser().parse(source.encode("utf-8"))

    def _new_parser(self) -> Parser:
        return Parser(self.language)


__all__ = ["JavaScriptParser"]
