"""JavaScript syntax layer: parsing, traversal, synthesized nodes and rendering."""

from __future__ import annotations

from .module import Module, StatementList, parse_module, render_module
from .parser import JavaScriptParser
from .traversal import walk

__all__ = [
    "JavaScriptParser",
    "Module",
    "StatementList",
    "parse_module",
    "render_module",
    "walk",
]
