"""Fake documentation extractors used in place of the react-docgen CLI."""

from __future__ import annotations

import copy
from typing import Any, Dict, List


class FakeExtractor:
    """Records each call and returns a canned result (or raises)."""

    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = [] if result is None else result
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, source: str, *, resolver: str | None = None, filename: str | None = None) -> Any:
        self.calls.append({"source": source, "resolver": resolver, "filename": filename})
        if self.error is not None:
            raise self.error
        return copy.deepcopy(self.result)


__all__ = ["FakeExtractor"]
