from __future__ import annotations

import textwrap
from typing import Callable

import pytest

from docinject.syntax import Module, parse_module
from tests._fixtures.extractors import FakeExtractor


@pytest.fixture
def parse() -> Callable[..., Module]:
    """Parse dedented JavaScript source into a module."""

    def _parse(source: str, filename: str | None = None) -> Module:
        return parse_module(textwrap.dedent(source).lstrip("\n"), filename)

    return _parse


@pytest.fixture
def fake_extractor() -> FakeExtractor:
    return FakeExtractor()
