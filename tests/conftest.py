"""Shared test fixtures for the globber test suite."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

# Candidates used by the property-style tests.
SAMPLE_CANDIDATES = [
    "",
    "x",
    "*",
    "**",
    "a*b",
    "test",
    "TEST",
    "Test",
    "startling.magic.test.cs",
    "startling.magic.TEST.cs",
    "startling.magic.test.CS",
    "val whale value",
    "aaaaaaaaab",
    "café",
    "CAFÉ",
    "?",
    "a?c",
]

SAMPLE_PATTERNS = [
    "",
    "*",
    "**",
    "test",
    "Test",
    "*.cs",
    "startling*",
    "start*.cs",
    "*.*.test.cs",
    "*.*.Test.cs",
    "val*whale*value",
    "*val*",
    "*a*a*b",
    "a?c",
    "caf*",
    "*É",
]


@pytest.fixture
def candidates() -> list[str]:
    return list(SAMPLE_CANDIDATES)


@pytest.fixture
def patterns() -> list[str]:
    return list(SAMPLE_PATTERNS)


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[str], str]:
    """Write dedented YAML text to a temp file and return its path."""

    def _write(content: str, name: str = "globber.yaml") -> str:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content))
        return str(path)

    return _write
