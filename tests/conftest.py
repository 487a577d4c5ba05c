"""
Shared fixtures for prakrit-verb tests.
"""

import pytest


class FixedDraw:
    """Random source stub whose ``randint`` always returns the same value."""

    def __init__(self, value: int):
        self.value = value
        self.calls = 0

    def randint(self, a: int, b: int) -> int:
        self.calls += 1
        return self.value


@pytest.fixture
def substitute_draw():
    """A draw that applies the i/u -> e/o substitution."""
    return FixedDraw(2)


@pytest.fixture
def exception_draw():
    """A draw that keeps the root unchanged."""
    return FixedDraw(1)


@pytest.fixture
def roots_file(tmp_path):
    """Input file with two roots, a comment and a blank line."""
    path = tmp_path / "roots.txt"
    path.write_text("gam\n# motion verbs\n\nbhU\n", encoding="utf-8")
    return path
