"""
Configuration for pytest to set up the import path and shared fixtures.
"""

import sys
from pathlib import Path
import pytest


# Add the parent directory to Python path so we can import cursors, reducers, etc.
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir))

# Import after path setup
from cursors import FiniteCursor, from_iterable


class SpyCursor(FiniteCursor):
    """Finite cursor over a list that records every advance()."""

    def __init__(self, values):
        self._values = list(values)
        self._position = 0
        self.advanced = []

    def has_more(self):
        return self._position < len(self._values)

    def advance(self):
        value = self._values[self._position]
        self._position += 1
        self.advanced.append(value)
        return value


class AlwaysMoreCursor(FiniteCursor):
    """Finite by type but never reports exhaustion."""

    def __init__(self):
        self.calls = 0

    def has_more(self):
        return True

    def advance(self):
        self.calls += 1
        return self.calls


@pytest.fixture
def numbers():
    """Fixture providing a fresh cursor over [1, 2, 3, 4, 5]."""
    return from_iterable([1, 2, 3, 4, 5])


@pytest.fixture
def spy_factory():
    """Fixture returning a factory for SpyCursor instances."""
    return SpyCursor


@pytest.fixture
def always_more():
    return AlwaysMoreCursor()
