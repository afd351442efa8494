"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from collections.abc import Iterable

import numpy as np
import pytest
from fastapi.testclient import TestClient

from dynalarm.api.dependencies.random_source import get_random_source
from dynalarm.main import app


class ScriptedSource:
    """Uniform source that replays a fixed list of draws.

    Fails the test if more draws are requested than were scripted.
    """

    def __init__(self, values: Iterable[float]) -> None:
        self._values = list(values)
        self.calls = 0

    def random(self) -> float:
        if self.calls >= len(self._values):
            pytest.fail(f"ScriptedSource exhausted after {self.calls} draws")
        value = self._values[self.calls]
        self.calls += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self._values) - self.calls


@pytest.fixture
def scripted():
    """Factory fixture for scripted uniform sources."""
    return ScriptedSource


@pytest.fixture
def seeded_rng() -> np.random.Generator:
    """Deterministic NumPy generator."""
    return np.random.default_rng(20240115)


@pytest.fixture
def client():
    """Test client whose requests each get a freshly seeded generator."""
    app.dependency_overrides[get_random_source] = lambda: np.random.default_rng(42)
    yield TestClient(app)
    app.dependency_overrides.clear()
