"""Shared fixtures: random sources that record or script their output."""

from __future__ import annotations

import numpy as np
import pytest


class CountingRng:
    """Wrap a numpy Generator and count the uniforms it hands out."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = np.random.default_rng(seed)
        self.calls = 0
        self.drawn = 0

    def random(self, size=None):
        self.calls += 1
        self.drawn += 1 if size is None else int(np.prod(size))
        return self._rng.random(size)


class ScriptedRng:
    """Return a fixed sequence of uniforms, cycling when exhausted."""

    def __init__(self, values) -> None:
        self._values = list(values)
        self._position = 0

    def _next(self) -> float:
        value = self._values[self._position % len(self._values)]
        self._position += 1
        return value

    def random(self, size=None):
        if size is None:
            return self._next()
        return np.array([self._next() for _ in range(int(np.prod(size)))])


@pytest.fixture
def counting_rng() -> CountingRng:
    return CountingRng(seed=42)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240101)


@pytest.fixture
def scripted_rng():
    """Factory for random sources returning the given uniforms."""
    return ScriptedRng


@pytest.fixture
def example_probabilities() -> list[float]:
    # Sums to 5.0
    return [0.2, 0.25, 0.35, 0.4, 0.5, 0.5, 0.55, 0.65, 0.7, 0.9]
