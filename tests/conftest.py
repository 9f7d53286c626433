"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest


class SequenceRng:
    """Stand-in generator that replays fixed values, for forcing sampling branches."""

    def __init__(self, values):
        self.values = list(values)

    def _next(self):
        return self.values.pop(0)

    def uniform(self, low=0.0, high=1.0, size=None):
        return self._next()

    def random(self, size=None):
        return self._next()


@pytest.fixture
def rng():
    """A seeded generator so statistical tests are reproducible."""
    return np.random.default_rng(20240601)


@pytest.fixture
def sequence_rng():
    """Factory for generators that return a fixed sequence of draws."""
    return SequenceRng
