"""Pytest configuration for path tracer tests.

Provides deterministic random sources so that sampling, scattering and
integration can be checked against exact values.
"""

import pytest


class SequenceRNG:
    """Random source that replays a fixed list of values, cycling forever."""

    def __init__(self, values):
        self.values = list(values)
        self.index = 0
        self.calls = 0

    def random(self):
        value = self.values[self.index]
        self.index = (self.index + 1) % len(self.values)
        self.calls += 1
        return value


class ForbiddenRNG:
    """Random source that fails the test if anything draws from it."""

    def random(self):
        raise AssertionError("random source should not have been used")


@pytest.fixture
def sequence_rng():
    """Factory for SequenceRNG instances."""
    return SequenceRNG


@pytest.fixture
def center_rng():
    """Always returns 0.5, which maps to 0 in [-1, 1): zero-offset samples."""
    return SequenceRNG([0.5])


@pytest.fixture
def forbidden_rng():
    return ForbiddenRNG()
