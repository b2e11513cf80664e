"""Shared fixtures for palettelab tests."""

import random

import pytest


class ScriptedRandom:
    """Random source replaying a fixed list of draws and counting calls."""

    def __init__(self, values):
        self._values = iter(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._values)


class ExplodingRandom:
    """Random source that must never be consumed."""

    def random(self) -> float:
        raise AssertionError("random source was consumed")


@pytest.fixture
def seeded():
    return random.Random(20240917)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def exploding():
    return ExplodingRandom()
