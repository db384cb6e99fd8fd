"""Shared fixtures: seeded randomness and a hand-driven clock."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamegenerator import ShuffleGenerator


class FakeClock:
    """Callable clock that only moves when a test advances it."""

    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def generator(rng: random.Random) -> ShuffleGenerator:
    return ShuffleGenerator(4, rng)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
