"""Shared fixtures for the arena tests."""

from __future__ import annotations

from typing import List, Tuple

import pytest

from game.arena.config import ArenaConfig
from game.arena.session import ArenaGame


class FakeSampler:
    """Deterministic sampler: returns low + frac * (high - low) and records calls."""

    def __init__(self, frac: float = 0.5) -> None:
        self.frac = frac
        self.calls: List[Tuple[float, float]] = []

    def uniform(self, low: float, high: float) -> float:
        self.calls.append((low, high))
        return low + self.frac * (high - low)


@pytest.fixture
def sampler() -> FakeSampler:
    return FakeSampler()


@pytest.fixture
def config() -> ArenaConfig:
    return ArenaConfig()


@pytest.fixture
def make_game(sampler: FakeSampler):
    """Factory for an ArenaGame with the fake sampler and config overrides."""

    def _make(**overrides) -> ArenaGame:
        return ArenaGame(ArenaConfig(**overrides), sampler)

    return _make
