"""Tests for enemy population maintenance."""

from __future__ import annotations

import pytest

from game.arena.config import ArenaConfig
from game.arena.entities import Enemy
from game.arena.spawner import RandomSampler, maintain_population, spawn_enemy

from conftest import FakeSampler

pytestmark = pytest.mark.unit


def _roster(n: int) -> list[Enemy]:
    return [Enemy(x=float(i), y=float(i)) for i in range(n)]


class TestSpawnEnemy:
    def test_uses_margin_and_speed_range(self, config: ArenaConfig):
        sampler = FakeSampler(frac=0.0)
        e = spawn_enemy(config, sampler)
        assert sampler.calls == [(50.0, 750.0), (50.0, 550.0), (40.0, 80.0)]
        assert (e.x, e.y, e.speed) == (50.0, 50.0, 40.0)
        assert e.health == 3
        assert e.cooldown == 0.0

    def test_midpoint_sample(self, config: ArenaConfig, sampler: FakeSampler):
        e = spawn_enemy(config, sampler)
        assert (e.x, e.y, e.speed) == (400.0, 300.0, 60.0)


class TestMaintainPopulation:
    @pytest.mark.parametrize("count", [0, 1, 2, 3])
    def test_appends_exactly_one_at_or_below_mark(self, config, sampler, count):
        enemies = _roster(count)
        assert maintain_population(enemies, config, sampler) == 1
        assert len(enemies) == count + 1

    def test_no_spawn_above_mark(self, config, sampler):
        enemies = _roster(4)
        assert maintain_population(enemies, config, sampler) == 0
        assert len(enemies) == 4
        assert sampler.calls == []

    def test_recovers_one_per_call(self, config, sampler):
        enemies: list[Enemy] = []
        counts = []
        for _ in range(6):
            maintain_population(enemies, config, sampler)
            counts.append(len(enemies))
        assert counts == [1, 2, 3, 4, 4, 4]


class TestRandomSampler:
    def test_seeded_sequence_is_reproducible(self):
        a = RandomSampler(7)
        b = RandomSampler(7)
        assert [a.uniform(0.0, 1.0) for _ in range(5)] == [b.uniform(0.0, 1.0) for _ in range(5)]

    def test_draws_stay_in_range(self):
        s = RandomSampler(0)
        draws = [s.uniform(40.0, 80.0) for _ in range(200)]
        assert all(40.0 <= d < 80.0 for d in draws)
        assert all(isinstance(d, float) for d in draws)

    def test_spawns_inside_inset_field(self, config: ArenaConfig):
        s = RandomSampler(3)
        for _ in range(50):
            e = spawn_enemy(config, s)
            assert 50.0 <= e.x <= 750.0
            assert 50.0 <= e.y <= 550.0
            assert 40.0 <= e.speed <= 80.0
