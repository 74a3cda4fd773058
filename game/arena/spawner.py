"""
Enemy population maintenance
"""

from __future__ import annotations

import logging
from typing import List, Optional, Protocol

import numpy as np

from .config import ArenaConfig
from .entities import Enemy

logger = logging.getLogger(__name__)


class UniformSampler(Protocol):
    """Source of independent uniform draws in [low, high)"""

    def uniform(self, low: float, high: float) -> float:
        ...


class RandomSampler:
    """numpy-backed sampler; a fixed seed gives a reproducible spawn sequence"""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)

    def uniform(self, low: float, high: float) -> float:
        return float(self._rng.uniform(low, high))


def spawn_enemy(cfg: ArenaConfig, sampler: UniformSampler) -> Enemy:
    margin = cfg.spawn_margin
    x = sampler.uniform(margin, cfg.width - margin)
    y = sampler.uniform(margin, cfg.height - margin)
    speed = sampler.uniform(*cfg.enemy_speed_range)
    return Enemy(x=x, y=y, speed=speed, health=cfg.enemy_health, cooldown=0.0)


def maintain_population(
    enemies: List[Enemy],
    cfg: ArenaConfig,
    sampler: UniformSampler,
) -> int:
    """Append at most one enemy when the roster is at or below the low-water mark"""
    if len(enemies) > cfg.low_water_mark:
        return 0

    e = spawn_enemy(cfg, sampler)
    enemies.append(e)
    logger.debug("Spawned enemy at (%.1f, %.1f) speed %.1f", e.x, e.y, e.speed)
    return 1
