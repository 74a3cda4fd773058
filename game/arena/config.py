"""
Arena simulation parameters
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class ArenaConfig:
    """All fixed constants of one arena session"""

    # Play field
    width: float = 800.0
    height: float = 600.0

    # Actors are drawn as actor_size squares; bullets hit within half of that
    actor_size: float = 32.0

    # Player
    player_speed: float = 200.0
    player_max_health: int = 5
    player_bullet_speed: float = 500.0
    player_fire_interval: float = 0.2

    # Enemies
    enemy_health: int = 3
    enemy_bullet_speed: float = 300.0
    enemy_fire_interval: float = 1.0
    enemy_speed_range: Tuple[float, float] = (40.0, 80.0)
    # Enemies closer to the player than this hold fire; 0 disables the check
    min_engagement_range: float = 0.0
    # (x, y, speed) of the enemies present at start and after each restart
    initial_enemies: Tuple[Tuple[float, float, float], ...] = (
        (100.0, 100.0, 50.0),
        (700.0, 400.0, 60.0),
    )

    # Spawner
    spawn_margin: float = 50.0
    low_water_mark: int = 3

    # Lifecycle: stop every update once the player is dead
    freeze_on_game_over: bool = False

    @property
    def hit_radius(self) -> float:
        return self.actor_size / 2.0

    @property
    def muzzle_offset(self) -> float:
        return self.actor_size / 2.0

    def validate(self) -> "ArenaConfig":
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Field size must be positive, got {self.width}x{self.height}")
        if self.actor_size <= 0:
            raise ValueError(f"actor_size must be positive, got {self.actor_size}")
        if self.player_max_health <= 0 or self.enemy_health <= 0:
            raise ValueError("Starting health must be positive")
        lo, hi = self.enemy_speed_range
        if lo < 0 or hi < lo:
            raise ValueError(f"Invalid enemy_speed_range: {self.enemy_speed_range}")
        if self.player_fire_interval < 0 or self.enemy_fire_interval < 0:
            raise ValueError("Fire intervals must be non-negative")
        if self.min_engagement_range < 0:
            raise ValueError("min_engagement_range must be non-negative")
        if self.spawn_margin < 0 or 2 * self.spawn_margin > min(self.width, self.height):
            raise ValueError(f"spawn_margin {self.spawn_margin} does not fit the field")
        if self.low_water_mark < 0:
            raise ValueError("low_water_mark must be non-negative")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ArenaConfig":
        """Build a validated config from a plain dict (e.g. ARENA_CONFIG)"""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown arena config keys: {unknown}")
        kwargs = dict(data)
        if "enemy_speed_range" in kwargs:
            kwargs["enemy_speed_range"] = tuple(kwargs["enemy_speed_range"])
        if "initial_enemies" in kwargs:
            kwargs["initial_enemies"] = tuple(tuple(e) for e in kwargs["initial_enemies"])
        return cls(**kwargs).validate()
