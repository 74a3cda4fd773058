"""
Arena entity dataclasses
"""

from dataclasses import dataclass
from enum import Enum


class BulletOwner(Enum):
    """Who fired a bullet"""
    PLAYER = "player"
    ENEMY = "enemy"


@dataclass
class Player:
    """Player avatar"""
    x: float
    y: float
    speed: float = 200.0  # px/s
    health: int = 5
    alive: bool = True
    facing: float = 0.0  # radians, presentation only


@dataclass
class Enemy:
    """Enemy that chases and shoots at the player"""
    x: float
    y: float
    speed: float = 60.0  # px/s
    health: int = 3
    cooldown: float = 0.0  # seconds until next shot


@dataclass(frozen=True)
class Bullet:
    """Bullet projectile; position is replaced each frame, owner never changes"""
    x: float
    y: float
    vx: float
    vy: float
    owner: BulletOwner

    @property
    def is_enemy(self) -> bool:
        return self.owner is BulletOwner.ENEMY

    def advanced(self, dt: float) -> "Bullet":
        return Bullet(self.x + self.vx * dt, self.y + self.vy * dt, self.vx, self.vy, self.owner)
