"""
Per-frame actor updates: player movement, aiming and firing, enemy
seek/fire behaviour and bullet advance.

All functions mutate the actors they are given and append freshly fired
bullets to the bullet list; none of them remove anything. Removal is left
to the combat resolver so that every frame has exactly one place where
the entity lists shrink.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from .config import ArenaConfig
from .entities import Bullet, BulletOwner, Enemy, Player
from .utils import aim_direction, normalize, vec_len


@dataclass(frozen=True)
class InputIntent:
    """What the host wants the player to do this frame"""
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    aim_x: float = 0.0
    aim_y: float = 0.0
    fire: bool = False  # level-triggered: held fire shoots whenever the cooldown allows
    restart: bool = False


@dataclass
class FrameEvents:
    """Counters of what happened during one frame"""
    player_shots: int = 0
    enemy_shots: int = 0
    enemy_hits: int = 0
    kills: int = 0
    player_hits: int = 0
    spawned: int = 0


def _muzzle(x: float, y: float, cfg: ArenaConfig) -> Tuple[float, float]:
    return x + cfg.muzzle_offset, y + cfg.muzzle_offset


def move_player(player: Player, intent: InputIntent, dt: float):
    if not player.alive:
        return

    # screen coordinates: up is -y
    dx = float(intent.right) - float(intent.left)
    dy = float(intent.down) - float(intent.up)
    if dx == 0.0 and dy == 0.0:
        return

    nx, ny = normalize(dx, dy)
    player.x += nx * player.speed * dt
    player.y += ny * player.speed * dt


def aim_player(player: Player, intent: InputIntent) -> Tuple[float, float]:
    """Return the unit aim direction and update the facing angle"""
    ax, ay = aim_direction(intent.aim_x - player.x, intent.aim_y - player.y)
    if player.alive:
        player.facing = math.atan2(ay, ax)
    return ax, ay


def update_player(
    player: Player,
    intent: InputIntent,
    cooldown: float,
    dt: float,
    cfg: ArenaConfig,
    bullets: List[Bullet],
    events: FrameEvents,
) -> float:
    """Move, aim and maybe fire; returns the player cooldown for next frame"""
    ax, ay = aim_player(player, intent)
    move_player(player, intent, dt)

    if player.alive and intent.fire and cooldown <= 0.0:
        bx, by = _muzzle(player.x, player.y, cfg)
        bullets.append(Bullet(
            x=bx, y=by,
            vx=ax * cfg.player_bullet_speed,
            vy=ay * cfg.player_bullet_speed,
            owner=BulletOwner.PLAYER,
        ))
        cooldown = cfg.player_fire_interval
        events.player_shots += 1

    return cooldown - dt


def update_enemies(
    enemies: List[Enemy],
    player: Player,
    dt: float,
    cfg: ArenaConfig,
    bullets: List[Bullet],
    events: FrameEvents,
):
    for e in enemies:
        # Seek
        to_px = player.x - e.x
        to_py = player.y - e.y
        if to_px != 0.0 or to_py != 0.0:
            nx, ny = normalize(to_px, to_py)
            e.x += nx * e.speed * dt
            e.y += ny * e.speed * dt

        # Fire
        if e.cooldown <= 0.0:
            dx = player.x - e.x
            dy = player.y - e.y
            too_close = (
                cfg.min_engagement_range > 0.0
                and vec_len(dx, dy) < cfg.min_engagement_range
            )
            if not too_close:
                ax, ay = aim_direction(dx, dy)
                bx, by = _muzzle(e.x, e.y, cfg)
                bullets.append(Bullet(
                    x=bx, y=by,
                    vx=ax * cfg.enemy_bullet_speed,
                    vy=ay * cfg.enemy_bullet_speed,
                    owner=BulletOwner.ENEMY,
                ))
                e.cooldown = cfg.enemy_fire_interval
                events.enemy_shots += 1

        e.cooldown -= dt


def advance_bullets(bullets: List[Bullet], dt: float) -> List[Bullet]:
    return [b.advanced(dt) for b in bullets]
