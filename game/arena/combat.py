"""
Bullet collision and health resolution.

Resolution runs in two phases. ``resolve_bullets`` classifies every bullet
against the actor lists as they stand when it is called and records the
damage it would deal, without touching any entity. ``apply_outcome`` then
writes the damage back and compacts the bullet list. Enemy removal is a
separate pass (``remove_dead_enemies``) that runs once all bullets of the
frame have landed, so simultaneous kills are all counted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .config import ArenaConfig
from .entities import Bullet, BulletOwner, Enemy, Player
from .simulation import FrameEvents
from .utils import in_bounds, point_in_circle

logger = logging.getLogger(__name__)


@dataclass
class CombatOutcome:
    """Decisions of one resolution pass"""
    surviving: List[int] = field(default_factory=list)  # bullet indices kept
    out_of_bounds: int = 0
    enemy_damage: Dict[int, int] = field(default_factory=dict)  # enemy index -> hits
    player_damage: int = 0


def _first_enemy_hit(b: Bullet, enemies: List[Enemy], radius: float) -> int:
    # first in list order, not nearest
    for i, e in enumerate(enemies):
        if point_in_circle(b.x, b.y, e.x, e.y, radius):
            return i
    return -1


def resolve_bullets(
    bullets: List[Bullet],
    enemies: List[Enemy],
    player: Player,
    cfg: ArenaConfig,
) -> CombatOutcome:
    """Phase one: decide the fate of every bullet without mutating anything"""
    out = CombatOutcome()
    radius = cfg.hit_radius

    # The player can die part-way through the pass; later bullets must miss.
    player_hp = player.health
    player_alive = player.alive

    for idx, b in enumerate(bullets):
        if not in_bounds(b.x, b.y, cfg.width, cfg.height):
            out.out_of_bounds += 1
            continue

        if b.owner is BulletOwner.PLAYER:
            hit = _first_enemy_hit(b, enemies, radius)
            if hit >= 0:
                out.enemy_damage[hit] = out.enemy_damage.get(hit, 0) + 1
                continue
        elif player_alive and point_in_circle(b.x, b.y, player.x, player.y, radius):
            out.player_damage += 1
            player_hp -= 1
            if player_hp <= 0:
                player_alive = False
            continue

        out.surviving.append(idx)

    return out


def apply_outcome(
    outcome: CombatOutcome,
    bullets: List[Bullet],
    enemies: List[Enemy],
    player: Player,
    events: FrameEvents,
) -> List[Bullet]:
    """Phase two: apply damage and return the compacted bullet list"""
    for idx, dmg in outcome.enemy_damage.items():
        e = enemies[idx]
        e.health = max(0, e.health - dmg)
        events.enemy_hits += dmg

    if outcome.player_damage:
        player.health = max(0, player.health - outcome.player_damage)
        events.player_hits += outcome.player_damage
        if player.health <= 0:
            player.alive = False

    return [bullets[i] for i in outcome.surviving]


def remove_dead_enemies(enemies: List[Enemy]) -> Tuple[List[Enemy], int]:
    """Drop every enemy at zero health; returns (survivors, number removed)"""
    survivors = [e for e in enemies if e.health > 0]
    removed = len(enemies) - len(survivors)
    if removed:
        logger.debug("%d enemies destroyed", removed)
    return survivors, removed


def resolve_combat(
    bullets: List[Bullet],
    enemies: List[Enemy],
    player: Player,
    cfg: ArenaConfig,
    events: FrameEvents,
) -> Tuple[List[Bullet], List[Enemy], int]:
    """Run both phases and the death pass; returns (bullets, enemies, kills)"""
    outcome = resolve_bullets(bullets, enemies, player, cfg)
    bullets = apply_outcome(outcome, bullets, enemies, player, events)
    enemies, kills = remove_dead_enemies(enemies)
    events.kills += kills
    return bullets, enemies, kills
