"""
Session state and lifecycle control.

``ArenaGame`` owns exactly one ``Session`` at a time. Each call to
``step`` advances it by one frame and returns an immutable
``FrameSnapshot`` that the host draws from. A restart replaces the
session wholesale with one built from the fixed initial parameters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .combat import resolve_combat
from .config import ArenaConfig
from .entities import Bullet, BulletOwner, Enemy, Player
from .simulation import (
    FrameEvents,
    InputIntent,
    advance_bullets,
    update_enemies,
    update_player,
)
from .spawner import RandomSampler, UniformSampler, maintain_population

logger = logging.getLogger(__name__)


class LifecycleState(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


# ----------------------------
# Read-only views
# ----------------------------

@dataclass(frozen=True)
class PlayerView:
    x: float
    y: float
    facing: float
    health: int
    alive: bool


@dataclass(frozen=True)
class EnemyView:
    x: float
    y: float
    health: int


@dataclass(frozen=True)
class BulletView:
    x: float
    y: float
    owner: BulletOwner


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the presentation layer may read after a frame"""
    player: PlayerView
    enemies: Tuple[EnemyView, ...]
    bullets: Tuple[BulletView, ...]
    score: int
    state: LifecycleState
    events: FrameEvents = field(default_factory=FrameEvents, compare=False)


# ----------------------------
# Session
# ----------------------------

@dataclass
class Session:
    """All mutable state of one play-through"""
    player: Player
    enemies: List[Enemy] = field(default_factory=list)
    bullets: List[Bullet] = field(default_factory=list)
    score: int = 0
    player_cooldown: float = 0.0
    state: LifecycleState = LifecycleState.PLAYING

    @classmethod
    def initial(cls, cfg: ArenaConfig) -> "Session":
        player = Player(
            x=cfg.width / 2.0,
            y=cfg.height / 2.0,
            speed=cfg.player_speed,
            health=cfg.player_max_health,
        )
        enemies = [
            Enemy(x=x, y=y, speed=speed, health=cfg.enemy_health, cooldown=0.0)
            for x, y, speed in cfg.initial_enemies
        ]
        return cls(player=player, enemies=enemies)


def snapshot(session: Session, events: Optional[FrameEvents] = None) -> FrameSnapshot:
    p = session.player
    return FrameSnapshot(
        player=PlayerView(p.x, p.y, p.facing, p.health, p.alive),
        enemies=tuple(EnemyView(e.x, e.y, e.health) for e in session.enemies),
        bullets=tuple(BulletView(b.x, b.y, b.owner) for b in session.bullets),
        score=session.score,
        state=session.state,
        events=events if events is not None else FrameEvents(),
    )


class ArenaGame:
    """Frame-stepped controller around a single session"""

    def __init__(
        self,
        config: Optional[ArenaConfig] = None,
        sampler: Optional[UniformSampler] = None,
    ):
        self.config = (config or ArenaConfig()).validate()
        self.sampler: UniformSampler = sampler if sampler is not None else RandomSampler()
        self.session = Session.initial(self.config)
        self.frame = 0

    @property
    def state(self) -> LifecycleState:
        return self.session.state

    @property
    def game_over(self) -> bool:
        return self.session.state is LifecycleState.GAME_OVER

    def snapshot(self) -> FrameSnapshot:
        return snapshot(self.session)

    def restart(self) -> FrameSnapshot:
        logger.info("Restarting session (previous score %d)", self.session.score)
        self.session = Session.initial(self.config)
        self.frame = 0
        return self.snapshot()

    def step(self, dt: float, intent: Optional[InputIntent] = None) -> FrameSnapshot:
        """Advance one frame and return what the host should draw"""
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if intent is None:
            intent = InputIntent()

        if self.game_over:
            if intent.restart:
                return self.restart()
            if self.config.freeze_on_game_over:
                return self.snapshot()

        cfg = self.config
        s = self.session
        events = FrameEvents()

        # Actors
        s.player_cooldown = update_player(
            s.player, intent, s.player_cooldown, dt, cfg, s.bullets, events
        )
        update_enemies(s.enemies, s.player, dt, cfg, s.bullets, events)
        s.bullets = advance_bullets(s.bullets, dt)

        # Collisions and deaths
        s.bullets, s.enemies, kills = resolve_combat(
            s.bullets, s.enemies, s.player, cfg, events
        )
        s.score += kills

        # Population
        events.spawned += maintain_population(s.enemies, cfg, self.sampler)

        if s.state is LifecycleState.PLAYING and not s.player.alive:
            s.state = LifecycleState.GAME_OVER
            logger.info("Player died on frame %d with score %d", self.frame, s.score)

        self.frame += 1
        return snapshot(s, events)
