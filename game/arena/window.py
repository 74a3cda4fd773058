"""
Arcade presentation layer: draws frame snapshots and, in interactive
mode, turns keyboard/mouse state into input intents.

The simulation uses screen coordinates (y grows downwards); arcade's
origin is bottom-left, so every y is flipped on the way in and out.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Set

import arcade

from .config import ArenaConfig
from .entities import BulletOwner
from .session import ArenaGame, FrameSnapshot, LifecycleState
from .simulation import InputIntent
from .spawner import RandomSampler

logger = logging.getLogger(__name__)

BULLET_SIZE = 6.0


class ArenaWindow(arcade.Window):
    """Arcade window for rendering (and optionally playing) the arena"""

    def __init__(self, config: ArenaConfig, game: Optional[ArenaGame] = None):
        super().__init__(int(config.width), int(config.height), "Arena Shooter - Arcade")
        self.config = config
        self.game = game
        self.snapshot: Optional[FrameSnapshot] = game.snapshot() if game else None

        # Input state, only used when driving a game directly
        self._keys: Set[int] = set()
        self._mouse = (config.width / 2.0, config.height / 2.0)
        self._fire_held = False
        self._restart_pressed = False

        # Colors
        self.BG = (68, 68, 68)
        self.PLAYER_C = (80, 200, 120)
        self.ENEMY_C = (220, 80, 80)
        self.PLAYER_BULLET_C = (0, 228, 48)
        self.ENEMY_BULLET_C = (230, 41, 55)
        self.BAR_BG = (130, 130, 130)
        self.HUD_C = (240, 240, 240)
        self.background_color = self.BG

    def _sy(self, y: float) -> float:
        return self.config.height - y

    # ----------------------------
    # Input
    # ----------------------------

    def on_key_press(self, symbol: int, modifiers: int):
        self._keys.add(symbol)
        if symbol == arcade.key.R:
            self._restart_pressed = True
        elif symbol == arcade.key.ESCAPE:
            self.close()

    def on_key_release(self, symbol: int, modifiers: int):
        self._keys.discard(symbol)

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self._mouse = (float(x), self._sy(float(y)))

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self._fire_held = True

    def on_mouse_release(self, x: int, y: int, button: int, modifiers: int):
        if button == arcade.MOUSE_BUTTON_LEFT:
            self._fire_held = False

    def current_intent(self) -> InputIntent:
        intent = InputIntent(
            up=arcade.key.W in self._keys,
            down=arcade.key.S in self._keys,
            left=arcade.key.A in self._keys,
            right=arcade.key.D in self._keys,
            aim_x=self._mouse[0],
            aim_y=self._mouse[1],
            fire=self._fire_held,
            restart=self._restart_pressed,
        )
        # restart is edge-triggered
        self._restart_pressed = False
        return intent

    def on_update(self, delta_time: float):
        if self.game is None:
            return
        self.snapshot = self.game.step(delta_time, self.current_intent())

    # ----------------------------
    # Drawing
    # ----------------------------

    def _draw_actor(self, x: float, y: float, color, hp_fraction: float, bar_color):
        size = self.config.actor_size
        top = self._sy(y)
        arcade.draw_lrbt_rectangle_filled(x, x + size, top - size, top, color)

        # HP bar above the actor
        arcade.draw_lrbt_rectangle_filled(x, x + size, top + 3, top + 8, self.BAR_BG)
        if hp_fraction > 0:
            arcade.draw_lrbt_rectangle_filled(x, x + size * hp_fraction, top + 3, top + 8, bar_color)

    def on_draw(self):
        """Draw the current snapshot"""
        self.clear()

        snap = self.snapshot
        if snap is None:
            return

        cfg = self.config
        half = cfg.actor_size / 2.0

        for e in snap.enemies:
            self._draw_actor(e.x, e.y, self.ENEMY_C, e.health / cfg.enemy_health, self.ENEMY_C)

        for b in snap.bullets:
            c = self.ENEMY_BULLET_C if b.owner is BulletOwner.ENEMY else self.PLAYER_BULLET_C
            top = self._sy(b.y)
            arcade.draw_lrbt_rectangle_filled(b.x, b.x + BULLET_SIZE, top - BULLET_SIZE, top, c)

        p = snap.player
        self._draw_actor(p.x, p.y, self.PLAYER_C, p.health / cfg.player_max_health, self.PLAYER_C)

        # Facing indicator from the sprite center
        cx, cy = p.x + half, self._sy(p.y + half)
        arcade.draw_line(
            cx, cy,
            cx + math.cos(p.facing) * cfg.actor_size,
            cy - math.sin(p.facing) * cfg.actor_size,
            self.HUD_C, 2,
        )

        arcade.draw_text(f"Score: {snap.score}", 10, self.height - 30, self.HUD_C, 20)

        if snap.state is LifecycleState.GAME_OVER:
            arcade.draw_text("YOU DIED", self.width / 2 - 80, self.height / 2, self.ENEMY_C, 40)
            arcade.draw_text(
                "Press R to Restart",
                self.width / 2 - 120, self.height / 2 - 40, self.HUD_C, 24,
            )


def play(config: Optional[ArenaConfig] = None, seed: Optional[int] = None):
    """Open a window and play the arena with keyboard and mouse"""
    game = ArenaGame(config, RandomSampler(seed))
    ArenaWindow(game.config, game)
    logger.info("Starting arena: WASD to move, mouse to aim, hold left button to fire")
    arcade.run()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    play()
