"""
ArenaEnv - the arena shooter wrapped as a Gymnasium environment
----------------------------------------------------------------
- One controllable player: 8-way movement, 8-way aim, held fire
- Enemies seek and shoot; the roster is topped up whenever it runs low
- Episode terminates on game over, truncates after max_steps
- Vector observation: player state + top-K nearest enemies + top-M nearest enemy bullets
- MultiDiscrete action space: [vertical(3), horizontal(3), fire(2), aim(8)]
- Arcade window for human rendering (imported lazily)

Quick test:
    python -m game.arena.arena_env
"""

from __future__ import annotations

import math
import time
from typing import Any, Dict, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ArenaConfig
from .entities import BulletOwner
from .session import ArenaGame, FrameSnapshot, LifecycleState
from .simulation import FrameEvents, InputIntent
from .spawner import RandomSampler
from .utils import clamp, seed_everything

DEFAULT_REWARDS = {
    "R_KILL": 1.0,      # enemy destroyed
    "R_HIT": 0.3,       # player bullet landed
    "R_DAMAGE": 1.0,    # per point of health lost
    "R_SHOT": 0.02,     # per shot fired
    "R_TIME": 0.001,    # per step
    "R_DEATH": 5.0,     # game over
}


class ArenaEnv(gym.Env):
    """Top-down arena shooter environment"""

    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        obs_mode: str = "vector",
        dt: float = 1 / 30,
        max_steps: int = 1800,  # 60s at 30 FPS
        k_enemies: int = 5,
        m_bullets: int = 5,
        aim_distance: float = 100.0,
        arena_config: Optional[Dict[str, Any]] = None,
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        assert obs_mode in ("vector",), "Only 'vector' observations are implemented."
        self.render_mode = render_mode
        self.obs_mode = obs_mode

        self.config = ArenaConfig.from_dict(arena_config or {})
        self.dt = dt
        self.max_steps = max_steps
        self.k_enemies = k_enemies
        self.m_bullets = m_bullets
        self.aim_distance = aim_distance

        self.rewards = dict(DEFAULT_REWARDS)
        if reward_config:
            self.rewards.update({k: v for k, v in reward_config.items() if k.startswith("R_")})

        # vertical: 0 none, 1 up, 2 down
        # horizontal: 0 none, 1 left, 2 right
        # fire: 0/1
        # aim: 0..7 (8 directions)
        self.action_space = spaces.MultiDiscrete([3, 3, 2, 8])

        # Player: pos(2) health(1) cooldown(1) alive(1)
        # Each enemy: rel pos(2) health(1)
        # Each enemy bullet: rel pos(2) rel vel(2)
        obs_dim = 5 + (self.k_enemies * 3) + (self.m_bullets * 4)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self._aim_dirs = []
        for i in range(8):
            ang = (math.pi * 2) * (i / 8.0)
            self._aim_dirs.append((math.cos(ang), math.sin(ang)))

        self._window = None
        self.game: ArenaGame = None  # type: ignore
        self._last: FrameSnapshot = None  # type: ignore
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        self.game = ArenaGame(self.config, RandomSampler(seed))
        self._last = self.game.snapshot()
        self._step_count = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        intent = self.action_to_intent(action)
        self._last = self.game.step(self.dt, intent)

        reward = self._compute_reward(self._last.events)

        terminated = self._last.state is LifecycleState.GAME_OVER
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    def action_to_intent(self, action) -> InputIntent:
        vert, horiz, fire, aim = int(action[0]), int(action[1]), int(action[2]), int(action[3])
        p = self.game.session.player
        dx, dy = self._aim_dirs[aim % 8]
        return InputIntent(
            up=vert == 1,
            down=vert == 2,
            left=horiz == 1,
            right=horiz == 2,
            aim_x=p.x + dx * self.aim_distance,
            aim_y=p.y + dy * self.aim_distance,
            fire=bool(fire),
        )

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        snap = self._last
        w, h = self.config.width, self.config.height
        p = snap.player

        cooldown = self.game.session.player_cooldown / max(1e-6, self.config.player_fire_interval)
        obs_parts = [
            clamp(p.x / w, 0, 1) * 2 - 1,
            clamp(p.y / h, 0, 1) * 2 - 1,
            (p.health / self.config.player_max_health) * 2 - 1,
            clamp(cooldown, 0, 1) * 2 - 1,
            1.0 if p.alive else -1.0,
        ]

        enemies_sorted = sorted(
            snap.enemies,
            key=lambda e: (e.x - p.x) ** 2 + (e.y - p.y) ** 2
        )
        for i in range(self.k_enemies):
            if i < len(enemies_sorted):
                e = enemies_sorted[i]
                obs_parts += [
                    clamp((e.x - p.x) / w, -1, 1),
                    clamp((e.y - p.y) / h, -1, 1),
                    (e.health / self.config.enemy_health) * 2 - 1,
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0]

        # velocities come from the live session; the snapshot only carries positions
        hostile = [b for b in self.game.session.bullets if b.owner is BulletOwner.ENEMY]
        hostile.sort(key=lambda b: (b.x - p.x) ** 2 + (b.y - p.y) ** 2)
        vscale = max(1e-6, self.config.player_bullet_speed)
        for i in range(self.m_bullets):
            if i < len(hostile):
                b = hostile[i]
                obs_parts += [
                    clamp((b.x - p.x) / w, -1, 1),
                    clamp((b.y - p.y) / h, -1, 1),
                    clamp(b.vx / vscale, -1, 1),
                    clamp(b.vy / vscale, -1, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: FrameEvents) -> float:
        r = self.rewards
        reward = 0.0

        reward += r["R_KILL"] * events.kills
        reward += r["R_HIT"] * events.enemy_hits
        reward -= r["R_DAMAGE"] * events.player_hits
        reward -= r["R_SHOT"] * events.player_shots
        reward -= r["R_TIME"]

        if events.player_hits and self._last.state is LifecycleState.GAME_OVER:
            reward -= r["R_DEATH"]

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        snap = self._last
        return {
            "score": snap.score,
            "health": snap.player.health,
            "state": snap.state.value,
            "num_enemies": len(snap.enemies),
            "num_bullets": len(snap.bullets),
            "kills": snap.events.kills,
            "damage_taken": snap.events.player_hits,
            "step": self._step_count,
        }

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self.render_mode == "human":
            if self._window is None:
                from .window import ArenaWindow

                self._window = ArenaWindow(self.config)
            self._window.snapshot = self._last
            self._window.on_draw()
            return None
        elif self.render_mode == "rgb_array":
            # TODO: read back the arcade framebuffer instead of a blank frame
            return np.zeros((int(self.config.height), int(self.config.width), 3), dtype=np.uint8)

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = True, seed: Optional[int] = 42) -> float:
    """Run a random episode for testing"""
    env = ArenaEnv(render_mode="human" if render else None)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    print("Running episode... close the window to exit early.")

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

        if render and env._window:
            env._window.dispatch_events()
            env._window.flip()
            time.sleep(env.dt)

    print(f"Random episode return: {total:.2f}, score: {info['score']}, steps: {info['step']}")

    env.close()
    return total


if __name__ == "__main__":
    run_random_episode(render=True)
