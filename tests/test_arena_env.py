"""Tests for the Gymnasium wrapper around the arena."""

from __future__ import annotations

import numpy as np
import pytest

from game.arena.arena_env import DEFAULT_REWARDS, ArenaEnv
from game.arena.entities import Bullet, BulletOwner

pytestmark = pytest.mark.unit

IDLE = np.array([0, 0, 0, 0])


@pytest.fixture
def env():
    e = ArenaEnv()
    e.reset(seed=0)
    yield e
    e.close()


class TestSpaces:
    def test_reset_observation_in_space(self, env):
        obs, info = env.reset(seed=1)
        assert obs.shape == env.observation_space.shape
        assert obs.dtype == np.float32
        assert env.observation_space.contains(obs)
        assert info["score"] == 0
        assert info["health"] == 5
        assert info["state"] == "playing"
        assert info["num_enemies"] == 2

    def test_observation_stays_in_space(self, env):
        for _ in range(200):
            obs, reward, terminated, truncated, info = env.step(env.action_space.sample())
            assert env.observation_space.contains(obs)
            assert isinstance(reward, float)
            if terminated or truncated:
                break

    def test_unsupported_obs_mode(self):
        with pytest.raises(AssertionError):
            ArenaEnv(obs_mode="pixels")


class TestActions:
    def test_action_to_intent(self, env):
        intent = env.action_to_intent([1, 2, 1, 2])
        assert intent.up and not intent.down
        assert intent.right and not intent.left
        assert intent.fire
        assert (intent.aim_x, intent.aim_y) == pytest.approx((400.0, 400.0))

    def test_idle_action(self, env):
        intent = env.action_to_intent(IDLE)
        assert not (intent.up or intent.down or intent.left or intent.right or intent.fire)
        assert (intent.aim_x, intent.aim_y) == pytest.approx((500.0, 300.0))


class TestEpisode:
    def test_death_terminates_with_penalty(self, env):
        p = env.game.session.player
        p.health = 1
        env.game.session.bullets.append(Bullet(p.x, p.y, 0.0, 0.0, BulletOwner.ENEMY))

        obs, reward, terminated, truncated, info = env.step(IDLE)
        assert terminated
        assert not truncated
        assert info["state"] == "game_over"
        expected = -(DEFAULT_REWARDS["R_DAMAGE"] + DEFAULT_REWARDS["R_DEATH"] + DEFAULT_REWARDS["R_TIME"])
        assert reward == pytest.approx(expected)

    def test_truncates_at_max_steps(self):
        env = ArenaEnv(max_steps=3)
        env.reset(seed=0)
        flags = [env.step(IDLE)[3] for _ in range(3)]
        assert flags == [False, False, True]

    def test_shot_costs_reward(self, env):
        _, reward, _, _, info = env.step(np.array([0, 0, 1, 0]))
        assert reward == pytest.approx(-DEFAULT_REWARDS["R_SHOT"] - DEFAULT_REWARDS["R_TIME"])
        assert info["num_bullets"] >= 1

    def test_same_seed_same_trajectory(self):
        actions = [np.array([i % 3, (i // 3) % 3, i % 2, i % 8]) for i in range(120)]
        runs = []
        for _ in range(2):
            env = ArenaEnv()
            obs, _ = env.reset(seed=5)
            trace = [obs]
            for a in actions:
                obs, *_ = env.step(a)
                trace.append(obs)
            runs.append(np.stack(trace))
        np.testing.assert_array_equal(runs[0], runs[1])

    def test_reward_config_override(self):
        env = ArenaEnv(reward_config={"name": "x", "R_TIME": 0.5})
        assert env.rewards["R_TIME"] == 0.5
        assert "name" not in env.rewards

    def test_rgb_array_render(self):
        env = ArenaEnv(render_mode="rgb_array")
        env.reset(seed=0)
        frame = env.render()
        assert frame.shape == (600, 800, 3)
