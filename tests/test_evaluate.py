"""Tests for the scripted policy evaluation CLI."""

from __future__ import annotations

import numpy as np
import pytest

from game.arena.arena_env import ArenaEnv
from rl.evaluate import aim_nearest_policy, evaluate_policy, main

pytestmark = pytest.mark.unit


class TestPolicies:
    def test_aim_nearest_fires_at_enemy(self):
        env = ArenaEnv()
        obs, _ = env.reset(seed=0)
        action = aim_nearest_policy(env, obs)
        assert env.action_space.contains(action)
        assert action[2] == 1
        # nearest initial enemy sits at (700, 400), just below the +x axis
        assert action[3] == 0

    def test_aim_nearest_without_enemies_idles(self):
        env = ArenaEnv()
        env.reset(seed=0)
        obs = np.zeros(env.observation_space.shape, dtype=np.float32)
        assert list(aim_nearest_policy(env, obs)) == [0, 0, 0, 0]


class TestEvaluate:
    def test_evaluate_policy_summary(self, capsys):
        results = evaluate_policy("aim_nearest", n_episodes=2, seed=0,
                                  env_config={"max_steps": 30})
        assert len(results["episode_rewards"]) == 2
        assert all(n <= 30 for n in results["episode_lengths"])
        assert "aim_nearest policy results" in capsys.readouterr().out

    def test_unknown_policy(self):
        with pytest.raises(ValueError):
            evaluate_policy("telepathy", n_episodes=1)

    def test_main_parses_arguments(self):
        results = main(["--policy", "random", "--n-episodes", "1", "--max-steps", "5"])
        assert len(results["episode_lengths"]) == 1
        assert results["episode_lengths"][0] <= 5
