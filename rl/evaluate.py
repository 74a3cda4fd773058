"""
Evaluation script for scripted arena policies
"""

import argparse
import logging
import time
from typing import Callable, Dict, Optional

import numpy as np

from game.arena import ArenaEnv
from rl.configs.arena_config import ENV_CONFIG, EVAL_CONFIG, REWARD_CONFIGS


def random_policy(env: ArenaEnv, obs: np.ndarray) -> np.ndarray:
    return env.action_space.sample()


def aim_nearest_policy(env: ArenaEnv, obs: np.ndarray) -> np.ndarray:
    """Hold still, aim at the nearest enemy and keep firing"""
    # First enemy slot of the observation is the nearest one
    dx, dy = obs[5], obs[6]
    if dx == 0.0 and dy == 0.0:
        return np.array([0, 0, 0, 0], dtype=np.int64)

    # Undo the per-axis field normalisation before taking the angle
    ang = np.arctan2(dy * env.config.height, dx * env.config.width)
    aim = int(np.round(ang / (2 * np.pi / 8))) % 8
    return np.array([0, 0, 1, aim], dtype=np.int64)


POLICIES: Dict[str, Callable[[ArenaEnv, np.ndarray], np.ndarray]] = {
    "random": random_policy,
    "aim_nearest": aim_nearest_policy,
}


def evaluate_policy(
    policy: str = "random",
    n_episodes: int = 10,
    render: bool = False,
    seed: Optional[int] = None,
    reward_config: str = "baseline",
    env_config: Optional[dict] = None,
):
    """
    Evaluate a scripted policy

    Args:
        policy: Name of the policy in POLICIES
        n_episodes: Number of episodes to evaluate
        render: Whether to render the environment
        seed: Base seed; episode i uses seed + i
        reward_config: Key into REWARD_CONFIGS
        env_config: Overrides for ENV_CONFIG
    """
    if policy not in POLICIES:
        raise ValueError(f"Unknown policy: {policy}")
    act = POLICIES[policy]

    cfg = dict(ENV_CONFIG)
    cfg.update(env_config or {})
    env = ArenaEnv(
        render_mode="human" if render else None,
        reward_config=REWARD_CONFIGS[reward_config],
        **cfg,
    )

    episode_rewards = []
    episode_lengths = []
    episode_scores = []

    for episode in range(n_episodes):
        obs, info = env.reset(seed=seed + episode if seed is not None else None)

        terminated = False
        truncated = False
        total_reward = 0.0
        steps = 0

        while not (terminated or truncated):
            obs, reward, terminated, truncated, info = env.step(act(env, obs))
            total_reward += reward
            steps += 1

            if render and env._window:
                env._window.dispatch_events()
                env._window.flip()
                time.sleep(env.dt)

        episode_rewards.append(total_reward)
        episode_lengths.append(steps)
        episode_scores.append(info["score"])

        print(f"Episode {episode + 1}/{n_episodes}: "
              f"Reward = {total_reward:.2f}, Length = {steps}, Score = {info['score']}")

    env.close()

    mean_reward = np.mean(episode_rewards)
    std_reward = np.std(episode_rewards)
    mean_length = np.mean(episode_lengths)
    mean_score = np.mean(episode_scores)

    print("\n" + "="*50)
    print(f"{policy} policy results ({n_episodes} episodes):")
    print(f"Mean Reward: {mean_reward:.2f} ± {std_reward:.2f}")
    print(f"Mean Episode Length: {mean_length:.1f}")
    print(f"Mean Score: {mean_score:.2f}")
    print("="*50)

    return {
        "mean_reward": mean_reward,
        "std_reward": std_reward,
        "mean_length": mean_length,
        "mean_score": mean_score,
        "episode_rewards": episode_rewards,
        "episode_lengths": episode_lengths,
        "episode_scores": episode_scores,
    }


def main(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate scripted arena policies")
    parser.add_argument(
        "--policy",
        type=str,
        default="random",
        choices=sorted(POLICIES),
        help="Policy to run (default: random)",
    )
    parser.add_argument(
        "--n-episodes",
        type=int,
        default=EVAL_CONFIG["n_episodes"],
        help="Number of evaluation episodes (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=EVAL_CONFIG["seed"],
        help="Random seed (default: %(default)s)",
    )
    parser.add_argument(
        "--reward-config",
        type=str,
        default="baseline",
        choices=sorted(REWARD_CONFIGS),
        help="Reward shaping preset (default: baseline)",
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="Override the episode step limit",
    )
    parser.add_argument(
        "--render",
        action="store_true",
        help="Show the arcade window",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level for the simulation (default: WARNING)",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(name)s %(levelname)s: %(message)s")

    overrides = {}
    if args.max_steps is not None:
        overrides["max_steps"] = args.max_steps

    return evaluate_policy(
        policy=args.policy,
        n_episodes=args.n_episodes,
        render=args.render,
        seed=args.seed,
        reward_config=args.reward_config,
        env_config=overrides,
    )


if __name__ == "__main__":
    main()
