"""
Configuration for the arena shooter environment and policy evaluation
"""

# Simulation constants (keys of game.arena.config.ArenaConfig)
ARENA_CONFIG = {
    "width": 800.0,
    "height": 600.0,
    "actor_size": 32.0,
    "player_speed": 200.0,
    "player_max_health": 5,
    "player_bullet_speed": 500.0,
    "player_fire_interval": 0.2,
    "enemy_health": 3,
    "enemy_bullet_speed": 300.0,
    "enemy_fire_interval": 1.0,
    "enemy_speed_range": (40.0, 80.0),
    "min_engagement_range": 0.0,  # 0 disables the hold-fire range
    "spawn_margin": 50.0,
    "low_water_mark": 3,
    "freeze_on_game_over": False,
}

# Environment parameters
ENV_CONFIG = {
    "dt": 1/30,
    "max_steps": 1800,  # 60 seconds at 30 FPS
    "k_enemies": 5,
    "m_bullets": 5,
    "aim_distance": 100.0,
    "arena_config": ARENA_CONFIG,
}

# ==============================================================================
# REWARD SHAPING
# ==============================================================================

REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Balanced combat and survival",
    "R_KILL": 1.0,       # Reward for destroying an enemy
    "R_HIT": 0.3,        # Reward for landing a bullet
    "R_DAMAGE": 1.0,     # Penalty per health point lost
    "R_SHOT": 0.02,      # Penalty for shooting (encourage efficiency)
    "R_TIME": 0.001,     # Small time penalty
    "R_DEATH": 5.0,      # Death penalty
}

REWARD_CONFIG_SURVIVAL = {
    "name": "survival",
    "description": "Prioritize dodging enemy fire",
    "R_KILL": 0.5,
    "R_HIT": 0.1,
    "R_DAMAGE": 3.0,
    "R_SHOT": 0.05,
    "R_TIME": 0.0005,
    "R_DEATH": 10.0,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "survival": REWARD_CONFIG_SURVIVAL,
}

# ==============================================================================
# EVALUATION SETTINGS
# ==============================================================================

EVAL_CONFIG = {
    "seed": 42,
    "n_episodes": 10,
    "policies": ["random", "aim_nearest"],
}
