"""Arena module - top-down arena shooter simulation"""

from .config import ArenaConfig
from .entities import Bullet, BulletOwner, Enemy, Player
from .session import ArenaGame, FrameSnapshot, LifecycleState, Session
from .simulation import FrameEvents, InputIntent
from .spawner import RandomSampler, UniformSampler
from .arena_env import ArenaEnv, run_random_episode

__all__ = [
    'ArenaConfig', 'ArenaEnv', 'ArenaGame', 'Bullet', 'BulletOwner', 'Enemy',
    'FrameEvents', 'FrameSnapshot', 'InputIntent', 'LifecycleState', 'Player',
    'RandomSampler', 'Session', 'UniformSampler', 'run_random_episode',
]
