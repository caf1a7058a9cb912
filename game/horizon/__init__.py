"""Dark Horizon - arcade shooter simulation core"""

from .config import GameConfig, make_config
from .session import FrameSnapshot, GameSession, GameState
from .env import HorizonEnv, run_random_episode

__all__ = [
    'GameConfig',
    'make_config',
    'FrameSnapshot',
    'GameSession',
    'GameState',
    'HorizonEnv',
    'run_random_episode',
]
