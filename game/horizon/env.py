"""
HorizonEnv - headless agent interface to a GameSession
------------------------------------------------------
- Gymnasium API
- One step = one frame on a simulated 60 FPS clock
- Discrete MultiDiscrete action space: [move(9), shoot(2)]
- Vector observation: player state + top-K nearest asteroids + top-M nearest stars
- Reward: score gained this frame, minus a penalty when the ship is destroyed

Quick test:
    python -m game.horizon.env
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from .config import ENV_CONFIG, GameConfig, make_config
from .controls import SHOOT
from .entities import Entity
from .scheduler import ManualScheduler
from .session import GameSession, GameState
from .storage import MemoryStore
from .utils import clamp, make_rng

# move: 0 stay, 1 up, 2 down, 3 left, 4 right, 5 up-left, 6 up-right, 7 down-left, 8 down-right
MOVE_KEYS = [
    (),
    ("up",),
    ("down",),
    ("left",),
    ("right",),
    ("up", "left"),
    ("up", "right"),
    ("down", "left"),
    ("down", "right"),
]


class HorizonEnv(gym.Env):
    """Dark Horizon as a step-driven environment"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        config: Optional[GameConfig] = None,
        max_steps: int = ENV_CONFIG["max_steps"],
        k_asteroids: int = ENV_CONFIG["k_asteroids"],
        m_stars: int = ENV_CONFIG["m_stars"],
        death_penalty: float = ENV_CONFIG["death_penalty"],
    ):
        super().__init__()

        assert render_mode is None or render_mode in self.metadata["render_modes"]
        self.render_mode = render_mode
        self.config = config or make_config()

        self.max_steps = max_steps
        self.k_asteroids = k_asteroids
        self.m_stars = m_stars
        self.death_penalty = death_penalty
        self._frame_ms = 1000.0 / self.config.fps

        self.action_space = spaces.MultiDiscrete([len(MOVE_KEYS), 2])

        # Player: pos(2) shot-ready(1); each asteroid / star: rel pos(2)
        obs_dim = 2 + 1 + (self.k_asteroids * 2) + (self.m_stars * 2)
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.session: GameSession = None  # type: ignore
        self._scheduler = ManualScheduler()
        self._sim_ms = 0.0
        self._step_count = 0
        self._window = None

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        if seed is None:
            seed = int(self.np_random.integers(0, 2**31 - 1))

        self._sim_ms = 0.0
        self._step_count = 0
        self._scheduler = ManualScheduler()
        self.session = GameSession(
            config=self.config,
            store=MemoryStore(),
            rng=make_rng(seed),
            clock=lambda: self._sim_ms,
            scheduler=self._scheduler,
        )
        self.session.start()

        return self._get_obs(), self._get_info()

    def step(self, action):
        move, shoot = int(action[0]), int(action[1])
        session = self.session

        session.input.keys = set(MOVE_KEYS[move % len(MOVE_KEYS)])
        if shoot:
            session.input.trigger(SHOOT)

        score_before = session.score
        self._sim_ms += self._frame_ms
        self._scheduler.step()

        reward = float(session.score - score_before)
        terminated = session.state is GameState.GAME_OVER
        if terminated:
            reward -= self.death_penalty

        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .render import SnapshotWindow
            self._window = SnapshotWindow(int(self.session.width), int(self.session.height))
        self._window.show(self.session.snapshot())
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None

    # ----------------------------
    # Observation / info
    # ----------------------------

    def _nearest(self, entities: List[Entity], count: int) -> List[float]:
        px, py = self.session.player.center
        w, h = self.session.width, self.session.height

        def dist(e: Entity) -> float:
            cx, cy = e.center
            return (cx - px) ** 2 + (cy - py) ** 2

        parts: List[float] = []
        ordered = sorted(entities, key=dist)
        for i in range(count):
            if i < len(ordered):
                cx, cy = ordered[i].center
                parts += [clamp((cx - px) / w, -1, 1), clamp((cy - py) / h, -1, 1)]
            else:
                parts += [0.0, 0.0]
        return parts

    def _get_obs(self) -> np.ndarray:
        s = self.session
        px = s.player.x / max(1.0, s.width - s.player.width)
        py = s.player.y / max(1.0, s.height - s.player.height)
        obs_parts = [px * 2 - 1, py * 2 - 1, 1.0 if s.shot_ready() else -1.0]
        obs_parts += self._nearest(s.asteroids, self.k_asteroids)
        obs_parts += self._nearest(s.stars, self.m_stars)
        return np.clip(np.array(obs_parts, dtype=np.float32), -1.0, 1.0)

    def _get_info(self) -> Dict[str, Any]:
        s = self.session
        return {
            "score": s.score,
            "high_score": s.high_score,
            "num_asteroids": len(s.asteroids),
            "num_stars": len(s.stars),
            "num_bullets": len(s.bullets),
            "asteroids_destroyed": s.last_report.asteroids_destroyed,
            "stars_collected": s.last_report.stars_collected,
            "step": self._step_count,
        }


def run_random_episode(render: bool = False, seed: Optional[int] = 42, config: Optional[GameConfig] = None) -> Dict[str, Any]:
    """Run a random-policy episode and return its final info"""
    env = HorizonEnv(render_mode="human" if render else None, config=config)
    obs, info = env.reset(seed=seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    print(f"Random episode return: {total:.1f} (score {info['score']}, {info['step']} steps)")
    env.close()
    return info


if __name__ == "__main__":
    run_random_episode(render=False)
