"""
GameSession - owns the whole mutable state of one game
------------------------------------------------------
- Start / pause / game-over state machine
- One frame = handle input -> update (unless paused) -> render -> reschedule
- Collections of asteroids, stars, bullets and particle effects
- Score, high score (persisted through a store) and wall-clock shot cooldown

Everything random comes from the injected ``rng`` and everything timed from
the injected ``clock`` (milliseconds), so a session can be driven
deterministically from tests or from the agent environment.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from .backdrop import Backdrop
from .collisions import CollisionReport, CollisionResolver
from .config import GameConfig, make_config
from .controls import PAUSE, SHOOT, START, InputSnapshot, clamp_player, steer_player
from .entities import Entity, EntityKind, advance, is_offscreen
from .particles import ParticleSystem
from .scheduler import FrameScheduler, ManualScheduler
from .spawner import SpawnController
from .storage import MemoryStore
from .utils import make_rng, wall_clock_ms

Rect = Tuple[float, float, float, float]
# x, y, size, alpha, color
Dot = Tuple[float, float, float, float, Tuple[int, int, int]]


class GameState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything a renderer needs for one frame, detached from the live session"""
    frame: int
    state: GameState
    score: int
    high_score: int
    width: float
    height: float
    player: Rect
    asteroids: Tuple[Rect, ...]
    stars: Tuple[Rect, ...]
    bullets: Tuple[Rect, ...]
    particles: Tuple[Dot, ...]
    trail: Tuple[Dot, ...]
    flashes: Tuple[Tuple[float, float, float, float], ...]  # cx, cy, radius, alpha
    field_stars: Tuple[Tuple[float, float, float, float], ...]  # x, y, size, alpha
    nebulae: Tuple[Tuple[float, float, float, Tuple[int, int, int]], ...]

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED


def _rect(e: Entity) -> Rect:
    return (e.x, e.y, e.width, e.height)


class GameSession:
    """Single owner of every entity collection, the score and the frame loop"""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        store=None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], float]] = None,
        scheduler: Optional[FrameScheduler] = None,
        renderer=None,
        on_game_over: Optional[Callable[[int, int], None]] = None,
        verbose: int = 0,
    ):
        self.config = config or make_config()
        self.store = store if store is not None else MemoryStore()
        self.rng = rng or make_rng()
        self.clock = clock or wall_clock_ms
        self.scheduler = scheduler or ManualScheduler()
        self.renderer = renderer
        self.on_game_over = on_game_over
        self.verbose = verbose

        # Viewport (logical pixels)
        self.width = float(self.config.width)
        self.height = float(self.config.height)

        self.input = InputSnapshot()

        self.spawner = SpawnController(self.config, self.rng)
        self.resolver = CollisionResolver(self.config.asteroid_points, self.config.star_points)
        self.effects = ParticleSystem(self.rng)
        self.backdrop = Backdrop(self.rng, self.width, self.height)

        # World state
        size = self.config.player_size
        self.player = Entity(EntityKind.PLAYER, 0.0, 0.0, size, size, self.config.player_speed)
        self._place_player_at_spawn()
        self.asteroids: List[Entity] = []
        self.stars: List[Entity] = []
        self.bullets: List[Entity] = []

        self.state = GameState.IDLE
        self.score = 0
        self.high_score = self._load_high_score()
        self.frame = 0
        self.last_report = CollisionReport()

        self._last_shot_ms: Optional[float] = None
        self._started_ms = 0.0

    # ----------------------------
    # State
    # ----------------------------

    @property
    def running(self) -> bool:
        return self.state in (GameState.RUNNING, GameState.PAUSED)

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    # ----------------------------
    # State machine
    # ----------------------------

    def start(self):
        """Start or restart: wipe the world, reset the score and arm the first frame"""
        self.asteroids = []
        self.stars = []
        self.bullets = []
        self.effects.clear()
        self.backdrop.reset(self.width, self.height)
        self.score = 0
        self._last_shot_ms = None
        self._started_ms = self.clock()
        self._place_player_at_spawn()
        self.input.drain_triggers()
        self.last_report = CollisionReport()

        self.state = GameState.RUNNING
        if self.verbose > 0:
            print(f"[GameSession] Started ({self.config.variant}), high score {self.high_score}")
        self.scheduler.request(self._frame)

    def toggle_pause(self):
        if self.state is GameState.RUNNING:
            self.state = GameState.PAUSED
        elif self.state is GameState.PAUSED:
            self.state = GameState.RUNNING

    def game_over(self):
        """Freeze the world, settle the high score and notify the listener"""
        self.state = GameState.GAME_OVER
        self.scheduler.cancel()

        if self.score > self.high_score:
            self.high_score = self.score
            self._persist("set_high_score", self.high_score)

        duration_s = max(0.0, (self.clock() - self._started_ms) / 1000.0)
        if getattr(self.store, "record_game", None) is not None:
            self._persist("record_game", self.score, duration_s)

        if self.verbose > 0:
            print(f"[GameSession] Game over after {self.frame} frames: "
                  f"score {self.score}, high score {self.high_score}")
        if self.on_game_over is not None:
            self.on_game_over(self.score, self.high_score)

    def stop(self):
        """Stop the loop without ending the game (window closed)"""
        self.scheduler.cancel()
        self.state = GameState.IDLE

    def resize(self, width: float, height: float):
        self.width = float(width)
        self.height = float(height)
        if self.state is GameState.IDLE:
            self._place_player_at_spawn()
        else:
            # a finished game keeps its last frame until the next start()
            clamp_player(self.player, self.width, self.height)

    # ----------------------------
    # Persistence (best effort)
    # ----------------------------

    def _load_high_score(self) -> int:
        try:
            return max(0, int(self.store.get_high_score()))
        except Exception as e:
            if self.verbose > 0:
                print(f"[GameSession] Could not load high score: {e}")
            return 0

    def _persist(self, method: str, *args):
        try:
            getattr(self.store, method)(*args)
        except Exception as e:
            if self.verbose > 0:
                print(f"[GameSession] Could not {method.replace('_', ' ')}: {e}")

    # ----------------------------
    # Frame loop
    # ----------------------------

    def _frame(self):
        if not self.running:
            return

        self.frame += 1
        self.handle_input()
        if self.state is GameState.RUNNING:
            self.update()

        if self.renderer is not None:
            self.renderer.draw(self.snapshot())

        if self.running:
            self.scheduler.request(self._frame)

    def handle_input(self):
        """Consume the one-shot triggers queued since the last frame"""
        for trigger in self.input.drain_triggers():
            if trigger == PAUSE:
                self.toggle_pause()
            elif trigger == SHOOT:
                self.shoot()
            elif trigger == START:
                self.start()
                return

    def update(self) -> CollisionReport:
        """Advance the world by one tick"""
        w, h = self.width, self.height

        steer_player(self.player, self.input, w, h, self.config.pointer_smoothing)
        for group in (self.asteroids, self.stars, self.bullets):
            for entity in group:
                advance(entity)

        self.spawner.spawn(self.asteroids, self.stars, w)

        self.effects.update()
        self.effects.emit_trail(self.player)
        self.backdrop.update(w, h)

        report = self.resolver.resolve(
            self.player, self.bullets, self.asteroids, self.stars, self.effects
        )
        self.score += report.points
        self.last_report = report

        self._purge()

        if report.player_hit:
            self.game_over()
        return report

    def _purge(self):
        h = self.height
        self.asteroids = [a for a in self.asteroids if not is_offscreen(a, h)]
        self.stars = [s for s in self.stars if not is_offscreen(s, h)]
        self.bullets = [b for b in self.bullets if not is_offscreen(b, h)]

    # ----------------------------
    # Actions
    # ----------------------------

    def shoot(self) -> bool:
        """Fire one bullet if the cooldown has elapsed. Returns True when a bullet was fired."""
        if self.state is not GameState.RUNNING:
            return False

        now = self.clock()
        if self._last_shot_ms is not None and now - self._last_shot_ms < self.config.shot_cooldown_ms:
            return False

        self.bullets.append(self._create_bullet())
        self._last_shot_ms = now
        return True

    def shot_ready(self) -> bool:
        if self._last_shot_ms is None:
            return True
        return self.clock() - self._last_shot_ms >= self.config.shot_cooldown_ms

    def _create_bullet(self) -> Entity:
        cfg = self.config
        p = self.player
        bx = p.x + (p.width - cfg.bullet_width) / 2 + cfg.bullet_spawn_offset
        return Entity(EntityKind.BULLET, bx, p.y, cfg.bullet_width, cfg.bullet_height, cfg.bullet_speed)

    def _place_player_at_spawn(self):
        p = self.player
        p.x = self.width / 2 - p.width / 2
        p.y = self.height - p.height - self.config.player_spawn_y_offset
        clamp_player(p, self.width, self.height)

    # ----------------------------
    # Render contract
    # ----------------------------

    def snapshot(self) -> FrameSnapshot:
        fx = self.effects
        return FrameSnapshot(
            frame=self.frame,
            state=self.state,
            score=self.score,
            high_score=self.high_score,
            width=self.width,
            height=self.height,
            player=_rect(self.player),
            asteroids=tuple(_rect(a) for a in self.asteroids),
            stars=tuple(_rect(s) for s in self.stars),
            bullets=tuple(_rect(b) for b in self.bullets),
            particles=tuple((p.x, p.y, p.size, p.alpha, p.color) for p in fx.particles),
            trail=tuple((p.x, p.y, p.size, p.alpha, p.color) for p in fx.trail),
            flashes=tuple(
                (f.x + f.size / 2, f.y + f.size / 2, f.size / 2 * f.scale, f.alpha)
                for f in fx.flashes
            ),
            field_stars=tuple(
                (s.x, s.y, s.size, Backdrop.twinkle(s, self.frame)) for s in self.backdrop.stars
            ),
            nebulae=tuple((n.x, n.y, n.r, n.color) for n in self.backdrop.nebulae),
        )
