"""
Probabilistic per-tick spawning of asteroids and collectible stars
"""

from __future__ import annotations

import random
from typing import List, Tuple

from .config import GameConfig
from .entities import Entity, EntityKind


class SpawnController:
    """Rolls once per tick for each entity type and builds new entities"""

    def __init__(self, config: GameConfig, rng: random.Random):
        self.config = config
        self.rng = rng

    def spawn(self, asteroids: List[Entity], stars: List[Entity], view_width: float) -> Tuple[int, int]:
        """Append any newly spawned entities; returns (asteroids, stars) spawned"""
        new_asteroids = new_stars = 0
        if self.rng.random() < self.config.asteroid_spawn_rate:
            asteroids.append(self.create_asteroid(view_width))
            new_asteroids = 1
        if self.rng.random() < self.config.star_spawn_rate:
            stars.append(self.create_star(view_width))
            new_stars = 1
        return new_asteroids, new_stars

    def create_asteroid(self, view_width: float) -> Entity:
        cfg = self.config
        width = cfg.asteroid_min_size + self.rng.random() * cfg.asteroid_size_variation
        height = cfg.asteroid_min_size + self.rng.random() * cfg.asteroid_size_variation
        speed = cfg.asteroid_base_speed + self.rng.random() * cfg.asteroid_speed_variation
        x = self._spawn_x(view_width, width, cfg.asteroid_margin)
        return Entity(EntityKind.ASTEROID, x, cfg.asteroid_spawn_y, width, height, speed)

    def create_star(self, view_width: float) -> Entity:
        cfg = self.config
        width = cfg.star_min_size + self.rng.random() * cfg.star_size_variation
        height = cfg.star_min_size + self.rng.random() * cfg.star_size_variation
        speed = cfg.star_speed + self.rng.random()
        x = self._spawn_x(view_width, width, cfg.star_margin)
        return Entity(EntityKind.STAR, x, cfg.star_spawn_y, width, height, speed)

    def _spawn_x(self, view_width: float, size: float, margin: float) -> float:
        min_x = margin / 2
        # narrow viewports collapse the range onto the left margin
        max_x = max(min_x, view_width - size - margin / 2)
        return min_x + self.rng.random() * (max_x - min_x)
