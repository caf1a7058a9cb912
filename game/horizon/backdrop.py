"""
Decorative background: drifting starfield and slowly breathing nebulae
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import List, Tuple

STARFIELD_COUNT = 150
NEBULA_COUNT = 10
NEBULA_RADIUS_MIN = 50.0
NEBULA_RADIUS_MAX = 250.0

NEBULA_COLORS = [
    (80, 130, 255),
    (255, 100, 100),
    (255, 200, 100),
    (180, 80, 255),
]


@dataclass
class FieldStar:
    x: float
    y: float
    size: float
    speed: float
    brightness: float


@dataclass
class NebulaBlob:
    x: float
    y: float
    r: float
    color: Tuple[int, int, int]
    dx: float
    dy: float
    dr: float


class Backdrop:
    """Owns the background layers and moves them once per tick"""

    def __init__(self, rng: random.Random, width: float, height: float):
        self.rng = rng
        self.stars: List[FieldStar] = []
        self.nebulae: List[NebulaBlob] = []
        self.reset(width, height)

    def reset(self, width: float, height: float):
        rng = self.rng
        self.stars = [
            FieldStar(
                x=rng.random() * width,
                y=rng.random() * height,
                size=rng.random() * 2 + 0.5,
                speed=rng.random() * 0.5 + 0.1,
                brightness=rng.random() * 0.5 + 0.5,
            )
            for _ in range(STARFIELD_COUNT)
        ]
        self.nebulae = [
            NebulaBlob(
                x=rng.random() * width,
                y=rng.random() * height,
                r=NEBULA_RADIUS_MIN + rng.random() * (NEBULA_RADIUS_MAX - NEBULA_RADIUS_MIN),
                color=rng.choice(NEBULA_COLORS),
                dx=(rng.random() - 0.5) * 0.7,
                dy=(rng.random() - 0.5) * 0.7,
                dr=(rng.random() - 0.5) * 0.3,
            )
            for _ in range(NEBULA_COUNT)
        ]

    def update(self, width: float, height: float):
        for s in self.stars:
            s.y += s.speed
            if s.y > height:
                s.y = -5.0
                s.x = self.rng.random() * width

        for n in self.nebulae:
            n.x += n.dx
            n.y += n.dy
            n.r += n.dr
            if n.x < 0 or n.x > width:
                n.dx *= -1
            if n.y < 0 or n.y > height:
                n.dy *= -1
            if n.r < NEBULA_RADIUS_MIN or n.r > NEBULA_RADIUS_MAX:
                n.dr *= -1

    @staticmethod
    def twinkle(star: FieldStar, frame: int) -> float:
        """Opacity of a field star at the given frame"""
        return star.brightness * (math.sin(frame * 0.01 + star.x) * 0.3 + 0.7)
