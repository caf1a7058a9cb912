"""
Particle effects: explosion debris and flash, star pickup burst, engine trail
"""

from __future__ import annotations

import math
import random
from typing import List

from .entities import Entity, Explosion, Particle, age_particle

# Explosion debris
DEBRIS_COUNT = 15
DEBRIS_LIFE = 30
DEBRIS_SPREAD = 8.0
DEBRIS_SIZE_MIN = 2.0
DEBRIS_SIZE_VARIATION = 4.0

# Star pickup burst
BURST_COUNT = 12
BURST_LIFE = 20
BURST_SPEED_MIN = 2.0
BURST_SPEED_VARIATION = 3.0
BURST_SIZE_MIN = 1.0
BURST_SIZE_VARIATION = 2.0
BURST_COLOR = (255, 215, 0)

# Engine trail
TRAIL_LIFE = 20
TRAIL_JITTER = 4.0
TRAIL_FALL_SPEED = 2.0

GRAVITY = 0.1
FLASH_SIZE = 50.0
FLASH_LIFE = 15


class ParticleSystem:
    """Owns every particle and flash emitted during a session"""

    def __init__(self, rng: random.Random):
        self.rng = rng
        self.particles: List[Particle] = []  # debris and bursts
        self.trail: List[Particle] = []
        self.flashes: List[Explosion] = []

    def emit_explosion(self, cx: float, cy: float):
        rng = self.rng
        for _ in range(DEBRIS_COUNT):
            shade = int((rng.random() * 40 + 40) / 100 * 255)
            self.particles.append(Particle(
                x=cx,
                y=cy,
                vx=(rng.random() - 0.5) * DEBRIS_SPREAD,
                vy=(rng.random() - 0.5) * DEBRIS_SPREAD,
                life=DEBRIS_LIFE,
                max_life=DEBRIS_LIFE,
                size=rng.random() * DEBRIS_SIZE_VARIATION + DEBRIS_SIZE_MIN,
                color=(shade, shade, shade),
                gravity=GRAVITY,
            ))
        self.flashes.append(Explosion(
            x=cx - FLASH_SIZE / 2,
            y=cy - FLASH_SIZE / 2,
            size=FLASH_SIZE,
            life=FLASH_LIFE,
            max_life=FLASH_LIFE,
        ))

    def emit_burst(self, cx: float, cy: float):
        rng = self.rng
        for i in range(BURST_COUNT):
            angle = (math.pi * 2 * i) / BURST_COUNT
            speed = rng.random() * BURST_SPEED_VARIATION + BURST_SPEED_MIN
            self.particles.append(Particle(
                x=cx,
                y=cy,
                vx=math.cos(angle) * speed,
                vy=math.sin(angle) * speed,
                life=BURST_LIFE,
                max_life=BURST_LIFE,
                size=rng.random() * BURST_SIZE_VARIATION + BURST_SIZE_MIN,
                color=BURST_COLOR,
                gravity=GRAVITY,
            ))

    def emit_trail(self, player: Entity):
        cx, _ = player.center
        self.trail.append(Particle(
            x=cx + (self.rng.random() - 0.5) * TRAIL_JITTER,
            y=player.bottom,
            vx=0.0,
            vy=TRAIL_FALL_SPEED,
            life=TRAIL_LIFE,
            max_life=TRAIL_LIFE,
            size=self.rng.random() * 3 + 1,
            color=(255, 120, 100),
        ))

    def update(self):
        for p in self.particles:
            age_particle(p)
        for p in self.trail:
            age_particle(p)
        for f in self.flashes:
            f.life -= 1

        self.particles = [p for p in self.particles if p.life > 0]
        self.trail = [p for p in self.trail if p.life > 0]
        self.flashes = [f for f in self.flashes if f.life > 0]

    def clear(self):
        self.particles = []
        self.trail = []
        self.flashes = []

    def __len__(self) -> int:
        return len(self.particles) + len(self.trail) + len(self.flashes)
