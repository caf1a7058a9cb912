"""
Collision detection and the per-tick resolution policy

Resolution runs in a fixed order against post-movement positions:

1. bullets vs asteroids (first overlapping asteroid per bullet is destroyed)
2. player vs asteroids (any overlap ends the game, nothing else is checked)
3. player vs stars (every overlapping star is collected)

Because step 2 short-circuits, a frame in which the player touches an asteroid
and a star at once ends the game without the star pickup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .entities import Entity
from .particles import ParticleSystem
from .utils import rect_overlap


def aabb_overlap(a: Entity, b: Entity) -> bool:
    """Open-interval AABB test: rectangles that only share an edge do not collide"""
    return rect_overlap(a.x, a.y, a.width, a.height, b.x, b.y, b.width, b.height)


@dataclass
class CollisionReport:
    """What happened during one resolution pass"""
    points: int = 0
    asteroids_destroyed: int = 0
    stars_collected: int = 0
    player_hit: bool = False


class CollisionResolver:
    def __init__(self, asteroid_points: int, star_points: int):
        self.asteroid_points = asteroid_points
        self.star_points = star_points

    def resolve(
        self,
        player: Entity,
        bullets: List[Entity],
        asteroids: List[Entity],
        stars: List[Entity],
        effects: ParticleSystem,
    ) -> CollisionReport:
        """Apply all three collision categories, removing consumed entities in place"""
        report = CollisionReport()

        self._bullets_vs_asteroids(bullets, asteroids, effects, report)

        for asteroid in asteroids:
            if aabb_overlap(player, asteroid):
                report.player_hit = True
                return report

        self._player_vs_stars(player, stars, effects, report)
        return report

    def _bullets_vs_asteroids(self, bullets, asteroids, effects, report):
        surviving = []
        for bullet in bullets:
            hit_index = None
            for j, asteroid in enumerate(asteroids):
                if aabb_overlap(bullet, asteroid):
                    hit_index = j
                    break

            if hit_index is None:
                surviving.append(bullet)
                continue

            asteroid = asteroids.pop(hit_index)
            report.points += self.asteroid_points
            report.asteroids_destroyed += 1
            cx, cy = asteroid.center
            effects.emit_explosion(cx, cy)

        bullets[:] = surviving

    def _player_vs_stars(self, player, stars, effects, report):
        remaining = []
        for star in stars:
            if aabb_overlap(player, star):
                cx, cy = star.center
                effects.emit_burst(cx, cy)
                report.points += self.star_points
                report.stars_collected += 1
            else:
                remaining.append(star)
        stars[:] = remaining
