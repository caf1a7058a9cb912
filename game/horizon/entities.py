"""
Game entity dataclasses

Every rectangular game object shares one representation (``Entity``) and is
told apart by its ``kind`` tag. Movement and despawn rules are looked up by
tag instead of being spread over subclasses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class EntityKind(str, Enum):
    PLAYER = "player"
    ASTEROID = "asteroid"
    STAR = "star"
    BULLET = "bullet"


# Vertical direction of the per-tick drift (+1 is down the screen)
_DRIFT = {
    EntityKind.ASTEROID: 1.0,
    EntityKind.STAR: 1.0,
    EntityKind.BULLET: -1.0,
    EntityKind.PLAYER: 0.0,
}


@dataclass
class Entity:
    """Axis-aligned rectangle moving at a fixed speed"""
    kind: EntityKind
    x: float
    y: float
    width: float
    height: float
    speed: float = 0.0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2


@dataclass
class Particle:
    """Short-lived fading point effect"""
    x: float
    y: float
    vx: float
    vy: float
    life: int
    max_life: int
    size: float
    color: Tuple[int, int, int] = (255, 255, 255)
    gravity: float = 0.0  # added to vy every tick

    @property
    def alpha(self) -> float:
        return max(0.0, self.life / self.max_life)


@dataclass
class Explosion:
    """Expanding flash ring left behind by a destroyed asteroid"""
    x: float
    y: float
    size: float = 50.0
    life: int = 15
    max_life: int = 15

    @property
    def alpha(self) -> float:
        return max(0.0, self.life / self.max_life)

    @property
    def scale(self) -> float:
        return 1.0 + (1.0 - self.alpha) * 2.0


def advance(entity: Entity) -> None:
    """Apply the entity's fixed per-tick drift (no-op for the player)"""
    entity.y += _DRIFT[entity.kind] * entity.speed


def is_offscreen(entity: Entity, viewport_height: float) -> bool:
    """True once the entity has fully left the playfield in its travel direction"""
    if entity.kind is EntityKind.BULLET:
        return entity.y + entity.height < 0
    if entity.kind in (EntityKind.ASTEROID, EntityKind.STAR):
        return entity.y > viewport_height
    return False


def age_particle(p: Particle) -> None:
    p.x += p.vx
    p.y += p.vy
    p.life -= 1
    p.vy += p.gravity
