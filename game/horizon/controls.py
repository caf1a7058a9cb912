"""
Input snapshot shared between input handlers and the session, and player steering
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from .entities import Entity
from .utils import clamp

LEFT_KEYS = frozenset({"left", "a"})
RIGHT_KEYS = frozenset({"right", "d"})
UP_KEYS = frozenset({"up", "w"})
DOWN_KEYS = frozenset({"down", "s"})
MOVEMENT_KEYS = LEFT_KEYS | RIGHT_KEYS | UP_KEYS | DOWN_KEYS

# One-shot triggers
SHOOT = "shoot"
START = "start"
PAUSE = "pause"


@dataclass
class InputSnapshot:
    """
    Latest input state. Handlers write into it between ticks and the session
    reads it once per tick; last write wins.
    """
    keys: Set[str] = field(default_factory=set)
    pointer: Optional[Tuple[float, float]] = None
    triggers: List[str] = field(default_factory=list)

    def press(self, key: str):
        self.keys.add(key)
        if key in MOVEMENT_KEYS:
            # a stale pointer must not pull the ship back once keys are used
            self.pointer = None

    def release(self, key: str):
        self.keys.discard(key)

    def move_pointer(self, x: float, y: float):
        self.pointer = (x, y)

    def clear_pointer(self):
        self.pointer = None

    def trigger(self, name: str):
        self.triggers.append(name)

    def drain_triggers(self) -> List[str]:
        pending, self.triggers = self.triggers, []
        return pending

    @property
    def moving(self) -> bool:
        return bool(self.keys & MOVEMENT_KEYS)


def steer_player(
    player: Entity,
    snapshot: InputSnapshot,
    view_width: float,
    view_height: float,
    smoothing: float = 0.1,
):
    """Move the player from held keys, or ease it toward the pointer, then clamp"""
    keys = snapshot.keys
    if snapshot.moving:
        if keys & LEFT_KEYS:
            player.x -= player.speed
        if keys & RIGHT_KEYS:
            player.x += player.speed
        if keys & UP_KEYS:
            player.y -= player.speed
        if keys & DOWN_KEYS:
            player.y += player.speed
    elif snapshot.pointer is not None:
        px, py = snapshot.pointer
        target_x = px - player.width / 2
        target_y = py - player.height / 2
        player.x += (target_x - player.x) * smoothing
        player.y += (target_y - player.y) * smoothing

    clamp_player(player, view_width, view_height)


def clamp_player(player: Entity, view_width: float, view_height: float):
    player.x = clamp(player.x, 0.0, max(0.0, view_width - player.width))
    player.y = clamp(player.y, 0.0, max(0.0, view_height - player.height))
