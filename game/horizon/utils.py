"""
Utility functions for game mechanics
"""

from __future__ import annotations
import random
import time
from typing import Optional


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def rect_overlap(ax, ay, aw, ah, bx, by, bw, bh) -> bool:
    """Check if two axis-aligned rectangles overlap (touching edges do not count)"""
    return ax < bx + bw and ax + aw > bx and ay < by + bh and ay + ah > by


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Create an independent, seedable random source"""
    return random.Random(seed)


def wall_clock_ms() -> float:
    """Monotonic wall clock in milliseconds"""
    return time.monotonic() * 1000.0
