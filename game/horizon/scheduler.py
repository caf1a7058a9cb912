"""
Frame scheduling handles

The session never re-arms itself through a closure; it asks the scheduler it
owns for the next frame and cancels it on stop.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol


FrameCallback = Callable[[], None]


class FrameScheduler(Protocol):
    def request(self, callback: FrameCallback) -> None:
        ...

    def cancel(self) -> None:
        ...


class ManualScheduler:
    """Holds at most one pending frame; ``step()`` runs it. Used headless and in tests."""

    def __init__(self):
        self._pending: Optional[FrameCallback] = None
        self.frames_run = 0

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def request(self, callback: FrameCallback) -> None:
        self._pending = callback

    def cancel(self) -> None:
        self._pending = None

    def step(self) -> bool:
        """Run the pending frame, if any. Returns False when nothing was scheduled."""
        callback, self._pending = self._pending, None
        if callback is None:
            return False
        self.frames_run += 1
        callback()
        return True

    def run(self, max_frames: int) -> int:
        n = 0
        while n < max_frames and self.step():
            n += 1
        return n
