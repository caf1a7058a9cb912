"""
Arcade front end: window, input capture, snapshot drawing and frame scheduling
"""

from __future__ import annotations

import math
from typing import Optional

import arcade

from .controls import PAUSE, SHOOT, START
from .scheduler import FrameCallback
from .session import FrameSnapshot, GameSession, GameState

KEY_NAMES = {
    arcade.key.LEFT: "left",
    arcade.key.RIGHT: "right",
    arcade.key.UP: "up",
    arcade.key.DOWN: "down",
    arcade.key.A: "a",
    arcade.key.D: "d",
    arcade.key.W: "w",
    arcade.key.S: "s",
}


class ArcadeScheduler:
    """FrameScheduler backed by arcade's clock; at most one frame is ever pending"""

    def __init__(self, interval: float = 1 / 60):
        self.interval = interval
        self._callback: Optional[FrameCallback] = None

    def _fire(self, delta_time: float):
        callback, self._callback = self._callback, None
        if callback is not None:
            callback()

    def request(self, callback: FrameCallback) -> None:
        self._callback = callback
        arcade.unschedule(self._fire)
        arcade.schedule_once(self._fire, self.interval)

    def cancel(self) -> None:
        self._callback = None
        arcade.unschedule(self._fire)


class SnapshotWindow(arcade.Window):
    """Draws FrameSnapshots; knows nothing about the session that produced them"""

    def __init__(self, width: int, height: int, title: str = "Dark Horizon"):
        super().__init__(width, height, title, resizable=True)
        self._snapshot: Optional[FrameSnapshot] = None

        # Colors
        self.BG = (10, 10, 16)
        self.PLAYER_C = (221, 221, 221)
        self.COCKPIT_C = (178, 0, 0)
        self.ASTEROID_C = (90, 90, 90)
        self.ASTEROID_EDGE_C = (34, 34, 34)
        self.STAR_C = (255, 215, 0)
        self.BULLET_C = (255, 107, 107)
        self.FLASH_C = (255, 200, 100)
        self.HUD_C = (230, 230, 230)

    # ----------------------------
    # Render collaborator
    # ----------------------------

    def draw(self, snapshot: FrameSnapshot):
        self._snapshot = snapshot

    def show(self, snapshot: FrameSnapshot):
        """Draw one snapshot immediately (used when something else drives the loop)"""
        self._snapshot = snapshot
        self.dispatch_events()
        self.on_draw()
        self.flip()

    # ----------------------------
    # Drawing
    # ----------------------------

    def _y(self, y: float) -> float:
        # snapshots are y-down, arcade is y-up
        return self.height - y

    def on_draw(self):
        self.clear()
        arcade.set_background_color(self.BG)
        snap = self._snapshot
        if snap is None:
            return

        self._draw_backdrop(snap)

        for x, y, w, h in snap.asteroids:
            cx, cy = x + w / 2, self._y(y + h / 2)
            arcade.draw_circle_filled(cx, cy, w / 2, self.ASTEROID_C)
            arcade.draw_circle_outline(cx, cy, w / 2, self.ASTEROID_EDGE_C, 2)

        for x, y, w, h in snap.bullets:
            arcade.draw_lrbt_rectangle_filled(x, x + w, self._y(y + h), self._y(y), self.BULLET_C)

        for x, y, w, h in snap.stars:
            pulse = math.sin(snap.frame * 0.01) * 0.2 + 0.8
            self._draw_star(x + w / 2, self._y(y + h / 2), w / 2 * pulse)

        for cx, cy, radius, alpha in snap.flashes:
            arcade.draw_circle_filled(cx, self._y(cy), radius, (*self.FLASH_C, int(alpha * 200)))

        for x, y, size, alpha, color in snap.particles:
            arcade.draw_circle_filled(x, self._y(y), size, (*color, int(alpha * 255)))

        self._draw_player(snap)

        for x, y, size, alpha, color in snap.trail:
            arcade.draw_circle_filled(x, self._y(y), size, (*color, int(alpha * 200)))

        self._draw_hud(snap)

    def _draw_backdrop(self, snap: FrameSnapshot):
        for x, y, r, color in snap.nebulae:
            arcade.draw_circle_filled(x, self._y(y), r, (*color, 20))
        for x, y, size, alpha in snap.field_stars:
            arcade.draw_lrbt_rectangle_filled(
                x, x + size, self._y(y + size), self._y(y), (255, 255, 255, int(alpha * 255))
            )

    def _draw_star(self, cx: float, cy: float, size: float):
        points = []
        for i in range(10):
            r = size if i % 2 == 0 else size * 0.4
            angle = math.pi / 2 + i * math.pi / 5
            points.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
        arcade.draw_polygon_filled(points, self.STAR_C)

    def _draw_player(self, snap: FrameSnapshot):
        x, y, w, h = snap.player
        top, bottom = self._y(y), self._y(y + h)
        cx = x + w / 2
        hull = [
            (cx, top),
            (x - 10, top - h * 0.55),
            (x + w * 0.25, bottom),
            (cx, bottom + h * 0.05),
            (x + w * 0.75, bottom),
            (x + w + 10, top - h * 0.55),
        ]
        arcade.draw_polygon_filled(hull, self.PLAYER_C)
        arcade.draw_ellipse_filled(cx, top - h * 0.32, 8, 6, self.COCKPIT_C)

    def _draw_hud(self, snap: FrameSnapshot):
        arcade.draw_text(f"Score: {snap.score}", 12, self.height - 28, self.HUD_C, 16)
        arcade.draw_text(f"High: {snap.high_score}", 12, self.height - 50, self.HUD_C, 14)

        if snap.state is GameState.PAUSED:
            arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, (0, 0, 0, 140))
            arcade.draw_text("PAUSED", self.width / 2, self.height / 2, self.HUD_C, 36,
                             anchor_x="center", anchor_y="center")
        elif snap.state is GameState.GAME_OVER:
            arcade.draw_text("GAME OVER", self.width / 2, self.height / 2 + 30, self.HUD_C, 36,
                             anchor_x="center", anchor_y="center")
            arcade.draw_text(f"Final score: {snap.score}  -  Enter to restart",
                             self.width / 2, self.height / 2 - 20, self.HUD_C, 16,
                             anchor_x="center", anchor_y="center")
        elif snap.state is GameState.IDLE:
            arcade.draw_text("DARK HORIZON  -  Enter to start", self.width / 2, self.height / 2,
                             self.HUD_C, 24, anchor_x="center", anchor_y="center")


class HorizonWindow(SnapshotWindow):
    """Playable window: feeds input into the session and renders what it produces"""

    def __init__(self, session: GameSession, title: str = "Dark Horizon"):
        super().__init__(int(session.width), int(session.height), title)
        self.session = session
        session.renderer = self
        self._snapshot = session.snapshot()

    def on_key_press(self, symbol: int, modifiers: int):
        session = self.session
        if symbol in KEY_NAMES:
            session.input.press(KEY_NAMES[symbol])
        elif symbol in (arcade.key.ENTER, arcade.key.RETURN):
            if not session.running:
                session.start()
            elif session.paused:
                session.input.trigger(PAUSE)
        elif symbol == arcade.key.SPACE:
            if session.running:
                session.input.trigger(SHOOT)
            else:
                session.start()
        elif symbol in (arcade.key.ESCAPE, arcade.key.P):
            if session.running:
                session.input.trigger(PAUSE)
        elif symbol == arcade.key.R and session.running:
            session.input.trigger(START)

    def on_key_release(self, symbol: int, modifiers: int):
        if symbol in KEY_NAMES:
            self.session.input.release(KEY_NAMES[symbol])

    def on_mouse_motion(self, x: int, y: int, dx: int, dy: int):
        self.session.input.move_pointer(x, self._y(y))

    def on_mouse_press(self, x: int, y: int, button: int, modifiers: int):
        if self.session.running:
            self.session.input.trigger(SHOOT)

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        self.session.resize(width, height)
        if not self.session.running:
            self._snapshot = self.session.snapshot()

    def on_close(self):
        self.session.stop()
        super().on_close()
