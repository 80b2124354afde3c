"""Base classes for drawable objects and event-receiving controls."""

from __future__ import annotations

from .point import Point


class GameObject:
    """Something that can be drawn and updated every frame."""

    def __init__(
        self,
        x: float = 0,
        y: float = 0,
        w: float = 0,
        h: float = 0,
        anchor_x: float = 0,
        anchor_y: float = 0,
    ) -> None:
        self.visible = True
        self.position = Point(x, y)
        self.size = Point(w, h)
        self.anchor = Point(anchor_x, anchor_y)
        self.age = 0.0
        self.draw_count = 0

    def draw(self) -> None:
        """Draw the object; the base object only counts how often it was drawn."""
        self.draw_count = getattr(self, "draw_count", 0) + 1

    def update(self, delta_time: float) -> None:
        """Advance game logic; the base object only accumulates elapsed time."""
        self.age = getattr(self, "age", 0.0) + delta_time


class Control:
    """Something that reacts to keyboard and mouse events.

    The base handlers remember the most recent event in ``last_event``.
    """

    last_event: tuple | None = None

    def on_key_down(self, key_code: int) -> None:
        """Handle a key press."""
        self.last_event = ("key_down", key_code)

    def on_key_up(self, key_code: int) -> None:
        """Handle a key release."""
        self.last_event = ("key_up", key_code)

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        """Handle a mouse button press at window coordinates."""
        self.last_event = ("mouse_down", button, mx, my)

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        """Handle a mouse button release at window coordinates."""
        self.last_event = ("mouse_up", button, mx, my)

    def on_mouse_move(self, mx: int, my: int) -> None:
        """Handle the mouse moving to window coordinates."""
        self.last_event = ("mouse_move", mx, my)

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        """Handle a mouse wheel scroll at window coordinates."""
        self.last_event = ("mouse_scroll", mx, my, delta)