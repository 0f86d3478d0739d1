"""Base class for things that are drawn and updated each frame."""

from __future__ import annotations

from typing import Any

from .point import Point


class GameObject:
    """An object with a position, size and anchor that can be drawn and updated.

    The anchor gives the object's centre relative to its size: (0, 0) is the
    top-left corner and (1, 1) the bottom-right. A width or height of 0 means
    the original size of whatever the object shows.
    """

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

    def draw(self, surface: Any) -> None:
        """Draw onto ``surface``; the base object draws nothing."""

    def update(self, delta_time: float) -> None:
        """Advance game logic by ``delta_time`` seconds; the base object does nothing."""