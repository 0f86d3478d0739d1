"""Base class for game scenes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .group import Group

BACKGROUND = (0, 0, 0)


class Scene(Group, ABC):
    """A group that the engine makes active.

    Setup belongs in ``initialize`` and teardown in ``terminate`` rather than
    in the constructor, so a scene can be entered and left many times.
    """

    @abstractmethod
    def initialize(self) -> None:
        """Build the scene's contents when it becomes active."""

    def terminate(self) -> None:
        """Tear the scene down when it stops being active; removes all children."""
        self.clear()

    def draw(self, surface: Any) -> None:
        """Clear ``surface`` to black, then draw every visible object."""
        surface.fill(BACKGROUND)
        super().draw(surface)