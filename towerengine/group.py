"""A container that forwards frame and input events to its children."""

from __future__ import annotations

from typing import Any, List, Optional

from .control import Control
from .gameobject import GameObject


def _index_of(items: List[Any], item: Any) -> int:
    """Return the position of ``item`` in ``items`` by identity."""
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    raise ValueError(f"{item!r} is not in this group")


class Group(GameObject, Control):
    """Holds game objects and controls and passes events on to them.

    Objects are updated and drawn in the order they were added; only visible
    objects take part. Input events go to every control in order. Children
    may remove themselves, or be removed, while an event is being passed on.
    """

    def __init__(self) -> None:
        super().__init__()
        self._objects: List[GameObject] = []
        self._controls: List[Control] = []

    def clear(self) -> None:
        """Remove every object and control."""
        self._objects.clear()
        self._controls.clear()

    def update(self, delta_time: float) -> None:
        """Update every visible object by ``delta_time`` seconds."""
        for obj in list(self._objects):
            if obj.visible:
                obj.update(delta_time)

    def draw(self, surface: Any) -> None:
        """Draw every visible object onto ``surface``."""
        for obj in list(self._objects):
            if obj.visible:
                obj.draw(surface)

    def on_key_down(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_down(key_code)

    def on_key_up(self, key_code: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_key_up(key_code)

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_down(button, mx, my)

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_up(button, mx, my)

    def on_mouse_move(self, mx: int, my: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_move(mx, my)

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        for ctrl in list(self._controls):
            ctrl.on_mouse_scroll(mx, my, delta)

    def add_object(self, obj: GameObject) -> None:
        """Append ``obj`` after all existing objects."""
        self._objects.append(obj)

    def insert_object(self, obj: GameObject, before: Optional[GameObject] = None) -> None:
        """Insert ``obj`` just before ``before``, or at the end when ``before`` is None.

        Raises ValueError if ``before`` is not in this group.
        """
        if before is None:
            self._objects.append(obj)
            return
        self._objects.insert(_index_of(self._objects, before), obj)

    def add_control(self, ctrl: Control) -> None:
        """Append ``ctrl`` after all existing controls."""
        self._controls.append(ctrl)

    def add_control_object(self, ctrl: Control) -> None:
        """Add something that is both a control and an object to both lists.

        Raises TypeError if ``ctrl`` is not both a Control and a GameObject.
        """
        if not isinstance(ctrl, GameObject) or not isinstance(ctrl, Control):
            raise TypeError("The control must inherit both GameObject and Control.")
        self._objects.append(ctrl)
        self._controls.append(ctrl)

    def remove_object(self, obj: GameObject) -> None:
        """Remove ``obj``; raises ValueError if it is not in this group."""
        del self._objects[_index_of(self._objects, obj)]

    def remove_control(self, ctrl: Control) -> None:
        """Remove ``ctrl``; raises ValueError if it is not in this group."""
        del self._controls[_index_of(self._controls, ctrl)]

    def remove_control_object(self, ctrl: Control, obj: Optional[GameObject] = None) -> None:
        """Remove ``ctrl`` from the controls and ``obj`` (default ``ctrl``) from the objects."""
        self.remove_control(ctrl)
        self.remove_object(ctrl if obj is None else obj)

    def objects(self) -> List[GameObject]:
        """Return a new list of all objects, in order."""
        return list(self._objects)

    def controls(self) -> List[Control]:
        """Return a new list of all controls, in order."""
        return list(self._controls)