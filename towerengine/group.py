"""Containers of objects and controls, and the scene base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, TypeVar

import pygame

from .objects import Control, GameObject

_T = TypeVar("_T")


def _index_of(items: list[_T], item: _T) -> int:
    for index, candidate in enumerate(items):
        if candidate is item:
            return index
    raise ValueError(f"{item!r} is not in the group")


def _contains(items: list[_T], item: _T) -> bool:
    return any(candidate is item for candidate in items)


class Group(GameObject, Control):
    """An object and control that delegates to the objects and controls it holds."""

    def __init__(self) -> None:
        GameObject.__init__(self)
        self._objects: list[GameObject] = []
        self._controls: list[Control] = []

    def clear(self) -> None:
        """Remove every object and control."""
        self._objects.clear()
        self._controls.clear()

    def update(self, delta_time: float) -> None:
        """Update every visible object; objects may remove themselves while updating."""
        for obj in list(self._objects):
            if obj.visible and _contains(self._objects, obj):
                obj.update(delta_time)

    def draw(self) -> None:
        """Draw every visible object in order."""
        for obj in self._objects:
            if obj.visible:
                obj.draw()

    def _live_controls(self):
        return (ctrl for ctrl in list(self._controls) if _contains(self._controls, ctrl))

    def on_key_down(self, key_code: int) -> None:
        for ctrl in self._live_controls():
            ctrl.on_key_down(key_code)

    def on_key_up(self, key_code: int) -> None:
        for ctrl in self._live_controls():
            ctrl.on_key_up(key_code)

    def on_mouse_down(self, button: int, mx: int, my: int) -> None:
        for ctrl in self._live_controls():
            ctrl.on_mouse_down(button, mx, my)

    def on_mouse_up(self, button: int, mx: int, my: int) -> None:
        for ctrl in self._live_controls():
            ctrl.on_mouse_up(button, mx, my)

    def on_mouse_move(self, mx: int, my: int) -> None:
        for ctrl in self._live_controls():
            ctrl.on_mouse_move(mx, my)

    def on_mouse_scroll(self, mx: int, my: int, delta: int) -> None:
        for ctrl in self._live_controls():
            ctrl.on_mouse_scroll(mx, my, delta)

    def add_object(self, obj: GameObject) -> GameObject:
        """Append an object and return it."""
        self._objects.append(obj)
        return obj

    def insert_object(self, obj: GameObject, before: Optional[GameObject]) -> GameObject:
        """Insert an object before ``before``, or at the end when ``before`` is None."""
        if before is None:
            self._objects.append(obj)
        else:
            self._objects.insert(_index_of(self._objects, before), obj)
        return obj

    def add_control(self, ctrl: Control) -> Control:
        """Append a control and return it."""
        self._controls.append(ctrl)
        return ctrl

    def add_control_object(self, ctrl: Control) -> Control:
        """Add something that is both a control and an object to both lists."""
        if not isinstance(ctrl, GameObject):
            raise ValueError("The control must inherit both GameObject and Control.")
        self._objects.append(ctrl)
        self._controls.append(ctrl)
        return ctrl

    def remove_object(self, obj: GameObject) -> None:
        """Remove an object; raise ValueError if it is not held."""
        del self._objects[_index_of(self._objects, obj)]

    def remove_control(self, ctrl: Control) -> None:
        """Remove a control; raise ValueError if it is not held."""
        del self._controls[_index_of(self._controls, ctrl)]

    def remove_control_object(self, ctrl: Control) -> None:
        """Remove something from both the control and the object lists."""
        self.remove_control(ctrl)
        self.remove_object(ctrl)  # type: ignore[arg-type]

    def objects(self) -> list[GameObject]:
        """Return the held objects in order."""
        return list(self._objects)

    def controls(self) -> list[Control]:
        """Return the held controls in order."""
        return list(self._controls)


class Scene(Group, ABC):
    """A group that is set up on entry and torn down on exit."""

    @abstractmethod
    def initialize(self) -> None:
        """Set the scene up; called each time the scene becomes active."""

    def terminate(self) -> None:
        """Tear the scene down; removes everything it holds."""
        self.clear()

    def draw(self) -> None:
        """Clear the display to black, then draw every visible object."""
        surface = pygame.display.get_surface() if pygame.display.get_init() else None
        if surface is not None:
            surface.fill((0, 0, 0))
        super().draw()