"""The single game engine that owns the window, scenes and main loop."""

from __future__ import annotations

import time
from typing import ClassVar, Optional

import pygame

from .errors import EngineError
from .group import Scene
from .logger import LogType, log
from .point import Point
from .resources import Resources

# Middle and right buttons are numbered the other way round by the backend.
_BUTTON_MAP = {1: 1, 2: 3, 3: 2}
_WHEEL_BUTTONS = {4, 5}


class GameEngine:
    """Runs the active scene: delegates update, draw and input events to it."""

    _instance: ClassVar[Optional["GameEngine"]] = None

    def __init__(self) -> None:
        self.fps = 60
        self.screen_w = 800
        self.screen_h = 600
        self.reserve_samples = 1000
        self.title = "Tower Defense"
        self.icon: Optional[str] = "icon.png"
        self.free_memory_on_scene_changed = False
        self.delta_time_threshold = 0.05
        self._scenes: dict[str, Scene] = {}
        self._active_scene: Optional[Scene] = None
        self._next_scene = ""
        self._display: Optional[pygame.Surface] = None
        self._icon_ref: Optional[pygame.Surface] = None
        self._mouse = (0, 0)

    def _init_backend(self) -> None:
        if pygame.init()[1] and not pygame.display.get_init():
            raise EngineError("failed to initialize display")
        try:
            pygame.font.init()
        except pygame.error as exc:
            raise EngineError("failed to initialize font add-on") from exc
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.set_num_channels(self.reserve_samples)
        except pygame.error as exc:
            raise EngineError("failed to initialize audio add-on") from exc
        try:
            self._display = pygame.display.set_mode((self.screen_w, self.screen_h))
        except pygame.error as exc:
            raise EngineError("failed to create display") from exc
        pygame.display.set_caption(self.title)
        if self.icon:
            self._icon_ref = Resources.get_instance().get_bitmap(self.icon)
            pygame.display.set_icon(self._icon_ref)
            log(LogType.INFO, "Loaded window icon from: ", self.icon)
        log(LogType.INFO, "There are total ", 3, " supported mouse buttons")

    def _dispatch(self, event: pygame.event.Event) -> bool:
        """Forward one input event to the active scene; return True on window close."""
        scene = self._active_scene
        if event.type == pygame.QUIT:
            log(LogType.VERBOSE, "Window close button clicked")
            return True
        if scene is None:
            return False
        if event.type == pygame.KEYDOWN:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " down")
            scene.on_key_down(event.key)
        elif event.type == pygame.KEYUP:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " up")
            scene.on_key_up(event.key)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if event.button in _WHEEL_BUTTONS:
                return False
            button = _BUTTON_MAP.get(event.button, event.button)
            mx, my = event.pos
            self._mouse = (mx, my)
            if event.type == pygame.MOUSEBUTTONDOWN:
                log(LogType.VERBOSE, f"Mouse button {button} down at ({mx}, {my})")
                scene.on_mouse_down(button, mx, my)
            else:
                log(LogType.VERBOSE, f"Mouse button {button} up at ({mx}, {my})")
                scene.on_mouse_up(button, mx, my)
        elif event.type == pygame.MOUSEMOTION:
            mx, my = event.pos
            self._mouse = (mx, my)
            if tuple(event.rel) != (0, 0):
                log(LogType.VERBOSE, f"Mouse move to ({mx}, {my})")
                scene.on_mouse_move(mx, my)
        elif event.type == pygame.MOUSEWHEEL:
            mx, my = self._mouse
            if event.y != 0:
                log(LogType.VERBOSE, f"Mouse scroll at ({mx}, {my}) with delta {event.y}")
                scene.on_mouse_scroll(mx, my, event.y)
        elif event.type == pygame.WINDOWLEAVE:
            log(LogType.VERBOSE, "Mouse leave display.")
            scene.on_mouse_move(-1, -1)
        elif event.type == pygame.WINDOWENTER:
            log(LogType.VERBOSE, "Mouse enter display.")
        return False

    def _event_loop(self) -> None:
        clock = pygame.time.Clock()
        timestamp = time.perf_counter()
        while True:
            if any(self._dispatch(event) for event in pygame.event.get()):
                return
            now = time.perf_counter()
            elapsed, timestamp = now - timestamp, now
            self.update(elapsed)
            self.draw()
            clock.tick(self.fps)

    def _change_scene(self, name: str) -> None:
        if name not in self._scenes:
            raise ValueError("Cannot change to a unknown scene.")
        if self._active_scene is not None:
            self._active_scene.terminate()
        self._active_scene = self._scenes[name]
        if self.free_memory_on_scene_changed:
            Resources.get_instance().release_unused()
        self._active_scene.initialize()
        log(LogType.INFO, "Changed to ", name, " scene")

    def start(
        self,
        first_scene_name: str,
        fps: int = 60,
        screen_w: int = 800,
        screen_h: int = 600,
        reserve_samples: int = 1000,
        title: str = "Tower Defense",
        icon: Optional[str] = "icon.png",
        free_memory_on_scene_changed: bool = False,
        delta_time_threshold: float = 0.05,
    ) -> None:
        """Open the window and run the game until it is closed."""
        log(LogType.INFO, "Game Initializing...")
        self.fps = fps
        self.screen_w = screen_w
        self.screen_h = screen_h
        self.reserve_samples = reserve_samples
        self.title = title
        self.icon = icon
        self.free_memory_on_scene_changed = free_memory_on_scene_changed
        self.delta_time_threshold = delta_time_threshold
        if first_scene_name not in self._scenes:
            raise ValueError("The scene is not added yet.")
        self._active_scene = self._scenes[first_scene_name]
        try:
            self._init_backend()
            log(LogType.INFO, "Backend initialized")
            log(LogType.INFO, "Game begin")
            self._active_scene.initialize()
            log(LogType.INFO, "Game initialized")
            self.draw()
            log(LogType.INFO, "Game start event loop")
            self._event_loop()
            log(LogType.INFO, "Game Terminating...")
            self._active_scene.terminate()
            log(LogType.INFO, "Game terminated")
            log(LogType.INFO, "Game end")
        finally:
            self._display = None
            pygame.quit()

    def add_new_scene(self, name: str, scene: Scene) -> None:
        """Register a scene under a unique name."""
        if name in self._scenes:
            raise ValueError("Cannot add scenes with the same name.")
        self._scenes[name] = scene

    def change_scene(self, name: str) -> None:
        """Switch to the named scene at the next update."""
        self._next_scene = name

    def update(self, delta_time: float) -> None:
        """Apply a pending scene change and update the active scene."""
        if self._next_scene:
            name, self._next_scene = self._next_scene, ""
            self._change_scene(name)
        if delta_time >= self.delta_time_threshold:
            delta_time = self.delta_time_threshold
        if self._active_scene is not None:
            self._active_scene.update(delta_time)

    def draw(self) -> None:
        """Draw the active scene and present the frame."""
        if self._active_scene is not None:
            self._active_scene.draw()
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()

    def active_scene(self) -> Optional[Scene]:
        """Return the scene currently receiving updates and events."""
        return self._active_scene

    def get_scene(self, name: str) -> Scene:
        """Return the scene registered under ``name``."""
        if name not in self._scenes:
            raise ValueError("Cannot get scenes that aren't added.")
        return self._scenes[name]

    def screen_size(self) -> Point:
        """Return the window size as a point."""
        return Point(self.screen_w, self.screen_h)

    def screen_width(self) -> int:
        return self.screen_w

    def screen_height(self) -> int:
        return self.screen_h

    def mouse_position(self) -> Point:
        """Return the current mouse position in window coordinates."""
        x, y = pygame.mouse.get_pos()
        return Point(x, y)

    def is_key_down(self, key_code: int) -> bool:
        """Return whether the key is currently held down."""
        return bool(pygame.key.get_pressed()[key_code])

    @classmethod
    def get_instance(cls) -> "GameEngine":
        """Return the shared engine, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance