"""The game engine: window, event loop and scene management."""

from __future__ import annotations

import functools
from typing import Any, Dict, Optional, Tuple

import pygame

from .errors import EngineError
from .log import LogType, log
from .point import Point
from .resources import Resources, get_resources
from .scene import Scene

DEFAULT_TITLE = "Tower Defense (I2P(II)_2025 Mini Project 2)"

# pygame numbers the middle and right buttons the other way round.
_BUTTON_MAP = {1: 1, 2: 3, 3: 2}
# Old-style wheel buttons; scrolling arrives as MOUSEWHEEL events instead.
_WHEEL_BUTTONS = {4, 5, 6, 7}


class GameEngine:
    """Owns the window, runs the event loop and drives the active scene.

    Scenes are registered by name with ``add_new_scene``. ``change_scene``
    only records the request; the switch happens at the start of the next
    ``update``, so a scene may ask to leave from inside its own handlers.
    """

    def __init__(self, surface: Any = None, resources: Optional[Resources] = None) -> None:
        self.fps = 60
        self.screen_w, self.screen_h = surface.get_size() if surface is not None else (0, 0)
        self.reserve_samples = 0
        self.title = DEFAULT_TITLE
        self.icon: Optional[str] = None
        self.free_memory_on_scene_changed = False
        self.delta_time_threshold = 0.05
        self._surface = surface
        self._resources = resources
        self._scenes: Dict[str, Scene] = {}
        self._active_scene: Optional[Scene] = None
        self._next_scene: Optional[str] = None
        self._mouse: Tuple[int, int] = (0, 0)

    @property
    def resources(self) -> Resources:
        """The resource cache used for the icon and for freeing memory."""
        if self._resources is None:
            self._resources = get_resources()
        return self._resources

    @property
    def active_scene(self) -> Optional[Scene]:
        """The scene that receives updates, drawing and input events."""
        return self._active_scene

    def _init_backend(self) -> None:
        pygame.init()
        try:
            self._surface = pygame.display.set_mode((self.screen_w, self.screen_h))
        except pygame.error as exc:
            raise EngineError("failed to create display") from exc
        pygame.display.set_caption(self.title)
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.set_num_channels(self.reserve_samples)
        except pygame.error as exc:
            raise EngineError("failed to initialize audio add-on") from exc
        if self.icon:
            pygame.display.set_icon(self.resources.get_bitmap(self.icon))
            log(LogType.INFO, "Loaded window icon from: ", self.icon)
        log(LogType.INFO, "There are total ", 3, " supported mouse buttons")

    def _run_loop(self) -> None:
        clock = pygame.time.Clock()
        clock.tick()
        running = True
        while running:
            elapsed_ms = clock.tick(self.fps)
            for event in pygame.event.get():
                if not self.dispatch(event):
                    running = False
            if not running:
                break
            self.update(elapsed_ms / 1000.0)
            self.draw()

    def _change_scene_now(self, name: str) -> None:
        if name not in self._scenes:
            raise ValueError("Cannot change to a unknown scene.")
        if self._active_scene is not None:
            self._active_scene.terminate()
        self._active_scene = self._scenes[name]
        if self.free_memory_on_scene_changed:
            self.resources.release_unused()
        self._active_scene.initialize()
        log(LogType.INFO, "Changed to ", name, " scene")

    def _require_scene(self) -> Scene:
        if self._active_scene is None:
            raise RuntimeError("There is no active scene.")
        return self._active_scene

    def start(
        self,
        first_scene_name: str,
        fps: int = 60,
        screen_w: int = 800,
        screen_h: int = 600,
        reserve_samples: int = 1000,
        title: str = DEFAULT_TITLE,
        icon: Optional[str] = "icon.png",
        free_memory_on_scene_changed: bool = False,
        delta_time_threshold: float = 0.05,
    ) -> None:
        """Open the window and run the game until it is closed.

        Raises ValueError if ``first_scene_name`` has not been added, and
        EngineError if the window or audio cannot be set up.
        """
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
            log(LogType.INFO, "Allegro5 initialized")
            log(LogType.INFO, "Game begin")
            self._active_scene.initialize()
            log(LogType.INFO, "Game initialized")
            self.draw()
            log(LogType.INFO, "Game start event loop")
            self._run_loop()
            log(LogType.INFO, "Game Terminating...")
            self._require_scene().terminate()
            log(LogType.INFO, "Game terminated")
            log(LogType.INFO, "Game end")
        finally:
            self._surface = None
            pygame.quit()

    def add_new_scene(self, name: str, scene: Scene) -> None:
        """Register ``scene`` under ``name``; raises ValueError if the name is taken."""
        if name in self._scenes:
            raise ValueError("Cannot add scenes with the same name.")
        self._scenes[name] = scene

    def change_scene(self, name: str) -> None:
        """Switch to the scene ``name`` at the next update."""
        self._next_scene = name

    def get_scene(self, name: str) -> Scene:
        """Return the scene registered as ``name``; raises ValueError if unknown."""
        if name not in self._scenes:
            raise ValueError("Cannot get scenes that aren't added.")
        return self._scenes[name]

    def update(self, delta_time: float) -> None:
        """Apply a pending scene change, then update the active scene.

        ``delta_time`` is capped at ``delta_time_threshold`` so that a slow
        frame cannot let fast objects pass through each other.
        """
        if self._next_scene:
            name, self._next_scene = self._next_scene, None
            self._change_scene_now(name)
        if delta_time >= self.delta_time_threshold:
            delta_time = self.delta_time_threshold
        self._require_scene().update(delta_time)

    def draw(self) -> None:
        """Draw the active scene onto the window and show it."""
        scene = self._require_scene()
        if self._surface is None:
            raise RuntimeError("There is no surface to draw on.")
        scene.draw(self._surface)
        if pygame.display.get_init() and pygame.display.get_surface() is self._surface:
            pygame.display.flip()

    def dispatch(self, event: Any) -> bool:
        """Pass one pygame event on to the active scene.

        Returns False when the event asks the game to close, True otherwise.
        Mouse buttons are numbered 1 left, 2 right, 3 middle.
        """
        kind = event.type
        if kind == pygame.QUIT:
            log(LogType.VERBOSE, "Window close button clicked")
            return False
        if kind == pygame.KEYDOWN:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " down")
            self._require_scene().on_key_down(event.key)
        elif kind == pygame.KEYUP:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " up")
            self._require_scene().on_key_up(event.key)
        elif kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            if event.button in _WHEEL_BUTTONS:
                return True
            mx, my = event.pos
            self._mouse = (mx, my)
            button = _BUTTON_MAP.get(event.button, event.button)
            scene = self._require_scene()
            if kind == pygame.MOUSEBUTTONDOWN:
                log(LogType.VERBOSE, "Mouse button ", button, " down at (", mx, ", ", my, ")")
                scene.on_mouse_down(button, mx, my)
            else:
                log(LogType.VERBOSE, "Mouse button ", button, " up at (", mx, ", ", my, ")")
                scene.on_mouse_up(button, mx, my)
        elif kind == pygame.MOUSEMOTION:
            mx, my = event.pos
            self._mouse = (mx, my)
            dx, dy = event.rel
            if dx != 0 or dy != 0:
                log(LogType.VERBOSE, "Mouse move to (", mx, ", ", my, ")")
                self._require_scene().on_mouse_move(mx, my)
        elif kind == pygame.MOUSEWHEEL:
            if event.y != 0:
                mx, my = self._mouse
                log(LogType.VERBOSE, "Mouse scroll at (", mx, ", ", my, ") with delta ", event.y)
                self._require_scene().on_mouse_scroll(mx, my, event.y)
        elif kind == getattr(pygame, "WINDOWLEAVE", None):
            log(LogType.VERBOSE, "Mouse leave display.")
            self._require_scene().on_mouse_move(-1, -1)
        elif kind == getattr(pygame, "WINDOWENTER", None):
            log(LogType.VERBOSE, "Mouse enter display.")
        return True

    def screen_size(self) -> Point:
        """Return the window size as a point (width, height)."""
        return Point(self.screen_w, self.screen_h)

    def mouse_position(self) -> Point:
        """Return the current mouse position in window coordinates."""
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            mx, my = pygame.mouse.get_pos()
        else:
            mx, my = self._mouse
        return Point(mx, my)

    def is_key_down(self, key_code: int) -> bool:
        """Return whether the key ``key_code`` is currently held down."""
        return bool(pygame.key.get_pressed()[key_code])


@functools.lru_cache(maxsize=None)
def get_engine() -> GameEngine:
    """Return the shared game engine, creating it on first use."""
    return GameEngine()