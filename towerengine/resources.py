"""Cached loading of images, fonts and sounds."""

from __future__ import annotations

import functools
import weakref
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple

import pygame

from .errors import EngineError
from .log import LogType, log

IMAGE_DIR = "images"
FONT_DIR = "fonts"
AUDIO_DIR = "audios"

Loader = Callable[[str], Any]


def _load_image(path: str) -> Any:
    return pygame.image.load(path)


def _scale_image(surface: Any, size: Tuple[int, int]) -> Any:
    try:
        return pygame.transform.smoothscale(surface, size)
    except ValueError:
        # Smooth scaling needs 24 or 32 bit surfaces.
        return pygame.transform.scale(surface, size)


def _load_font(path: str, size: int) -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _load_sample(path: str) -> Any:
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(path)


def _make_instance(sample: Any) -> Any:
    from .audio import SampleInstance

    return SampleInstance(sample)


def _pop_unused(cache: Dict[str, Any], key: str) -> bool:
    """Drop ``cache[key]`` if nothing outside the cache refers to it."""
    value = cache.pop(key)
    try:
        ref = weakref.ref(value)
    except TypeError:
        cache[key] = value
        return False
    del value
    survivor = ref()
    if survivor is not None:
        cache[key] = survivor
        return False
    return True


def _pop_unused_pair(cache: Dict[str, Tuple[Any, Any]], key: str) -> bool:
    """Drop ``cache[key]`` if its instance is not referred to elsewhere."""
    instance, sample = cache.pop(key)
    try:
        ref = weakref.ref(instance)
    except TypeError:
        cache[key] = (instance, sample)
        return False
    del instance
    survivor = ref()
    if survivor is not None:
        cache[key] = (survivor, sample)
        return False
    return True


class Resources:
    """Loads images, fonts and sounds from a resource directory and caches them.

    Files are looked up under ``<root>/images``, ``<root>/fonts`` and
    ``<root>/audios``. Cached items stay loaded until ``release_unused`` finds
    that nothing but the cache still refers to them.
    """

    def __init__(
        self,
        root: Any = "Resource",
        *,
        image_loader: Loader = _load_image,
        image_scaler: Callable[[Any, Tuple[int, int]], Any] = _scale_image,
        font_loader: Callable[[str, int], Any] = _load_font,
        sample_loader: Loader = _load_sample,
        instance_factory: Callable[[Any], Any] = _make_instance,
    ) -> None:
        self.root = Path(root)
        self._image_loader = image_loader
        self._image_scaler = image_scaler
        self._font_loader = font_loader
        self._sample_loader = sample_loader
        self._instance_factory = instance_factory
        self._bitmaps: Dict[str, Any] = {}
        self._fonts: Dict[str, Any] = {}
        self._samples: Dict[str, Any] = {}
        self._sample_instances: Dict[str, Tuple[Any, Any]] = {}

    def _path(self, folder: str, name: str) -> str:
        return str(self.root / folder / name)

    @staticmethod
    def _load(loader: Callable[..., Any], message: str, path: str, *args: Any) -> Any:
        try:
            item = loader(path, *args)
        except EngineError:
            raise
        except Exception as exc:
            raise EngineError(f"{message}: {path}") from exc
        if item is None:
            raise EngineError(f"{message}: {path}")
        return item

    def release_unused(self) -> None:
        """Forget every cached item that nothing else refers to any more."""
        for key in list(self._bitmaps):
            if _pop_unused(self._bitmaps, key):
                log(LogType.INFO, "Destroyed Resource<image>: ", key)
        for key in list(self._fonts):
            if _pop_unused(self._fonts, key):
                log(LogType.INFO, "Destroyed Resource<font>: ", key)
        for key in list(self._sample_instances):
            if _pop_unused_pair(self._sample_instances, key):
                log(LogType.INFO, "Destroyed<sample_instance>: ", key)
        for key in list(self._samples):
            if _pop_unused(self._samples, key):
                log(LogType.INFO, "Destroyed Resource<audio>: ", key)

    def get_bitmap(self, name: str, width: Optional[int] = None, height: Optional[int] = None) -> Any:
        """Return the image ``name``, resized to ``width`` x ``height`` if both are given.

        Raises EngineError if the image cannot be loaded or resized, and
        ValueError if only one of ``width`` and ``height`` is given.
        """
        if (width is None) != (height is None):
            raise ValueError("width and height must be given together")
        path = self._path(IMAGE_DIR, name)
        if width is None or height is None:
            if name in self._bitmaps:
                return self._bitmaps[name]
            bitmap = self._load(self._image_loader, "failed to load image", path)
            log(LogType.INFO, "Loaded Resource<image>: ", path)
            self._bitmaps[name] = bitmap
            return bitmap

        key = f"{name}?{width}x{height}"
        if key in self._bitmaps:
            return self._bitmaps[key]
        original = self._load(self._image_loader, "failed to load image", path)
        try:
            bitmap = self._image_scaler(original, (width, height))
        except Exception as exc:
            raise EngineError(f"failed to create bitmap when creating resized image: {path}") from exc
        if bitmap is None:
            raise EngineError(f"failed to create bitmap when creating resized image: {path}")
        log(LogType.INFO, "Loaded Resource<image>: ", path, " scaled to ", width, "x", height)
        self._bitmaps[key] = bitmap
        return bitmap

    def get_font(self, name: str, font_size: int) -> Any:
        """Return the font ``name`` at ``font_size``; raises EngineError on failure."""
        key = f"{name}?{font_size}"
        if key in self._fonts:
            return self._fonts[key]
        path = self._path(FONT_DIR, name)
        font = self._load(self._font_loader, "failed to load font", path, font_size)
        log(LogType.INFO, "Loaded Resource<font>: ", path, " with size ", font_size)
        self._fonts[key] = font
        return font

    def get_sample(self, name: str) -> Any:
        """Return the sound ``name``; raises EngineError on failure."""
        if name in self._samples:
            return self._samples[name]
        path = self._path(AUDIO_DIR, name)
        sample = self._load(self._sample_loader, "failed to load audio", path)
        log(LogType.INFO, "Loaded Resource<audio>: ", path)
        self._samples[name] = sample
        return sample

    def get_sample_instance(self, name: str) -> Any:
        """Return a new playable instance of the sound ``name``.

        The latest instance for each name is kept with its sound until
        released; raises EngineError if the instance cannot be created.
        """
        sample = self.get_sample(name)
        path = self._path(AUDIO_DIR, name)
        try:
            instance = self._instance_factory(sample)
        except Exception as exc:
            raise EngineError(f"failed to create sample instance: {path}") from exc
        if instance is None:
            raise EngineError(f"failed to create sample instance: {path}")
        log(LogType.INFO, "Created<sample_instance>: ", path)
        self._sample_instances[name] = (instance, sample)
        return instance


@functools.lru_cache(maxsize=None)
def get_resources() -> Resources:
    """Return the shared resource cache, creating it on first use."""
    return Resources()