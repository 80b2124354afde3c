"""Caching loader for images, fonts and sounds."""

from __future__ import annotations

import sys
from typing import Any, ClassVar, Optional

import pygame

from .errors import EngineError
from .logger import LogType, log


def _frame_bytes() -> int:
    _, size, channels = pygame.mixer.get_init()
    return abs(size) // 8 * channels


class _SampleInstance:
    """An independently playable instance of a loaded sound."""

    def __init__(self, sample: pygame.mixer.Sound) -> None:
        self.sample = sample
        self.loop = False
        self.gain = 1.0
        self.position = 0
        self._sound = sample
        self._channel: Optional[pygame.mixer.Channel] = None

    @property
    def frequency(self) -> int:
        """Frames per second of the mixer output."""
        return pygame.mixer.get_init()[0]

    @property
    def length(self) -> int:
        """Length of the sound in frames."""
        return len(self.sample.get_raw()) // _frame_bytes()

    @property
    def playing(self) -> bool:
        channel = self._channel
        return (
            channel is not None
            and channel.get_busy()
            and channel.get_sound() is self._sound
        )

    def set_gain(self, gain: float) -> bool:
        if gain < 0:
            return False
        self.gain = gain
        if self.playing:
            self._channel.set_volume(min(gain, 1.0))
        return True

    def set_position(self, frame: int) -> bool:
        if frame < 0 or frame > self.length:
            return False
        self.position = frame
        return True

    def play(self) -> bool:
        if self.position == 0:
            sound = self.sample
        else:
            raw = self.sample.get_raw()
            sound = pygame.mixer.Sound(buffer=raw[self.position * _frame_bytes():])
        self._sound = sound
        self._channel = sound.play(loops=-1 if self.loop else 0)
        if self._channel is None:
            return False
        self._channel.set_volume(min(self.gain, 1.0))
        return True

    def stop(self) -> bool:
        if self._channel is None:
            return False
        self._channel.stop()
        return True


def _unused(table: dict, key: str) -> bool:
    # The table entry and the call argument are the only references left.
    return sys.getrefcount(table[key]) <= 2


class Resources:
    """Loads resources on demand and keeps them cached until released."""

    _instance: ClassVar[Optional["Resources"]] = None

    def __init__(
        self,
        bitmap_prefix: str = "Resource/images/",
        font_prefix: str = "Resource/fonts/",
        sample_prefix: str = "Resource/audios/",
    ) -> None:
        self.bitmap_prefix = bitmap_prefix
        self.font_prefix = font_prefix
        self.sample_prefix = sample_prefix
        self._bitmaps: dict[str, pygame.Surface] = {}
        self._fonts: dict[str, pygame.font.Font] = {}
        self._samples: dict[str, pygame.mixer.Sound] = {}
        self._sample_instance_pairs: dict[str, tuple[_SampleInstance, pygame.mixer.Sound]] = {}

    def release_unused(self) -> None:
        """Drop every cached resource that nothing outside the cache refers to."""
        for key in list(self._bitmaps):
            if _unused(self._bitmaps, key):
                log(LogType.INFO, "Destroyed Resource<image>: ", key)
                del self._bitmaps[key]
        for key in list(self._fonts):
            if _unused(self._fonts, key):
                log(LogType.INFO, "Destroyed Resource<font>: ", key)
                del self._fonts[key]
        for key in list(self._sample_instance_pairs):
            if sys.getrefcount(self._sample_instance_pairs[key][0]) <= 2:
                log(LogType.INFO, "Destroyed<sample_instance>: ", key)
                del self._sample_instance_pairs[key]
        for key in list(self._samples):
            if _unused(self._samples, key):
                log(LogType.INFO, "Destroyed Resource<audio>: ", key)
                del self._samples[key]

    def _load_image(self, path: str) -> pygame.Surface:
        try:
            image = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise EngineError(f"failed to load image: {path}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            image = image.convert_alpha()
        return image

    def get_bitmap(self, name: str, width: Optional[int] = None, height: Optional[int] = None) -> pygame.Surface:
        """Return the image ``name``, scaled to ``width`` x ``height`` when both are given."""
        if width is None or height is None:
            if name in self._bitmaps:
                return self._bitmaps[name]
            path = self.bitmap_prefix + name
            image = self._load_image(path)
            log(LogType.INFO, "Loaded Resource<image>: ", path)
            self._bitmaps[name] = image
            return image

        key = f"{name}?{width}x{height}"
        if key in self._bitmaps:
            return self._bitmaps[key]
        path = self.bitmap_prefix + name
        image = self._load_image(path)
        try:
            resized = pygame.transform.smoothscale(image, (width, height))
        except ValueError:
            resized = pygame.transform.scale(image, (width, height))
        except pygame.error as exc:
            raise EngineError(f"failed to create bitmap when creating resized image: {path}") from exc
        log(LogType.INFO, "Loaded Resource<image>: ", path, " scaled to ", width, "x", height)
        self._bitmaps[key] = resized
        return resized

    def get_font(self, name: str, font_size: int) -> pygame.font.Font:
        """Return the font ``name`` at ``font_size``."""
        key = f"{name}?{font_size}"
        if key in self._fonts:
            return self._fonts[key]
        path = self.font_prefix + name
        try:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(path, font_size)
        except (pygame.error, OSError) as exc:
            raise EngineError(f"failed to load font: {path}") from exc
        log(LogType.INFO, "Loaded Resource<font>: ", path, " with size ", font_size)
        self._fonts[key] = font
        return font

    def get_sample(self, name: str) -> pygame.mixer.Sound:
        """Return the sound ``name``."""
        if name in self._samples:
            return self._samples[name]
        path = self.sample_prefix + name
        try:
            sample = pygame.mixer.Sound(path)
        except (pygame.error, OSError) as exc:
            raise EngineError(f"failed to load audio: {path}") from exc
        log(LogType.INFO, "Loaded Resource<audio>: ", path)
        self._samples[name] = sample
        return sample

    def get_sample_instance(self, name: str) -> Any:
        """Return a new playable instance of the sound ``name``."""
        sample = self.get_sample(name)
        instance = _SampleInstance(sample)
        log(LogType.INFO, "Created<sample_instance>: ", self.sample_prefix + name)
        self._sample_instance_pairs[name] = (instance, sample)
        return instance

    @classmethod
    def get_instance(cls) -> "Resources":
        """Return the shared instance, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance