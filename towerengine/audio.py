"""Helpers for playing sound effects, background music and sample instances."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import pygame

from .errors import EngineError
from .logger import LogType, log
from .resources import Resources


@dataclass
class VolumeSettings:
    """Volumes applied to background music and sound effects."""

    bgm: float = 1.0
    sfx: float = 1.0


settings = VolumeSettings()


def _play_once_or_loop(audio: str, loops: int, volume: float, kind: str) -> Optional[pygame.mixer.Channel]:
    sample = Resources.get_instance().get_sample(audio)
    channel = sample.play(loops=loops)
    if channel is None:
        log(LogType.INFO, f"failed to play audio ({kind})")
    else:
        channel.set_volume(min(volume, 1.0))
        log(LogType.VERBOSE, f"played audio ({kind})")
    return channel


def play_audio(audio: str) -> Optional[pygame.mixer.Channel]:
    """Play a sound effect once at the effect volume; return its channel."""
    return _play_once_or_loop(audio, 0, settings.sfx, "once")


def play_bgm(audio: str) -> Optional[pygame.mixer.Channel]:
    """Play background music in a loop at the music volume; return its channel."""
    return _play_once_or_loop(audio, -1, settings.bgm, "bgm")


def stop_bgm(channel: Optional[pygame.mixer.Channel]) -> None:
    """Stop music started with :func:`play_bgm`."""
    if channel is not None:
        channel.stop()
    log(LogType.INFO, "stopped audio (bgm)")


def change_sample_volume(sample: Any, volume: float) -> None:
    """Set the gain of a sample instance."""
    if not sample.set_gain(volume):
        raise EngineError(f"failed to change sample volume to {volume:f}")


def change_sample_position(sample: Any, position: float) -> None:
    """Move a sample instance to ``position`` seconds."""
    index = int(sample.frequency * position)
    if not sample.set_position(index):
        raise EngineError(f"failed to change sample position to {position:f} s")


def play_sample(audio: str, loop: bool = False, volume: float = 1, position: float = 0) -> Any:
    """Create and play a new instance of ``audio``; return the instance."""
    instance = Resources.get_instance().get_sample_instance(audio)
    instance.loop = loop
    if volume != 1:
        change_sample_volume(instance, volume)
    if position != 0:
        change_sample_position(instance, position)
    if not instance.play():
        log(LogType.INFO, "failed to play audio (sample)")
    else:
        log(LogType.VERBOSE, "played audio (sample)")
    return instance


def get_sample_length(sample: Any) -> int:
    """Return the whole number of seconds a sample instance lasts."""
    return sample.length // sample.frequency


def stop_sample(sample: Any) -> None:
    """Stop a sample instance if it is playing."""
    if not sample.playing:
        return
    if not sample.stop():
        log(LogType.INFO, "failed to stop audio (sample)")
    else:
        log(LogType.INFO, "stopped audio (sample)")