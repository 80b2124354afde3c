"""Core of a pygame 2D game engine: geometry, groups and scenes, resources, audio, logging and a score board."""

__version__ = "0.1.0"

__all__ = [
    "point",
    "collider",
    "logger",
    "scoreboard",
    "objects",
    "group",
    "errors",
    "resources",
    "audio",
    "game_engine",
]