"""Exceptions raised by the engine."""

from __future__ import annotations


class EngineError(RuntimeError):
    """Raised when the multimedia backend fails to load or control a resource."""