"""Viewport schemas."""

from cliptrack.viewport.schemas.ruler import RulerTick, ScaleConfig, TimeFormat

__all__ = [
    "RulerTick",
    "ScaleConfig",
    "TimeFormat",
]
