"""Clip engine configuration settings."""

import os
from functools import cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, model_validator

from cliptrack.common.base_cliptrack_model import BaseCliptrackModel

# Load .env file from project root
_project_dir = Path(__file__).parent.parent.parent
load_dotenv(_project_dir / ".env")


class EngineConfig(BaseCliptrackModel):
    """Tunable limits of the clip engine."""

    # Shortest clip an edit may leave behind (seconds)
    min_clip_duration: float = Field(default=0.1, gt=0)

    # Split points closer than this to a clip edge are rejected (seconds)
    split_margin: float = Field(default=0.1, ge=0)

    # Distance within which a drag is attracted to a snap point (seconds)
    snap_threshold: float = Field(default=0.2, ge=0)

    # Zoom limits in pixels per second
    zoom_min: float = Field(default=5.0, gt=0)
    zoom_max: float = Field(default=400.0, gt=0)
    default_zoom: float = Field(default=50.0, gt=0)

    @model_validator(mode="after")
    def _check_zoom_range(self) -> "EngineConfig":
        if self.zoom_min > self.zoom_max:
            msg = f"zoom_min ({self.zoom_min}) must not exceed zoom_max ({self.zoom_max})"
            raise ValueError(msg)
        return self

    @model_validator(mode="after")
    def _check_split_margin(self) -> "EngineConfig":
        # Both halves of a split must be a legal clip
        if self.split_margin < self.min_clip_duration:
            msg = (
                f"split_margin ({self.split_margin}) must not be below "
                f"min_clip_duration ({self.min_clip_duration})"
            )
            raise ValueError(msg)
        return self


_ENV_FIELDS = {
    "CLIPTRACK_MIN_CLIP_DURATION": "min_clip_duration",
    "CLIPTRACK_SPLIT_MARGIN": "split_margin",
    "CLIPTRACK_SNAP_THRESHOLD": "snap_threshold",
    "CLIPTRACK_ZOOM_MIN": "zoom_min",
    "CLIPTRACK_ZOOM_MAX": "zoom_max",
    "CLIPTRACK_DEFAULT_ZOOM": "default_zoom",
}


def load_engine_config() -> EngineConfig:
    """Build the engine configuration from environment variables.

    Environment variables (all optional, seconds or pixels per second):
        CLIPTRACK_MIN_CLIP_DURATION: Minimum clip duration (default: 0.1)
        CLIPTRACK_SPLIT_MARGIN: Split edge margin (default: 0.1)
        CLIPTRACK_SNAP_THRESHOLD: Snap attraction distance (default: 0.2)
        CLIPTRACK_ZOOM_MIN: Lowest zoom (default: 5)
        CLIPTRACK_ZOOM_MAX: Highest zoom (default: 400)
        CLIPTRACK_DEFAULT_ZOOM: Zoom used when no viewport is known (default: 50)
    """
    overrides: dict[str, float] = {}
    for env_name, field_name in _ENV_FIELDS.items():
        raw = os.environ.get(env_name, "").strip()
        if not raw:
            continue
        try:
            overrides[field_name] = float(raw)
        except ValueError as e:
            msg = f"{env_name} must be a number, got {raw!r}"
            raise ValueError(msg) from e

    return EngineConfig(**overrides)


@cache
def get_engine_config() -> EngineConfig:
    """Provide the cached process-wide engine configuration."""
    return load_engine_config()
