"""Ruler schemas."""

from enum import StrEnum, auto

from cliptrack.common.base_cliptrack_model import BaseCliptrackModel


class TimeFormat(StrEnum):
    """How ruler labels are written."""

    SECONDS = auto()  # 0, 5, 10
    MINUTES = auto()  # 1:00, 2:30
    HOURS = auto()  # 1:00:00


class ScaleConfig(BaseCliptrackModel):
    """One ruler granularity."""

    # Seconds between major ticks
    scale: float
    # Minor subdivisions per major interval
    split_count: int
    time_format: TimeFormat
    # Major ticks closer than this many pixels are unreadable
    min_pixels_per_major: float

    @property
    def minor_interval(self) -> float:
        """Seconds between minor ticks."""
        return self.scale / self.split_count


class RulerTick(BaseCliptrackModel):
    """A tick mark on the ruler."""

    time: float
    is_major: bool
    label: str | None = None
