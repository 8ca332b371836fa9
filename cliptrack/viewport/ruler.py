"""Ruler scale selection and tick layout."""

import math

from cliptrack.timeline.schemas import Layer
from cliptrack.viewport.schemas import RulerTick, ScaleConfig, TimeFormat

# The timeline always shows at least this many seconds
TIMELINE_MIN_DURATION = 60.0
# Extra seconds drawn past the end of the timeline
TIMELINE_PADDING = 12.0


def _preset(scale: float, split_count: int, time_format: TimeFormat, min_pixels: float) -> ScaleConfig:
    return ScaleConfig(
        scale=scale,
        split_count=split_count,
        time_format=time_format,
        min_pixels_per_major=min_pixels,
    )


# Ordered from finest to coarsest
SCALE_PRESETS: list[ScaleConfig] = [
    _preset(1, 2, TimeFormat.SECONDS, 40),
    _preset(1, 4, TimeFormat.SECONDS, 60),
    _preset(2, 4, TimeFormat.SECONDS, 50),
    _preset(5, 5, TimeFormat.SECONDS, 60),
    _preset(10, 5, TimeFormat.SECONDS, 70),
    _preset(10, 10, TimeFormat.SECONDS, 100),
    _preset(30, 6, TimeFormat.MINUTES, 80),
    _preset(60, 6, TimeFormat.MINUTES, 80),
    _preset(60, 12, TimeFormat.MINUTES, 120),
    _preset(120, 4, TimeFormat.MINUTES, 80),
    _preset(300, 5, TimeFormat.MINUTES, 80),
    _preset(600, 5, TimeFormat.MINUTES, 80),
    _preset(600, 10, TimeFormat.MINUTES, 120),
    _preset(1800, 6, TimeFormat.MINUTES, 80),
    _preset(3600, 6, TimeFormat.HOURS, 80),
    _preset(3600, 12, TimeFormat.HOURS, 120),
    _preset(7200, 4, TimeFormat.HOURS, 80),
    _preset(14400, 4, TimeFormat.HOURS, 80),
    _preset(36000, 5, TimeFormat.HOURS, 80),
]


def optimal_scale(zoom: float) -> ScaleConfig:
    """Return the finest preset whose major ticks are far enough apart at `zoom`."""
    for preset in SCALE_PRESETS:
        if preset.scale * zoom >= preset.min_pixels_per_major:
            return preset
    return SCALE_PRESETS[-1]


def format_time_label(seconds: float, time_format: TimeFormat) -> str:
    """Format a ruler label: `5`, `1:05` or `1:01:05`."""
    if time_format == TimeFormat.SECONDS:
        return str(math.floor(seconds + 0.5))

    total = math.floor(seconds)
    if time_format == TimeFormat.MINUTES:
        return f"{total // 60}:{total % 60:02d}"

    return f"{total // 3600}:{total % 3600 // 60:02d}:{total % 60:02d}"


def timeline_extent(layer: Layer, media_duration: float = 0.0) -> float:
    """Return how many seconds the timeline area spans."""
    return max(media_duration, layer.end_time, TIMELINE_MIN_DURATION)


def ruler_ticks(
    extent: float,
    zoom: float,
    padding: float = TIMELINE_PADDING,
) -> list[RulerTick]:
    """Lay out the ticks of a ruler covering `extent` seconds plus padding.

    Args:
        extent: Seconds of timeline to cover (see `timeline_extent`).
        zoom: Pixels per second.
        padding: Extra seconds drawn past the extent.

    Returns:
        Ticks in ascending time; major ticks carry a label.
    """
    config = optimal_scale(zoom)
    total = extent + padding
    minor = config.minor_interval
    count = math.floor(total / minor + 1e-9)

    ticks: list[RulerTick] = []
    for i in range(count + 1):
        time = round(i * minor, 3)
        is_major = i % config.split_count == 0
        label = format_time_label(time, config.time_format) if is_major else None
        ticks.append(RulerTick(time=time, is_major=is_major, label=label))
    return ticks
