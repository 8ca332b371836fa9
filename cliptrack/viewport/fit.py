"""Zoom level that fits a timeline duration into a viewport."""

import math

from cliptrack.common.config import EngineConfig, get_engine_config

# (upper duration bound in seconds, lowest zoom, highest zoom) in px/s.
# Short timelines need a dense ruler; long ones must compress or labels overlap.
FIT_BANDS: list[tuple[float, float, float]] = [
    (10.0, 100.0, 150.0),
    (60.0, 50.0, 100.0),
    (300.0, 30.0, 60.0),
    (900.0, 20.0, 40.0),
    (math.inf, 10.0, 25.0),
]


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def clamp_zoom(value: float, config: EngineConfig | None = None) -> float:
    """Clamp a zoom level to the configured range."""
    config = config or get_engine_config()
    return min(config.zoom_max, max(config.zoom_min, value))


def fit_zoom(
    duration: float,
    viewport_width_px: float,
    config: EngineConfig | None = None,
) -> int:
    """Pick a pixels-per-second zoom that shows `duration` in the viewport.

    Args:
        duration: Timeline duration in seconds (floored at one second).
        viewport_width_px: Visible width of the timeline in pixels.
        config: Engine limits; defaults to the process configuration.

    Returns:
        The zoom in whole pixels per second.
    """
    config = config or get_engine_config()
    if viewport_width_px <= 0:
        return _round_half_up(clamp_zoom(config.default_zoom, config))

    duration = max(duration, 1.0)
    zoom = viewport_width_px / duration
    for upper_bound, band_min, band_max in FIT_BANDS:
        if duration < upper_bound:
            zoom = min(band_max, max(band_min, zoom))
            break

    return _round_half_up(clamp_zoom(zoom, config))
