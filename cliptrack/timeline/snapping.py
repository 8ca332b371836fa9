"""Snap positions derived from a layer."""

from cliptrack.common.config import EngineConfig, get_engine_config
from cliptrack.common.tolerance import EPSILON
from cliptrack.timeline.schemas import Layer


def snap_points(layer: Layer) -> list[float]:
    """Return timeline zero and every clip edge, ascending and deduplicated.

    Edges closer than EPSILON count as one point.
    """
    candidates = [0.0]
    for clip in layer.clips:
        candidates.append(clip.start)
        candidates.append(clip.end)

    points: list[float] = []
    for value in sorted(candidates):
        if points and value - points[-1] <= EPSILON:
            continue
        points.append(value)
    return points


def find_snap_point(
    value: float,
    points: list[float],
    threshold: float | None = None,
    config: EngineConfig | None = None,
) -> float:
    """Attract a dragged time to the nearest snap point within the threshold.

    Args:
        value: The time proposed by the drag, in seconds.
        points: Candidate snap points (see `snap_points`).
        threshold: Attraction distance; defaults to the configured one.
        config: Engine limits; defaults to the process configuration.

    Returns:
        The nearest point within the threshold, otherwise `value` unchanged.
    """
    if threshold is None:
        threshold = (config or get_engine_config()).snap_threshold

    best = value
    best_distance = threshold
    for point in points:
        distance = abs(value - point)
        if distance < best_distance:
            best, best_distance = point, distance
    return best
