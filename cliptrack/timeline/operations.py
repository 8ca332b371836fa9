"""Edit operations on a layer.

Every operation takes the current Layer and a proposed change and returns a
new, normalized Layer. Inputs are never mutated; clips an edit does not touch
keep their values.
"""

import logging
from collections.abc import Callable, Iterable

from cliptrack.common.config import EngineConfig, get_engine_config
from cliptrack.common.tolerance import EPSILON, approx_equal
from cliptrack.timeline.errors import SplitRejectedError
from cliptrack.timeline.normalizer import normalize
from cliptrack.timeline.schemas import Clip, Layer, new_clip_id

logger = logging.getLogger(__name__)


def move_or_resize(
    layer: Layer,
    clip_id: str,
    start: float,
    duration: float | None = None,
    trim_start: float | None = None,
    trim_end: float | None = None,
) -> Layer:
    """Place a clip at a new start, optionally with new duration and trims.

    Neighbours are not adjusted; the normalizer closes whatever gap or overlap
    the change leaves.

    Args:
        layer: Current layer state.
        clip_id: The clip to change.
        start: New start time in seconds.
        duration: New duration, or None to keep the current one.
        trim_start: New start trim, or None to keep the current one.
        trim_end: New end trim, or None to keep the current one.

    Returns:
        The updated layer (the input layer when the clip is unknown).
    """
    index = layer.index_of(clip_id)
    if index is None:
        logger.warning("[layer=%s] move: unknown clip %s", layer.layer_id, clip_id)
        return layer

    clip = layer.clips[index]
    changes: dict[str, float] = {"start": start}
    if duration is not None:
        changes["duration"] = duration
    if trim_start is not None:
        changes["trim_start"] = trim_start
    if trim_end is not None:
        changes["trim_end"] = trim_end

    clips = list(layer.clips)
    clips[index] = clip.with_changes(**changes)
    return layer.with_clips(normalize(clips))


def resize_rolling(
    layer: Layer,
    clip_id: str,
    start: float,
    duration: float,
    trim_start: float,
    trim_end: float,
    config: EngineConfig | None = None,
) -> Layer:
    """Resize one edge of a clip and roll the shared cut point into its neighbour.

    When the end edge moves, the clip starting at the old end gives up (or
    takes back) exactly the seconds the resized clip gains (or loses), so the
    timeline keeps its length. When the start edge moves, the clip ending at
    the old start does the same. The first clip has no left neighbour: its
    start stays at zero and the trim shortens the timeline instead.

    A neighbour adjustment that would drop below the minimum clip duration or
    need a negative trim is skipped; the resize of the clip itself still
    applies and the normalizer closes the resulting gap or overlap.

    Args:
        layer: Current layer state.
        clip_id: The clip being resized.
        start: Proposed start of the clip.
        duration: Proposed duration of the clip.
        trim_start: Proposed start trim of the clip.
        trim_end: Proposed end trim of the clip.
        config: Engine limits; defaults to the process configuration.

    Returns:
        The updated layer (the input layer when the clip is unknown).
    """
    config = config or get_engine_config()
    index = layer.index_of(clip_id)
    if index is None:
        logger.warning("[layer=%s] resize: unknown clip %s", layer.layer_id, clip_id)
        return layer

    old = layer.clips[index]
    clips = list(layer.clips)
    new_end = start + duration

    if approx_equal(start, old.start):
        _roll_into_next(layer, clips, old, new_end - old.end, config)

    if approx_equal(new_end, old.end):
        if index == 0:
            start = 0.0
        else:
            _roll_into_previous(layer, clips, old, start - old.start, config)

    clips[index] = old.with_changes(
        start=start,
        duration=duration,
        trim_start=trim_start,
        trim_end=trim_end,
    )
    return layer.with_clips(normalize(clips))


def _roll_into_next(
    layer: Layer,
    clips: list[Clip],
    resized: Clip,
    delta: float,
    config: EngineConfig,
) -> None:
    """Move the start of the clip that begins at `resized.end` by `delta`."""
    neighbour_index = _find_index(
        layer.clips,
        lambda c: c.clip_id != resized.clip_id and approx_equal(c.start, resized.end),
    )
    if neighbour_index is None:
        return

    neighbour = layer.clips[neighbour_index]
    new_duration = neighbour.duration - delta
    new_trim_start = neighbour.trim_start + delta
    if new_duration < config.min_clip_duration or new_trim_start < 0:
        logger.debug(
            "[layer=%s] rolling edit skipped for next clip %s (duration=%.4f, trim_start=%.4f)",
            layer.layer_id,
            neighbour.clip_id,
            new_duration,
            new_trim_start,
        )
        return

    clips[neighbour_index] = neighbour.with_changes(
        start=neighbour.start + delta,
        duration=new_duration,
        trim_start=new_trim_start,
    )


def _roll_into_previous(
    layer: Layer,
    clips: list[Clip],
    resized: Clip,
    delta: float,
    config: EngineConfig,
) -> None:
    """Move the end of the clip that stops at `resized.start` by `delta`."""
    neighbour_index = _find_index(
        layer.clips,
        lambda c: c.clip_id != resized.clip_id and approx_equal(c.end, resized.start),
    )
    if neighbour_index is None:
        return

    neighbour = layer.clips[neighbour_index]
    new_duration = neighbour.duration + delta
    new_trim_end = neighbour.trim_end - delta
    if new_duration < config.min_clip_duration or new_trim_end < 0:
        logger.debug(
            "[layer=%s] rolling edit skipped for previous clip %s (duration=%.4f, trim_end=%.4f)",
            layer.layer_id,
            neighbour.clip_id,
            new_duration,
            new_trim_end,
        )
        return

    clips[neighbour_index] = neighbour.with_changes(
        duration=new_duration,
        trim_end=new_trim_end,
    )


def _find_index(clips: list[Clip], predicate: Callable[[Clip], bool]) -> int | None:
    """Return the index of the first clip matching `predicate`, or None."""
    for index, clip in enumerate(clips):
        if predicate(clip):
            return index
    return None


def split(
    layer: Layer,
    clip_id: str,
    split_time: float,
    config: EngineConfig | None = None,
) -> Layer:
    """Cut a clip in two at a timeline time.

    The left part keeps the clip's start and start trim; the right part starts
    at `split_time`, picks up the source where the left part stops and keeps
    the original end trim. Both parts get fresh ids and share the source's
    original duration.

    Args:
        layer: Current layer state.
        clip_id: The clip to split.
        split_time: Timeline time of the cut, in seconds.
        config: Engine limits; defaults to the process configuration.

    Returns:
        The updated layer.

    Raises:
        SplitRejectedError: The clip is unknown or the cut is within the split
            margin of either clip edge.
    """
    config = config or get_engine_config()
    index = layer.index_of(clip_id)
    if index is None:
        raise SplitRejectedError(clip_id, split_time, "clip is not on this layer")

    clip = layer.clips[index]
    margin = config.split_margin
    if split_time <= clip.start + margin or split_time >= clip.end - margin:
        raise SplitRejectedError(
            clip_id,
            split_time,
            f"must fall inside ({clip.start + margin:.3f}s, {clip.end - margin:.3f}s)",
        )

    left_duration = split_time - clip.start
    left = clip.with_changes(
        clip_id=new_clip_id(),
        duration=left_duration,
        trim_end=clip.original_duration - clip.trim_start - left_duration,
    )
    right = clip.with_changes(
        clip_id=new_clip_id(),
        start=split_time,
        duration=clip.end - split_time,
        trim_start=clip.trim_start + left_duration,
    )

    clips = list(layer.clips)
    clips[index : index + 1] = [left, right]
    logger.debug(
        "[layer=%s] split %s at %.3fs into %s and %s",
        layer.layer_id,
        clip_id,
        split_time,
        left.clip_id,
        right.clip_id,
    )
    return layer.with_clips(normalize(clips))


def delete_ripple(layer: Layer, clip_id: str) -> Layer:
    """Remove a clip and pull every later clip left to close the gap.

    Args:
        layer: Current layer state.
        clip_id: The clip to remove.

    Returns:
        The updated layer (the input layer when the clip is unknown).
    """
    deleted = layer.find_clip(clip_id)
    if deleted is None:
        logger.warning("[layer=%s] delete: unknown clip %s", layer.layer_id, clip_id)
        return layer

    remaining: list[Clip] = []
    for clip in layer.clips:
        if clip.clip_id == clip_id:
            continue
        if clip.start >= deleted.end - EPSILON:
            clip = clip.with_changes(start=clip.start - deleted.duration)
        remaining.append(clip)
    return layer.with_clips(normalize(remaining))


def delete_many_ripple(layer: Layer, clip_ids: Iterable[str]) -> Layer:
    """Ripple delete several clips, latest first.

    Args:
        layer: Current layer state.
        clip_ids: The clips to remove; unknown ids are ignored.

    Returns:
        The updated layer.
    """
    wanted = set(clip_ids)
    targets = [clip for clip in layer.clips if clip.clip_id in wanted]
    for clip in sorted(targets, key=lambda c: c.start, reverse=True):
        layer = delete_ripple(layer, clip.clip_id)
    return layer
