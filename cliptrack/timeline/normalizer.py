"""Restore the sorted, gapless order of a clip sequence."""

from collections.abc import Iterable

from cliptrack.timeline.schemas import Clip


def normalize(clips: Iterable[Clip]) -> list[Clip]:
    """Sort clips by start and close every gap or overlap between them.

    The first clip is moved to zero and each following clip is moved to where
    the previous one ends, exactly, so rounding drift never accumulates. Only
    `start` is ever changed, so durations and trim offsets are preserved.
    Clips already in place are returned as-is, which makes the operation
    idempotent.

    Args:
        clips: Clips in any order, possibly overlapping or with gaps.

    Returns:
        A new list of clips satisfying the Layer invariant.
    """
    ordered = sorted(clips, key=lambda c: c.start)

    result: list[Clip] = []
    expected_start = 0.0
    for clip in ordered:
        if clip.start != expected_start:
            clip = clip.with_changes(start=expected_start)
        result.append(clip)
        expected_start = clip.end
    return result
