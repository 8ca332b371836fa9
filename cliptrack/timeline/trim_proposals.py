"""Turn a time delta on a clip edge into a trim proposal.

Trim handles never stretch media: shrinking an edge hands the seconds over to
that edge's trim offset, and extending an edge can only reveal source that
was trimmed away before.
"""

from cliptrack.common.config import EngineConfig, get_engine_config
from cliptrack.timeline.schemas import Clip, ResizeProposal


def propose_start_trim(
    clip: Clip,
    delta: float,
    config: EngineConfig | None = None,
) -> ResizeProposal:
    """Propose new placement for a clip whose start edge moved by `delta` seconds.

    A positive delta moves the edge right (shrink), a negative one left (extend).
    """
    config = config or get_engine_config()
    start, duration, trim_start = clip.start, clip.duration, clip.trim_start

    if delta > 0:
        shrink = _allowed_shrink(clip, delta, config)
        start += shrink
        duration -= shrink
        trim_start += shrink
    elif delta < 0:
        revealed = min(-delta, clip.trim_start)
        start -= revealed
        duration += revealed
        trim_start -= revealed

    return ResizeProposal(
        start=start,
        duration=duration,
        trim_start=trim_start,
        trim_end=clip.trim_end,
    )


def propose_end_trim(
    clip: Clip,
    delta: float,
    config: EngineConfig | None = None,
) -> ResizeProposal:
    """Propose new placement for a clip whose end edge moved by `delta` seconds.

    A negative delta moves the edge left (shrink), a positive one right (extend).
    """
    config = config or get_engine_config()
    duration, trim_end = clip.duration, clip.trim_end

    if delta < 0:
        shrink = _allowed_shrink(clip, -delta, config)
        duration -= shrink
        trim_end += shrink
    elif delta > 0:
        revealed = min(delta, clip.trim_end)
        duration += revealed
        trim_end -= revealed

    return ResizeProposal(
        start=clip.start,
        duration=duration,
        trim_start=clip.trim_start,
        trim_end=trim_end,
    )


def _allowed_shrink(clip: Clip, requested: float, config: EngineConfig) -> float:
    """Clamp a shrink so the clip stops at the minimum duration.

    A clip already at or below the minimum does not shrink at all.
    """
    return min(requested, max(clip.duration - config.min_clip_duration, 0.0))
