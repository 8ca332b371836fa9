"""Resize proposal schema."""

from cliptrack.common.base_cliptrack_model import BaseCliptrackModel


class ResizeProposal(BaseCliptrackModel):
    """New placement and trims proposed for one clip by a resize gesture."""

    start: float
    duration: float
    trim_start: float
    trim_end: float
