"""Timeline schemas."""

from cliptrack.timeline.schemas.clip import Clip, ClipKind, new_clip_id
from cliptrack.timeline.schemas.layer import Layer, LayerKind
from cliptrack.timeline.schemas.proposal import ResizeProposal

__all__ = [
    "Clip",
    "ClipKind",
    "Layer",
    "LayerKind",
    "ResizeProposal",
    "new_clip_id",
]
