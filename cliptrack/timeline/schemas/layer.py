"""Layer schema."""

import uuid
from collections.abc import Iterable
from enum import StrEnum, auto
from typing import Any

from pydantic import Field, model_validator

from cliptrack.common.base_cliptrack_model import BaseCliptrackModel
from cliptrack.common.tolerance import EPSILON, approx_equal
from cliptrack.timeline.schemas.clip import Clip, ClipKind


class LayerKind(StrEnum):
    """Display kind of a layer."""

    VIDEO = auto()
    AUDIO = auto()
    OVERLAY = auto()
    EFFECT = auto()


class Layer(BaseCliptrackModel):
    """An ordered, gapless track of clips.

    Clips are sorted by start, the first one starts at zero, and every clip
    starts where the previous one ends (within EPSILON). An empty layer is a
    valid empty timeline.
    """

    layer_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = "Video Track"
    kind: LayerKind = LayerKind.VIDEO
    is_visible: bool = True
    is_locked: bool = False
    accent_color: str | None = None
    clips: list[Clip] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_gapless(self) -> "Layer":
        seen: set[str] = set()
        expected_start = 0.0
        for index, clip in enumerate(self.clips):
            if clip.clip_id in seen:
                msg = f"Layer {self.layer_id}: duplicate clip id {clip.clip_id}"
                raise ValueError(msg)
            seen.add(clip.clip_id)

            if not approx_equal(clip.start, expected_start):
                msg = (
                    f"Layer {self.layer_id}: clip {index} ({clip.clip_id}) starts at "
                    f"{clip.start}, expected {expected_start} (tolerance {EPSILON})"
                )
                raise ValueError(msg)
            expected_start = clip.end
        return self

    @classmethod
    def from_source(
        cls,
        duration: float,
        name: str = "Video Track",
        clip_name: str = "Untitled",
        clip_kind: ClipKind = ClipKind.VIDEO,
        **layer_fields: Any,
    ) -> "Layer":
        """Create a layer holding one full-length clip of a source media file.

        Args:
            duration: Length of the source media in seconds.
            name: Layer name.
            clip_name: Name given to the initial clip.
            clip_kind: Media kind of the initial clip.
            **layer_fields: Other Layer fields (kind, accent_color, ...).

        Returns:
            A layer with a single untrimmed clip, or an empty layer when the
            source has no duration.
        """
        clips: list[Clip] = []
        if duration > 0:
            clips.append(
                Clip(
                    kind=clip_kind,
                    start=0.0,
                    duration=duration,
                    trim_start=0.0,
                    trim_end=0.0,
                    original_duration=duration,
                    name=clip_name,
                )
            )
        return cls(name=name, clips=clips, **layer_fields)

    @property
    def end_time(self) -> float:
        """Return where the last clip ends (0 for an empty layer)."""
        if not self.clips:
            return 0.0
        return self.clips[-1].end

    def index_of(self, clip_id: str) -> int | None:
        """Return the position of a clip, or None if it is not on this layer."""
        for index, clip in enumerate(self.clips):
            if clip.clip_id == clip_id:
                return index
        return None

    def find_clip(self, clip_id: str) -> Clip | None:
        """Return the clip with the given id, if any."""
        index = self.index_of(clip_id)
        return None if index is None else self.clips[index]

    def with_clips(self, clips: Iterable[Clip]) -> "Layer":
        """Return a validated layer with the same identity and other clips."""
        return type(self)(**{**dict(self), "clips": list(clips)})
