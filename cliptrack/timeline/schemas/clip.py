"""Clip schema."""

import uuid
from enum import StrEnum, auto
from typing import Any

from pydantic import Field, model_validator

from cliptrack.common.base_cliptrack_model import BaseCliptrackModel
from cliptrack.common.tolerance import approx_equal


class ClipKind(StrEnum):
    """Type of media a clip carries."""

    VIDEO = auto()
    AUDIO = auto()
    IMAGE = auto()
    TEXT = auto()
    EFFECT = auto()


def new_clip_id() -> str:
    """Return a fresh clip identity."""
    return str(uuid.uuid4())


class Clip(BaseCliptrackModel):
    """An interval of source media placed on a layer.

    `trim_start` and `trim_end` are the seconds cut away from the edges of the
    un-trimmed source, so `trim_start + duration + trim_end` always equals
    `original_duration`.
    """

    clip_id: str = Field(default_factory=new_clip_id)
    kind: ClipKind = ClipKind.VIDEO

    # Timeline placement; a Layer keeps start non-negative
    start: float
    duration: float = Field(gt=0)

    # Offsets into the source media
    trim_start: float = Field(default=0.0, ge=0)
    trim_end: float = Field(default=0.0, ge=0)
    original_duration: float = Field(gt=0)

    # Display metadata, ignored by the edit operations
    name: str = "Untitled"
    color: str | None = None
    speed: float = 1.0
    muted: bool = False
    metadata: str | None = None

    @model_validator(mode="before")
    @classmethod
    def _default_original_duration(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("original_duration") is None:
            data = dict(data)
            data["original_duration"] = (
                data.get("duration", 0.0)
                + data.get("trim_start", 0.0)
                + data.get("trim_end", 0.0)
            )
        return data

    @model_validator(mode="after")
    def _check_trim_conservation(self) -> "Clip":
        covered = self.trim_start + self.duration + self.trim_end
        if not approx_equal(covered, self.original_duration):
            msg = (
                f"Clip {self.clip_id}: trim_start ({self.trim_start}) + duration "
                f"({self.duration}) + trim_end ({self.trim_end}) = {covered} "
                f"does not match original_duration ({self.original_duration})"
            )
            raise ValueError(msg)
        return self

    @property
    def end(self) -> float:
        """Timeline time at which the clip stops."""
        return self.start + self.duration

    def with_changes(self, **changes: Any) -> "Clip":
        """Return a validated copy of this clip with some fields replaced."""
        return type(self)(**{**dict(self), **changes})
