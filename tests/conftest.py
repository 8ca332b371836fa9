"""Shared fixtures for the clip engine tests."""

import pytest

from cliptrack.common.config import EngineConfig
from cliptrack.common.tolerance import EPSILON
from cliptrack.timeline.schemas import Clip, Layer


@pytest.fixture
def config():
    """Default engine limits, independent of the environment."""
    return EngineConfig()


@pytest.fixture
def clip_factory():
    """Factory to create Clip instances for testing."""

    def create(clip_id, start, duration, trim_start=0.0, trim_end=0.0, **kwargs):
        return Clip(
            clip_id=clip_id,
            name=f"Clip {clip_id}",
            start=start,
            duration=duration,
            trim_start=trim_start,
            trim_end=trim_end,
            **kwargs,
        )

    return create


@pytest.fixture
def layer_factory():
    """Factory to create a Layer from clips."""

    def create(*clips, **fields):
        return Layer(layer_id="layer-1", clips=list(clips), **fields)

    return create


@pytest.fixture
def three_clip_layer(clip_factory, layer_factory):
    """A 15s recording cut into three 5s clips: a=[0,5), b=[5,10), c=[10,15)."""
    return layer_factory(
        clip_factory("a", 0, 5, trim_start=0, trim_end=10),
        clip_factory("b", 5, 5, trim_start=5, trim_end=5),
        clip_factory("c", 10, 5, trim_start=10, trim_end=0),
    )


@pytest.fixture
def check_invariants():
    """Assert the gapless and trim-conservation invariants of a layer."""

    def check(layer):
        if not layer.clips:
            return
        assert layer.clips[0].start == 0
        for prev, nxt in zip(layer.clips, layer.clips[1:]):
            assert abs(nxt.start - prev.end) <= EPSILON
        for clip in layer.clips:
            covered = clip.trim_start + clip.duration + clip.trim_end
            assert abs(covered - clip.original_duration) <= EPSILON
            assert clip.trim_start >= 0
            assert clip.trim_end >= 0

    return check
