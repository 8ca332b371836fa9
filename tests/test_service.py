"""Tests for the stateful timeline editor."""

import logging

import pytest

from cliptrack.timeline.errors import SplitRejectedError
from cliptrack.timeline.schemas import ClipKind, Layer, LayerKind
from cliptrack.timeline.service import TimelineEditorService


@pytest.fixture
def editor(config):
    """An editor holding a 30s recording."""
    service = TimelineEditorService(config=config)
    service.load_source(30, name="output.mp4")
    return service


class TestTimelineEditorService:
    def test_starts_empty(self, config):
        service = TimelineEditorService(config=config)
        assert service.layer.clips == []
        assert service.zoom == config.default_zoom

    def test_load_source_keeps_layer_identity(self, config):
        service = TimelineEditorService(Layer(name="Audio", kind=LayerKind.AUDIO), config=config)
        layer_id = service.layer.layer_id
        layer = service.load_source(12, name="voice.wav", kind=ClipKind.AUDIO)
        assert layer.layer_id == layer_id
        assert layer.name == "Audio"
        assert layer.kind == LayerKind.AUDIO
        assert layer.clips[0].kind == ClipKind.AUDIO
        assert layer.clips[0].name == "voice.wav"

    def test_split_then_delete(self, editor, check_invariants):
        clip_id = editor.layer.clips[0].clip_id
        editor.split(clip_id, 10)
        first, second = editor.layer.clips
        editor.delete(first.clip_id)
        assert len(editor.layer.clips) == 1
        assert editor.layer.clips[0].clip_id == second.clip_id
        assert editor.layer.clips[0].start == 0
        assert editor.layer.clips[0].trim_start == 10
        check_invariants(editor.layer)

    def test_rejected_split_keeps_state(self, editor, caplog):
        before = editor.layer
        with caplog.at_level(logging.WARNING, logger="cliptrack.timeline.service"):
            with pytest.raises(SplitRejectedError):
                editor.split(before.clips[0].clip_id, 0.05)
        assert editor.layer is before
        assert "Cannot split" in caplog.text

    def test_rolling_resize(self, editor, check_invariants):
        editor.split(editor.layer.clips[0].clip_id, 10)
        first, second = editor.layer.clips
        editor.resize_rolling(first.clip_id, 0, 12, 0, 18)
        first, second = editor.layer.clips
        assert first.duration == 12
        assert second.start == pytest.approx(12)
        assert second.duration == pytest.approx(18)
        assert editor.layer.end_time == pytest.approx(30)
        check_invariants(editor.layer)

    def test_move_or_resize(self, editor):
        clip_id = editor.layer.clips[0].clip_id
        editor.move_or_resize(clip_id, 0, duration=20, trim_end=10)
        assert editor.layer.end_time == 20

    def test_delete_many(self, editor):
        editor.split(editor.layer.clips[0].clip_id, 10)
        editor.split(editor.layer.clips[1].clip_id, 20)
        first, _, last = editor.layer.clips
        editor.delete_many([first.clip_id, last.clip_id])
        assert len(editor.layer.clips) == 1
        assert editor.layer.end_time == pytest.approx(10)

    def test_delete_many_nothing(self, editor):
        before = editor.layer
        assert editor.delete_many([]) is before

    def test_snap(self, editor):
        editor.split(editor.layer.clips[0].clip_id, 5)
        assert editor.snap_points() == [0, 5, 30]
        assert editor.snap(4.95) == 5
        assert editor.snap(17) == 17

    def test_auto_fit(self, editor):
        assert editor.auto_fit(900) == 50
        assert editor.zoom == 50

    def test_set_zoom_clamps(self, editor, config):
        assert editor.set_zoom(10_000) == config.zoom_max
        assert editor.zoom == config.zoom_max

    def test_commits_are_logged(self, config, caplog):
        service = TimelineEditorService(config=config)
        with caplog.at_level(logging.INFO, logger="cliptrack.timeline.service"):
            service.load_source(4, name="clip.mp4")
        assert "load 'clip.mp4'" in caplog.text
