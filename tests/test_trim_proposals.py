"""Tests for trim-handle proposals."""

import pytest

from cliptrack.timeline.operations import resize_rolling
from cliptrack.timeline.trim_proposals import propose_end_trim, propose_start_trim


@pytest.fixture
def trimmed_clip(clip_factory):
    """A clip showing seconds 5-10 of a 15s source, placed at 5s."""
    return clip_factory("b", 5, 5, trim_start=5, trim_end=5)


class TestProposeStartTrim:
    def test_shrink(self, trimmed_clip, config):
        proposal = propose_start_trim(trimmed_clip, 2, config)
        assert (proposal.start, proposal.duration, proposal.trim_start, proposal.trim_end) == (7, 3, 7, 5)

    def test_shrink_stops_at_min_duration(self, trimmed_clip, config):
        proposal = propose_start_trim(trimmed_clip, 6, config)
        assert proposal.duration == pytest.approx(config.min_clip_duration)
        assert proposal.start == pytest.approx(9.9)
        assert proposal.trim_start == pytest.approx(9.9)

    def test_clip_below_min_duration_does_not_grow(self, clip_factory, config):
        short = clip_factory("s", 9.9, 0.05, trim_start=9.9, trim_end=0.05)
        proposal = propose_start_trim(short, 0.01, config)
        assert (proposal.start, proposal.duration, proposal.trim_start) == (9.9, 0.05, 9.9)

    def test_extend_reveals_trimmed_source(self, trimmed_clip, config):
        proposal = propose_start_trim(trimmed_clip, -3, config)
        assert (proposal.start, proposal.duration, proposal.trim_start) == (2, 8, 2)

    def test_extend_limited_by_trim(self, trimmed_clip, config):
        proposal = propose_start_trim(trimmed_clip, -10, config)
        assert (proposal.start, proposal.duration, proposal.trim_start) == (0, 10, 0)

    def test_no_delta(self, trimmed_clip, config):
        proposal = propose_start_trim(trimmed_clip, 0, config)
        assert (proposal.start, proposal.duration, proposal.trim_start) == (5, 5, 5)


class TestProposeEndTrim:
    def test_shrink(self, trimmed_clip, config):
        proposal = propose_end_trim(trimmed_clip, -2, config)
        assert (proposal.start, proposal.duration, proposal.trim_start, proposal.trim_end) == (5, 3, 5, 7)

    def test_shrink_stops_at_min_duration(self, trimmed_clip, config):
        proposal = propose_end_trim(trimmed_clip, -6, config)
        assert proposal.duration == pytest.approx(config.min_clip_duration)
        assert proposal.trim_end == pytest.approx(9.9)

    def test_clip_below_min_duration_does_not_grow(self, clip_factory, config):
        short = clip_factory("s", 0, 0.05, trim_end=9.95)
        proposal = propose_end_trim(short, -0.01, config)
        assert (proposal.duration, proposal.trim_end) == (0.05, 9.95)

    def test_extend_limited_by_trim(self, trimmed_clip, config):
        proposal = propose_end_trim(trimmed_clip, 10, config)
        assert (proposal.duration, proposal.trim_end) == (10, 0)

    def test_proposal_conserves_source(self, trimmed_clip, config):
        for delta in (-7, -2.5, 0, 1.25, 9):
            proposal = propose_end_trim(trimmed_clip, delta, config)
            covered = proposal.trim_start + proposal.duration + proposal.trim_end
            assert covered == pytest.approx(trimmed_clip.original_duration)


class TestProposalsDriveRollingEdits:
    def test_end_trim_rolls_into_next_clip(self, three_clip_layer, config, check_invariants):
        a = three_clip_layer.find_clip("a")
        proposal = propose_end_trim(a, 2, config)
        result = resize_rolling(three_clip_layer, "a", **proposal.model_dump(), config=config)
        a, b, c = result.clips
        assert a.duration == 7
        assert b.start == pytest.approx(7)
        assert b.duration == pytest.approx(3)
        assert b.trim_start == pytest.approx(7)
        assert result.end_time == pytest.approx(15)
        check_invariants(result)

    def test_start_trim_rolls_into_previous_clip(self, three_clip_layer, config, check_invariants):
        c = three_clip_layer.find_clip("c")
        proposal = propose_start_trim(c, -1, config)
        result = resize_rolling(three_clip_layer, "c", **proposal.model_dump(), config=config)
        _, b, c = result.clips
        assert b.duration == pytest.approx(4)
        assert b.trim_end == pytest.approx(6)
        assert c.start == pytest.approx(9)
        assert c.duration == pytest.approx(6)
        check_invariants(result)
