"""
Unit tests for uniform and marker-aware segmentation.

Covers exact marker breaks, markers beyond reach, already-passed
markers and exhaustive coverage of the source height.
"""

import pytest

from canvas_paginator.core.models import BreakMarker, DecisionKind
from canvas_paginator.pagination import (
    segment_uniform,
    segment_with_markers,
    trace_uniform,
    trace_with_markers,
)


def _heights(segments):
    return [s.height_px for s in segments]


def _markers(*positions):
    return [BreakMarker(p) for p in positions]


def _assert_exhaustive(segments, total):
    """Segments tile [0, total) with no gaps or overlaps, numbered in order."""
    y = 0
    for index, seg in enumerate(segments):
        assert seg.y_px == y
        assert seg.height_px > 0
        assert seg.page_number == index
        y = seg.bottom_px
    assert y == total


class TestSegmentUniform:

    def test_uniform_when_partial_last_page_then_clamps_last(self):
        segments = segment_uniform(1000, 300)

        assert _heights(segments) == [300, 300, 300, 100]
        assert [s.y_px for s in segments] == [0, 300, 600, 900]

    def test_uniform_when_exact_multiple_then_all_full(self):
        assert _heights(segment_uniform(900, 300)) == [300, 300, 300]

    def test_uniform_when_shorter_than_page_then_single_segment(self):
        assert _heights(segment_uniform(120, 300)) == [120]

    def test_uniform_when_no_content_then_empty(self):
        assert segment_uniform(0, 300) == []
        assert segment_uniform(-5, 300) == []

    def test_uniform_when_capacity_not_positive_then_raises_error(self):
        with pytest.raises(ValueError, match="page_content_height_px must be positive"):
            segment_uniform(1000, 0)

    def test_trace_uniform_when_traced_then_one_full_page_decision_per_segment(self):
        trace = trace_uniform(1000, 300)

        assert len(trace.decisions) == 4
        assert all(d.kind is DecisionKind.FULL_PAGE for d in trace.decisions)


class TestSegmentWithMarkers:

    def test_markers_when_marker_within_first_page_then_breaks_at_marker(self):
        segments = segment_with_markers(1000, 300, _markers(250))

        assert segments[0].height_px == 250
        assert _heights(segments) == [250, 300, 300, 150]

    def test_markers_when_marker_mid_second_page_then_breaks_there(self):
        assert _heights(segment_with_markers(1000, 300, _markers(500))) == [300, 200, 300, 200]

    def test_markers_when_marker_on_final_short_page_then_matches_uniform(self):
        segments = segment_with_markers(1000, 300, _markers(950))

        assert _heights(segments) == [300, 300, 300, 100]
        assert segments == segment_uniform(1000, 300)

    def test_markers_when_exactly_one_page_remains_then_still_breaks(self):
        # Cursor at 600 with 300 rows left: the marker at 700 is honoured
        assert _heights(segment_with_markers(900, 300, _markers(700))) == [300, 300, 100, 200]

    def test_markers_when_less_than_one_page_remains_then_final_segment(self):
        assert _heights(segment_with_markers(899, 300, _markers(700))) == [300, 300, 299]

    def test_markers_when_no_markers_then_matches_uniform(self):
        assert segment_with_markers(1000, 300, []) == segment_uniform(1000, 300)

    def test_markers_when_cluster_closer_than_page_then_each_breaks(self):
        segments = segment_with_markers(1000, 300, _markers(100, 150, 200))

        assert _heights(segments) == [100, 50, 50, 300, 300, 200]

    def test_markers_when_marker_on_previous_boundary_then_skipped(self):
        trace = trace_with_markers(1000, 300, _markers(300))

        assert _heights(trace.segments) == [300, 300, 300, 100]
        assert trace.skipped_markers == (300,)

    def test_markers_when_out_of_order_then_drops_passed_marker(self):
        trace = trace_with_markers(1000, 300, _markers(500, 200, 700))

        assert _heights(trace.segments) == [300, 200, 200, 300]
        assert trace.skipped_markers == (200,)

    def test_markers_when_marker_at_zero_then_skipped(self):
        trace = trace_with_markers(600, 300, _markers(0))

        assert _heights(trace.segments) == [300, 300]
        assert trace.skipped_markers == (0,)

    def test_markers_when_marker_past_content_then_ignored(self):
        assert _heights(segment_with_markers(1000, 300, _markers(1100))) == [300, 300, 300, 100]

    def test_markers_when_content_fits_one_page_then_single_segment(self):
        assert _heights(segment_with_markers(200, 300, _markers(100))) == [200]

    def test_markers_when_no_content_then_empty(self):
        assert segment_with_markers(0, 300, _markers(100)) == []

    def test_markers_when_capacity_not_positive_then_raises_error(self):
        with pytest.raises(ValueError):
            segment_with_markers(1000, -1, _markers(100))

    def test_trace_when_marker_used_then_records_break_decision(self):
        trace = trace_with_markers(1000, 300, _markers(250))

        kinds = [d.kind for d in trace.decisions]
        assert kinds == [
            DecisionKind.MARKER_BREAK,
            DecisionKind.FULL_PAGE,
            DecisionKind.FULL_PAGE,
            DecisionKind.FULL_PAGE,
        ]
        assert trace.decisions[0].marker_px == 250
        assert trace.marker_breaks == 1

    def test_trace_when_marker_skipped_then_logs_warning(self, caplog):
        with caplog.at_level("WARNING"):
            trace_with_markers(1000, 300, _markers(300))

        assert "Skipping break marker at 300px" in caplog.text


@pytest.mark.parametrize(
    "total,capacity,positions",
    [
        (1000, 300, []),
        (1000, 300, [250]),
        (1000, 300, [100, 150, 200, 201, 202]),
        (1000, 300, [900, 100, 950, 300]),
        (3000, 1046, [500, 1546, 1547, 2999]),
        (7, 3, [1, 2, 3, 4, 5, 6, 7, 8]),
        (1, 1046, [0, 1]),
    ],
)
def test_markers_when_any_marker_layout_then_exhaustive(total, capacity, positions):
    _assert_exhaustive(segment_with_markers(total, capacity, _markers(*positions)), total)


@pytest.mark.parametrize("total,capacity", [(1000, 300), (3000, 1046), (1, 1), (1045, 1046)])
def test_uniform_when_any_height_then_exhaustive(total, capacity):
    _assert_exhaustive(segment_uniform(total, capacity), total)
