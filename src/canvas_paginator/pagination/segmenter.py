"""
Module: pagination.segmenter

Purpose:
    Cut a tall bitmap into page-sized vertical segments, either uniformly
    or breaking at renderer-supplied markers.

Key Functions:
    - segment_uniform(): Fixed-height segmentation
    - segment_with_markers(): Marker-aware segmentation
    - trace_uniform(), trace_with_markers(): Same, with decision traces

Algorithm (marker-aware):
    Walk top to bottom with a cursor and a marker index:
    1. Marker strictly inside the current page's reach (and at least a full
       page of content remains): break exactly there
    2. Marker at or above the cursor: already passed, drop it
    3. Otherwise: emit a full page (or the remaining rows)
    Stop when the cursor reaches the bottom of the bitmap.

Dependencies:
    - core.models: ContentSegment, BreakMarker, SegmentDecision

Used By:
    - pagination.engine: Pagination orchestration
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from canvas_paginator.core.models import (
    BreakMarker,
    ContentSegment,
    DecisionKind,
    SegmentationTrace,
    SegmentDecision,
)

logger = logging.getLogger(__name__)


def trace_uniform(total_height_px: int, page_content_height_px: int) -> SegmentationTrace:
    """
    Split a content height into fixed page-height chunks.

    Every segment is page_content_height_px tall except the last, which is
    clamped to the remaining rows.

    Args:
        total_height_px: Height of the source bitmap
        page_content_height_px: Rows that fit in one page's content area

    Returns:
        SegmentationTrace with one FULL_PAGE decision per segment

    Raises:
        ValueError: If page_content_height_px is not positive
    """
    _check_capacity(page_content_height_px)

    segments: List[ContentSegment] = []
    decisions: List[SegmentDecision] = []

    y = 0
    while y < total_height_px:
        height = min(page_content_height_px, total_height_px - y)
        segments.append(ContentSegment(y_px=y, height_px=height, page_number=len(segments)))
        decisions.append(SegmentDecision(DecisionKind.FULL_PAGE, y_px=y, height_px=height))
        y += height

    logger.debug(f"Uniform split of {total_height_px}px into {len(segments)} segments")
    return SegmentationTrace(segments=tuple(segments), decisions=tuple(decisions))


def segment_uniform(total_height_px: int, page_content_height_px: int) -> List[ContentSegment]:
    """
    Split a content height into fixed page-height chunks.

    Example:
        >>> [s.height_px for s in segment_uniform(1000, 300)]
        [300, 300, 300, 100]
    """
    return list(trace_uniform(total_height_px, page_content_height_px).segments)


def trace_with_markers(
    total_height_px: int,
    page_content_height_px: int,
    markers: Sequence[BreakMarker],
) -> SegmentationTrace:
    """
    Segment content, breaking exactly at markers within reach of a page.

    A marker is "within reach" when it lies strictly between the cursor and
    cursor + page_content_height_px. Markers at or above the cursor (out of
    order, or on a previous boundary) are dropped. Once fewer rows than a
    full page remain they form the final segment and markers inside it are
    not used.

    Args:
        total_height_px: Height of the source bitmap
        page_content_height_px: Rows that fit in one page's content area
        markers: Break markers, normally ascending

    Returns:
        SegmentationTrace with segments and per-step decisions

    Raises:
        ValueError: If page_content_height_px is not positive
    """
    _check_capacity(page_content_height_px)

    segments: List[ContentSegment] = []
    decisions: List[SegmentDecision] = []

    y = 0
    m = 0
    while y < total_height_px:
        marker_px = None
        kind = DecisionKind.FULL_PAGE

        if m < len(markers):
            marker_px = markers[m].position_px
            distance = marker_px - y

            if distance <= 0:
                logger.warning(
                    f"Skipping break marker at {marker_px}px: cursor already at {y}px"
                )
                decisions.append(
                    SegmentDecision(DecisionKind.MARKER_SKIPPED, y_px=y, marker_px=marker_px)
                )
                m += 1
                continue

            remaining = total_height_px - y
            if distance < page_content_height_px and remaining >= page_content_height_px:
                height = distance
                kind = DecisionKind.MARKER_BREAK
                m += 1
            else:
                height = min(page_content_height_px, remaining)
        else:
            height = min(page_content_height_px, total_height_px - y)

        if height <= 0:
            break

        segments.append(ContentSegment(y_px=y, height_px=height, page_number=len(segments)))
        decisions.append(SegmentDecision(kind, y_px=y, height_px=height, marker_px=marker_px))
        logger.debug(f"Segment {len(segments) - 1}: y={y}, height={height}, {kind.value}")
        y += height

    trace = SegmentationTrace(segments=tuple(segments), decisions=tuple(decisions))
    logger.debug(
        f"Marker split of {total_height_px}px into {len(segments)} segments "
        f"({trace.marker_breaks} at markers, {len(trace.skipped_markers)} markers skipped)"
    )
    return trace


def segment_with_markers(
    total_height_px: int,
    page_content_height_px: int,
    markers: Sequence[BreakMarker],
) -> List[ContentSegment]:
    """
    Segment content, breaking exactly at markers within reach of a page.

    Example:
        >>> segs = segment_with_markers(1000, 300, [BreakMarker(500)])
        >>> [s.height_px for s in segs]
        [300, 200, 300, 200]
    """
    return list(trace_with_markers(total_height_px, page_content_height_px, markers).segments)


def _check_capacity(page_content_height_px: int) -> None:
    if page_content_height_px <= 0:
        raise ValueError(
            f"page_content_height_px must be positive: {page_content_height_px}"
        )
