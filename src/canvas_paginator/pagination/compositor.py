"""
Module: pagination.compositor

Purpose:
    Place each segment on its physical page. Scales the segment to the
    printable area while preserving aspect ratio, centres it horizontally
    and anchors it to the top margin.

Key Functions:
    - compose_segment(): Placement + source region for one segment
    - compose_segments(): Same for a list of segments

Strategy:
    Fit by height first (full printable height, width from aspect ratio).
    If that is wider than the printable area, fit by width instead.

Dependencies:
    - core.models: ContentSegment, PageGeometry, PlacementResult, SourceRegion

Used By:
    - pagination.engine: Per-page composition
"""

from __future__ import annotations

import logging
from typing import Iterable, List

from canvas_paginator.core.models import (
    ComposedSegment,
    ContentSegment,
    PageGeometry,
    PlacementResult,
    SourceRegion,
)

logger = logging.getLogger(__name__)


def compose_segment(
    segment: ContentSegment,
    source_width_px: int,
    geometry: PageGeometry,
) -> ComposedSegment:
    """
    Compute where a segment is drawn on its page.

    Args:
        segment: Segment of the source bitmap
        source_width_px: Width of the source bitmap
        geometry: Resolved page geometry (oriented format and margin)

    Returns:
        ComposedSegment with the pixel region to extract and the
        millimetre placement on the page

    Raises:
        ValueError: If source_width_px is not positive

    Example:
        >>> geo = resolve_geometry("a4", 10, 1, landscape=False)
        >>> composed = compose_segment(ContentSegment(0, 1046, 0), 714, geo)
        >>> composed.placement.height_mm
        277
    """
    if source_width_px <= 0:
        raise ValueError(f"source_width_px must be positive: {source_width_px}")

    margin_mm = geometry.margin_mm
    area_width_mm = geometry.content_width_mm
    area_height_mm = geometry.content_height_mm

    aspect_ratio = source_width_px / segment.height_px

    # Fit by height
    height_mm = area_height_mm
    width_mm = area_height_mm * aspect_ratio

    if width_mm > area_width_mm:
        # Too wide, fit by width
        width_mm = area_width_mm
        height_mm = area_width_mm / aspect_ratio

    x_mm = margin_mm + (area_width_mm - width_mm) / 2

    placement = PlacementResult(
        x_mm=x_mm,
        y_mm=margin_mm,
        width_mm=width_mm,
        height_mm=height_mm,
    )
    region = SourceRegion(
        x=0,
        y=segment.y_px,
        width=source_width_px,
        height=segment.height_px,
    )

    logger.debug(
        f"Segment {segment.page_number}: aspect {aspect_ratio:.3f}, "
        f"{width_mm:.1f}mm x {height_mm:.1f}mm at x={x_mm:.1f}mm"
    )
    return ComposedSegment(segment=segment, region=region, placement=placement)


def compose_segments(
    segments: Iterable[ContentSegment],
    source_width_px: int,
    geometry: PageGeometry,
) -> List[ComposedSegment]:
    """Compose every segment in emission order."""
    return [compose_segment(s, source_width_px, geometry) for s in segments]
