"""
Module: core.models

Purpose:
    Immutable data model for pagination runs.

Key Classes:
    - PageFormat, PageSize: Physical page formats
    - PageGeometry: Resolved pixel geometry
    - BreakMarker, ContentSegment: Segmentation inputs and outputs
    - SourceRegion, PlacementResult, ComposedSegment: Composition outputs
    - SegmentDecision, SegmentationTrace: Structured segmenter trace
    - RenderedDocument: Renderer hand-off
"""

from .formats import PIXELS_PER_MM, PageFormat, PageSize
from .geometry import PageGeometry
from .segments import (
    BreakMarker,
    ComposedSegment,
    ContentSegment,
    DecisionKind,
    PlacementResult,
    SegmentationTrace,
    SegmentDecision,
    SourceRegion,
)
from .document import RenderedDocument

__all__ = [
    "PIXELS_PER_MM",
    "PageFormat",
    "PageSize",
    "PageGeometry",
    "BreakMarker",
    "ContentSegment",
    "SourceRegion",
    "PlacementResult",
    "ComposedSegment",
    "DecisionKind",
    "SegmentDecision",
    "SegmentationTrace",
    "RenderedDocument",
]
