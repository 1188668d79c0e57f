"""
Module: core.models.segments

Purpose:
    Value types describing how a source bitmap is cut into pages and where
    each piece lands on its physical page.

Key Classes:
    - BreakMarker: Requested page break at a pixel row
    - ContentSegment: Half-open vertical slice destined for one page
    - SourceRegion: Pixel rectangle to extract from the source bitmap
    - PlacementResult: Millimetre rectangle on the physical page
    - ComposedSegment: Segment + region + placement
    - DecisionKind / SegmentDecision / SegmentationTrace: segmenter trace

Dependencies:
    - dataclasses (std)
    - PIL.Image (TYPE_CHECKING only)

Used By:
    - pagination.segmenter: Produces segments and traces
    - pagination.compositor: Produces placements and regions
    - pagination.engine: Orchestration
    - output: Page writers
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from PIL import Image


@dataclass(frozen=True, slots=True, order=True)
class BreakMarker:
    """
    Explicit page break request at a pixel row of the source bitmap.

    Markers have no payload beyond their position. The renderer emits them
    top to bottom; the segmenter tolerates any order.

    Attributes:
        position_px: Row in the source bitmap where the break was requested

    Example:
        >>> BreakMarker.from_layout_offset(125.4, scale=2)
        BreakMarker(position_px=251)
    """

    position_px: int

    @classmethod
    def from_layout_offset(cls, offset: float, scale: float = 1.0) -> BreakMarker:
        """
        Convert a layout-space offset (CSS pixels from the top of the
        rendered container) into a bitmap row.

        Args:
            offset: Offset in layout pixels
            scale: Render scale factor used when rasterizing

        Returns:
            BreakMarker at the nearest bitmap row
        """
        return cls(position_px=round(offset * scale))


@dataclass(frozen=True, slots=True)
class ContentSegment:
    """
    Slice of the source bitmap for one page.

    The slice is [y_px, y_px + height_px).

    Attributes:
        y_px: First row (inclusive)
        height_px: Number of rows, always > 0
        page_number: Zero-based emission index

    Example:
        >>> seg = ContentSegment(y_px=300, height_px=200, page_number=1)
        >>> seg.bottom_px
        500
    """

    y_px: int
    height_px: int
    page_number: int

    def __post_init__(self) -> None:
        """Validate segment on construction."""
        if self.y_px < 0:
            raise ValueError(f"y_px must be >= 0: {self.y_px}")
        if self.height_px <= 0:
            raise ValueError(f"height_px must be > 0: {self.height_px}")
        if self.page_number < 0:
            raise ValueError(f"page_number must be >= 0: {self.page_number}")

    @property
    def bottom_px(self) -> int:
        """First row after the segment (exclusive)."""
        return self.y_px + self.height_px


@dataclass(frozen=True, slots=True)
class SourceRegion:
    """
    Pixel rectangle within the source bitmap.

    Attributes:
        x: Left edge (always 0 for full-width segments)
        y: Top edge
        width: Width in pixels
        height: Height in pixels
    """

    x: int
    y: int
    width: int
    height: int

    def as_box(self) -> tuple[int, int, int, int]:
        """(left, top, right, bottom) tuple for PIL."""
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def crop_from(self, image: Image.Image) -> Image.Image:
        """
        Crop this region from an image.

        Args:
            image: Source bitmap

        Returns:
            New PIL Image containing just this region

        Raises:
            ValueError: If the region falls outside the image
        """
        left, top, right, bottom = self.as_box()
        if right > image.width or bottom > image.height:
            raise ValueError(
                f"Region {self.as_box()} exceeds image size {image.width}x{image.height}"
            )
        return image.crop((left, top, right, bottom))


@dataclass(frozen=True, slots=True)
class PlacementResult:
    """
    Where a segment is drawn on its page, in millimetres from the top-left
    corner of the page.

    Attributes:
        x_mm: Left edge
        y_mm: Top edge
        width_mm: Drawn width
        height_mm: Drawn height
    """

    x_mm: float
    y_mm: float
    width_mm: float
    height_mm: float

    @property
    def center_x_mm(self) -> float:
        return self.x_mm + self.width_mm / 2


@dataclass(frozen=True, slots=True)
class ComposedSegment:
    """A segment with its source region and page placement."""

    segment: ContentSegment
    region: SourceRegion
    placement: PlacementResult


class DecisionKind(Enum):
    """What the segmenter did at one step."""

    MARKER_BREAK = "marker_break"      # Segment ends exactly at a marker
    FULL_PAGE = "full_page"            # Segment uses the page capacity (or the remainder)
    MARKER_SKIPPED = "marker_skipped"  # Marker at or above the cursor, dropped


@dataclass(frozen=True, slots=True)
class SegmentDecision:
    """
    One step of a segmentation run.

    Attributes:
        kind: Decision taken
        y_px: Cursor position when the decision was made
        height_px: Height of the emitted segment (0 for skipped markers)
        marker_px: Marker consulted, if any
    """

    kind: DecisionKind
    y_px: int
    height_px: int = 0
    marker_px: Optional[int] = None


@dataclass(frozen=True)
class SegmentationTrace:
    """
    Segments plus the decisions that produced them.

    Example:
        >>> trace = trace_uniform(1000, 300)
        >>> [s.height_px for s in trace.segments]
        [300, 300, 300, 100]
    """

    segments: tuple[ContentSegment, ...]
    decisions: tuple[SegmentDecision, ...]

    @property
    def skipped_markers(self) -> tuple[int, ...]:
        """Positions of markers that were dropped as already passed."""
        return tuple(
            d.marker_px for d in self.decisions
            if d.kind is DecisionKind.MARKER_SKIPPED and d.marker_px is not None
        )

    @property
    def marker_breaks(self) -> int:
        """Number of segments that end at a marker."""
        return sum(1 for d in self.decisions if d.kind is DecisionKind.MARKER_BREAK)
