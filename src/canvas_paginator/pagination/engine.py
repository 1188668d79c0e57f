"""
Module: pagination.engine

Purpose:
    Orchestrate a complete pagination run.
    Validate → Orient → Resolve geometry → Segment → Compose → Write

Key Classes:
    - PaginationEngine: Runs the pipeline for one configuration
    - PaginationPlan: Pure result of planning (no output written)
    - PaginationResult: Plan plus what the page writer produced
    - SegmentationMode: Uniform or marker-aware

Key Functions:
    - paginate_document(): Convenience wrapper around the engine

Dependencies:
    - pagination.geometry / orientation / segmenter / compositor
    - output.page_writer: PageWriter (interface only)

Used By:
    - output.pdf_writer.export_pdf
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

from canvas_paginator.core.models import (
    ComposedSegment,
    ContentSegment,
    PageGeometry,
    PlacementResult,
    RenderedDocument,
    SegmentationTrace,
)

from .compositor import compose_segments
from .config import PaginationConfig
from .geometry import resolve_geometry, validate_page_setup
from .orientation import select_orientation
from .segmenter import trace_uniform, trace_with_markers

if TYPE_CHECKING:
    from canvas_paginator.output.page_writer import PageWriter

logger = logging.getLogger(__name__)

EMPTY_CONTENT_WARNING = "Nothing to paginate"


class SegmentationMode(Enum):
    """Which segmenter produced a plan."""

    UNIFORM = "uniform"
    MARKERS = "markers"


@dataclass(frozen=True)
class PaginationPlan:
    """
    Pure pagination result (immutable).

    Attributes:
        is_landscape: Orientation chosen for every page
        geometry: Resolved geometry, None for empty content
        mode: Segmenter used
        trace: Segments and segmenter decisions
        composed: One ComposedSegment per page, in emission order
        warnings: Non-fatal issues (empty content, skipped markers)

    Example:
        >>> plan = PaginationEngine(PaginationConfig()).plan(document)
        >>> plan.page_count
        3
    """

    is_landscape: bool
    geometry: Optional[PageGeometry]
    mode: SegmentationMode
    trace: SegmentationTrace
    composed: tuple[ComposedSegment, ...]
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def page_count(self) -> int:
        return len(self.composed)

    @property
    def is_empty(self) -> bool:
        return not self.composed

    @property
    def segments(self) -> tuple[ContentSegment, ...]:
        return self.trace.segments

    @property
    def placements(self) -> tuple[PlacementResult, ...]:
        return tuple(c.placement for c in self.composed)


@dataclass(frozen=True)
class PaginationResult:
    """
    Outcome of driving a page writer with a plan.

    Attributes:
        plan: The plan that was written
        pages_written: Pages the writer started
        output: Whatever the writer's finish() returned (None if empty)
        elapsed_seconds: Wall time for the run
    """

    plan: PaginationPlan
    pages_written: int
    output: Any = None
    elapsed_seconds: float = 0.0

    @property
    def is_empty(self) -> bool:
        return self.plan.is_empty

    @property
    def warnings(self) -> tuple[str, ...]:
        return self.plan.warnings


class PaginationEngine:
    """
    Pagination pipeline for one configuration.

    The engine holds only its immutable config; every call to ``plan`` or
    ``paginate`` works on fresh values, so one engine can serve any number
    of documents, including concurrently.

    Example:
        >>> engine = PaginationEngine(PaginationConfig(use_marker_pagination=True))
        >>> result = engine.paginate(document, PdfPageWriter(Path("out.pdf")))
        >>> result.pages_written
        4
    """

    def __init__(self, config: PaginationConfig) -> None:
        self.config = config

    def plan(self, document: RenderedDocument) -> PaginationPlan:
        """
        Compute every page of a document without writing anything.

        Pipeline:
        1. Validate page setup (fatal on failure)
        2. Return an empty plan for an empty bitmap
        3. Select orientation from the bitmap's aspect ratio
        4. Resolve geometry for that orientation
        5. Segment uniformly or at markers
        6. Compose each segment onto its page

        Args:
            document: Rendered bitmap and break markers

        Returns:
            PaginationPlan

        Raises:
            ConfigurationError: If the page setup leaves no printable area
        """
        config = self.config
        validate_page_setup(config.page_size, config.margin_mm, config.scale)

        use_markers = config.use_marker_pagination and document.has_markers
        mode = SegmentationMode.MARKERS if use_markers else SegmentationMode.UNIFORM

        if document.height_px <= 0 or document.width_px <= 0:
            logger.warning(f"{EMPTY_CONTENT_WARNING}: bitmap is {document.width_px}x{document.height_px}")
            return PaginationPlan(
                is_landscape=config.force_landscape,
                geometry=None,
                mode=mode,
                trace=SegmentationTrace(segments=(), decisions=()),
                composed=(),
                warnings=(EMPTY_CONTENT_WARNING,),
            )

        is_landscape = select_orientation(
            document.width_px,
            document.height_px,
            config.force_landscape,
            reference=config.page_size,
        )
        geometry = resolve_geometry(config.page_size, config.margin_mm, config.scale, is_landscape)
        capacity = geometry.content_rows

        logger.info(
            f"Paginating {document.width_px}x{document.height_px}px bitmap on "
            f"{config.page_size.name} {'landscape' if is_landscape else 'portrait'} "
            f"({capacity}px per page, {mode.value})"
        )

        if use_markers:
            if not document.markers_sorted:
                logger.warning("Break markers are not in ascending order")
            trace = trace_with_markers(document.height_px, capacity, document.markers)
        else:
            trace = trace_uniform(document.height_px, capacity)

        warnings = [
            f"Skipped break marker at {px}px (already passed)"
            for px in trace.skipped_markers
        ]
        composed = compose_segments(trace.segments, document.width_px, geometry)

        return PaginationPlan(
            is_landscape=is_landscape,
            geometry=geometry,
            mode=mode,
            trace=trace,
            composed=tuple(composed),
            warnings=tuple(warnings),
        )

    def paginate(self, document: RenderedDocument, writer: PageWriter) -> PaginationResult:
        """
        Plan a document and drive a page writer with the result.

        The whole plan is computed before the writer is touched, so a bad
        configuration never leaves a half-written document. An empty
        document produces no writer calls at all.

        Args:
            document: Rendered bitmap and break markers
            writer: Page writer receiving one page per segment

        Returns:
            PaginationResult

        Raises:
            ConfigurationError: If the page setup leaves no printable area
        """
        start_time = time.perf_counter()
        plan = self.plan(document)

        if plan.is_empty:
            return PaginationResult(plan=plan, pages_written=0)

        writer.begin(plan.geometry.page_format)
        for i, composed in enumerate(plan.composed):
            if i > 0:
                writer.new_page()
            writer.draw(composed.region.crop_from(document.image), composed.placement)
        output = writer.finish()

        elapsed = time.perf_counter() - start_time
        logger.info(f"Paginated onto {writer.page_count} pages in {elapsed:.2f}s")

        return PaginationResult(
            plan=plan,
            pages_written=writer.page_count,
            output=output,
            elapsed_seconds=elapsed,
        )


def paginate_document(
    document: RenderedDocument,
    config: PaginationConfig,
    writer: PageWriter,
) -> PaginationResult:
    """Run a single pagination with a throwaway engine."""
    return PaginationEngine(config).paginate(document, writer)
