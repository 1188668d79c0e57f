"""
Module: pagination

Purpose:
    Canvas pagination engine. Slices one tall rendered bitmap into
    page-sized segments and places each on a physical page.

Key Functions:
    - resolve_geometry(): Page format -> pixel geometry
    - select_orientation(): Portrait or landscape for the run
    - segment_uniform() / segment_with_markers(): Segmentation
    - compose_segment(): Placement for one segment

Key Classes:
    - PaginationConfig: Configuration for a run
    - PaginationEngine: Orchestrator
    - PaginationPlan / PaginationResult: Outputs

Dependencies:
    - PIL: Bitmap cropping
    - canvas_paginator.core.models: Data model

Used By:
    - canvas_paginator.output: Page writers and export_pdf
"""

from .config import PaginationConfig
from .geometry import layout_width_px, page_count_for, resolve_geometry, validate_page_setup
from .orientation import select_orientation
from .segmenter import segment_uniform, segment_with_markers, trace_uniform, trace_with_markers
from .compositor import compose_segment, compose_segments
from .engine import (
    PaginationEngine,
    PaginationPlan,
    PaginationResult,
    SegmentationMode,
    paginate_document,
)

__all__ = [
    # Config
    "PaginationConfig",
    # Geometry
    "resolve_geometry",
    "validate_page_setup",
    "layout_width_px",
    "page_count_for",
    # Orientation
    "select_orientation",
    # Segmentation
    "segment_uniform",
    "segment_with_markers",
    "trace_uniform",
    "trace_with_markers",
    # Composition
    "compose_segment",
    "compose_segments",
    # Engine
    "PaginationEngine",
    "PaginationPlan",
    "PaginationResult",
    "SegmentationMode",
    "paginate_document",
]
