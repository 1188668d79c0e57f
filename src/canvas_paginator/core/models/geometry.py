"""
Module: core.models.geometry

Purpose:
    Resolved pixel-space page geometry. Built once per run by
    pagination.geometry.resolve_geometry and never mutated.

Key Classes:
    - PageGeometry: Page and content dimensions in pixels
"""

from __future__ import annotations

from dataclasses import dataclass

from .formats import PageFormat


@dataclass(frozen=True, slots=True)
class PageGeometry:
    """
    Pixel-space page dimensions (immutable).

    Pixel values are floats at the given render scale. The oriented page
    format and margin the geometry was resolved from are kept alongside so
    that placements can be computed in millimetres later.

    Attributes:
        page_format: Oriented physical page format
        margin_mm: Margin on every side in millimetres
        scale: Render scale factor
        page_width_px: Full page width
        page_height_px: Full page height
        content_width_px: Page width minus both margins
        content_height_px: Page height minus both margins
        margin_px: Single margin in pixels

    Invariants:
        - page_width_px == content_width_px + 2 * margin_px
        - content dims < page dims whenever margin_mm > 0
    """

    page_format: PageFormat
    margin_mm: float
    scale: float
    page_width_px: float
    page_height_px: float
    content_width_px: float
    content_height_px: float
    margin_px: float

    @property
    def is_landscape(self) -> bool:
        return self.page_format.is_landscape

    @property
    def content_width_mm(self) -> float:
        """Printable width in millimetres."""
        return self.page_format.width_mm - 2 * self.margin_mm

    @property
    def content_height_mm(self) -> float:
        """Printable height in millimetres."""
        return self.page_format.height_mm - 2 * self.margin_mm

    @property
    def content_rows(self) -> int:
        """Content height floored to whole pixel rows (slicing capacity)."""
        return int(self.content_height_px)
