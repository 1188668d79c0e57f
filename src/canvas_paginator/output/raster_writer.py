"""
Module: output.raster_writer

Purpose:
    Render pages as Pillow images instead of a PDF. Used for page
    previews and for checking placements pixel by pixel.

Key Classes:
    - RasterPageWriter: Produces one RGB image per page
"""

from __future__ import annotations

import logging
from typing import List, Optional

from PIL import Image

from canvas_paginator.core.models import PageFormat, PlacementResult

from .page_writer import PageWriter

logger = logging.getLogger(__name__)

DEFAULT_PREVIEW_DPI = 96
MM_PER_INCH = 25.4


class RasterPageWriter(PageWriter):
    """
    Page writer that paints each page onto a white canvas.

    Attributes:
        dpi: Resolution of the output pages
        background: Fill colour for the page
    """

    def __init__(self, dpi: int = DEFAULT_PREVIEW_DPI, background: str = "white") -> None:
        super().__init__()
        if dpi <= 0:
            raise ValueError(f"dpi must be positive: {dpi}")
        self.dpi = dpi
        self.background = background
        self._size: tuple[int, int] = (0, 0)
        self._current: Optional[Image.Image] = None
        self._done: List[Image.Image] = []

    def mm_to_px(self, value_mm: float) -> int:
        return round(value_mm * self.dpi / MM_PER_INCH)

    def _begin(self, page_format: PageFormat) -> None:
        self._size = (self.mm_to_px(page_format.width_mm), self.mm_to_px(page_format.height_mm))
        self._current = self._blank()

    def _new_page(self) -> None:
        self._done.append(self._current)
        self._current = self._blank()

    def _draw(self, image: Image.Image, placement: PlacementResult) -> None:
        box = (
            self.mm_to_px(placement.x_mm),
            self.mm_to_px(placement.y_mm),
            self.mm_to_px(placement.x_mm + placement.width_mm),
            self.mm_to_px(placement.y_mm + placement.height_mm),
        )
        size = (max(1, box[2] - box[0]), max(1, box[3] - box[1]))
        scaled = image.convert("RGB").resize(size, Image.Resampling.LANCZOS)
        self._current.paste(scaled, box[:2])

    def _finish(self) -> List[Image.Image]:
        self._done.append(self._current)
        self._current = None
        logger.debug(f"Rasterized {len(self._done)} pages at {self.dpi} DPI")
        return list(self._done)

    def _blank(self) -> Image.Image:
        return Image.new("RGB", self._size, color=self.background)
