"""
Module: output.pdf_writer

Purpose:
    Write composed segments to a multi-page PDF using ReportLab.
    Each segment becomes one PDF page with its image drawn at the
    placement computed by the compositor.

Key Classes:
    - PdfPageWriter: ReportLab page writer

Key Functions:
    - export_pdf(): Paginate a rendered document straight to a PDF file

Dependencies:
    - reportlab: PDF generation
    - PIL: Image encoding

Used By:
    - Callers that need a finished PDF from a RenderedDocument
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from PIL import Image
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from canvas_paginator.core.models import PageFormat, PlacementResult, RenderedDocument
from canvas_paginator.pagination.config import PaginationConfig
from canvas_paginator.pagination.engine import PaginationEngine, PaginationResult

from .page_writer import PageWriter

logger = logging.getLogger(__name__)

DEFAULT_JPEG_QUALITY = 85
SUPPORTED_IMAGE_FORMATS = ("JPEG", "PNG")


class PdfPageWriter(PageWriter):
    """
    Page writer backed by a ReportLab canvas.

    Placements are top-down millimetres; ReportLab works bottom-up in
    points, so y is flipped against the page height on draw.

    Attributes:
        output_path: PDF file to write
        image_format: "JPEG" (smaller, lossy) or "PNG" (lossless)
        jpeg_quality: Quality for JPEG encoding (1-95)

    Example:
        >>> writer = PdfPageWriter(Path("out/doc.pdf"))
        >>> PaginationEngine(config).paginate(document, writer)
    """

    def __init__(
        self,
        output_path: Path,
        *,
        image_format: str = "JPEG",
        jpeg_quality: int = DEFAULT_JPEG_QUALITY,
    ) -> None:
        super().__init__()
        image_format = image_format.upper()
        if image_format not in SUPPORTED_IMAGE_FORMATS:
            raise ValueError(f"Unsupported image format: {image_format}")
        if not 1 <= jpeg_quality <= 95:
            raise ValueError(f"jpeg_quality must be in 1..95: {jpeg_quality}")

        self.output_path = Path(output_path)
        self.image_format = image_format
        self.jpeg_quality = jpeg_quality
        self._canvas: Optional[canvas.Canvas] = None
        self._page_height_pt = 0.0

    def _begin(self, page_format: PageFormat) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)
        page_size = (page_format.width_mm * mm, page_format.height_mm * mm)
        self._page_height_pt = page_size[1]
        self._canvas = canvas.Canvas(str(self.output_path), pagesize=page_size)

    def _new_page(self) -> None:
        self._canvas.showPage()

    def _draw(self, image: Image.Image, placement: PlacementResult) -> None:
        x_pt = placement.x_mm * mm
        width_pt = placement.width_mm * mm
        height_pt = placement.height_mm * mm
        y_pt = _transform_y(self._page_height_pt, placement.y_mm, placement.height_mm)

        self._canvas.drawImage(
            self._pil_to_reader(image),
            x_pt,
            y_pt,
            width=width_pt,
            height=height_pt,
        )

    def _finish(self) -> Path:
        self._canvas.showPage()
        self._canvas.save()
        logger.info(f"Wrote {self.page_count} pages to {self.output_path}")
        return self.output_path

    def _pil_to_reader(self, img: Image.Image) -> ImageReader:
        """
        Encode a PIL image for ReportLab.

        JPEG has no alpha channel, so images are flattened to RGB first.
        """
        buf = io.BytesIO()
        if self.image_format == "JPEG":
            if img.mode != "RGB":
                img = img.convert("RGB")
            img.save(buf, format="JPEG", quality=self.jpeg_quality)
        else:
            img.save(buf, format="PNG")
        buf.seek(0)
        return ImageReader(buf)


def _transform_y(page_height_pt: float, y_mm_top: float, height_mm: float) -> float:
    """
    Convert a top-down millimetre y coordinate to bottom-up PDF points.

    Args:
        page_height_pt: Page height in points
        y_mm_top: Distance from the page top to the element's top edge
        height_mm: Element height

    Returns:
        Y of the element's bottom edge, measured from the page bottom
    """
    return page_height_pt - (y_mm_top + height_mm) * mm


def export_pdf(
    document: RenderedDocument,
    output_path: Path,
    config: PaginationConfig,
    *,
    image_format: str = "JPEG",
    jpeg_quality: int = DEFAULT_JPEG_QUALITY,
) -> PaginationResult:
    """
    Paginate a rendered document into a PDF file.

    Args:
        document: Rendered bitmap and break markers
        output_path: PDF file to write
        config: Pagination configuration
        image_format: Encoding for page images ("JPEG" or "PNG")
        jpeg_quality: JPEG quality when image_format is "JPEG"

    Returns:
        PaginationResult; ``output`` is the PDF path, or None if the
        document was empty and nothing was written

    Raises:
        ConfigurationError: If the config leaves no printable area
    """
    writer = PdfPageWriter(output_path, image_format=image_format, jpeg_quality=jpeg_quality)
    return PaginationEngine(config).paginate(document, writer)
