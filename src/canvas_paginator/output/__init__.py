"""
Module: output

Purpose:
    Page writers for the pagination engine.

Key Classes:
    - PageWriter: Abstract interface
    - PdfPageWriter: ReportLab PDF output
    - RasterPageWriter: Pillow page images

Key Functions:
    - export_pdf(): RenderedDocument -> PDF file

Dependencies:
    - reportlab: PDF generation
    - PIL: Image handling
"""

from .page_writer import PageWriter
from .raster_writer import RasterPageWriter
from .pdf_writer import PdfPageWriter, export_pdf

__all__ = [
    "PageWriter",
    "PdfPageWriter",
    "RasterPageWriter",
    "export_pdf",
]
