"""
Module: output.page_writer

Purpose:
    Abstract interface for the collaborator that turns composed segments
    into physical pages. The engine drives a writer in strict order:

        begin(page_format)
        draw(image, placement)            # page 0
        new_page(); draw(image, placement) # page 1, 2, ...
        finish()

Key Classes:
    - PageWriter: Abstract base class for page writers

Dependencies:
    - PIL: Image type
    - core.models: PageFormat, PlacementResult

Used By:
    - pagination.engine: Page output
    - output.pdf_writer: ReportLab implementation
    - output.raster_writer: Pillow implementation
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from PIL import Image

from canvas_paginator.core.errors import PageWriterError
from canvas_paginator.core.models import PageFormat, PlacementResult


class PageWriter(ABC):
    """
    Abstract page writer.

    Subclasses implement the ``_begin``/``_new_page``/``_draw``/``_finish``
    hooks; this base class enforces the call order and counts pages.
    """

    def __init__(self) -> None:
        self._page_format: Optional[PageFormat] = None
        self._pages = 0
        self._finished = False

    @property
    def page_format(self) -> Optional[PageFormat]:
        """Page format for the whole document, once begun."""
        return self._page_format

    @property
    def page_count(self) -> int:
        """Pages started so far."""
        return self._pages

    def begin(self, page_format: PageFormat) -> None:
        """
        Start the document. The first page is implicitly open afterwards.

        Raises:
            PageWriterError: If the writer was already begun
        """
        if self._page_format is not None:
            raise PageWriterError("Writer already begun")
        self._page_format = page_format
        self._pages = 1
        self._begin(page_format)

    def new_page(self) -> None:
        """Close the current page and open the next one."""
        self._require_open("new_page")
        self._pages += 1
        self._new_page()

    def draw(self, image: Image.Image, placement: PlacementResult) -> None:
        """Draw a segment image on the current page."""
        self._require_open("draw")
        self._draw(image, placement)

    def finish(self) -> Any:
        """
        Close the document.

        Returns:
            Writer-specific output (a path, a list of images, ...)
        """
        self._require_open("finish")
        self._finished = True
        return self._finish()

    def _require_open(self, action: str) -> None:
        if self._page_format is None:
            raise PageWriterError(f"Cannot {action} before begin()")
        if self._finished:
            raise PageWriterError(f"Cannot {action} after finish()")

    @abstractmethod
    def _begin(self, page_format: PageFormat) -> None:
        """Open the output with the given page format."""

    @abstractmethod
    def _new_page(self) -> None:
        """Emit the current page and start a fresh one."""

    @abstractmethod
    def _draw(self, image: Image.Image, placement: PlacementResult) -> None:
        """Draw ``image`` into the placement rectangle of the current page."""

    @abstractmethod
    def _finish(self) -> Any:
        """Flush the last page and return the writer's output."""
