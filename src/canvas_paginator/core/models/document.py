"""
Module: core.models.document

Purpose:
    The renderer's hand-off to the paginator: one tall bitmap plus the
    break markers found while rendering it.

Key Classes:
    - RenderedDocument: Source bitmap and break markers

Dependencies:
    - PIL: Image type
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from PIL import Image

from .segments import BreakMarker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedDocument:
    """
    Rendered document ready for pagination (immutable).

    Attributes:
        image: Full rendered bitmap
        markers: Break markers, top to bottom

    Example:
        >>> doc = RenderedDocument.from_positions(Image.new("RGB", (800, 3000)), [1200, 2500])
        >>> doc.height_px
        3000
    """

    image: Image.Image
    markers: tuple[BreakMarker, ...] = field(default_factory=tuple)

    @property
    def width_px(self) -> int:
        return self.image.width

    @property
    def height_px(self) -> int:
        return self.image.height

    @property
    def has_markers(self) -> bool:
        return bool(self.markers)

    @property
    def markers_sorted(self) -> bool:
        """True when markers are in ascending order."""
        return all(a <= b for a, b in zip(self.markers, self.markers[1:]))

    @classmethod
    def from_positions(
        cls,
        image: Image.Image,
        positions: Iterable[int],
    ) -> RenderedDocument:
        """Build a document from raw marker rows."""
        return cls(image=image, markers=tuple(BreakMarker(int(p)) for p in positions))

    @classmethod
    def from_layout_offsets(
        cls,
        image: Image.Image,
        offsets: Iterable[float],
        scale: float = 1.0,
    ) -> RenderedDocument:
        """
        Build a document from layout-space marker offsets.

        Offsets are measured in unscaled layout pixels from the top of the
        rendered container; they are multiplied by the render scale to land
        on bitmap rows.
        """
        markers = tuple(BreakMarker.from_layout_offset(o, scale) for o in offsets)
        logger.debug(f"Converted {len(markers)} layout offsets at scale {scale}")
        return cls(image=image, markers=markers)
