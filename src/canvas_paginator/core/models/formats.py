"""
Module: core.models.formats

Purpose:
    Physical page formats. Provides the two supported base sizes (A4 and
    US Letter) with their portrait and landscape variants, plus the
    millimetre to pixel conversion constant used throughout pagination.

Key Classes:
    - PageFormat: Physical page size in millimetres
    - PageSize: Enum of supported base sizes

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - pagination.geometry: Pixel geometry resolution
    - pagination.orientation: Reference aspect ratios
    - pagination.compositor: Printable area in millimetres
    - output.pdf_writer: Page size in points
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from canvas_paginator.core.errors import ConfigurationError

# 96 DPI expressed per millimetre (96 / 25.4)
PIXELS_PER_MM = 3.7795275591


@dataclass(frozen=True, slots=True)
class PageFormat:
    """
    Physical page size (immutable).

    Attributes:
        width_mm: Page width in millimetres
        height_mm: Page height in millimetres

    Example:
        >>> fmt = PageFormat(210, 297)
        >>> fmt.landscape()
        PageFormat(width_mm=297, height_mm=210)
    """

    width_mm: float
    height_mm: float

    def __post_init__(self) -> None:
        """Validate dimensions on construction."""
        if self.width_mm <= 0:
            raise ValueError(f"width_mm must be positive: {self.width_mm}")
        if self.height_mm <= 0:
            raise ValueError(f"height_mm must be positive: {self.height_mm}")

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height."""
        return self.width_mm / self.height_mm

    @property
    def is_landscape(self) -> bool:
        """True when the page is wider than it is tall."""
        return self.width_mm > self.height_mm

    def landscape(self) -> PageFormat:
        """Return the variant with width and height swapped."""
        return PageFormat(width_mm=self.height_mm, height_mm=self.width_mm)


class PageSize(Enum):
    """
    Supported base page sizes.

    Each member's value is its portrait PageFormat. ``from_name`` also
    accepts the single-letter aliases "A" (A4) and "B" (Letter).

    Example:
        >>> PageSize.from_name("letter").portrait
        PageFormat(width_mm=216, height_mm=279)
    """

    A4 = PageFormat(width_mm=210, height_mm=297)
    LETTER = PageFormat(width_mm=216, height_mm=279)  # 8.5x11in

    @property
    def portrait(self) -> PageFormat:
        return self.value

    @property
    def landscape(self) -> PageFormat:
        return self.value.landscape()

    def oriented(self, landscape: bool) -> PageFormat:
        """Portrait or landscape variant of this size."""
        return self.landscape if landscape else self.portrait

    @classmethod
    def from_name(cls, name: str | PageSize) -> PageSize:
        """
        Look up a page size by name.

        Args:
            name: "a4", "letter", "A", "B" (case-insensitive) or a PageSize

        Returns:
            Matching PageSize

        Raises:
            ConfigurationError: If the name is not a known page size
        """
        if isinstance(name, PageSize):
            return name
        key = str(name).strip().lower()
        try:
            return _PAGE_SIZE_NAMES[key]
        except KeyError:
            raise ConfigurationError(f"Unknown page size: {name!r}") from None


_PAGE_SIZE_NAMES = {
    "a4": PageSize.A4,
    "a": PageSize.A4,
    "letter": PageSize.LETTER,
    "b": PageSize.LETTER,
}
