"""
Module: pagination.geometry

Purpose:
    Convert physical page formats into pixel-space content dimensions.
    Pure functions, no state.

Key Functions:
    - validate_page_setup(): Check margin/scale against a page size
    - resolve_geometry(): Build a PageGeometry for one orientation
    - layout_width_px(): Width a renderer should lay content out at
    - page_count_for(): Pages needed for a content height

Dependencies:
    - core.models: PageSize, PageGeometry, PIXELS_PER_MM

Used By:
    - pagination.engine: Geometry resolution once per run
"""

from __future__ import annotations

import math

from canvas_paginator.core.errors import ConfigurationError
from canvas_paginator.core.models import PIXELS_PER_MM, PageGeometry, PageSize


def validate_page_setup(page_size: PageSize | str, margin_mm: float, scale: float) -> PageSize:
    """
    Check that a page setup leaves a positive printable area.

    Args:
        page_size: Page size or its name
        margin_mm: Margin on every side in millimetres
        scale: Render scale factor

    Returns:
        The resolved PageSize

    Raises:
        ConfigurationError: If the size is unknown, scale <= 0, margin < 0,
            or the margins consume a whole page side,
            or the printable area is narrower than one pixel
    """
    size = PageSize.from_name(page_size)
    if scale <= 0:
        raise ConfigurationError(f"scale must be positive: {scale}")
    if margin_mm < 0:
        raise ConfigurationError(f"margin_mm must be non-negative: {margin_mm}")

    fmt = size.portrait
    if 2 * margin_mm >= fmt.width_mm:
        raise ConfigurationError(
            f"Margins exceed page width: 2 x {margin_mm}mm >= {fmt.width_mm}mm"
        )
    if 2 * margin_mm >= fmt.height_mm:
        raise ConfigurationError(
            f"Margins exceed page height: 2 x {margin_mm}mm >= {fmt.height_mm}mm"
        )

    shortest_side_px = (min(fmt.width_mm, fmt.height_mm) - 2 * margin_mm) * PIXELS_PER_MM * scale
    if shortest_side_px < 1:
        raise ConfigurationError(
            f"Printable area is under one pixel at scale {scale}: {shortest_side_px:.3f}px"
        )
    return size


def resolve_geometry(
    page_size: PageSize | str,
    margin_mm: float,
    scale: float,
    landscape: bool,
) -> PageGeometry:
    """
    Resolve pixel-space page geometry.

    Args:
        page_size: Base page size (A4 or Letter) or its name
        margin_mm: Margin on every side in millimetres
        scale: Render scale factor applied on top of 96 DPI
        landscape: Use the landscape variant of the page

    Returns:
        PageGeometry with page and content dimensions in pixels

    Raises:
        ConfigurationError: If the setup leaves no printable area

    Example:
        >>> geo = resolve_geometry("a4", 10, 1, landscape=False)
        >>> round(geo.content_height_px, 2)
        1046.93
    """
    size = validate_page_setup(page_size, margin_mm, scale)
    fmt = size.oriented(landscape)
    px_per_mm = PIXELS_PER_MM * scale

    return PageGeometry(
        page_format=fmt,
        margin_mm=margin_mm,
        scale=scale,
        page_width_px=fmt.width_mm * px_per_mm,
        page_height_px=fmt.height_mm * px_per_mm,
        content_width_px=(fmt.width_mm - 2 * margin_mm) * px_per_mm,
        content_height_px=(fmt.height_mm - 2 * margin_mm) * px_per_mm,
        margin_px=margin_mm * px_per_mm,
    )


def layout_width_px(page_size: PageSize | str, margin_mm: float) -> int:
    """
    Width in unscaled layout pixels that fills a portrait page's printable
    width. Renderers lay the document out at this width before rasterizing.
    """
    size = validate_page_setup(page_size, margin_mm, 1.0)
    return round((size.portrait.width_mm - 2 * margin_mm) * PIXELS_PER_MM)


def page_count_for(total_height_px: float, content_height_px: float) -> int:
    """Number of full-capacity pages needed for a content height."""
    if content_height_px <= 0:
        raise ValueError(f"content_height_px must be positive: {content_height_px}")
    if total_height_px <= 0:
        return 0
    return math.ceil(total_height_px / content_height_px)
