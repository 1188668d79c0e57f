"""
Module: pagination.orientation

Purpose:
    Choose portrait or landscape pages for a bitmap so that its aspect
    ratio wastes as little of the page as possible.

Key Functions:
    - select_orientation(): Landscape decision for a whole run
"""

from __future__ import annotations

import logging

from canvas_paginator.core.models import PageSize

logger = logging.getLogger(__name__)


def select_orientation(
    content_width_px: float,
    content_height_px: float,
    force_landscape: bool = False,
    reference: PageSize = PageSize.A4,
) -> bool:
    """
    Decide whether pages should be landscape.

    Compares the content aspect ratio with the reference page's portrait
    and landscape ratios and picks the closer one. Portrait wins ties.

    Args:
        content_width_px: Bitmap width
        content_height_px: Bitmap height
        force_landscape: Skip the heuristic and return True
        reference: Page size whose ratios are compared against

    Returns:
        True for landscape, False for portrait

    Raises:
        ValueError: If either content dimension is not positive

    Example:
        >>> select_orientation(800, 3000)
        False
        >>> select_orientation(3000, 1000)
        True
    """
    if force_landscape:
        return True
    if content_width_px <= 0 or content_height_px <= 0:
        raise ValueError(
            f"Content dimensions must be positive: {content_width_px}x{content_height_px}"
        )

    aspect_ratio = content_width_px / content_height_px
    portrait_diff = abs(aspect_ratio - reference.portrait.aspect_ratio)
    landscape_diff = abs(aspect_ratio - reference.landscape.aspect_ratio)

    is_landscape = landscape_diff < portrait_diff
    logger.debug(
        f"Aspect {aspect_ratio:.3f}: portrait diff {portrait_diff:.3f}, "
        f"landscape diff {landscape_diff:.3f} -> {'landscape' if is_landscape else 'portrait'}"
    )
    return is_landscape
