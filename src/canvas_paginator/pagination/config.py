"""
Module: pagination.config

Purpose:
    Configuration for the pagination engine.
    Defines page size, margins, render scale and the pagination mode.

Key Classes:
    - PaginationConfig: Immutable pagination configuration

Dependencies:
    - dataclasses (std)
    - core.models.formats: PageSize

Used By:
    - pagination.engine: Engine construction
    - output.pdf_writer: export_pdf convenience
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping

from canvas_paginator.core.errors import ConfigurationError
from canvas_paginator.core.models.formats import PageSize

from .geometry import validate_page_setup

logger = logging.getLogger(__name__)

DEFAULT_MARGIN_MM = 10.0
DEFAULT_SCALE = 1.0


@dataclass(frozen=True)
class PaginationConfig:
    """
    Configuration for one pagination run (immutable).

    Passed once into the engine; there is no global settings object.

    Attributes:
        page_size: Base page size (A4 or Letter)
        margin_mm: Margin on every side in millimetres
        scale: Render scale factor the bitmap was rasterized at
        force_landscape: Always use landscape pages
        use_marker_pagination: Break at renderer markers when present

    Example:
        >>> config = PaginationConfig(page_size=PageSize.LETTER, margin_mm=15)
        >>> config.page_size.portrait.width_mm
        216
    """

    page_size: PageSize = PageSize.A4
    margin_mm: float = DEFAULT_MARGIN_MM
    scale: float = DEFAULT_SCALE
    force_landscape: bool = False
    use_marker_pagination: bool = False

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not isinstance(self.page_size, PageSize):
            raise ConfigurationError(f"page_size must be a PageSize: {self.page_size!r}")
        validate_page_setup(self.page_size, self.margin_mm, self.scale)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PaginationConfig:
        """
        Build a config from a plain mapping (e.g. parsed JSON settings).

        Missing keys take their defaults. ``page_size`` may be a name such as
        "a4" or "letter". Unknown keys are ignored. Flags accept booleans, 0/1 or
        strings such as "true" and "false".

        Raises:
            ConfigurationError: If any value is invalid
        """
        known = {f.name for f in fields(cls)}
        kwargs = {k: v for k, v in data.items() if k in known}
        ignored = sorted(set(data) - known)
        if ignored:
            logger.debug(f"Ignoring unknown pagination settings: {ignored}")

        if "page_size" in kwargs:
            kwargs["page_size"] = PageSize.from_name(kwargs["page_size"])
        try:
            for key in ("margin_mm", "scale"):
                if key in kwargs:
                    kwargs[key] = float(kwargs[key])
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid numeric setting: {e}") from e
        for key in ("force_landscape", "use_marker_pagination"):
            if key in kwargs:
                kwargs[key] = _parse_flag(key, kwargs[key])

        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "page_size": self.page_size.name.lower(),
            "margin_mm": self.margin_mm,
            "scale": self.scale,
            "force_landscape": self.force_landscape,
            "use_marker_pagination": self.use_marker_pagination,
        }


_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


def _parse_flag(key: str, value: Any) -> bool:
    """Convert a settings value to bool; strings must spell out true or false."""
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
        raise ConfigurationError(f"Invalid boolean setting {key}: {value!r}")
    if isinstance(value, (bool, int)) and value in (0, 1):
        return bool(value)
    raise ConfigurationError(f"Invalid boolean setting {key}: {value!r}")
