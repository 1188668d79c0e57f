"""
Module: core.errors

Purpose:
    Exception hierarchy shared by the pagination engine and page writers.

Key Classes:
    - PaginationError: Base class for all paginator errors
    - ConfigurationError: Invalid page setup (fatal, never retried)
    - PageWriterError: Page writer driven out of order
"""

from __future__ import annotations


class PaginationError(Exception):
    """Error during pagination."""
    pass


class ConfigurationError(PaginationError, ValueError):
    """
    Page setup cannot produce a printable area.

    Raised for unknown page sizes, non-positive scale, negative margins,
    or margins that leave no content area. Deterministic given the same
    inputs, so callers should not retry.
    """
    pass


class PageWriterError(PaginationError):
    """Page writer used out of order (e.g. draw before begin)."""
    pass
