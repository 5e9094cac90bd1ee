"""ISO 3166-2 region-code lookup for explicit geo locators.

The subdivision table comes from ``pycountry`` and is loaded once, on
first use. It is never mutated afterwards, so concurrent reads need no
locking.
"""

from __future__ import annotations

import functools
import logging

import pycountry

logger = logging.getLogger(__name__)


@functools.cache
def region_codes() -> frozenset[str]:
    """Return every recognized ISO 3166-2 subdivision code (e.g. ``US-CA``)."""
    codes = frozenset(subdivision.code for subdivision in pycountry.subdivisions)
    logger.debug("Loaded %d ISO 3166-2 subdivision codes", len(codes))
    return codes


def is_valid_region_code(code: str) -> bool:
    """Check whether *code* is a recognized subdivision code.

    Total over all strings; matching is exact and case-sensitive.

    Examples:
        >>> is_valid_region_code("US-CA")
        True
        >>> is_valid_region_code("US-AA")
        False
    """
    return code in region_codes()


def describe_region(code: str) -> dict[str, str] | None:
    """Return name/type/country for a recognized region code, else None."""
    if not is_valid_region_code(code):
        return None
    subdivision = pycountry.subdivisions.get(code=code)
    return {
        "code": subdivision.code,
        "name": subdivision.name,
        "type": subdivision.type,
        "country_code": subdivision.country_code,
    }
