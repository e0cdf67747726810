"""Page/size normalisation for order listings.

Listing never fails because of its pagination inputs: non-positive or
unparsable values fall back to page 1 and ``settings.DEFAULT_PAGE_SIZE``,
and sizes above ``settings.MAX_PAGE_SIZE`` are clamped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings

FALLBACK_PAGE_SIZE = 10
FALLBACK_MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


def normalize_page(page: int, size: int) -> PageRequest:
    default_size = getattr(settings, "DEFAULT_PAGE_SIZE", FALLBACK_PAGE_SIZE)
    max_size = getattr(settings, "MAX_PAGE_SIZE", FALLBACK_MAX_PAGE_SIZE)

    if page <= 0:
        page = 1
    if size <= 0:
        size = default_size
    return PageRequest(page=page, size=min(size, max_size))


def parse_int_param(raw: Any) -> int:
    """Parse a query-string value; anything unparsable becomes ``0``."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        return 0
