"""Pagination — offset/limit math and the page envelope.

Invariants:
    - offset = (page_number - 1) * per_page_size, limit = per_page_size
    - total_page >= 1, even for an empty listing
    - current_page is clamped into [1, total_page]; data is never re-sliced

Design Decisions:
    - Frozen dataclass for the request: computed once from validated query
      params, then passed unchanged from route to repository
"""

import logging
import math
from dataclasses import dataclass

from app.core.domain_types import OrderDirection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageRequest:
    """Validated page request. Values are trusted (checked at the API boundary)."""
    page_number: int = 1
    per_page_size: int = 10
    order_by: OrderDirection = OrderDirection.DESC

    @property
    def offset(self) -> int:
        return (self.page_number - 1) * self.per_page_size

    @property
    def limit(self) -> int:
        return self.per_page_size


def compute_total_pages(total_count: int, per_page_size: int) -> int:
    """ceil(total / size), forced to 1 when that is below 1."""
    pages = math.ceil(total_count / per_page_size)
    if pages < 1:
        logger.warning(
            f"Total pages computed as {pages} for {total_count} rows; using 1",
        )
        return 1
    return pages


def clamp_page(page_number: int, total_pages: int) -> int:
    """Clamp a requested page number into the valid range."""
    return max(1, min(page_number, total_pages))


def build_page(request: PageRequest, total_count: int, items: list) -> dict:
    """Page envelope returned as `data` of a list response."""
    total_page = compute_total_pages(total_count, request.per_page_size)
    return {
        "current_page": clamp_page(request.page_number, total_page),
        "per_page_size": request.per_page_size,
        "total_count": total_count,
        "total_page": total_page,
        "data": items,
    }
