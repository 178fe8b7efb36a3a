"""Pagination: validates page/per_page and slices a sequence in order.

Invariants:
    - page and per_page must be finite and >= 1, otherwise FieldValidationError
    - Slice bounds are truncated toward zero (fractional pages are allowed)
    - Bounds past the end (including overflow to inf) yield an empty page
    - total_pages = max(1, ceil(total / per_page)), so an empty store still has 1 page
"""

import math
from dataclasses import dataclass
from typing import Sequence, TypeVar

from demo_api.core.errors import FieldValidationError

T = TypeVar("T")

DEFAULT_PAGE: int = 1
DEFAULT_PER_PAGE: int = 2


@dataclass(frozen=True)
class PageRequest:
    """A validated pagination request."""
    page: float
    per_page: float


def validate_page_request(page: float, per_page: float) -> PageRequest:
    """Reject NaN, infinities and anything below 1."""
    for field, value in (("page", page), ("per_page", per_page)):
        if not math.isfinite(value) or value < 1:
            raise FieldValidationError(
                "Invalid pagination parameters", field=field,
            )
    return PageRequest(page=float(page), per_page=float(per_page))


def total_pages(total: int, per_page: float) -> int:
    return max(1, math.ceil(total / per_page))


def page_slice(items: Sequence[T], request: PageRequest) -> list[T]:
    """Contiguous window [start, start + per_page) of items, in order."""
    start = (request.page - 1) * request.per_page
    end = start + request.per_page
    # Huge finite inputs can overflow to inf; past the end is just empty.
    start = min(start, len(items))
    end = min(end, len(items))
    return list(items[int(start):int(end)])
