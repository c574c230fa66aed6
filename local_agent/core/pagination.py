"""
Filter-then-slice pagination shared by all three stores.

Pages are numbered from 1. A page past the end is just empty, not an error.
"""

import math
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")


def select_page(
    collection: Iterable[T],
    predicate: Callable[[T], bool] | None,
    page: int,
    page_size: int,
) -> tuple[list[T], int]:
    """Return (items on the requested page, total items matching predicate).

    Insertion order of the collection is preserved. Both page and page_size
    must be positive; the HTTP layer rejects anything else before we get here.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    if predicate is None:
        filtered = list(collection)
    else:
        filtered = [item for item in collection if predicate(item)]

    start = (page - 1) * page_size
    return filtered[start:start + page_size], len(filtered)


def total_pages(total_items: int, page_size: int) -> int:
    """ceil(total_items / page_size). Zero items means zero pages."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return math.ceil(total_items / page_size)
