"""
Pagination sequence generation for table footers.

Policy, evaluated in order:
1. total_pages <= 7: every page
2. current_page among the first 3: first 3, ellipsis, last 2
3. current_page among the last 3: first 2, ellipsis, last 3
4. otherwise: first, ellipsis, current and neighbours, ellipsis, last

Inputs are not validated here; see component.run_generate_pagination.
"""

from __future__ import annotations

from typing import Literal

ELLIPSIS: Literal["..."] = "..."
MAX_PAGES_WITHOUT_ELLIPSIS = 7

PageItem = int | Literal["..."]


def generate_pagination(current_page: int, total_pages: int) -> list[PageItem]:
    """
    Return the page markers to display for current_page of total_pages.

    >>> generate_pagination(5, 10)
    [1, '...', 4, 5, 6, '...', 10]
    """
    if total_pages <= MAX_PAGES_WITHOUT_ELLIPSIS:
        return list(range(1, total_pages + 1))

    if current_page <= 3:
        return [1, 2, 3, ELLIPSIS, total_pages - 1, total_pages]

    if current_page >= total_pages - 2:
        return [1, 2, ELLIPSIS, total_pages - 2, total_pages - 1, total_pages]

    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total_pages,
    ]


def page_numbers(items: list[PageItem]) -> list[int]:
    """Drop ellipsis markers, keeping page numbers in display order."""
    return [item for item in items if item != ELLIPSIS]
