"""
Client-side pagination

The leaderboard fetches every player once and pages through the list locally.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Paginator(Generic[T]):
    """
    Page state over an in-memory list

    Pages are 1-based. page_numbers() yields the page buttons to show:
    the first page, a window of one page around the current one, the last
    page, and None wherever an ellipsis belongs.
    """

    def __init__(self, items: Sequence[T], per_page: int = 10, page: int = 1):
        if per_page < 1:
            raise ValueError("per_page must be >= 1")
        self.items = list(items)
        self.per_page = per_page
        self.page = 1
        self.go_to_page(page)

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.per_page)

    @property
    def start_index(self) -> int:
        return (self.page - 1) * self.per_page

    @property
    def items_on_page(self) -> list[T]:
        return self.items[self.start_index:self.start_index + self.per_page]

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    def range_label(self, noun: str = "players") -> str:
        """e.g. "Showing 11 - 20 of 42 players" """
        first = self.start_index + 1
        last = min(self.page * self.per_page, self.total)
        return f"Showing {first} - {last} of {self.total} {noun}"

    def go_to_page(self, page: int) -> bool:
        """
        Move to a page

        Returns:
            bool: False (and no change) when the page is out of range
        """
        if page < 1 or page > self.total_pages:
            return False
        self.page = page
        return True

    def next_page(self) -> bool:
        return self.go_to_page(self.page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.page - 1)

    def page_numbers(self) -> list[Optional[int]]:
        total_pages = self.total_pages
        if total_pages <= 1:
            return []

        pages: list[Optional[int]] = [1]
        start = max(2, self.page - 1)
        end = min(total_pages - 1, self.page + 1)

        if start > 2:
            pages.append(None)
        pages.extend(range(start, end + 1))
        if end < total_pages - 1:
            pages.append(None)

        pages.append(total_pages)
        return pages
