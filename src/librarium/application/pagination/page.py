"""Application pagination – PagedList.

A page is always cut from a fully filtered and ordered sequence, so
``total_count`` describes the filtered set rather than the raw store.
Out-of-range page numbers are clamped, never rejected::

    page = PagedList.create(authors, page_number=7, page_size=2)
    page.current_page   # last available page
"""
from __future__ import annotations

import dataclasses
import json
import math
from typing import Any, Callable, Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclasses.dataclass
class PagedList(Generic[T]):
    """One page of results with the metadata needed for pagination headers."""

    items: list[T]
    current_page: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0 or self.total_count <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter(self.items)

    def map(self, fn: Callable[[T], Any]) -> "PagedList[Any]":
        """Return a new :class:`PagedList` with each item transformed by *fn*."""
        return PagedList(
            items=[fn(item) for item in self.items],
            current_page=self.current_page,
            page_size=self.page_size,
            total_count=self.total_count,
        )

    def to_metadata(self) -> dict[str, int]:
        """Pagination fields keyed the way clients read them from headers."""
        return {
            "totalCount": self.total_count,
            "pageSize": self.page_size,
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
        }

    def pagination_header(self) -> str:
        """Compact JSON value for an ``X-Pagination`` response header."""
        return json.dumps(self.to_metadata(), separators=(",", ":"))

    @classmethod
    def create(cls, source: Sequence[T], page_number: int, page_size: int) -> "PagedList[T]":
        """Slice *source* into the requested page.

        ``page_size`` below 1 is treated as 1.  ``page_number`` is clamped to
        ``[1, total_pages]``; an empty source yields page 1 with no items.
        """
        all_items = list(source)
        size = max(page_size, 1)
        total = len(all_items)
        total_pages = math.ceil(total / size) if total else 0
        page = min(max(page_number, 1), max(total_pages, 1))
        start = (page - 1) * size
        return cls(
            items=all_items[start:start + size],
            current_page=page,
            page_size=size,
            total_count=total,
        )


__all__ = ["PagedList"]
