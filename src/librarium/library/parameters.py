"""Resource parameters for the author listing."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from librarium.application.pagination import PageRequest
from librarium.library.settings import LibrarySettings


def _as_int(raw: Any, fallback: int) -> int:
    if raw is None:
        return fallback
    try:
        return int(str(raw).strip())
    except ValueError:
        return fallback


def _as_text(raw: Any) -> str | None:
    if raw is None:
        return None
    text = str(raw)
    return text if text.strip() else None


@dataclasses.dataclass(frozen=True)
class AuthorsResourceParameters:
    """Filters, ordering and paging for one author listing request.

    ``page_size`` is clamped to ``[1, max_page_size]`` and ``page_number`` to
    ``>= 1``; nothing here is ever rejected.
    """

    genre: str | None = None
    search_query: str | None = None
    order_by: str | None = "Name"
    page_number: int = 1
    page_size: int = 10
    max_page_size: int = 20

    def __post_init__(self) -> None:
        request = PageRequest.clamped(self.page_number, self.page_size, self.max_page_size)
        object.__setattr__(self, "page_number", request.page)
        object.__setattr__(self, "page_size", request.size)

    @classmethod
    def from_query(
        cls,
        query: Mapping[str, Any],
        settings: LibrarySettings | None = None,
    ) -> "AuthorsResourceParameters":
        """Build parameters from raw query-string values.

        Recognised keys: ``genre``, ``searchQuery``, ``orderBy``,
        ``pageNumber``, ``pageSize``.  Unparsable numbers fall back to the
        configured defaults.
        """
        settings = settings or LibrarySettings()
        return cls(
            genre=_as_text(query.get("genre")),
            search_query=_as_text(query.get("searchQuery")),
            order_by=_as_text(query.get("orderBy")) or settings.default_order_by,
            page_number=_as_int(query.get("pageNumber"), 1),
            page_size=_as_int(query.get("pageSize"), settings.default_page_size),
            max_page_size=settings.max_page_size,
        )

    def for_page(self, page_number: int) -> "AuthorsResourceParameters":
        """Same filters and ordering, another page (previous/next links)."""
        return dataclasses.replace(self, page_number=page_number)

    def to_query(self) -> dict[str, str]:
        """Inverse of :meth:`from_query`, omitting unset filters."""
        query = {
            "genre": self.genre,
            "searchQuery": self.search_query,
            "orderBy": self.order_by,
            "pageNumber": str(self.page_number),
            "pageSize": str(self.page_size),
        }
        return {k: v for k, v in query.items() if v is not None}


__all__ = ["AuthorsResourceParameters"]
