"""LibraryStore – the storage port the repository talks to."""
from __future__ import annotations

import abc
import uuid

from librarium.library.entities import Author, Book


class LibraryStore(abc.ABC):
    """Port: persistent author/book storage.

    Mutations are staged until :meth:`commit`.  Nothing is tracked
    implicitly: in-place edits to a loaded record reach storage only after
    :meth:`mark_changed`.

    Concrete implementations live in ``adapters/sqlalchemy`` and
    ``testing/fakes``.
    """

    @abc.abstractmethod
    async def get_author(self, author_id: uuid.UUID) -> Author | None: ...

    @abc.abstractmethod
    async def list_authors(self) -> list[Author]:
        """All authors in storage order."""

    @abc.abstractmethod
    async def author_exists(self, author_id: uuid.UUID) -> bool: ...

    @abc.abstractmethod
    async def add_author(self, author: Author) -> None: ...

    @abc.abstractmethod
    async def remove_author(self, author: Author) -> None:
        """Remove *author*; its books go with it."""

    @abc.abstractmethod
    async def list_books(self, author_id: uuid.UUID) -> list[Book]: ...

    @abc.abstractmethod
    async def get_book(self, author_id: uuid.UUID, book_id: uuid.UUID) -> Book | None: ...

    @abc.abstractmethod
    async def add_book(self, author: Author, book: Book) -> None: ...

    @abc.abstractmethod
    async def remove_book(self, book: Book) -> None: ...

    @abc.abstractmethod
    async def mark_changed(self, record: Author | Book) -> None:
        """Stage the current field values of an already stored record."""

    @abc.abstractmethod
    async def commit(self) -> int:
        """Apply staged changes; return how many records were affected.

        A negative result reports a failed commit.
        """


__all__ = ["LibraryStore"]
