"""Testing fakes – InMemoryLibraryStore."""
from __future__ import annotations

import copy
import dataclasses
import uuid
from typing import Callable

from librarium.library.entities import Author, Book
from librarium.library.store import LibraryStore

_Change = Callable[[], int]


class InMemoryLibraryStore(LibraryStore):
    """Dict-backed library store for tests.

    Reads hand out copies of the committed state, and writes are staged
    until :meth:`commit`, so edits to a loaded record are invisible until
    they are marked changed and committed.
    """

    def __init__(self, authors: list[Author] | None = None) -> None:
        self._authors: dict[uuid.UUID, Author] = {}
        self._staged: list[_Change] = []
        self._fail_next = False
        for author in authors or []:
            self._insert(author)

    # -- reads ---------------------------------------------------------

    async def get_author(self, author_id: uuid.UUID) -> Author | None:
        author = self._authors.get(author_id)
        return copy.deepcopy(author) if author is not None else None

    async def list_authors(self) -> list[Author]:
        return [copy.deepcopy(a) for a in self._authors.values()]

    async def author_exists(self, author_id: uuid.UUID) -> bool:
        return author_id in self._authors

    async def list_books(self, author_id: uuid.UUID) -> list[Book]:
        author = self._authors.get(author_id)
        return [copy.deepcopy(b) for b in author.books] if author is not None else []

    async def get_book(self, author_id: uuid.UUID, book_id: uuid.UUID) -> Book | None:
        for book in await self.list_books(author_id):
            if book.id == book_id:
                return book
        return None

    # -- staged writes -------------------------------------------------

    async def add_author(self, author: Author) -> None:
        self._staged.append(lambda: self._insert(author))

    async def remove_author(self, author: Author) -> None:
        def change() -> int:
            removed = self._authors.pop(author.id, None)  # type: ignore[arg-type]
            return 0 if removed is None else 1 + len(removed.books)

        self._staged.append(change)

    async def add_book(self, author: Author, book: Book) -> None:
        def change() -> int:
            stored = self._authors.get(author.id)  # type: ignore[arg-type]
            if stored is None:
                return 0
            stored.books.append(copy.deepcopy(book))
            return 1

        self._staged.append(change)

    async def remove_book(self, book: Book) -> None:
        def change() -> int:
            stored = self._authors.get(book.author_id)  # type: ignore[arg-type]
            if stored is None:
                return 0
            before = len(stored.books)
            stored.books = [b for b in stored.books if b.id != book.id]
            return before - len(stored.books)

        self._staged.append(change)

    async def mark_changed(self, record: Author | Book) -> None:
        if isinstance(record, Author):
            self._staged.append(lambda: self._update_author(record))
        else:
            self._staged.append(lambda: self._update_book(record))

    async def commit(self) -> int:
        if self._fail_next:
            self._fail_next = False
            self._staged.clear()
            return -1
        affected = sum(change() for change in self._staged)
        self._staged.clear()
        return affected

    # -- test helpers --------------------------------------------------

    def fail_next_commit(self) -> None:
        """Make the next :meth:`commit` report failure and drop staged changes."""
        self._fail_next = True

    @property
    def pending_changes(self) -> int:
        return len(self._staged)

    # -- internals -----------------------------------------------------

    def _insert(self, author: Author) -> int:
        snapshot = copy.deepcopy(author)
        snapshot.assign_id()
        for book in snapshot.books:
            book.assign_id()
            book.author_id = snapshot.id
        self._authors[snapshot.id] = snapshot  # type: ignore[index]
        return 1 + len(snapshot.books)

    def _update_author(self, author: Author) -> int:
        stored = self._authors.get(author.id)  # type: ignore[arg-type]
        if stored is None:
            return 0
        for field in dataclasses.fields(Author):
            if field.name not in ("id", "books"):
                setattr(stored, field.name, getattr(author, field.name))
        return 1

    def _update_book(self, book: Book) -> int:
        stored = self._authors.get(book.author_id)  # type: ignore[arg-type]
        if stored is None:
            return 0
        for index, existing in enumerate(stored.books):
            if existing.id == book.id:
                stored.books[index] = copy.deepcopy(book)
                return 1
        return 0


__all__ = ["InMemoryLibraryStore"]
