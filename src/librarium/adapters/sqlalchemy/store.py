"""SQLAlchemy adapter – SqlAlchemyLibraryStore."""
from __future__ import annotations

import uuid
from typing import Awaitable, Callable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from librarium.adapters.sqlalchemy.models import AuthorModel, BookModel
from librarium.kernel.errors import PersistenceError
from librarium.library.entities import Author, Book
from librarium.library.store import LibraryStore
from librarium.observability.logging import get_logger

_log = get_logger(__name__)

_Change = Callable[[], Awaitable[int]]


def _book_to_domain(model: BookModel) -> Book:
    return Book(
        id=model.id,
        title=model.title,
        description=model.description,
        author_id=model.author_id,
    )


def _author_to_domain(model: AuthorModel) -> Author:
    return Author(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        genre=model.genre,
        date_of_birth=model.date_of_birth,
        books=[_book_to_domain(b) for b in model.books],
    )


def _book_to_model(book: Book, author_id: uuid.UUID) -> BookModel:
    return BookModel(
        id=book.assign_id(),
        title=book.title,
        description=book.description,
        author_id=author_id,
    )


def _author_to_model(author: Author) -> AuthorModel:
    author_id = author.assign_id()
    return AuthorModel(
        id=author_id,
        first_name=author.first_name,
        last_name=author.last_name,
        genre=author.genre,
        date_of_birth=author.date_of_birth,
        books=[_book_to_model(b, author_id) for b in author.books],
    )


class SqlAlchemyLibraryStore(LibraryStore):
    """Library store backed by an async SQLAlchemy session.

    Domain records are converted to and from ORM models at the boundary, so
    edits to a returned :class:`Author` or :class:`Book` only reach the
    database through :meth:`mark_changed`. Writes are queued and only
    touch the session inside :meth:`commit`; until then reads return the
    committed rows.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._staged: list[_Change] = []

    def _authors(self):  # type: ignore[no-untyped-def]
        return (
            select(AuthorModel)
            .options(selectinload(AuthorModel.books))
            .execution_options(populate_existing=True)
        )

    async def get_author(self, author_id: uuid.UUID) -> Author | None:
        result = await self._session.execute(self._authors().where(AuthorModel.id == author_id))
        model = result.scalar_one_or_none()
        return _author_to_domain(model) if model else None

    async def list_authors(self) -> list[Author]:
        result = await self._session.execute(self._authors())
        return [_author_to_domain(m) for m in result.scalars().all()]

    async def author_exists(self, author_id: uuid.UUID) -> bool:
        result = await self._session.execute(
            select(AuthorModel.id).where(AuthorModel.id == author_id).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def list_books(self, author_id: uuid.UUID) -> list[Book]:
        result = await self._session.execute(
            select(BookModel).where(BookModel.author_id == author_id)
        )
        return [_book_to_domain(m) for m in result.scalars().all()]

    async def get_book(self, author_id: uuid.UUID, book_id: uuid.UUID) -> Book | None:
        result = await self._session.execute(
            select(BookModel).where(BookModel.id == book_id, BookModel.author_id == author_id)
        )
        model = result.scalar_one_or_none()
        return _book_to_domain(model) if model else None

    # -- staged writes -------------------------------------------------

    async def add_author(self, author: Author) -> None:
        async def change() -> int:
            self._session.add(_author_to_model(author))
            return 1 + len(author.books)

        self._staged.append(change)

    async def remove_author(self, author: Author) -> None:
        self._staged.append(lambda: self._delete(AuthorModel, author.id))

    async def add_book(self, author: Author, book: Book) -> None:
        author_id = author.assign_id()

        async def change() -> int:
            self._session.add(_book_to_model(book, author_id))
            return 1

        self._staged.append(change)

    async def remove_book(self, book: Book) -> None:
        self._staged.append(lambda: self._delete(BookModel, book.id))

    async def mark_changed(self, record: Author | Book) -> None:
        self._staged.append(lambda: self._update(record))

    async def commit(self) -> int:
        staged, self._staged = self._staged, []
        affected = 0
        try:
            for change in staged:
                affected += await change()
            await self._session.commit()
        except SQLAlchemyError as exc:
            await self._session.rollback()
            raise PersistenceError(
                "Committing library changes failed",
                detail={"pending": len(staged)},
                cause=exc,
            ) from exc
        return affected

    # -- internals -----------------------------------------------------

    async def _delete(self, model_cls: type[AuthorModel] | type[BookModel], record_id: uuid.UUID | None) -> int:
        if record_id is None:
            return 0
        model = await self._session.get(model_cls, record_id)
        if model is None:
            return 0
        await self._session.delete(model)
        return 1

    async def _update(self, record: Author | Book) -> int:
        if record.id is None:
            return 0
        if isinstance(record, Author):
            author = await self._session.get(AuthorModel, record.id)
            if author is None:
                _log.debug("library.store.mark_changed_missing", record="author", id=str(record.id))
                return 0
            author.first_name = record.first_name
            author.last_name = record.last_name
            author.genre = record.genre
            author.date_of_birth = record.date_of_birth
            return 1
        book = await self._session.get(BookModel, record.id)
        if book is None:
            _log.debug("library.store.mark_changed_missing", record="book", id=str(record.id))
            return 0
        book.title = record.title
        book.description = record.description
        return 1


__all__ = ["SqlAlchemyLibraryStore"]
