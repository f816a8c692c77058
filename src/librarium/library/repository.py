"""LibraryRepository – author/book queries and mutations over a LibraryStore."""
from __future__ import annotations

import operator
import uuid
from typing import Iterable

from librarium.application.pagination import PagedList
from librarium.application.query import equals_filter, run_query, search_filter
from librarium.application.sorting import PropertyMappingService
from librarium.kernel.ddd import all_of
from librarium.kernel.errors import NotSupportedError, PersistenceError
from librarium.library.dto import AuthorDto
from librarium.library.entities import Author, Book
from librarium.library.mappings import default_property_mappings
from librarium.library.parameters import AuthorsResourceParameters
from librarium.library.store import LibraryStore
from librarium.observability.logging import Logger, get_logger

_GENRE = operator.attrgetter("genre")
_SEARCHABLE = (
    operator.attrgetter("genre"),
    operator.attrgetter("first_name"),
    operator.attrgetter("last_name"),
)


class LibraryRepository:
    """Read and write authors and books.

    Queries run entirely against the records the store hands back; the
    store is only asked for whole collections or single records.

    Example::

        repo = LibraryRepository(InMemoryLibraryStore())
        page = await repo.get_authors(AuthorsResourceParameters(genre="horror"))
    """

    def __init__(
        self,
        store: LibraryStore,
        property_mappings: PropertyMappingService | None = None,
        *,
        default_order_by: str | None = "Name",
        logger: Logger | None = None,
    ) -> None:
        self._store = store
        self._mappings = property_mappings or default_property_mappings()
        self._default_order_by = default_order_by
        self._log = logger or get_logger(__name__)

    # ------------------------------------------------------------------
    # Authors
    # ------------------------------------------------------------------

    async def author_exists(self, author_id: uuid.UUID) -> bool:
        return await self._store.author_exists(author_id)

    async def get_author(self, author_id: uuid.UUID) -> Author | None:
        return await self._store.get_author(author_id)

    async def all_authors(self) -> list[Author]:
        """Every stored author, unfiltered, in storage order."""
        return await self._store.list_authors()

    async def get_authors(self, parameters: AuthorsResourceParameters) -> PagedList[Author]:
        """One page of authors, filtered by genre and free-text search.

        Raises:
            UnknownSortKeyError: when ``parameters.order_by`` names a key the
                author mapping does not know.
        """
        mapping = self._mappings.get_mapping(AuthorDto, Author)
        specification = all_of(
            [
                equals_filter(_GENRE, parameters.genre),
                search_filter(_SEARCHABLE, parameters.search_query),
            ]
        )
        page = run_query(
            await self._store.list_authors(),
            order_by=parameters.order_by,
            mapping=mapping,
            page_number=parameters.page_number,
            page_size=parameters.page_size,
            specification=specification,
            default_order_by=self._default_order_by,
        )
        self._log.debug(
            "library.authors.query",
            genre=parameters.genre,
            search_query=parameters.search_query,
            order_by=parameters.order_by,
            page=page.current_page,
            total_count=page.total_count,
        )
        return page

    async def get_authors_by_ids(self, author_ids: Iterable[uuid.UUID]) -> list[Author | None]:
        """One entry per requested id, in request order; ``None`` if missing.

        Callers detect missing authors by comparing lengths or looking for
        ``None`` entries.
        """
        return [await self._store.get_author(author_id) for author_id in author_ids]

    async def add_author(self, author: Author) -> Author:
        """Stage *author*, assigning ids to it and to its books where absent."""
        author_id = author.assign_id()
        for book in author.books:
            book.assign_id()
            book.author_id = author_id
        await self._store.add_author(author)
        return author

    async def delete_author(self, author: Author) -> None:
        await self._store.remove_author(author)

    async def update_author(self, author: Author) -> None:
        raise NotSupportedError("update_author", f"Updating author '{author.id}' is not supported")

    # ------------------------------------------------------------------
    # Books
    # ------------------------------------------------------------------

    async def get_books_for_author(self, author_id: uuid.UUID) -> list[Book]:
        return await self._store.list_books(author_id)

    async def get_book_for_author(self, author_id: uuid.UUID, book_id: uuid.UUID) -> Book | None:
        return await self._store.get_book(author_id, book_id)

    async def add_book_for_author(self, author_id: uuid.UUID, book: Book) -> bool:
        """Stage *book* under the author; ``False`` when the author is unknown."""
        author = await self._store.get_author(author_id)
        if author is None:
            self._log.debug("library.book.author_missing", author_id=str(author_id))
            return False
        book.assign_id()
        book.author_id = author_id
        await self._store.add_book(author, book)
        return True

    async def update_book_for_author(self, book: Book) -> None:
        await self.mark_changed(book)

    async def delete_book(self, book: Book) -> None:
        await self._store.remove_book(book)

    # ------------------------------------------------------------------
    # Unit of work
    # ------------------------------------------------------------------

    async def mark_changed(self, record: Author | Book) -> None:
        """Stage in-place edits made to a loaded record."""
        await self._store.mark_changed(record)

    async def save(self) -> bool:
        """Commit staged changes; ``False`` when the store reports failure.

        Raises:
            PersistenceError: when the store itself raises while committing.
        """
        try:
            affected = await self._store.commit()
        except PersistenceError:
            self._log.warning("library.save.failed")
            raise
        if affected < 0:
            self._log.warning("library.save.rejected", affected=affected)
            return False
        self._log.info("library.save.committed", affected=affected)
        return True


__all__ = ["LibraryRepository"]
