"""AuthorCollectionService – create and fetch authors as a batch."""
from __future__ import annotations

import uuid
from typing import Sequence

from librarium.kernel.errors import NotFoundError, PersistenceError, ValidationError
from librarium.kernel.types import format_id_list
from librarium.library.dto import AuthorForCreation
from librarium.library.entities import Author
from librarium.library.repository import LibraryRepository


class AuthorCollectionService:
    def __init__(self, repository: LibraryRepository) -> None:
        self._repository = repository

    async def create_collection(self, payloads: Sequence[AuthorForCreation] | None) -> list[Author]:
        """Add every author in one commit and return the stored entities.

        Raises:
            ValidationError: when *payloads* is ``None``.
            PersistenceError: when the commit reports failure.
        """
        if payloads is None:
            raise ValidationError("An author collection is required")
        authors = [payload.to_entity() for payload in payloads]
        for author in authors:
            await self._repository.add_author(author)
        if not await self._repository.save():
            raise PersistenceError("Creating an author collection failed on save.")
        return authors

    async def get_collection(self, author_ids: Sequence[uuid.UUID] | None) -> list[Author]:
        """Fetch all requested authors, in request order.

        Raises:
            ValidationError: when *author_ids* is ``None``.
            NotFoundError: when any requested author does not exist.
        """
        if author_ids is None:
            raise ValidationError("A list of author ids is required")
        found = await self._repository.get_authors_by_ids(author_ids)
        authors = [author for author in found if author is not None]
        if len(authors) != len(author_ids):
            missing = [str(i) for i, a in zip(author_ids, found) if a is None]
            raise NotFoundError("Author collection", ",".join(missing))
        return authors

    @staticmethod
    def collection_key(authors: Sequence[Author]) -> str:
        """Comma separated ids, the key a created collection is fetched back by."""
        return format_id_list(a.id for a in authors)


__all__ = ["AuthorCollectionService"]
