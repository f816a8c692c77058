"""Seed data for demos and tests."""
from __future__ import annotations

import datetime

from librarium.kernel.errors import PersistenceError
from librarium.library.entities import Author, Book
from librarium.library.repository import LibraryRepository


def seed_authors() -> list[Author]:
    return [
        Author(
            first_name="Stephen",
            last_name="King",
            genre="Horror",
            date_of_birth=datetime.date(1947, 9, 21),
            books=[
                Book(
                    title="The Shining",
                    description="The Shining is a horror novel by American author Stephen King.",
                )
            ],
        ),
        Author(
            first_name="Neil",
            last_name="Gaiman",
            genre="Fantasy",
            date_of_birth=datetime.date(1960, 11, 10),
        ),
        Author(
            first_name="Tom",
            last_name="Lanoye",
            genre="Various",
            date_of_birth=datetime.date(1958, 8, 27),
        ),
    ]


async def ensure_seed_data(repository: LibraryRepository) -> list[Author]:
    """Replace every stored author with the seed authors.

    Raises:
        PersistenceError: when either commit is rejected by the store.
    """
    for author in await repository.all_authors():
        await repository.delete_author(author)
    if not await repository.save():
        raise PersistenceError("Clearing authors before seeding failed on save.")

    authors = seed_authors()
    for author in authors:
        await repository.add_author(author)
    if not await repository.save():
        raise PersistenceError("Seeding authors failed on save.")
    return authors


__all__ = ["ensure_seed_data", "seed_authors"]
