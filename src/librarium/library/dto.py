"""Client-facing author views and creation payloads."""
from __future__ import annotations

import dataclasses
import datetime
import uuid

from librarium.library.entities import Author, Book


@dataclasses.dataclass(frozen=True)
class AuthorDto:
    """What clients see of an author; sort keys are expressed in its terms."""
    id: uuid.UUID | None
    name: str
    age: int
    genre: str

    @classmethod
    def from_entity(cls, author: Author, today: datetime.date | None = None) -> "AuthorDto":
        return cls(
            id=author.id,
            name=author.name,
            age=author.age_on(today or datetime.date.today()),
            genre=author.genre,
        )


@dataclasses.dataclass(frozen=True)
class BookForCreation:
    title: str
    description: str | None = None

    def to_entity(self) -> Book:
        return Book(title=self.title, description=self.description)


@dataclasses.dataclass(frozen=True)
class AuthorForCreation:
    first_name: str
    last_name: str
    genre: str
    date_of_birth: datetime.date
    books: tuple[BookForCreation, ...] = ()

    def to_entity(self) -> Author:
        return Author(
            first_name=self.first_name,
            last_name=self.last_name,
            genre=self.genre,
            date_of_birth=self.date_of_birth,
            books=[b.to_entity() for b in self.books],
        )


__all__ = ["AuthorDto", "AuthorForCreation", "BookForCreation"]
