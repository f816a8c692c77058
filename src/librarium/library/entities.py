"""Library domain records – Author and Book."""
from __future__ import annotations

import dataclasses
import datetime
import uuid

from librarium.kernel.ddd import Entity


@dataclasses.dataclass(eq=False)
class Book(Entity):
    title: str
    description: str | None = None
    author_id: uuid.UUID | None = None
    id: uuid.UUID | None = None


@dataclasses.dataclass(eq=False)
class Author(Entity):
    first_name: str
    last_name: str
    genre: str
    date_of_birth: datetime.date
    books: list[Book] = dataclasses.field(default_factory=list)
    id: uuid.UUID | None = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def age_on(self, today: datetime.date) -> int:
        """Whole years between ``date_of_birth`` and *today*."""
        age = today.year - self.date_of_birth.year
        if (today.month, today.day) < (self.date_of_birth.month, self.date_of_birth.day):
            age -= 1
        return age


__all__ = ["Author", "Book"]
