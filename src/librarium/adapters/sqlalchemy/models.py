"""SQLAlchemy adapter – ORM models for authors and books."""
from __future__ import annotations

import datetime
import uuid

from sqlalchemy import Date, ForeignKey, String, Uuid
from sqlalchemy.ext.asyncio import AsyncEngine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    pass


class AuthorModel(Base):
    __tablename__ = "authors"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    first_name: Mapped[str] = mapped_column(String(50))
    last_name: Mapped[str] = mapped_column(String(50))
    genre: Mapped[str] = mapped_column(String(50))
    date_of_birth: Mapped[datetime.date] = mapped_column(Date)

    books: Mapped[list["BookModel"]] = relationship(
        back_populates="author",
        cascade="all, delete-orphan",
    )


class BookModel(Base):
    __tablename__ = "books"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(String(500), nullable=True, default=None)
    author_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("authors.id"))

    author: Mapped[AuthorModel] = relationship(back_populates="books")


async def create_schema(engine: AsyncEngine) -> None:
    """Create the ``authors`` and ``books`` tables if they do not exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = ["AuthorModel", "Base", "BookModel", "create_schema"]
