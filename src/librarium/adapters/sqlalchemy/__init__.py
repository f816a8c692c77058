"""SQLAlchemy adapter – ORM models, session factory and the library store."""
from librarium.adapters.sqlalchemy.models import AuthorModel, Base, BookModel, create_schema
from librarium.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from librarium.adapters.sqlalchemy.store import SqlAlchemyLibraryStore

__all__ = [
    "AuthorModel",
    "Base",
    "BookModel",
    "SqlAlchemyLibraryStore",
    "SqlAlchemySessionFactory",
    "create_schema",
]
