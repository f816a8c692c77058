"""
librarium – paged, sorted and filtered data access for the library domain.

Import path convention::

    from librarium.kernel.errors import NotFoundError
    from librarium.application.pagination import PagedList
    from librarium.library import LibraryRepository, AuthorsResourceParameters
    from librarium.adapters.sqlalchemy import SqlAlchemyLibraryStore
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
