"""Library domain – authors, books and the paged author repository."""
from librarium.library.bootstrap import configure, create_repository
from librarium.library.collections import AuthorCollectionService
from librarium.library.dto import AuthorDto, AuthorForCreation, BookForCreation
from librarium.library.entities import Author, Book
from librarium.library.mappings import AUTHOR_PROPERTY_MAPPING, default_property_mappings
from librarium.library.parameters import AuthorsResourceParameters
from librarium.library.repository import LibraryRepository
from librarium.library.seed import ensure_seed_data, seed_authors
from librarium.library.settings import LibrarySettings
from librarium.library.store import LibraryStore

__all__ = [
    "AUTHOR_PROPERTY_MAPPING",
    "Author",
    "AuthorCollectionService",
    "AuthorDto",
    "AuthorForCreation",
    "AuthorsResourceParameters",
    "Book",
    "BookForCreation",
    "LibraryRepository",
    "LibrarySettings",
    "LibraryStore",
    "configure",
    "create_repository",
    "default_property_mappings",
    "ensure_seed_data",
    "seed_authors",
]
