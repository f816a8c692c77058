"""Testing support – fakes and property-based generators.

Usage::

    from librarium.testing.fakes import InMemoryLibraryStore
    from librarium.testing.generators import authors_strategy
"""

from librarium.testing.fakes import InMemoryLibraryStore

__all__ = ["InMemoryLibraryStore"]
