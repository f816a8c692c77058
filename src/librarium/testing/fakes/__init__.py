"""Testing fakes – in-memory doubles for the storage port."""
from librarium.testing.fakes.store import InMemoryLibraryStore

__all__ = ["InMemoryLibraryStore"]
