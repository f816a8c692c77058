"""Testing generators – property-based strategies."""
from librarium.testing.generators.strategies import GENRES, author_strategy, authors_strategy

__all__ = ["GENRES", "author_strategy", "authors_strategy"]
