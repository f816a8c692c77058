"""Application query – filter specifications and the paged query pipeline."""
from librarium.application.query.filters import (
    ContainsText,
    FieldEquals,
    equals_filter,
    search_filter,
)
from librarium.application.query.pipeline import run_query

__all__ = ["ContainsText", "FieldEquals", "equals_filter", "run_query", "search_filter"]
