"""Application – query building blocks (storage-agnostic)."""

from librarium.application.pagination import PagedList, PageRequest
from librarium.application.query import ContainsText, FieldEquals, run_query
from librarium.application.sorting import (
    PropertyMapping,
    PropertyMappingService,
    PropertyMappingValue,
    SortSpec,
    apply_sort,
)

__all__ = [
    "ContainsText",
    "FieldEquals",
    "PageRequest",
    "PagedList",
    "PropertyMapping",
    "PropertyMappingService",
    "PropertyMappingValue",
    "SortSpec",
    "apply_sort",
    "run_query",
]
