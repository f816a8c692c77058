"""Application sorting – property mappings, ``orderBy`` parsing and sorting."""
from librarium.application.sorting.applicator import apply_sort, resolve_sort_keys
from librarium.application.sorting.property_mapping import (
    PropertyMapping,
    PropertyMappingService,
    PropertyMappingValue,
)
from librarium.application.sorting.sort_spec import SortClause, SortSpec

__all__ = [
    "PropertyMapping",
    "PropertyMappingService",
    "PropertyMappingValue",
    "SortClause",
    "SortSpec",
    "apply_sort",
    "resolve_sort_keys",
]
