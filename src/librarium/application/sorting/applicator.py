"""Application sorting – apply an ``orderBy`` string to a sequence of records."""
from __future__ import annotations

from typing import Any, Iterable, TypeVar

from librarium.application.sorting.property_mapping import Accessor, PropertyMapping
from librarium.application.sorting.sort_spec import SortSpec
from librarium.kernel.errors import UnknownSortKeyError
from librarium.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


def _null_first(accessor: Accessor) -> Accessor:
    def key(record: Any) -> tuple[bool, Any]:
        value = accessor(record)
        return (value is not None, value)

    return key


def resolve_sort_keys(spec: SortSpec, mapping: PropertyMapping) -> list[tuple[Accessor, bool]]:
    """Expand *spec* into ``(accessor, descending)`` pairs in priority order.

    Raises:
        UnknownSortKeyError: for the first clause the mapping does not know.
    """
    keys: list[tuple[Accessor, bool]] = []
    for clause in spec:
        values = mapping.get(clause.key)
        if values is None:
            _log.debug("sort.key_rejected", key=clause.key, known=list(mapping))
            raise UnknownSortKeyError(clause.key)
        for value in values:
            keys.append((value.accessor, clause.descending != value.revert))  # type: ignore[arg-type]
    return keys


def apply_sort(
    source: Iterable[T],
    order_by: str | None,
    mapping: PropertyMapping,
    *,
    default: str | None = None,
) -> list[T]:
    """Return a new list with *source* ordered by *order_by*.

    The first clause is the primary key, later clauses break ties.  A clause
    whose mapping lists several fields sorts by each of them in turn, with
    ``descending XOR revert`` as the direction of every field.  Records with
    equal keys keep their input order.  An empty *order_by* falls back to
    *default*; with neither, the input order is returned unchanged.

    Raises:
        UnknownSortKeyError: when a clause has no entry in *mapping*.
    """
    items = list(source)
    spec = SortSpec.parse(order_by) or SortSpec.parse(default)
    if not spec:
        return items

    # list.sort is stable, so sorting from the least significant key up
    # produces the lexicographic order.
    for accessor, descending in reversed(resolve_sort_keys(spec, mapping)):
        items.sort(key=_null_first(accessor), reverse=descending)
    return items


__all__ = ["apply_sort", "resolve_sort_keys"]
