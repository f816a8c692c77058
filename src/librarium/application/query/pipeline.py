"""Application query – sort, filter and page a record collection."""
from __future__ import annotations

from typing import Iterable, TypeVar

from librarium.application.pagination import PagedList
from librarium.application.sorting import PropertyMapping, apply_sort
from librarium.kernel.ddd.specification import BaseSpecification

T = TypeVar("T")


def run_query(
    source: Iterable[T],
    *,
    order_by: str | None,
    mapping: PropertyMapping,
    page_number: int,
    page_size: int,
    specification: BaseSpecification[T] | None = None,
    default_order_by: str | None = None,
) -> PagedList[T]:
    """Order *source*, keep what satisfies *specification*, cut one page.

    Paging always runs last, so ``total_count`` is the filtered count.
    """
    ordered = apply_sort(source, order_by, mapping, default=default_order_by)
    if specification is not None:
        ordered = specification.select(ordered)
    return PagedList.create(ordered, page_number, page_size)


__all__ = ["run_query"]
