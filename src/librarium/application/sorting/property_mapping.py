"""Application sorting – property mapping table.

Translates client-facing sort keys (as sent in ``orderBy``) into one or more
record fields.  Each field carries a typed accessor resolved once when the
mapping is built, and a ``revert`` flag that flips the requested direction
for that field only (e.g. sorting by age means sorting by date of birth the
other way round).

Mappings are registered per ``(source, destination)`` type pair when the
:class:`PropertyMappingService` is constructed and are read-only afterwards.
"""
from __future__ import annotations

import dataclasses
import operator
from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping, Sequence

from librarium.application.sorting.sort_spec import SortSpec
from librarium.kernel.errors import MappingNotFoundError

Accessor = Callable[[Any], Any]


@dataclasses.dataclass(frozen=True)
class PropertyMappingValue:
    """A destination field for one client key."""

    destination: str
    revert: bool = False
    accessor: Accessor | None = dataclasses.field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.accessor is None:
            object.__setattr__(self, "accessor", operator.attrgetter(self.destination))

    def read(self, record: Any) -> Any:
        return self.accessor(record)  # type: ignore[misc]


class PropertyMapping:
    """Case-insensitive table ``client key -> destination fields``."""

    def __init__(self, entries: Mapping[str, Sequence[PropertyMappingValue | str]]) -> None:
        table: dict[str, tuple[PropertyMappingValue, ...]] = {}
        names: dict[str, str] = {}
        for key, values in entries.items():
            resolved = tuple(
                v if isinstance(v, PropertyMappingValue) else PropertyMappingValue(v)
                for v in values
            )
            if not resolved:
                raise ValueError(f"property mapping '{key}' must name at least one destination")
            table[key.casefold()] = resolved
            names[key.casefold()] = key
        self._table = MappingProxyType(table)
        self._names = MappingProxyType(names)

    def get(self, key: str) -> tuple[PropertyMappingValue, ...] | None:
        return self._table.get(key.strip().casefold())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.strip().casefold() in self._table

    def __getitem__(self, key: str) -> tuple[PropertyMappingValue, ...]:
        values = self.get(key)
        if values is None:
            raise KeyError(key)
        return values

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._table)

    def unknown_keys(self, order_by: str | None) -> list[str]:
        """Keys of *order_by* that have no mapping, in request order."""
        return [key for key in SortSpec.parse(order_by).keys if key not in self]


class PropertyMappingService:
    """Registry of property mappings keyed by ``(source, destination)``.

    Example::

        service = PropertyMappingService({(AuthorDto, Author): author_mapping})
        mapping = service.get_mapping(AuthorDto, Author)
    """

    def __init__(self, registrations: Mapping[tuple[Any, Any], PropertyMapping]) -> None:
        self._registry: Mapping[tuple[Any, Any], PropertyMapping] = MappingProxyType(
            dict(registrations)
        )

    def get_mapping(self, source: Any, destination: Any) -> PropertyMapping:
        """Return the mapping for the pair.

        Raises:
            MappingNotFoundError: when no mapping is registered for the pair.
        """
        try:
            return self._registry[(source, destination)]
        except KeyError:
            raise MappingNotFoundError(source, destination) from None

    def has_valid_mapping(self, source: Any, destination: Any, order_by: str | None) -> bool:
        """True when every key in *order_by* resolves; an empty string is valid."""
        if not order_by or not order_by.strip():
            return True
        return not self.get_mapping(source, destination).unknown_keys(order_by)

    @property
    def registered_pairs(self) -> list[tuple[Any, Any]]:
        return list(self._registry)


__all__ = ["Accessor", "PropertyMapping", "PropertyMappingService", "PropertyMappingValue"]
