"""Application query – case-insensitive filter specifications."""
from __future__ import annotations

from typing import Any, Sequence, TypeVar

from librarium.application.sorting.property_mapping import Accessor
from librarium.kernel.ddd.specification import BaseSpecification

T = TypeVar("T")


def _normalise(value: Any) -> str:
    return "" if value is None else str(value).casefold()


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed.casefold() if trimmed else None


class FieldEquals(BaseSpecification[T]):
    """The field, case-folded, equals the trimmed, case-folded value."""

    def __init__(self, accessor: Accessor, value: str) -> None:
        self._accessor = accessor
        self._value = value.strip().casefold()

    def is_satisfied_by(self, candidate: T) -> bool:
        return _normalise(self._accessor(candidate)) == self._value


class ContainsText(BaseSpecification[T]):
    """Any of the fields, case-folded, contains the trimmed, case-folded text."""

    def __init__(self, accessors: Sequence[Accessor], text: str) -> None:
        self._accessors = tuple(accessors)
        self._text = text.strip().casefold()

    def is_satisfied_by(self, candidate: T) -> bool:
        return any(self._text in _normalise(a(candidate)) for a in self._accessors)


def equals_filter(accessor: Accessor, value: str | None) -> FieldEquals[Any] | None:
    """``FieldEquals`` for *value*, or ``None`` when it is missing or blank."""
    if _clean(value) is None:
        return None
    return FieldEquals(accessor, value)  # type: ignore[arg-type]


def search_filter(accessors: Sequence[Accessor], text: str | None) -> ContainsText[Any] | None:
    """``ContainsText`` for *text*, or ``None`` when it is missing or blank."""
    if _clean(text) is None:
        return None
    return ContainsText(accessors, text)  # type: ignore[arg-type]


__all__ = ["ContainsText", "FieldEquals", "equals_filter", "search_filter"]
