"""Kernel DDD – composable record predicates (specification pattern)."""

from __future__ import annotations

import abc
from typing import Callable, Generic, Iterable, TypeVar

T = TypeVar("T")


class BaseSpecification(abc.ABC, Generic[T]):
    """A predicate over records that combines with ``&``, ``|`` and ``~``.

    Example::

        class WritesHorror(BaseSpecification[Author]):
            def is_satisfied_by(self, candidate: Author) -> bool:
                return candidate.genre == "Horror"

        horror_or_king = WritesHorror() | LastNameIs("King")
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def select(self, candidates: Iterable[T]) -> list[T]:
        """Matching candidates, in their original order."""
        return [c for c in candidates if self.is_satisfied_by(c)]

    def __and__(self, other: BaseSpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: BaseSpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)


Specification = BaseSpecification


class _Binary(BaseSpecification[T]):
    def __init__(self, left: BaseSpecification[T], right: BaseSpecification[T]) -> None:
        self.left = left
        self.right = right


class AndSpecification(_Binary[T]):
    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) and self.right.is_satisfied_by(candidate)


class OrSpecification(_Binary[T]):
    def is_satisfied_by(self, candidate: T) -> bool:
        return self.left.is_satisfied_by(candidate) or self.right.is_satisfied_by(candidate)


class NotSpecification(BaseSpecification[T]):
    def __init__(self, inner: BaseSpecification[T]) -> None:
        self.inner = inner

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self.inner.is_satisfied_by(candidate)


class LambdaSpecification(BaseSpecification[T]):
    """Adapts a plain callable, e.g. ``LambdaSpecification(lambda a: a.genre == "Horror")``."""

    def __init__(self, predicate: Callable[[T], bool], *, name: str = "") -> None:
        self._predicate = predicate
        self.name = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))

    def __repr__(self) -> str:
        return f"LambdaSpecification({self.name!r})"


def all_of(specs: Iterable[BaseSpecification[T] | None]) -> BaseSpecification[T] | None:
    """AND together the non-``None`` specifications; ``None`` when there are none."""
    combined: BaseSpecification[T] | None = None
    for spec in specs:
        if spec is not None:
            combined = spec if combined is None else combined & spec
    return combined


__all__ = [
    "AndSpecification",
    "BaseSpecification",
    "LambdaSpecification",
    "NotSpecification",
    "OrSpecification",
    "Specification",
    "all_of",
]
