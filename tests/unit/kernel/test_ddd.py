"""Unit tests for the Entity base and the specification pattern."""

from __future__ import annotations

import dataclasses
import uuid

from librarium.kernel.ddd import (
    BaseSpecification,
    Entity,
    LambdaSpecification,
    all_of,
)


@dataclasses.dataclass(eq=False)
class _Thing(Entity):
    name: str
    id: uuid.UUID | None = None


@dataclasses.dataclass(eq=False)
class _Other(Entity):
    id: uuid.UUID | None = None


class TestEntity:
    def test_assign_id_generates_when_missing(self) -> None:
        thing = _Thing("a")
        assert thing.is_transient
        new = thing.assign_id()
        assert isinstance(new, uuid.UUID)
        assert thing.id == new
        assert not thing.is_transient

    def test_assign_id_never_replaces_existing(self) -> None:
        fixed = uuid.uuid4()
        thing = _Thing("a", id=fixed)
        assert thing.assign_id(uuid.uuid4()) == fixed
        assert thing.id == fixed

    def test_assign_id_uses_given_value(self) -> None:
        given = uuid.uuid4()
        assert _Thing("a").assign_id(given) == given

    def test_equality_by_id(self) -> None:
        shared = uuid.uuid4()
        assert _Thing("a", id=shared) == _Thing("b", id=shared)
        assert _Thing("a", id=shared) != _Thing("a", id=uuid.uuid4())

    def test_equality_requires_same_type(self) -> None:
        shared = uuid.uuid4()
        assert _Thing("a", id=shared) != _Other(id=shared)

    def test_transient_entities_compare_by_identity(self) -> None:
        a = _Thing("same")
        assert a == a
        assert a != _Thing("same")

    def test_hash_matches_equality(self) -> None:
        shared = uuid.uuid4()
        assert len({_Thing("a", id=shared), _Thing("b", id=shared)}) == 1


class _LongName(BaseSpecification[str]):
    def is_satisfied_by(self, candidate: str) -> bool:
        return len(candidate) > 3


_STARTS_WITH_K = LambdaSpecification(lambda s: s.startswith("K"), name="starts_with_k")


class TestSpecification:
    def test_and(self) -> None:
        spec = _LongName() & _STARTS_WITH_K
        assert spec.is_satisfied_by("King")
        assert not spec.is_satisfied_by("Kim")

    def test_or(self) -> None:
        spec = _LongName() | _STARTS_WITH_K
        assert spec.is_satisfied_by("Kim")
        assert spec.is_satisfied_by("Lanoye")
        assert not spec.is_satisfied_by("Bob")

    def test_not(self) -> None:
        assert (~_STARTS_WITH_K).is_satisfied_by("Gaiman")

    def test_select_keeps_order(self) -> None:
        assert _LongName().select(["Tom", "Lanoye", "Neil", "Ed"]) == ["Lanoye", "Neil"]

    def test_lambda_name(self) -> None:
        assert _STARTS_WITH_K.name == "starts_with_k"

    def test_all_of_skips_none(self) -> None:
        spec = all_of([None, _LongName(), None, _STARTS_WITH_K])
        assert spec is not None
        assert spec.is_satisfied_by("King")
        assert not spec.is_satisfied_by("Lanoye")

    def test_all_of_nothing_is_none(self) -> None:
        assert all_of([None, None]) is None
