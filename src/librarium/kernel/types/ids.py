"""UUID-based record identifiers."""

from __future__ import annotations

import uuid
from typing import Iterable

from librarium.kernel.errors.domain import ValidationError


def new_id() -> uuid.UUID:
    """Return a new random record identifier."""
    return uuid.uuid4()


def parse_id(value: str | uuid.UUID) -> uuid.UUID:
    """Coerce *value* into a :class:`uuid.UUID`.

    Raises:
        ValidationError: when *value* is not a valid UUID string.
    """
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value).strip())
    except ValueError as exc:
        raise ValidationError(
            f"'{value}' is not a valid identifier",
            errors=[{"field": "id", "value": str(value)}],
            cause=exc,
        ) from exc


def parse_id_list(raw: str) -> list[uuid.UUID]:
    """Parse a comma separated id list, optionally wrapped in parentheses.

    Example::

        parse_id_list("(3f2b...,9c1e...)")
    """
    text = raw.strip()
    if text.startswith("(") and text.endswith(")"):
        text = text[1:-1]
    return [parse_id(part) for part in text.split(",") if part.strip()]


def format_id_list(ids: Iterable[uuid.UUID | None]) -> str:
    """Inverse of :func:`parse_id_list` (without the parentheses)."""
    return ",".join(str(i) for i in ids if i is not None)


__all__ = ["format_id_list", "new_id", "parse_id", "parse_id_list"]
