"""Entity base class — identity-based equality with late id assignment."""

from __future__ import annotations

import uuid

from librarium.kernel.types.ids import new_id


class Entity:
    """Base entity – equality is identity-based (by ``id``).

    Subclasses declare ``id`` themselves (usually as a dataclass field
    defaulting to ``None``).  Once an id is set it never changes.
    """

    id: uuid.UUID | None

    def assign_id(self, value: uuid.UUID | None = None) -> uuid.UUID:
        """Give the entity an id unless it already has one; return the id."""
        if self.id is None:
            self.id = value or new_id()
        return self.id

    @property
    def is_transient(self) -> bool:
        return self.id is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return object.__hash__(self)
        return hash((type(self).__name__, self.id))


__all__ = ["Entity"]
