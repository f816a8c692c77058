"""Infrastructure errors — storage failures."""

from __future__ import annotations

from librarium.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class PersistenceError(InfrastructureError):
    """Committing pending changes to the store failed."""

    default_code = "persistence_error"


__all__ = ["InfrastructureError", "PersistenceError"]
