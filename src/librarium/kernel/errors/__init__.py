"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   └── UnknownSortKeyError
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    │   ├── MappingNotFoundError
    │   └── NotSupportedError
    └── InfrastructureError  (infrastructure.py)
        └── PersistenceError
"""

from librarium.kernel.errors.application import (
    ApplicationError,
    MappingNotFoundError,
    NotSupportedError,
)
from librarium.kernel.errors.base import BaseError
from librarium.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    UnknownSortKeyError,
    ValidationError,
)
from librarium.kernel.errors.infrastructure import InfrastructureError, PersistenceError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "MappingNotFoundError",
    "NotFoundError",
    "NotSupportedError",
    "PersistenceError",
    "UnknownSortKeyError",
    "ValidationError",
]
