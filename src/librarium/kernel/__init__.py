"""Kernel – framework-agnostic building blocks."""

from librarium.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    MappingNotFoundError,
    NotFoundError,
    NotSupportedError,
    PersistenceError,
    UnknownSortKeyError,
    ValidationError,
)

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
