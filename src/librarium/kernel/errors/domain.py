"""Kernel errors – domain errors: rejected input and missing records."""

from __future__ import annotations

from typing import Any

from librarium.kernel.errors.base import BaseError


class DomainError(BaseError):
    """A request cannot be honoured under the library's rules."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input was rejected; ``errors`` lists the offending fields."""

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors) if errors else []

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "errors": self.errors}


class UnknownSortKeyError(ValidationError):
    """An ``orderBy`` clause names a key with no property mapping."""

    default_code = "unknown_sort_key"

    def __init__(self, key: str, **kwargs: Any) -> None:
        super().__init__(
            f"Key mapping for '{key}' is missing",
            errors=[{"field": "orderBy", "value": key}],
            **kwargs,
        )
        self.key = key


class NotFoundError(DomainError):
    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} '{identifier}' not found"
        super().__init__(message, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = [
    "DomainError",
    "NotFoundError",
    "UnknownSortKeyError",
    "ValidationError",
]
