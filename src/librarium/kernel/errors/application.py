"""Application-layer errors — use-case level failures."""

from __future__ import annotations

from typing import Any

from librarium.kernel.errors.base import BaseError


def _type_name(value: Any) -> str:
    return getattr(value, "__name__", str(value))


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class MappingNotFoundError(ApplicationError):
    """No property mapping is registered for a source/destination pair."""

    default_code = "mapping_not_found"

    def __init__(self, source: Any, destination: Any, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot find exact property mapping instance for "
            f"<{_type_name(source)}, {_type_name(destination)}>",
            **kwargs,
        )
        self.source = source
        self.destination = destination


class NotSupportedError(ApplicationError):
    """The requested operation is not supported by this repository."""

    default_code = "not_supported"

    def __init__(self, operation: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(message or f"Operation '{operation}' is not supported", **kwargs)
        self.operation = operation


__all__ = [
    "ApplicationError",
    "MappingNotFoundError",
    "NotSupportedError",
]
