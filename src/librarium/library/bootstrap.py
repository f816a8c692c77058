"""Process start-up: settings, logging and repository wiring."""
from __future__ import annotations

from typing import Any

from librarium.library.mappings import default_property_mappings
from librarium.library.repository import LibraryRepository
from librarium.library.settings import LibrarySettings
from librarium.library.store import LibraryStore
from librarium.observability.logging import JsonLoggerFactory


def configure(overrides: dict[str, Any] | None = None) -> LibrarySettings:
    """Load ``LIBRARY_*`` settings and configure structured logging."""
    settings = LibrarySettings.load(overrides=overrides)
    JsonLoggerFactory.configure(settings.log_level, json=settings.log_json)
    return settings


def create_repository(store: LibraryStore, settings: LibrarySettings | None = None) -> LibraryRepository:
    settings = settings or LibrarySettings()
    return LibraryRepository(
        store,
        default_property_mappings(),
        default_order_by=settings.default_order_by,
    )


__all__ = ["configure", "create_repository"]
