"""LibrarySettings – ``LIBRARY_*`` environment configuration."""
from __future__ import annotations

import dataclasses
from typing import Any, ClassVar, Sequence

from librarium.config import (
    EnvSettingsLoader,
    InvalidSettingValueError,
    Settings,
    SettingsFactory,
    SettingsLoader,
)


@dataclasses.dataclass
class LibrarySettings(Settings):
    _prefix: ClassVar[str] = "LIBRARY"

    database_url: str = "sqlite+aiosqlite:///:memory:"
    default_page_size: int = 10
    max_page_size: int = 20
    default_order_by: str = "Name"
    log_level: str = "INFO"
    log_json: bool = True

    def _validate(self) -> None:
        if self.max_page_size < 1:
            raise InvalidSettingValueError("max_page_size", self.max_page_size, "must be >= 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise InvalidSettingValueError(
                "default_page_size",
                self.default_page_size,
                f"must be between 1 and max_page_size ({self.max_page_size})",
            )

    @classmethod
    def load(
        cls,
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> "LibrarySettings":
        return SettingsFactory.create(cls, loaders or [EnvSettingsLoader()], overrides)


__all__ = ["LibrarySettings"]
