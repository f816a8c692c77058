"""Config settings – SettingsFactory."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence, TypeVar

from librarium.config.settings.base import Settings
from librarium.config.settings.loaders import SettingsLoader
from librarium.config.validation.errors import ConfigError, MissingRequiredSettingError
from librarium.observability.logging import get_logger

S = TypeVar("S", bound=Settings)

_log = get_logger(__name__)


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


class SettingsFactory:
    """Build a :class:`Settings` instance from layered sources.

    Sources are merged in order (later loaders win) and *overrides* are
    applied last. A loader that fails with :class:`ConfigError` contributes
    nothing; the rest still apply.
    """

    @staticmethod
    def create(
        settings_cls: type[S],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> S:
        """
        Raises
        ------
        MissingRequiredSettingError
            A field without a default received no value from any source.
        InvalidSettingValueError
            ``Settings._validate`` rejected the merged values.
        ConfigError
            The dataclass could not be constructed (e.g. an unknown key).
        """
        values: dict[str, Any] = {}
        for loader in loaders or ():
            try:
                loaded = loader.load(settings_cls)
            except ConfigError as exc:
                _log.debug("settings.loader_skipped", loader=type(loader).__name__, error=exc.message)
                continue
            values.update(dataclasses.asdict(loaded))
        values.update(overrides or {})

        missing = [
            f.name
            for f in dataclasses.fields(settings_cls)  # type: ignore[arg-type]
            if _is_required(f) and f.name not in values
        ]
        if missing:
            raise MissingRequiredSettingError(missing[0])

        try:
            return settings_cls(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Cannot build {settings_cls.__name__}: {exc}", cause=exc) from exc


__all__ = ["SettingsFactory"]
