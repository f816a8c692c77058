"""Config settings – SettingsLoader port, EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, TypeVar

from dotenv import load_dotenv

from librarium.config.settings.base import Settings
from librarium.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

S = TypeVar("S", bound=Settings)

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class SettingsLoader(abc.ABC):
    """Port: produce a settings instance from one external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[S]) -> S: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` environment variables.

    With ``LibrarySettings`` (prefix ``LIBRARY``) the page size default is
    read from ``LIBRARY_DEFAULT_PAGE_SIZE``.
    """

    def load(self, settings_class: type[S]) -> S:
        prefix = getattr(settings_class, "_prefix", "")
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):  # type: ignore[arg-type]
            variable = "_".join(p for p in (prefix, field.name) if p).upper()
            raw = os.environ.get(variable)
            if raw is None:
                if field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING:
                    raise MissingRequiredSettingError(variable)
                continue
            try:
                values[field.name] = _coerce(raw, field.type)
            except ValueError as exc:
                raise InvalidSettingValueError(variable, raw, str(exc)) from exc

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Cannot load {settings_class.__name__} from environment: {exc}", cause=exc) from exc


def _coerce(raw: str, annotation: Any) -> Any:
    # annotations arrive as strings under postponed evaluation
    if annotation in (bool, "bool"):
        return raw.strip().lower() in _TRUTHY
    if annotation in (int, "int"):
        return int(raw)
    return raw


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into the environment, then read it like :class:`EnvSettingsLoader`."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self, settings_class: type[S]) -> S:
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load(settings_class)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader"]
