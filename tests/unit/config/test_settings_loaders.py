"""Unit tests for settings loaders and SettingsFactory."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path

import pytest

from librarium.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
    SettingsFactory,
    SettingsLoader,
)


@dataclasses.dataclass
class _AppSettings(Settings):
    _prefix = "APP"

    name: str
    workers: int = 2
    debug: bool = False


class _Broken(SettingsLoader):
    def load(self, settings_class):  # type: ignore[no-untyped-def]
        raise ConfigError("unavailable")


class TestEnvSettingsLoader:
    def test_reads_and_coerces(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_NAME", "library")
        monkeypatch.setenv("APP_WORKERS", "4")
        monkeypatch.setenv("APP_DEBUG", "yes")
        s = EnvSettingsLoader().load(_AppSettings)
        assert (s.name, s.workers, s.debug) == ("library", 4, True)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("APP_NAME", raising=False)
        with pytest.raises(MissingRequiredSettingError):
            EnvSettingsLoader().load(_AppSettings)

    def test_bad_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_NAME", "library")
        monkeypatch.setenv("APP_WORKERS", "many")
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader().load(_AppSettings)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("APP_NAME", raising=False)
        monkeypatch.delenv("APP_WORKERS", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("APP_NAME=from-dotenv\nAPP_WORKERS=7\n")
        try:
            s = DotenvSettingsLoader(str(env_file)).load(_AppSettings)
        finally:
            os.environ.pop("APP_NAME", None)
            os.environ.pop("APP_WORKERS", None)
        assert (s.name, s.workers) == ("from-dotenv", 7)


class TestSettingsFactory:
    def test_overrides_only(self) -> None:
        s = SettingsFactory.create(_AppSettings, overrides={"name": "x"})
        assert (s.name, s.workers) == ("x", 2)

    def test_failing_loader_is_skipped(self) -> None:
        s = SettingsFactory.create(_AppSettings, [_Broken()], overrides={"name": "x"})
        assert s.name == "x"

    def test_missing_required_after_merge(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(_AppSettings, [_Broken()])

    def test_unknown_override_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(_AppSettings, overrides={"name": "x", "colour": "red"})
