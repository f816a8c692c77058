"""Config settings – environment-based configuration."""
from librarium.config.settings.base import Settings
from librarium.config.settings.factory import SettingsFactory
from librarium.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsFactory", "SettingsLoader"]
