"""Config – 12-factor settings and loaders."""

from ledgerport.config.settings import EnvSettingsLoader, ExportSettings, Settings, SettingsLoader
from ledgerport.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


def load_export_settings() -> ExportSettings:
    """Read :class:`ExportSettings` from the environment."""
    return EnvSettingsLoader().load(ExportSettings)


__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "ExportSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "load_export_settings",
]
