"""Config settings – 12-factor env-based configuration."""
from ledgerport.config.settings.base import Settings
from ledgerport.config.settings.export import ExportSettings
from ledgerport.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "ExportSettings", "Settings", "SettingsLoader"]
