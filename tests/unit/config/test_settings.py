"""Unit tests for config settings & validation."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from ledgerport.config import load_export_settings
from ledgerport.config.settings import EnvSettingsLoader, ExportSettings, Settings
from ledgerport.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_defaults_when_env_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("APP_HOST", "APP_PORT", "APP_DEBUG", "APP_ALLOWED_ORIGINS"):
            monkeypatch.delenv(key, raising=False)
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "localhost"
        assert settings.port == 8080

    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        assert EnvSettingsLoader().load(AppSettings).port == 9000

    def test_loads_bool_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True

    def test_loads_bool_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_DEBUG", "off")
        assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "a.com, b.com,")
        assert EnvSettingsLoader().load(AppSettings).allowed_origins == ["a.com", "b.com"]

    def test_bad_int_raises_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "eighty")
        with pytest.raises(ConfigError):
            EnvSettingsLoader().load(AppSettings)

    def test_missing_required(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("REQ_TOKEN", raising=False)
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"
        assert exc_info.value.detail == {"setting": "REQ_TOKEN"}

    def test_env_key_uses_prefix(self) -> None:
        assert AppSettings.env_key("allowed_origins") == "APP_ALLOWED_ORIGINS"
        assert ExportSettings.env_key("output_dir") == "LEDGERPORT_OUTPUT_DIR"
        assert Settings.env_key("plain") == "PLAIN"


# ---------------------------------------------------------------------------
# ExportSettings
# ---------------------------------------------------------------------------


class TestExportSettings:
    def test_defaults(self) -> None:
        settings = ExportSettings()
        assert settings.output_dir == "."
        assert settings.print_dir == ""
        assert settings.escape_html is True
        assert settings.log_level == "INFO"

    def test_log_level_is_normalised(self) -> None:
        settings = ExportSettings(log_level="debug")
        assert settings.log_level == "DEBUG"
        assert settings.log_level_number == 10

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            ExportSettings(log_level="chatty")
        assert exc_info.value.setting_name == "log_level"
        assert exc_info.value.detail["setting"] == "log_level"

    def test_loaded_from_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        monkeypatch.setenv("LEDGERPORT_OUTPUT_DIR", str(tmp_path))
        monkeypatch.setenv("LEDGERPORT_ESCAPE_HTML", "false")
        monkeypatch.setenv("LEDGERPORT_DOCUMENT_BRAND", "Kenels LMS")
        settings = load_export_settings()
        assert settings.output_dir == str(tmp_path)
        assert settings.escape_html is False
        assert settings.document_brand == "Kenels LMS"

    def test_invalid_env_level_surfaces_as_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LEDGERPORT_LOG_LEVEL", "loud")
        with pytest.raises(ConfigError):
            load_export_settings()
