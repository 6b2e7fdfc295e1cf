"""Config settings – ExportSettings for sinks, documents and logging."""
from __future__ import annotations

import dataclasses
import logging

from ledgerport.config.settings.base import Settings
from ledgerport.config.validation import InvalidSettingValueError

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclasses.dataclass
class ExportSettings(Settings):
    """Environment-driven settings, read from ``LEDGERPORT_*`` variables.

    ``print_dir`` left empty means printable documents go to the system
    temporary directory.
    """

    _prefix: dataclasses.ClassVar[str] = "LEDGERPORT"

    output_dir: str = "."
    print_dir: str = ""
    escape_html: bool = True
    document_brand: str = ""
    log_level: str = "INFO"

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


__all__ = ["ExportSettings"]
