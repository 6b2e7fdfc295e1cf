"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Dataclass read field by field from prefixed environment variables.

    With ``_prefix = "LEDGERPORT"`` the field ``output_dir`` comes from
    ``LEDGERPORT_OUTPUT_DIR``. Fields without a default are required.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Hook for cross-field checks; raise ``InvalidSettingValueError``."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")


__all__ = ["Settings"]
