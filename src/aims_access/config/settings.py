"""Config – Settings base class and AccessSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from aims_access.config.errors import InvalidSettingError


@dataclasses.dataclass
class Settings:
    """Base class for settings read from ``<_prefix>_<FIELD>`` variables."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class AccessSettings(Settings):
    """Defaults used by the gates and the logging setup.

    Read from ``AIMS_ACCESS_*`` environment variables by
    :class:`~aims_access.config.loaders.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "AIMS_ACCESS"

    unauthorized_path: str = "/unauthorized"
    show_loading: bool = True
    log_level: str = "INFO"
    log_json: bool = True
    audit_denials: bool = False
    service_name: str = "aims"

    def _validate(self) -> None:
        if not self.unauthorized_path.startswith("/"):
            raise InvalidSettingError(
                "unauthorized_path", self.unauthorized_path, "must be an absolute path"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingError("log_level", self.log_level, "unknown logging level")


__all__ = ["AccessSettings", "Settings"]
