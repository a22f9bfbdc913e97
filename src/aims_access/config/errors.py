"""Errors raised while reading or validating :class:`AccessSettings`."""
from __future__ import annotations

from aims_access.kernel.errors import AccessError


class ConfigError(AccessError):
    """Settings could not be built from the given sources."""

    default_code = "config_error"


class InvalidSettingError(ConfigError):
    """One setting has a value the access layer cannot use.

    ``source`` names where the value came from (an environment variable such
    as ``AIMS_ACCESS_SHOW_LOADING``); it is ``None`` for values passed in code.
    """

    default_code = "invalid_setting"

    def __init__(
        self, setting: str, value: object, reason: str, *, source: str | None = None
    ) -> None:
        origin = f" (from {source})" if source else ""
        super().__init__(
            f"{setting}={value!r}{origin}: {reason}",
            setting=setting,
            source=source,
        )
        self.setting = setting
        self.value = value
        self.reason = reason
        self.source = source


__all__ = ["ConfigError", "InvalidSettingError"]
