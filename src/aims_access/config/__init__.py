"""Config – 12-factor settings for the gates and logging."""

from aims_access.config.errors import ConfigError, InvalidSettingError
from aims_access.config.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    load_settings,
)
from aims_access.config.settings import AccessSettings, Settings

__all__ = [
    "AccessSettings",
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingError",
    "Settings",
    "SettingsLoader",
    "load_settings",
]
