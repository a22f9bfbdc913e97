"""Config – environment and ``.env`` sources for :class:`AccessSettings`.

Every loader reports only the fields its source actually defines, so
:func:`load_settings` can layer several sources without a later one
resetting an earlier value back to its default.
"""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Mapping, Sequence, TypeVar

from dotenv import dotenv_values

from aims_access.config.errors import ConfigError, InvalidSettingError
from aims_access.config.settings import Settings

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _build(settings_cls: type[T], values: Mapping[str, Any]) -> T:
    try:
        return settings_cls(**values)
    except TypeError as exc:
        raise ConfigError(f"cannot build {settings_cls.__name__}: {exc}") from exc


class SettingsLoader(abc.ABC):
    """Port: one source of setting values."""

    @abc.abstractmethod
    def read(self, settings_cls: type[Settings]) -> dict[str, Any]:
        """Return the values this source defines, keyed by field name."""

    def load(self, settings_cls: type[T]) -> T:
        return _build(settings_cls, self.read(settings_cls))


class EnvSettingsLoader(SettingsLoader):
    """Read ``<PREFIX>_<FIELD>`` variables (``AIMS_ACCESS_SHOW_LOADING``...).

    Boolean fields accept ``1/0``, ``true/false``, ``yes/no`` and ``on/off``;
    anything else raises :class:`InvalidSettingError` rather than silently
    turning a gate's behaviour off.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def read(self, settings_cls: type[Settings]) -> dict[str, Any]:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}
        for field in dataclasses.fields(settings_cls):
            key = f"{settings_cls._prefix}_{field.name}".upper()
            raw = environ.get(key)
            if raw is not None:
                values[field.name] = self._parse(field, raw, key)
        return values

    @staticmethod
    def _parse(field: dataclasses.Field[Any], raw: str, key: str) -> Any:
        if field.type not in (bool, "bool"):
            return raw.strip()
        flag = raw.strip().lower()
        if flag in _TRUE:
            return True
        if flag in _FALSE:
            return False
        raise InvalidSettingError(field.name, raw, "expected a boolean", source=key)


class DotenvSettingsLoader(SettingsLoader):
    """Read a ``.env`` file without touching ``os.environ``.

    Real environment variables win over the file unless *override* is set.
    """

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def read(self, settings_cls: type[Settings]) -> dict[str, Any]:
        from_file = {k: v for k, v in dotenv_values(self._env_file).items() if v is not None}
        if self._override:
            environ = {**os.environ, **from_file}
        else:
            environ = {**from_file, **os.environ}
        return EnvSettingsLoader(environ).read(settings_cls)


def load_settings(
    settings_cls: type[T],
    loaders: Sequence[SettingsLoader] | None = None,
    overrides: Mapping[str, Any] | None = None,
) -> T:
    """Layer *loaders* (later wins) and *overrides* (win over all) into one instance.

    Raises :class:`ConfigError` for unknown or missing fields and
    :class:`InvalidSettingError` for values that fail validation.
    """
    merged: dict[str, Any] = {}
    for loader in loaders or ():
        merged.update(loader.read(settings_cls))
    merged.update(overrides or {})
    return _build(settings_cls, merged)


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "load_settings"]
