from __future__ import annotations

import configparser
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path

from .errors import SettingsError
from .paths import settings_file

logger = logging.getLogger(__name__)

SECTION = "nodeedit"
ENV_PREFIX = "NODEEDIT_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class EditorSettings:
    """User settings for editing sessions."""

    relaxed_parse: bool = False
    atomic_save: bool = False
    log_level: str = "WARNING"

    @property
    def level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if not isinstance(level, int):
            raise SettingsError(f"unknown log level {self.log_level!r}")
        return level


def _parse_bool(name: str, raw: str) -> bool:
    lowered = raw.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise SettingsError(f"invalid boolean for {name}: {raw!r}")


def _coerce(values: Mapping[str, str]) -> dict[str, object]:
    out: dict[str, object] = {}
    for f in fields(EditorSettings):
        if f.name not in values:
            continue
        raw = values[f.name]
        out[f.name] = _parse_bool(f.name, raw) if f.type == "bool" else raw.strip()
    return out


def read_file(path: Path) -> dict[str, str]:
    parser = configparser.ConfigParser()
    if not path.exists():
        return {}
    try:
        parser.read(path, encoding="utf-8")
    except configparser.Error as exc:
        logger.warning("Failed to read settings %s: %s", path, exc)
        return {}
    if not parser.has_section(SECTION):
        return {}
    return dict(parser.items(SECTION))


def read_env(env: Mapping[str, str] | None = None) -> dict[str, str]:
    env = os.environ if env is None else env
    result: dict[str, str] = {}
    for key, value in env.items():
        if key.startswith(ENV_PREFIX):
            result[key[len(ENV_PREFIX):].lower()] = value
    return result


def load_settings(
    path: Path | None = None, env: Mapping[str, str] | None = None
) -> EditorSettings:
    """Return settings from *path* overlaid with ``NODEEDIT_*`` variables."""
    path = path or settings_file()
    settings = replace(EditorSettings(), **_coerce(read_file(path)))
    return replace(settings, **_coerce(read_env(env)))


__all__ = ["EditorSettings", "load_settings", "read_env", "read_file"]
