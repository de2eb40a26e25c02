"""Runtime settings for uniconv.

:func:`get_settings` resolves the interactive prompt and the logging
destination from ``UNICONV_*`` environment variables. Keyword overrides (used
by the CLI options) take precedence over the environment and bypass the cache.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

__all__ = ["DEFAULT_PROMPT", "Settings", "get_settings", "parse_log_level", "reset_settings"]

DEFAULT_PROMPT = "Enter what you want to convert (or exit): "

_ENV_PROMPT = "UNICONV_PROMPT"
_ENV_LOG_FILE = "UNICONV_LOG_FILE"
_ENV_LOG_LEVEL = "UNICONV_LOG_LEVEL"

_SETTINGS_CACHE: Optional["Settings"] = None
_CACHE_KEY: Optional[tuple] = None


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    prompt: str = DEFAULT_PROMPT
    log_file: Optional[Path] = None
    log_level: int = logging.INFO

    def as_dict(self) -> Dict[str, Any]:
        """Expose the settings as JSON-friendly values."""

        return {
            "prompt": self.prompt,
            "log_file": str(self.log_file) if self.log_file is not None else None,
            "log_level": logging.getLevelName(self.log_level),
        }


def parse_log_level(value: str | int) -> int:
    """Accept either a numeric level or a level name such as ``debug``."""

    if isinstance(value, int):
        return value
    candidate = value.strip()
    if candidate.isdigit():
        return int(candidate)
    level = logging.getLevelName(candidate.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {value!r}")
    return level


def _normalize_path(value: Optional[str | Path]) -> Optional[Path]:
    if value is None or value == "":
        return None
    return Path(value).expanduser().resolve()


def _build_settings(env: Mapping[str, str], overrides: Mapping[str, Any]) -> Settings:
    prompt = overrides.get("prompt")
    if prompt is None:
        prompt = env.get(_ENV_PROMPT, DEFAULT_PROMPT)

    log_file = overrides.get("log_file")
    if log_file is None:
        log_file = env.get(_ENV_LOG_FILE)

    log_level = overrides.get("log_level")
    if log_level is None:
        log_level = env.get(_ENV_LOG_LEVEL) or logging.INFO

    return Settings(
        prompt=prompt,
        log_file=_normalize_path(log_file),
        log_level=parse_log_level(log_level),
    )


def get_settings(
    *,
    refresh: bool = False,
    prompt: Optional[str] = None,
    log_file: Optional[str | Path] = None,
    log_level: Optional[str | int] = None,
) -> Settings:
    """Return the cached :class:`Settings`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached settings are discarded and recomputed.
    prompt, log_file, log_level:
        Explicit overrides. When any is given the result is built on the fly
        and not cached globally.
    """

    global _SETTINGS_CACHE, _CACHE_KEY

    overrides = {
        key: value
        for key, value in (("prompt", prompt), ("log_file", log_file), ("log_level", log_level))
        if value is not None
    }
    if overrides:
        return _build_settings(os.environ, overrides)

    key = tuple(os.environ.get(name) for name in (_ENV_PROMPT, _ENV_LOG_FILE, _ENV_LOG_LEVEL))
    if refresh or _SETTINGS_CACHE is None or _CACHE_KEY != key:
        _SETTINGS_CACHE = _build_settings(os.environ, {})
        _CACHE_KEY = key

    return _SETTINGS_CACHE


def reset_settings() -> None:
    """Clear the cached settings (mainly useful for tests)."""

    global _SETTINGS_CACHE, _CACHE_KEY
    _SETTINGS_CACHE = None
    _CACHE_KEY = None
