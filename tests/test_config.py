import logging
from pathlib import Path

import pytest

from uniconv.config import DEFAULT_PROMPT, get_settings, parse_log_level, reset_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("UNICONV_PROMPT", "UNICONV_LOG_FILE", "UNICONV_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


def test_defaults() -> None:
    settings = get_settings()
    assert settings.prompt == DEFAULT_PROMPT
    assert settings.log_file is None
    assert settings.log_level == logging.INFO
    assert settings.as_dict() == {"prompt": DEFAULT_PROMPT, "log_file": None, "log_level": "INFO"}


def test_settings_are_cached() -> None:
    assert get_settings() is get_settings()
    assert get_settings(refresh=True) == get_settings()


def test_environment_variables(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("UNICONV_PROMPT", ">> ")
    monkeypatch.setenv("UNICONV_LOG_FILE", str(tmp_path / "events.jsonl"))
    monkeypatch.setenv("UNICONV_LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.prompt == ">> "
    assert settings.log_file == (tmp_path / "events.jsonl").resolve()
    assert settings.log_level == logging.DEBUG


def test_overrides_take_precedence(monkeypatch) -> None:
    monkeypatch.setenv("UNICONV_LOG_LEVEL", "debug")
    settings = get_settings(log_level="warning", prompt="? ")
    assert settings.log_level == logging.WARNING
    assert settings.prompt == "? "
    assert get_settings().log_level == logging.DEBUG


@pytest.mark.parametrize("value, expected", [("INFO", logging.INFO), ("error", logging.ERROR), ("15", 15), (10, 10)])
def test_parse_log_level(value, expected: int) -> None:
    assert parse_log_level(value) == expected


def test_parse_log_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError):
        parse_log_level("chatty")
