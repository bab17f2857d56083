"""Unit tests for environment configuration."""

from pathlib import Path

import pytest

from gyeongbokgung import config


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("GYEONGBOKGUNG_UI", raising=False)
    monkeypatch.delenv("GYEONGBOKGUNG_LOG_DIR", raising=False)
    monkeypatch.delenv("GYEONGBOKGUNG_DEBUG", raising=False)

    assert config.get_ui_mode() == "tui"
    assert config.get_log_dir() == Path("logs")
    assert config.get_debug() is False


def test_ui_mode_is_normalized(monkeypatch) -> None:
    monkeypatch.setenv("GYEONGBOKGUNG_UI", " Console ")

    assert config.get_ui_mode() == "console"


def test_invalid_ui_mode(monkeypatch) -> None:
    monkeypatch.setenv("GYEONGBOKGUNG_UI", "web")

    with pytest.raises(ValueError, match="GYEONGBOKGUNG_UI"):
        config.get_ui_mode()


@pytest.mark.parametrize("value,expected", [("1", True), ("true", True), ("YES", True), ("0", False), ("", False)])
def test_debug_flag(monkeypatch, value, expected) -> None:
    monkeypatch.setenv("GYEONGBOKGUNG_DEBUG", value)

    assert config.get_debug() is expected
