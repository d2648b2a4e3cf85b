"""Tests for log sink setup."""

import pytest
from loguru import logger

from likes_planner.config.settings import Settings
from likes_planner.core.logger import setup_logger


@pytest.fixture(autouse=True)
def reset_logger():
    yield
    logger.remove()


def test_file_sink_follows_settings(tmp_path, monkeypatch):
    log_file = tmp_path / "logs" / "planner.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    setup_logger(Settings(_env_file=None))
    logger.info("hidden below WARNING")
    logger.warning("Skipped 1 unreadable activity record(s)")
    logger.remove()

    content = log_file.read_text(encoding="utf-8")
    assert "Skipped 1 unreadable activity record(s)" in content
    assert "hidden below WARNING" not in content


def test_debug_flag_overrides_configured_level(tmp_path, monkeypatch):
    log_file = tmp_path / "planner.log"
    monkeypatch.setenv("LOG_FILE", str(log_file))
    monkeypatch.setenv("LOG_LEVEL", "ERROR")

    setup_logger(Settings(_env_file=None), debug=True)
    logger.debug("Notation rule 'zone' left '@(X+1~2)' as is")
    logger.remove()

    assert "Notation rule 'zone'" in log_file.read_text(encoding="utf-8")


def test_console_only_without_log_file(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("LOG_FILE", raising=False)

    setup_logger(Settings(_env_file=None))
    logger.warning("console only")

    captured = capsys.readouterr()
    assert "console only" in captured.err
    assert captured.out == ""
    assert list(tmp_path.iterdir()) == []
