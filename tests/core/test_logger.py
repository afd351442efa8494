"""Tests for logger setup."""

import sys

import pytest
from loguru import logger

from dynalarm.core.logger import setup_logger


@pytest.fixture(autouse=True)
def restore_logger():
    yield
    logger.remove()
    logger.add(sys.stderr)


def test_console_shows_structured_fields(capsys):
    """Test that keyword fields passed to a log call reach the console."""
    setup_logger(level="INFO")
    logger.warning("Alarm request rejected", code="WINDOW_TOO_SMALL", reason="too small")

    err = capsys.readouterr().err
    assert "Alarm request rejected" in err
    assert "'code': 'WINDOW_TOO_SMALL'" in err
    assert "'reason': 'too small'" in err


def test_file_sink_shows_structured_fields(tmp_path):
    log_file = tmp_path / "logs" / "alarm.log"
    setup_logger(level="INFO", log_file=str(log_file))
    logger.info("Alarm planned", array_size=75)
    logger.remove()

    text = log_file.read_text()
    assert "Logger initialized" in text
    assert "Alarm planned | {'array_size': 75}" in text
