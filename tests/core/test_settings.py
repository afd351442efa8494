"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from dynalarm.core.settings import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("HOST", "PORT", "LOG_LEVEL", "LOG_FILE", "ALARM_RANDOM_SEED", "ALARM_MAX_SAMPLES"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "INFO"
    assert settings.log_file is None
    assert settings.random_seed is None
    assert settings.max_array_size is None


def test_reads_environment(monkeypatch):
    """Test that PORT, LOG_LEVEL and ALARM_RANDOM_SEED come from the environment."""
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("ALARM_RANDOM_SEED", "42")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.log_level == "DEBUG"
    assert settings.random_seed == 42


def test_rejects_unknown_log_level(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError, match="LOG_LEVEL"):
        Settings(_env_file=None)


def test_rejects_out_of_range_port(monkeypatch):
    monkeypatch.setenv("PORT", "70000")
    with pytest.raises(ValidationError, match="PORT"):
        Settings(_env_file=None)


def test_reads_sample_cap(monkeypatch):
    monkeypatch.setenv("ALARM_MAX_SAMPLES", "5000")
    assert Settings(_env_file=None).max_array_size == 5000


@pytest.mark.parametrize("value", ["0", "-3"])
def test_rejects_non_positive_sample_cap(monkeypatch, value):
    monkeypatch.setenv("ALARM_MAX_SAMPLES", value)
    with pytest.raises(ValidationError, match="max_array_size|ALARM_MAX_SAMPLES"):
        Settings(_env_file=None)
