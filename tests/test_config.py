"""Tests for TourSettings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from pyapplicative.config import LOGGER_NAME, TourSettings, configure_logging


def test_defaults():
    settings = TourSettings()
    assert settings.color is True
    assert settings.log_level == "WARNING"
    assert settings.workers == 4
    assert settings.sections == ()


def test_from_env_reads_prefixed_variables():
    settings = TourSettings.from_env({
        "PYAPPLICATIVE_COLOR": "false",
        "PYAPPLICATIVE_LOG_LEVEL": "debug",
        "PYAPPLICATIVE_WORKERS": "8",
        "PYAPPLICATIVE_FETCH_DELAY_MS": "0",
        "PYAPPLICATIVE_SECTIONS": "maybe, laws,",
        "UNRELATED": "ignored",
    })
    assert settings.color is False
    assert settings.log_level == "DEBUG"
    assert settings.workers == 8
    assert settings.fetch_delay_ms == 0
    assert settings.sections == ("maybe", "laws")


@pytest.mark.parametrize("field, value", [
    ("workers", 0),
    ("fetch_delay_ms", -1),
    ("log_level", "LOUD"),
])
def test_invalid_values_are_rejected(field, value):
    with pytest.raises(ValidationError):
        TourSettings(**{field: value})


def test_settings_are_frozen():
    settings = TourSettings()
    with pytest.raises(ValidationError):
        settings.workers = 2  # type: ignore[misc]


def test_configure_logging_is_idempotent():
    logger = configure_logging("DEBUG")
    configure_logging("INFO")
    assert logger.name == LOGGER_NAME
    assert logger.level == logging.INFO
    assert logger.propagate is False
    stream_handlers = [h for h in logger.handlers
                       if isinstance(h, logging.StreamHandler)]
    assert len(stream_handlers) == 1
