import logging

import pytest

from main import log_level_from_env


@pytest.mark.parametrize("value, expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    ("verbose", logging.INFO),
    ("", logging.INFO),
])
def test_log_level_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("LOG_LEVEL", value)
    assert log_level_from_env() == expected


def test_log_level_defaults_to_info(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    assert log_level_from_env() == logging.INFO
