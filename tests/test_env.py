import logging
import os

import pytest

from ylmpy.env import LOG_LEVEL_ENV, parse_log_level_env


def test_parse_log_level_env_defaults():
    os.environ.pop(LOG_LEVEL_ENV, None)
    assert parse_log_level_env() == logging.WARNING
    assert parse_log_level_env(default=logging.ERROR) == logging.ERROR


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("debug", logging.DEBUG),
        ("INFO", logging.INFO),
        (" error ", logging.ERROR),
        ("10", 10),
        ("", logging.WARNING),
        ("garbage", logging.WARNING),
    ],
)
def test_parse_log_level_env_values(raw: str, expected: int):
    os.environ[LOG_LEVEL_ENV] = raw
    try:
        assert parse_log_level_env() == expected
    finally:
        os.environ.pop(LOG_LEVEL_ENV, None)
