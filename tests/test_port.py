import logging
import time

import pytest

from hubblenet.port import LogLevel, log, uptime_ms


@pytest.mark.parametrize(
    "level, expected",
    [
        (LogLevel.DEBUG, logging.DEBUG),
        (LogLevel.INFO, logging.INFO),
        (LogLevel.WARNING, logging.WARNING),
        (LogLevel.ERR, logging.ERROR),
    ],
)
def test_log_maps_levels(caplog, level, expected):
    with caplog.at_level(logging.DEBUG, logger="hubblenet"):
        log(level, "message %d", 5)
    assert [r.levelno for r in caplog.records] == [expected]
    assert caplog.records[0].getMessage() == "message 5"


def test_log_levels_increase_with_severity(caplog):
    with caplog.at_level(logging.DEBUG, logger="hubblenet"):
        for level in sorted(LogLevel):
            log(level, "entry")
    levels = [r.levelno for r in caplog.records]
    assert levels == [logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR]


def test_log_drops_trailing_newline(caplog):
    with caplog.at_level(logging.DEBUG, logger="hubblenet"):
        log(LogLevel.INFO, "Hubble Satellite Network initialized\n")
    assert caplog.records[0].getMessage() == "Hubble Satellite Network initialized"


def test_log_accepts_integer_level(caplog):
    with caplog.at_level(logging.DEBUG, logger="hubblenet"):
        log(2, "%s-%s", "a", "b")
    assert caplog.records[0].levelno == logging.WARNING
    assert caplog.records[0].getMessage() == "a-b"


def test_log_rejects_unknown_level():
    with pytest.raises(ValueError):
        log(9, "message")


def test_uptime_is_monotonic():
    first = uptime_ms()
    time.sleep(0.02)
    second = uptime_ms()
    assert first >= 0
    assert second - first >= 10