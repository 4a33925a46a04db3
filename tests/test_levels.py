import logging

import pytest

from log2.levels import Level, _to_logging, get_level, set_level


@pytest.fixture(autouse=True)
def _restore_root_level():
    root = logging.getLogger()
    saved = root.level
    yield
    root.setLevel(saved)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("debug", Level.DEBUG),
        ("trace", Level.TRACE),
        ("info", Level.INFO),
        ("warn", Level.WARN),
        ("error", Level.ERROR),
        ("off", Level.OFF),
    ],
)
def test_get_level_known_names(name, expected):
    assert get_level(name) is expected


def test_get_level_is_case_insensitive():
    assert get_level("INFO") is Level.INFO
    assert get_level("Trace") is Level.TRACE


def test_get_level_unknown_defaults_to_debug():
    assert get_level("verbose") is Level.DEBUG
    assert get_level("") is Level.DEBUG


def test_level_ordering_and_names():
    assert Level.OFF < Level.ERROR < Level.WARN < Level.INFO < Level.DEBUG < Level.TRACE
    assert str(Level.WARN) == "WARN"
    assert get_level(str(Level.ERROR)) is Level.ERROR


def test_set_level_by_name():
    set_level("info")
    expected = _to_logging(get_level("info"))
    assert expected == logging.INFO
    assert logging.getLogger().level == expected


def test_set_level_by_enum():
    set_level(Level.WARN)
    expected = _to_logging(Level.WARN)
    assert expected == logging.WARNING
    assert logging.getLogger().level == expected


def test_set_level_trace_enables_everything():
    set_level("trace")
    expected = _to_logging(get_level("trace"))
    root = logging.getLogger()
    assert root.level == expected
    assert expected < logging.DEBUG
    assert root.isEnabledFor(logging.DEBUG)


def test_set_level_off_disables_everything():
    set_level(Level.OFF)
    expected = _to_logging(Level.OFF)
    root = logging.getLogger()
    assert root.level == expected
    assert expected > logging.CRITICAL
    assert not root.isEnabledFor(logging.CRITICAL)