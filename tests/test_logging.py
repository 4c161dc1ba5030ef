import logging

from appcheck.utils import resolve_log_level


def test_default_level():
    assert resolve_log_level(None) == logging.WARNING
    assert resolve_log_level("") == logging.WARNING


def test_named_levels():
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level(" INFO ") == logging.INFO


def test_unknown_level_falls_back():
    assert resolve_log_level("chatty") == logging.WARNING
