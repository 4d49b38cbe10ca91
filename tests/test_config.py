import logging

import pytest

from gdengine.core import config
from gdengine.core.config import MathConfig, env_int, setup_default_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("GDENGINE_DISPLAY_PRECISION", raising=False)
    monkeypatch.delenv("GDENGINE_LOG_LEVEL", raising=False)
    cfg = MathConfig.from_env()
    assert cfg.display_precision == 2
    assert cfg.log_level == "WARNING"


def test_from_env(monkeypatch):
    monkeypatch.setenv("GDENGINE_DISPLAY_PRECISION", "4")
    monkeypatch.setenv("GDENGINE_LOG_LEVEL", "debug")
    cfg = MathConfig.from_env()
    assert cfg.display_precision == 4
    assert cfg.log_level == "DEBUG"


def test_env_int_invalid_and_bounds(monkeypatch):
    monkeypatch.setenv("GDENGINE_TEST_INT", "abc")
    assert env_int("GDENGINE_TEST_INT", 3) == 3
    monkeypatch.setenv("GDENGINE_TEST_INT", "-5")
    assert env_int("GDENGINE_TEST_INT", 3, min_value=0) == 0
    monkeypatch.delenv("GDENGINE_TEST_INT")
    assert env_int("GDENGINE_TEST_INT") is None


@pytest.fixture()
def fresh_root(monkeypatch):
    """Isolated root logger so pytest's own handlers stay untouched."""
    root = logging.RootLogger(logging.WARNING)
    monkeypatch.setattr(logging, "root", root)
    return root


def test_setup_default_logging_noop_when_configured(fresh_root):
    handler = logging.NullHandler()
    fresh_root.addHandler(handler)
    setup_default_logging("DEBUG")
    assert fresh_root.handlers == [handler]
    assert fresh_root.level == logging.WARNING


def test_setup_default_logging_configures_root(fresh_root, monkeypatch):
    monkeypatch.setattr(config.settings, "log_level", "INFO")
    setup_default_logging()
    assert fresh_root.level == logging.INFO
    assert len(fresh_root.handlers) == 1
