import logging
import os
import sys

import pytest

# Add the project root to sys.path to resolve module imports correctly
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import config
from config import MAX_ID, Config, _int_env
from core_logic import setup_logging


def test_defaults_are_valid():
    Config.validate()


def test_int_env(monkeypatch):
    monkeypatch.setenv("OBF_TEST_VALUE", "42")
    assert _int_env("OBF_TEST_VALUE", 7) == 42
    monkeypatch.setenv("OBF_TEST_VALUE", "  ")
    assert _int_env("OBF_TEST_VALUE", 7) == 7
    monkeypatch.delenv("OBF_TEST_VALUE")
    assert _int_env("OBF_TEST_VALUE", None) is None


def test_int_env_rejects_garbage(monkeypatch):
    monkeypatch.setenv("OBF_TEST_VALUE", "not-a-number")
    with pytest.raises(ValueError, match="OBF_TEST_VALUE") as excinfo:
        _int_env("OBF_TEST_VALUE", 7)
    # The int() failure is not chained onto the config error
    assert excinfo.value.__cause__ is None
    assert excinfo.value.__suppress_context__


@pytest.mark.parametrize("attr,value", [
    ("OBFUSCATION_PRIME", MAX_ID + 1),
    ("OBFUSCATION_PRIME", 1580030174),
    ("OBFUSCATION_RANDOM", -1),
    ("OBFUSCATION_MOD_INVERSE", MAX_ID + 1),
    ("LOG_LEVEL", "LOUD"),
])
def test_validate_rejects(monkeypatch, attr, value):
    monkeypatch.setattr(config.Config, attr, value)
    with pytest.raises(ValueError):
        Config.validate()


def test_module_constants_exposed():
    assert config.OBFUSCATION_PRIME == Config.OBFUSCATION_PRIME
    assert config.MAX_ID == 2147483647


def test_unknown_log_level_falls_back_to_info():
    """A bad LOG_LEVEL must not break import; validate() reports it instead."""
    previous = logging.getLogger("id_obfuscator").level
    logger = setup_logging(level="LOUD")
    try:
        assert logger.level == logging.INFO
    finally:
        logger.setLevel(previous)
