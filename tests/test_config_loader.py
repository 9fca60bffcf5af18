"""
配置加载与错误处理测试
Configuration Loader and Error Handler Tests
"""
import logging

import pytest

from rps_game.utils.config_loader import ConfigLoader, DEFAULT_CONFIG
from rps_game.utils.error_handler import ErrorHandler
from rps_game.utils.exceptions import (
    ConfigurationException, GameException, InvalidInput, InvalidState
)
from rps_game.utils.logger import get_log_level, setup_logger


def test_load_and_save_round_trip(tmp_path):
    path = tmp_path / "nested" / "config.yaml"
    config = {"game": {"max_rounds": 3}, "bot": {"strategy": "scripted", "moves": ["rock"]}}
    assert ConfigLoader.save_config(config, path)
    assert ConfigLoader.load_config(path) == config


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load_config(tmp_path / "missing.yaml")


def test_load_empty_file_returns_empty_dict(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert ConfigLoader.load_config(path) == {}


def test_load_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("game: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationException):
        ConfigLoader.load_config(path)


def test_load_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationException):
        ConfigLoader.load_config(path)


def test_merge_with_defaults_keeps_defaults_intact():
    merged = ConfigLoader.merge_with_defaults({"game": {"max_rounds": 5}, "logging": None})
    assert merged["game"]["max_rounds"] == 5
    assert merged["bot"]["strategy"] == "random"
    assert merged["logging"]["level"] == "WARNING"
    merged["bot"]["seed"] = 1
    assert DEFAULT_CONFIG["bot"]["seed"] is None
    assert DEFAULT_CONFIG["game"]["max_rounds"] == 10


def test_get_max_rounds():
    assert ConfigLoader.get_max_rounds({}) == 10
    assert ConfigLoader.get_max_rounds({"game": {"max_rounds": 7}}) == 7
    with pytest.raises(ConfigurationException) as exc_info:
        ConfigLoader.get_max_rounds({"game": {"max_rounds": 0}})
    assert exc_info.value.config_key == "game.max_rounds"


def test_get_log_level():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("nonsense") == logging.INFO
    assert get_log_level(None) == logging.INFO


def test_setup_logger_does_not_duplicate_handlers():
    first = setup_logger("RPS.TestLogger")
    count = len(first.handlers)
    second = setup_logger("RPS.TestLogger", level=logging.DEBUG)
    assert first is second
    assert len(second.handlers) == count
    assert second.level == logging.DEBUG


def test_error_handler_dispatches_by_type():
    handler = ErrorHandler()
    assert handler.handle(InvalidInput("bad name", value=""), "test")
    assert handler.handle(InvalidState("not started", game_state="NOT_STARTED"), "test")
    assert handler.handle(GameException("boom"), "test")
    assert handler.handle(ConfigurationException("bad", config_key="game"), "test")
    assert not handler.handle(ValueError("generic"), "test")


def test_error_handler_custom_handler_and_recoverable():
    handler = ErrorHandler()
    seen = []
    handler.register_handler(KeyError, lambda exc, ctx: seen.append(ctx))
    assert handler.handle(KeyError("x"), "lookup")
    assert seen == ["lookup"]
    assert handler.is_recoverable(InvalidInput("x"))
    assert not handler.is_recoverable(GameException("x"))
