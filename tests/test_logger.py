"""
日志与错误处理测试
Logger and Error Handler Tests
"""
import logging
import sys

import pytest

from rps_game.game.match_controller import MatchController  # noqa: F401  创建 RPS.MatchController
from rps_game.utils.error_handler import ErrorHandler
from rps_game.utils.exceptions import GameException, InvalidInput, InvalidState
from rps_game.utils.logger import (
    setup_logger, set_global_level, close_file_handlers
)


class CollectingHandler(logging.Handler):
    def __init__(self):
        super().__init__(level=logging.DEBUG)
        self.records = []

    def emit(self, record):
        self.records.append(record)


@pytest.fixture
def error_log():
    logger = logging.getLogger("RPS.ErrorHandler")
    old_level = logger.level
    handler = CollectingHandler()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(old_level)


def file_handlers(logger):
    return [h for h in logger.handlers if isinstance(h, logging.FileHandler)]


def test_console_handler_writes_to_stderr():
    logger = setup_logger("RPS.TestConsole")
    stream_handlers = [h for h in logger.handlers
                       if type(h) is logging.StreamHandler]
    assert len(stream_handlers) == 1
    assert stream_handlers[0].stream is sys.stderr


def test_file_handler_added_to_existing_logger_once(tmp_path):
    log_file = tmp_path / "rps.log"
    logger = setup_logger("RPS.TestFile")
    assert file_handlers(logger) == []

    setup_logger("RPS.TestFile", log_file=str(log_file))
    setup_logger("RPS.TestFile", log_file=str(log_file))
    assert len(file_handlers(logger)) == 1

    logger.info("写入日志文件")
    close_file_handlers()
    assert file_handlers(logger) == []
    assert "写入日志文件" in log_file.read_text(encoding="utf-8")


def test_set_global_level_attaches_file_to_all_loggers(tmp_path):
    log_file = tmp_path / "all.log"
    setup_logger("RPS.TestGlobal", level=logging.WARNING)
    set_global_level(logging.INFO, log_file=str(log_file))
    try:
        logger = logging.getLogger("RPS.TestGlobal")
        assert logger.level == logging.INFO
        assert len(file_handlers(logger)) == 1
        assert len(file_handlers(logging.getLogger("RPS.MatchController"))) == 1
    finally:
        close_file_handlers()
        set_global_level(logging.WARNING)


@pytest.mark.parametrize("exception", [
    InvalidInput("无效的出拳", value="lizard"),
    InvalidState("比赛未在进行中", command="choose_move"),
])
def test_recoverable_errors_are_logged_at_debug(error_log, exception):
    handler = ErrorHandler()
    assert handler.is_recoverable(exception)
    assert handler.handle(exception, "出拳")
    assert error_log.records
    assert all(r.levelno == logging.DEBUG for r in error_log.records)


def test_game_errors_are_logged_at_error(error_log):
    handler = ErrorHandler()
    assert handler.handle(GameException("预设出拳序列已用完"), "机器人出拳")
    assert any(r.levelno == logging.ERROR for r in error_log.records)
