"""
日志工具模块
Logger Utility Module
"""
import logging
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LEVEL_MAP = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}


def get_log_level(level_str: Optional[str]) -> int:
    """
    从字符串获取日志级别，未知级别回退到 INFO

    Args:
        level_str: 日志级别字符串（DEBUG, INFO, WARNING, ERROR, CRITICAL）

    Returns:
        int: 日志级别
    """
    if not level_str:
        return logging.INFO
    return LEVEL_MAP.get(str(level_str).upper(), logging.INFO)


def _has_file_handler(logger: logging.Logger, log_path: Path) -> bool:
    target = str(log_path.resolve())
    return any(isinstance(h, logging.FileHandler) and h.baseFilename == target
               for h in logger.handlers)


def setup_logger(
    name: str = "RPS",
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    设置日志记录器

    已经配置过的记录器更新级别，并在指定新日志文件时追加文件处理器；
    同一文件不会重复添加。

    Args:
        name: 日志记录器名称（约定为 "RPS.<组件>"）
        log_file: 日志文件路径（可选）
        level: 日志级别
        format_string: 日志格式字符串（可选）

    Returns:
        logging.Logger: 配置好的日志记录器
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    if not logger.handlers:
        # 控制台日志走 stderr，不与游戏界面输出混在一起
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        if not _has_file_handler(logger, log_path):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    # 子记录器 "RPS.xxx" 各自带处理器，避免重复输出到父记录器
    logger.propagate = False
    return logger


def _rps_logger_names():
    return [name for name in list(logging.Logger.manager.loggerDict)
            if name == "RPS" or name.startswith("RPS.")]


def set_global_level(level: int, log_file: Optional[str] = None):
    """
    将所有已创建的 RPS.* 记录器调整到同一级别

    Args:
        level: 日志级别
        log_file: 日志文件路径（可选），给每个记录器都挂上文件处理器
    """
    for name in _rps_logger_names():
        setup_logger(name, log_file=log_file, level=level)


def close_file_handlers():
    """关闭并移除所有 RPS.* 记录器上的文件处理器"""
    for name in _rps_logger_names():
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()
