"""
错误处理工具模块
Error Handler Utility Module
"""
import traceback
from typing import Optional, Callable, Dict
from .exceptions import (
    GameException, InvalidInput, InvalidState, ConfigurationException
)
from .logger import setup_logger

logger = setup_logger("RPS.ErrorHandler")


class ErrorHandler:
    """错误处理器类，按异常类型分发到已注册的处理函数"""

    def __init__(self):
        """初始化错误处理器"""
        self.error_callbacks: Dict[type, Callable] = {}
        self.setup_default_handlers()

    def setup_default_handlers(self):
        """设置默认错误处理函数（子类在前，保证优先匹配）"""
        self.error_callbacks[InvalidInput] = self._handle_invalid_input
        self.error_callbacks[InvalidState] = self._handle_invalid_state
        self.error_callbacks[GameException] = self._handle_game_error
        self.error_callbacks[ConfigurationException] = self._handle_config_error

    def register_handler(self, exception_type: type, handler: Callable):
        """
        注册错误处理函数

        Args:
            exception_type: 异常类型
            handler: 处理函数，签名为 handler(exception, context)
        """
        self.error_callbacks[exception_type] = handler
        logger.debug(f"注册错误处理函数: {exception_type.__name__}")

    def is_recoverable(self, exception: Exception) -> bool:
        """输入或阶段错误可以由界面层直接恢复"""
        return isinstance(exception, (InvalidInput, InvalidState))

    def handle(self, exception: Exception, context: Optional[str] = None) -> bool:
        """
        处理异常

        Args:
            exception: 异常对象
            context: 上下文信息

        Returns:
            bool: 是否由已注册的处理函数处理
        """
        error_msg = "异常发生"
        if context:
            error_msg += f" (上下文: {context})"
        error_msg += f": {exception}"

        if self.is_recoverable(exception):
            logger.debug(error_msg)
        else:
            logger.error(error_msg, exc_info=exception)

        handler = None
        for exc_type, handler_func in self.error_callbacks.items():
            if isinstance(exception, exc_type):
                handler = handler_func
                break

        if handler is None:
            self._handle_generic_error(exception, context)
            return False

        try:
            handler(exception, context)
            return True
        except Exception as e:
            logger.error(f"错误处理函数执行异常: {e}", exc_info=True)
            return False

    def _handle_invalid_input(self, exception: InvalidInput, context: Optional[str]):
        """处理无效输入（界面层负责提示，日志只记 DEBUG）"""
        logger.debug(f"无效输入 [{exception.value!r}]: {exception.message}")

    def _handle_invalid_state(self, exception: InvalidState, context: Optional[str]):
        """处理阶段错误"""
        logger.debug(f"当前阶段不允许该操作 [阶段: {exception.game_state}, "
                     f"命令: {exception.command}]: {exception.message}")

    def _handle_game_error(self, exception: GameException, context: Optional[str]):
        """处理游戏逻辑错误"""
        logger.error(f"游戏逻辑错误 [状态: {exception.game_state}]: {exception.message}")

    def _handle_config_error(self, exception: ConfigurationException, context: Optional[str]):
        """处理配置错误"""
        logger.error(f"配置错误 [键: {exception.config_key}]: {exception.message}")

    def _handle_generic_error(self, exception: Exception, context: Optional[str]):
        """处理通用错误"""
        logger.error(f"未处理的异常: {type(exception).__name__}: {exception}")
        logger.debug("".join(traceback.format_exception(
            type(exception), exception, exception.__traceback__)))


# 全局错误处理器实例
global_error_handler = ErrorHandler()
