"""
自定义异常类
Custom Exception Classes
"""
from typing import Optional


class GameException(Exception):
    """游戏逻辑异常基类"""
    def __init__(self, message: str, game_state: Optional[str] = None):
        super().__init__(message)
        self.game_state = game_state
        self.message = message


class InvalidInput(GameException):
    """无效输入（空玩家名、无法识别的出拳等）"""
    def __init__(self, message: str, value: Optional[object] = None,
                 game_state: Optional[str] = None):
        super().__init__(message, game_state=game_state)
        self.value = value


class InvalidState(GameException):
    """在当前比赛阶段不允许执行的命令"""
    def __init__(self, message: str, game_state: Optional[str] = None,
                 command: Optional[str] = None):
        super().__init__(message, game_state=game_state)
        self.command = command


class ConfigurationException(Exception):
    """配置异常"""
    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message)
        self.config_key = config_key
        self.message = message
