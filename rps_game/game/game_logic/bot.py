"""
机器人出拳策略
Bot Move Selection
"""
from abc import ABC, abstractmethod
from typing import Optional, Dict, Any, Iterable, List
import numpy as np
from .move import Move
from ...utils.exceptions import GameException, ConfigurationException
from ...utils.logger import setup_logger

logger = setup_logger("RPS.Bot")


class MoveSelector(ABC):
    """机器人出拳策略抽象基类"""

    @abstractmethod
    def choose(self) -> Move:
        """
        选出本回合机器人的出拳

        Returns:
            Move: 机器人出拳
        """
        pass

    def reset(self):
        """重新开始比赛时调用；无状态策略不需要处理"""
        pass


class RandomMoveSelector(MoveSelector):
    """均匀随机出拳，每回合独立抽取，不记忆历史"""

    def __init__(self, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        初始化随机出拳策略

        Args:
            seed: 随机种子（可选，用于复现）
            rng: 外部注入的随机数生成器，优先于 seed
        """
        self.seed = seed
        self._rng = rng if rng is not None else np.random.default_rng(seed)
        self._moves = Move.all()

    def choose(self) -> Move:
        index = int(self._rng.integers(len(self._moves)))
        move = self._moves[index]
        logger.debug(f"机器人随机出拳: {move}")
        return move


class ScriptedMoveSelector(MoveSelector):
    """按固定序列出拳，用于测试和回放"""

    def __init__(self, moves: Iterable):
        self._moves: List[Move] = [Move.from_string(m) for m in moves]
        self._index = 0

    @property
    def remaining(self) -> int:
        return len(self._moves) - self._index

    def choose(self) -> Move:
        if self._index >= len(self._moves):
            raise GameException(f"预设出拳序列已用完（共 {len(self._moves)} 手）")
        move = self._moves[self._index]
        self._index += 1
        return move

    def reset(self):
        """从序列开头重新出拳"""
        self._index = 0


class BotFactory:
    """出拳策略工厂类，按名称创建策略实例"""

    _selector_classes: Dict[str, type] = {}

    @classmethod
    def register(cls, name: str, selector_class: type):
        """
        注册出拳策略类

        Args:
            name: 策略名称（如 'random'）
            selector_class: 策略类（必须继承自MoveSelector）
        """
        if not issubclass(selector_class, MoveSelector):
            raise TypeError(f"{selector_class} must be a subclass of MoveSelector")
        cls._selector_classes[name.lower()] = selector_class

    @classmethod
    def available(cls) -> List[str]:
        return sorted(cls._selector_classes)

    @classmethod
    def create(cls, name: str, config: Optional[Dict[str, Any]] = None) -> MoveSelector:
        """
        创建出拳策略实例

        Args:
            name: 策略名称
            config: 构造参数

        Returns:
            MoveSelector: 策略实例

        Raises:
            ConfigurationException: 未知策略或参数错误
        """
        name_lower = (name or "").lower()
        if name_lower not in cls._selector_classes:
            raise ConfigurationException(
                f"未知的机器人策略: {name}（可选: {', '.join(cls.available())}）",
                config_key='bot.strategy'
            )

        try:
            return cls._selector_classes[name_lower](**(config or {}))
        except TypeError as e:
            raise ConfigurationException(f"机器人策略参数错误: {e}",
                                         config_key='bot') from e

    @classmethod
    def from_config(cls, bot_config: Dict[str, Any]) -> MoveSelector:
        """
        从 bot 配置段创建策略

        Args:
            bot_config: 形如 {'strategy': 'random', 'seed': 42} 的字典
        """
        config = dict(bot_config or {})
        strategy = config.pop('strategy', 'random')
        if strategy == 'random':
            config.pop('moves', None)
        elif strategy == 'scripted':
            config.pop('seed', None)
        logger.info(f"创建机器人策略: {strategy}")
        return cls.create(strategy, config)


BotFactory.register('random', RandomMoveSelector)
BotFactory.register('scripted', ScriptedMoveSelector)
