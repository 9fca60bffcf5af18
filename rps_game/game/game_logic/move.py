"""
出拳枚举类型
Move Enumeration
"""
from enum import Enum
from typing import Tuple
from ...utils.exceptions import InvalidInput


class Move(Enum):
    """出拳类型枚举"""
    ROCK = "rock"          # 石头
    PAPER = "paper"        # 布
    SCISSORS = "scissors"  # 剪刀

    def __str__(self):
        return self.value

    def glyph(self) -> str:
        """显示用符号"""
        return _GLYPHS[self]

    def beats(self) -> "Move":
        """返回会被本手战胜的那一手"""
        return _BEATS[self]

    def wins_against(self, other: "Move") -> bool:
        """
        判断本手是否战胜另一手（石头>剪刀>布>石头）

        Args:
            other: 对方出拳

        Returns:
            bool: 本手获胜返回 True；相同或落败返回 False
        """
        return _BEATS[self] is other

    @classmethod
    def all(cls) -> Tuple["Move", ...]:
        """按固定顺序返回全部三种出拳"""
        return (cls.ROCK, cls.PAPER, cls.SCISSORS)

    @classmethod
    def from_string(cls, value: str) -> "Move":
        """
        从字符串创建出拳枚举

        Args:
            value: 出拳字符串（rock/paper/scissors 或首字母 r/p/s，不区分大小写）

        Returns:
            Move: 出拳枚举值

        Raises:
            InvalidInput: 无法识别的字符串
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for move in cls:
            if text in (move.value, move.value[0]):
                return move
        raise InvalidInput(f"无法识别的出拳: {value!r}", value=value)


_BEATS = {
    Move.ROCK: Move.SCISSORS,      # 石头胜剪刀
    Move.PAPER: Move.ROCK,         # 布胜石头
    Move.SCISSORS: Move.PAPER,     # 剪刀胜布
}

_GLYPHS = {
    Move.ROCK: "🪨",
    Move.PAPER: "📄",
    Move.SCISSORS: "✂️",
}
