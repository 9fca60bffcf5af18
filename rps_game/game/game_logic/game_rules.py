"""
游戏规则实现
Game Rules Implementation
"""
from enum import Enum
from typing import Dict
from .move import Move
from ...utils.logger import setup_logger

logger = setup_logger("RPS.GameRules")


class RoundWinner(Enum):
    """单回合胜者（回合内没有平局）"""
    PLAYER = "player"
    BOT = "bot"


class MatchResult(Enum):
    """整场比赛结果（从玩家视角）"""
    WIN = "win"
    LOSS = "loss"
    TIE = "tie"

    @property
    def message(self) -> str:
        """比赛结束时展示给玩家的提示"""
        return _RESULT_MESSAGES[self]


_RESULT_MESSAGES = {
    MatchResult.WIN: "You Won! ✌️",
    MatchResult.LOSS: "Bot Won 😳",
    MatchResult.TIE: "It's a tie!",
}


class GameRules:
    """游戏规则类"""

    # 胜负规则：key胜value
    WIN_RULES: Dict[Move, Move] = {move: move.beats() for move in Move}

    @staticmethod
    def judge(player_move: Move, bot_move: Move) -> RoundWinner:
        """
        判断回合胜者

        只有机器人出拳战胜玩家时机器人得分，其余情况（包括相同出拳）
        都记为玩家得分，因此每回合恰好一方得分。

        Args:
            player_move: 玩家出拳
            bot_move: 机器人出拳

        Returns:
            RoundWinner: 回合胜者
        """
        if bot_move.wins_against(player_move):
            logger.debug(f"机器人获胜: {bot_move} 胜 {player_move}")
            return RoundWinner.BOT

        if player_move is bot_move:
            logger.debug(f"相同出拳 {player_move}，记为玩家得分")
        else:
            logger.debug(f"玩家获胜: {player_move} 胜 {bot_move}")
        return RoundWinner.PLAYER

    @staticmethod
    def get_winning_move(move: Move) -> Move:
        """获取能战胜指定出拳的那一手"""
        for winner, loser in GameRules.WIN_RULES.items():
            if loser is move:
                return winner
        raise ValueError(f"未知出拳: {move!r}")

    @staticmethod
    def get_losing_move(move: Move) -> Move:
        """获取会被指定出拳战胜的那一手"""
        return GameRules.WIN_RULES[move]

    @staticmethod
    def match_result(player_score: int, bot_score: int) -> MatchResult:
        """
        根据最终比分得出比赛结果

        Args:
            player_score: 玩家得分
            bot_score: 机器人得分

        Returns:
            MatchResult: 比赛结果
        """
        if player_score > bot_score:
            return MatchResult.WIN
        if player_score < bot_score:
            return MatchResult.LOSS
        return MatchResult.TIE
