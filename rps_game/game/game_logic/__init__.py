"""
游戏逻辑模块
Game Logic Module
"""
from .move import Move
from .game_rules import GameRules, RoundWinner, MatchResult
from .match_state import MatchState, MatchSnapshot, RoundResult
from .bot import MoveSelector, RandomMoveSelector, ScriptedMoveSelector, BotFactory

__all__ = [
    'Move',
    'GameRules',
    'RoundWinner',
    'MatchResult',
    'MatchState',
    'MatchSnapshot',
    'RoundResult',
    'MoveSelector',
    'RandomMoveSelector',
    'ScriptedMoveSelector',
    'BotFactory'
]
