"""
游戏逻辑模块
Game Logic Module
"""
from .state_machine import MatchPhase, MatchPhaseMachine
from .game_logic import (
    Move, GameRules, RoundWinner, MatchResult, MatchState, MatchSnapshot, RoundResult,
    MoveSelector, RandomMoveSelector, ScriptedMoveSelector, BotFactory
)
from .match_controller import MatchController

__all__ = [
    'MatchController',
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
    'BotFactory',
    'MatchPhase',
    'MatchPhaseMachine'
]
