"""
剪刀石头布单人比赛
Rock Paper Scissors Match
"""
from .game import MatchController, Move, MatchPhase, MatchResult, MatchState
from .utils.exceptions import InvalidInput, InvalidState

__version__ = "0.1.0"

__all__ = [
    'MatchController',
    'Move',
    'MatchPhase',
    'MatchResult',
    'MatchState',
    'InvalidInput',
    'InvalidState',
    '__version__'
]
