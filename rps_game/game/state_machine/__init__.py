"""
比赛阶段状态机模块
Match Phase State Machine Module
"""
from .match_phase import MatchPhase
from .phase_machine import MatchPhaseMachine

__all__ = ['MatchPhase', 'MatchPhaseMachine']
