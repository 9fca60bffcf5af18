"""
比赛阶段枚举
Match Phase Enumeration
"""
from enum import Enum


class MatchPhase(Enum):
    """比赛阶段枚举"""
    NOT_STARTED = "not_started"    # 尚未输入玩家名
    IN_PROGRESS = "in_progress"    # 比赛进行中
    FINISHED = "finished"          # 已打满全部回合

    def __str__(self):
        return self.name
