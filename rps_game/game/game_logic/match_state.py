"""
比赛状态数据
Match State Data
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Tuple
from .move import Move
from .game_rules import RoundWinner
from ...utils.config_loader import DEFAULT_MAX_ROUNDS
from ..state_machine.match_phase import MatchPhase


@dataclass(frozen=True)
class RoundResult:
    """回合结果数据类（创建后不可修改）"""
    round_number: int
    player_move: Move
    bot_move: Move
    winner: RoundWinner
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def player_won(self) -> bool:
        return self.winner is RoundWinner.PLAYER

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'round_number': self.round_number,
            'player_move': self.player_move.value,
            'bot_move': self.bot_move.value,
            'winner': self.winner.value,
            'timestamp': self.timestamp.isoformat()
        }


@dataclass(frozen=True)
class MatchSnapshot:
    """比赛状态的只读快照，发送给订阅者"""
    player_name: str
    round: int
    max_rounds: int
    player_score: int
    bot_score: int
    player_choice: Optional[Move]
    bot_choice: Optional[Move]
    phase: MatchPhase
    completed_rounds: int
    player_won_last_round: Optional[bool]
    history: Tuple[RoundResult, ...] = ()


@dataclass
class MatchState:
    """
    比赛状态

    由比赛控制器按引用持有并原地修改。``phase`` 是阶段的唯一存储，
    由比赛阶段状态机直接读写。不变量：
    ``player_score + bot_score == completed_rounds``，
    ``1 <= round <= max_rounds``。
    """
    max_rounds: int = DEFAULT_MAX_ROUNDS
    player_name: str = ""
    round: int = 1
    player_score: int = 0
    bot_score: int = 0
    player_choice: Optional[Move] = None
    bot_choice: Optional[Move] = None
    phase: MatchPhase = MatchPhase.NOT_STARTED
    completed_rounds: int = 0
    player_won_last_round: Optional[bool] = None
    history: List[RoundResult] = field(default_factory=list)
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None

    def reset_rounds(self):
        """清空回合、比分与出拳，保留玩家名和最大回合数"""
        self.round = 1
        self.player_score = 0
        self.bot_score = 0
        self.player_choice = None
        self.bot_choice = None
        self.completed_rounds = 0
        self.player_won_last_round = None
        self.history.clear()
        self.started_at = datetime.now()
        self.finished_at = None

    def apply_round(self, result: RoundResult):
        """
        记录一个已完成的回合

        Args:
            result: 回合结果
        """
        self.player_choice = result.player_move
        self.bot_choice = result.bot_move
        self.player_won_last_round = result.player_won
        if result.player_won:
            self.player_score += 1
        else:
            self.bot_score += 1
        self.completed_rounds += 1
        self.history.append(result)
        if self.round < self.max_rounds:
            self.round += 1

    @property
    def remaining_rounds(self) -> int:
        return max(0, self.max_rounds - self.completed_rounds)

    def snapshot(self) -> MatchSnapshot:
        """生成当前状态的只读快照"""
        return MatchSnapshot(
            player_name=self.player_name,
            round=self.round,
            max_rounds=self.max_rounds,
            player_score=self.player_score,
            bot_score=self.bot_score,
            player_choice=self.player_choice,
            bot_choice=self.bot_choice,
            phase=self.phase,
            completed_rounds=self.completed_rounds,
            player_won_last_round=self.player_won_last_round,
            history=tuple(self.history),
        )

    def to_dict(self) -> dict:
        """转换为字典"""
        return {
            'player_name': self.player_name,
            'round': self.round,
            'max_rounds': self.max_rounds,
            'player_score': self.player_score,
            'bot_score': self.bot_score,
            'player_choice': self.player_choice.value if self.player_choice else None,
            'bot_choice': self.bot_choice.value if self.bot_choice else None,
            'phase': self.phase.value,
            'completed_rounds': self.completed_rounds,
            'history': [r.to_dict() for r in self.history],
            'started_at': self.started_at.isoformat() if self.started_at else None,
            'finished_at': self.finished_at.isoformat() if self.finished_at else None
        }
