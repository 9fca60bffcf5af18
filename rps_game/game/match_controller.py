"""
比赛控制器
Match Controller - 管理玩家名、回合、比分和阶段
"""
from datetime import datetime
from typing import Optional, Callable, List
from .state_machine import MatchPhase, MatchPhaseMachine
from .game_logic import (
    Move, GameRules, MatchResult, MatchState, MatchSnapshot, RoundResult,
    MoveSelector, RandomMoveSelector
)
from ..utils.config_loader import DEFAULT_MAX_ROUNDS
from ..utils.exceptions import InvalidInput, InvalidState, ConfigurationException
from ..utils.logger import setup_logger

logger = setup_logger("RPS.MatchController")

StateListener = Callable[[MatchSnapshot], None]


class MatchController:
    """
    比赛控制器类

    所有命令同步执行。命令在不允许的阶段调用时抛出 ``InvalidState``，
    不做任何修改；成功的命令结束后向订阅者发送一次状态快照。
    """

    def __init__(self,
                 max_rounds: int = DEFAULT_MAX_ROUNDS,
                 bot: Optional[MoveSelector] = None,
                 state: Optional[MatchState] = None):
        """
        初始化比赛控制器

        Args:
            max_rounds: 最大回合数（传入 state 时以 state.max_rounds 为准）
            bot: 机器人出拳策略，默认均匀随机
            state: 外部持有的比赛状态（可选）
        """
        if state is None:
            state = MatchState(max_rounds=max_rounds)
        if isinstance(state.max_rounds, bool) or not isinstance(state.max_rounds, int) \
                or state.max_rounds < 1:
            raise ConfigurationException(
                f"max_rounds 必须是正整数，当前值: {state.max_rounds!r}",
                config_key='game.max_rounds'
            )

        self.state = state
        self.bot = bot if bot is not None else RandomMoveSelector()

        self.phase_machine = MatchPhaseMachine(holder=state)
        self.phase_machine.register_phase_handler(MatchPhase.FINISHED, self._handle_finished)

        self._listeners: List[StateListener] = []
        self.on_round_result: Optional[Callable[[RoundResult], None]] = None
        self.on_match_over: Optional[Callable[[MatchResult, MatchSnapshot], None]] = None

        logger.info(f"比赛控制器初始化，最大回合数: {state.max_rounds}")

    # ------------------------------------------------------------------
    # 只读访问
    # ------------------------------------------------------------------
    @property
    def player_name(self) -> str:
        return self.state.player_name

    @property
    def round(self) -> int:
        return self.state.round

    @property
    def max_rounds(self) -> int:
        return self.state.max_rounds

    @property
    def player_score(self) -> int:
        return self.state.player_score

    @property
    def bot_score(self) -> int:
        return self.state.bot_score

    @property
    def player_choice(self) -> Optional[Move]:
        return self.state.player_choice

    @property
    def bot_choice(self) -> Optional[Move]:
        return self.state.bot_choice

    @property
    def phase(self) -> MatchPhase:
        return self.phase_machine.get_current_phase()

    @property
    def completed_rounds(self) -> int:
        return self.state.completed_rounds

    @property
    def remaining_rounds(self) -> int:
        return self.state.remaining_rounds

    @property
    def is_finished(self) -> bool:
        return self.phase is MatchPhase.FINISHED

    def get_round_history(self) -> List[RoundResult]:
        """获取回合历史"""
        return list(self.state.history)

    def get_last_round_result(self) -> Optional[RoundResult]:
        """获取上一回合结果"""
        if self.state.history:
            return self.state.history[-1]
        return None

    def snapshot(self) -> MatchSnapshot:
        return self.state.snapshot()

    # ------------------------------------------------------------------
    # 订阅
    # ------------------------------------------------------------------
    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """
        订阅状态变化

        Args:
            listener: 回调函数，参数为 MatchSnapshot

        Returns:
            Callable: 调用即取消订阅
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # 命令
    # ------------------------------------------------------------------
    def start(self, name: str):
        """
        开始比赛

        Args:
            name: 玩家名，去除首尾空白后不能为空

        Raises:
            InvalidInput: 玩家名为空
            InvalidState: 比赛已经开始过
        """
        if not self.phase_machine.is_in_phase(MatchPhase.NOT_STARTED):
            raise self._invalid_state("比赛已经开始，请使用重新开始", "start")

        if not isinstance(name, str) or not name.strip():
            raise InvalidInput("玩家名不能为空", value=name, game_state=self.phase.name)

        self.state.player_name = name.strip()
        self.state.reset_rounds()
        self._transition(MatchPhase.IN_PROGRESS)

        logger.info(f"比赛开始，玩家: {self.state.player_name}，"
                    f"共 {self.state.max_rounds} 回合")
        self._notify_state_changed()

    def choose_move(self, player_move: Move) -> RoundResult:
        """
        玩家出拳，进行一回合

        Args:
            player_move: 玩家出拳

        Returns:
            RoundResult: 回合结果

        Raises:
            InvalidState: 比赛未在进行中
            InvalidInput: 出拳不是 Move
        """
        if not self.phase_machine.is_in_phase(MatchPhase.IN_PROGRESS):
            raise self._invalid_state("比赛未在进行中，无法出拳", "choose_move")
        if not isinstance(player_move, Move):
            raise InvalidInput(f"无效的出拳: {player_move!r}", value=player_move,
                               game_state=self.phase.name)

        bot_move = self.bot.choose()
        winner = GameRules.judge(player_move, bot_move)
        round_result = RoundResult(
            round_number=self.state.completed_rounds + 1,
            player_move=player_move,
            bot_move=bot_move,
            winner=winner
        )
        self.state.apply_round(round_result)

        logger.info(f"回合 {round_result.round_number}/{self.state.max_rounds}: "
                    f"玩家={player_move.value}, 机器人={bot_move.value}, "
                    f"胜者={winner.value}, 比分 {self.state.player_score}:{self.state.bot_score}")

        if self.on_round_result:
            try:
                self.on_round_result(round_result)
            except Exception as e:
                logger.error(f"回合结果回调异常: {e}", exc_info=True)

        if self.state.completed_rounds >= self.state.max_rounds:
            self._transition(MatchPhase.FINISHED)

        self._notify_state_changed()
        return round_result

    def result(self) -> MatchResult:
        """
        获取比赛结果

        Returns:
            MatchResult: 玩家视角的胜/负/平

        Raises:
            InvalidState: 比赛尚未结束
        """
        if not self.phase_machine.is_in_phase(MatchPhase.FINISHED):
            raise self._invalid_state("比赛尚未结束，没有结果", "result")
        return GameRules.match_result(self.state.player_score, self.state.bot_score)

    def restart(self):
        """
        重新开始比赛，保留玩家名

        尚未开始时调用不做任何事。
        """
        if self.phase_machine.is_in_phase(MatchPhase.NOT_STARTED):
            logger.warning("比赛尚未开始，忽略重新开始")
            return

        self.bot.reset()
        self.state.reset_rounds()
        self._transition(MatchPhase.IN_PROGRESS)
        logger.info(f"比赛重新开始，玩家: {self.state.player_name}")
        self._notify_state_changed()

    # ------------------------------------------------------------------
    # 内部
    # ------------------------------------------------------------------
    def _transition(self, phase: MatchPhase):
        if not self.phase_machine.transition_to(phase):
            raise self._invalid_state(f"无法进入阶段 {phase}", "transition")

    def _invalid_state(self, message: str, command: str) -> InvalidState:
        logger.warning(f"{message}（当前阶段: {self.phase}）")
        return InvalidState(message, game_state=self.phase.name, command=command)

    def _handle_finished(self):
        """处理比赛结束"""
        self.state.finished_at = datetime.now()
        result = GameRules.match_result(self.state.player_score, self.state.bot_score)

        logger.info(f"比赛结束，玩家 {self.state.player_score} : "
                    f"{self.state.bot_score} 机器人，结果: {result.value}")

        if self.on_match_over:
            try:
                self.on_match_over(result, self.state.snapshot())
            except Exception as e:
                logger.error(f"比赛结束回调异常: {e}", exc_info=True)

    def _notify_state_changed(self):
        """通知状态改变"""
        snapshot = self.state.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as e:
                logger.error(f"状态改变回调异常: {e}", exc_info=True)
