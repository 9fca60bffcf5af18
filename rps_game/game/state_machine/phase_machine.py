"""
比赛阶段状态机
Match Phase State Machine
"""
from typing import Optional, Callable, Dict, List, Tuple
from .match_phase import MatchPhase
from ...utils.logger import setup_logger

logger = setup_logger("RPS.MatchPhaseMachine")


class MatchPhaseMachine:
    """比赛阶段状态机类"""

    # 状态转换规则；NOT_STARTED 只能通过开始比赛离开
    VALID_TRANSITIONS: Dict[MatchPhase, List[MatchPhase]] = {
        MatchPhase.NOT_STARTED: [MatchPhase.IN_PROGRESS],
        MatchPhase.IN_PROGRESS: [MatchPhase.IN_PROGRESS, MatchPhase.FINISHED],
        MatchPhase.FINISHED: [MatchPhase.IN_PROGRESS],
    }

    def __init__(self, initial_phase: MatchPhase = MatchPhase.NOT_STARTED, holder=None):
        """
        初始化状态机

        Args:
            initial_phase: 初始阶段（传入 holder 时忽略）
            holder: 带 ``phase`` 属性的对象（如 MatchState），状态机直接读写它的阶段
        """
        self._holder = holder
        self._phase = initial_phase
        self.previous_phase: Optional[MatchPhase] = None
        self.phase_handlers: Dict[MatchPhase, Callable] = {}
        self.transition_handlers: Dict[Tuple[MatchPhase, MatchPhase], Callable] = {}

        logger.debug(f"比赛阶段状态机初始化，初始阶段: {self.current_phase}")

    @property
    def current_phase(self) -> MatchPhase:
        if self._holder is not None:
            return self._holder.phase
        return self._phase

    @current_phase.setter
    def current_phase(self, phase: MatchPhase):
        if self._holder is not None:
            self._holder.phase = phase
        else:
            self._phase = phase

    def register_phase_handler(self, phase: MatchPhase, handler: Callable):
        """
        注册阶段处理函数（进入该阶段时调用）

        Args:
            phase: 阶段
            handler: 处理函数
        """
        self.phase_handlers[phase] = handler
        logger.debug(f"注册阶段处理函数: {phase}")

    def register_transition_handler(self, from_phase: MatchPhase, to_phase: MatchPhase,
                                    handler: Callable):
        """
        注册阶段转换处理函数

        Args:
            from_phase: 源阶段
            to_phase: 目标阶段
            handler: 处理函数
        """
        self.transition_handlers[(from_phase, to_phase)] = handler
        logger.debug(f"注册转换处理函数: {from_phase} -> {to_phase}")

    def can_transition_to(self, phase: MatchPhase) -> bool:
        """检查是否可以转换到指定阶段"""
        return phase in self.VALID_TRANSITIONS.get(self.current_phase, [])

    def transition_to(self, new_phase: MatchPhase) -> bool:
        """
        转换到新阶段

        Args:
            new_phase: 新阶段

        Returns:
            bool: 转换是否成功
        """
        if not self.can_transition_to(new_phase):
            logger.warning(f"无效的阶段转换: {self.current_phase} -> {new_phase}")
            return False

        old_phase = self.current_phase
        self.previous_phase = old_phase
        self.current_phase = new_phase

        if old_phase == new_phase:
            logger.debug(f"阶段重新进入: {new_phase}")
        else:
            logger.info(f"阶段转换: {old_phase} -> {new_phase}")

        handler = self.transition_handlers.get((old_phase, new_phase))
        if handler:
            try:
                handler()
            except Exception as e:
                logger.error(f"转换处理函数执行异常: {e}", exc_info=True)

        handler = self.phase_handlers.get(new_phase)
        if handler:
            try:
                handler()
            except Exception as e:
                logger.error(f"阶段处理函数执行异常: {e}", exc_info=True)

        return True

    def get_current_phase(self) -> MatchPhase:
        """获取当前阶段"""
        return self.current_phase

    def get_previous_phase(self) -> Optional[MatchPhase]:
        """获取上一个阶段"""
        return self.previous_phase

    def is_in_phase(self, phase: MatchPhase) -> bool:
        return self.current_phase == phase
