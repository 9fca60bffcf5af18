"""
比赛阶段状态机测试
Match Phase State Machine Tests
"""
from rps_game.game.state_machine import MatchPhase, MatchPhaseMachine


def test_only_start_leaves_not_started():
    machine = MatchPhaseMachine()
    assert machine.get_current_phase() is MatchPhase.NOT_STARTED
    assert not machine.can_transition_to(MatchPhase.FINISHED)
    assert not machine.transition_to(MatchPhase.FINISHED)
    assert machine.is_in_phase(MatchPhase.NOT_STARTED)
    assert machine.transition_to(MatchPhase.IN_PROGRESS)


def test_finished_loops_back_to_in_progress():
    machine = MatchPhaseMachine(initial_phase=MatchPhase.IN_PROGRESS)
    assert machine.transition_to(MatchPhase.FINISHED)
    assert not machine.can_transition_to(MatchPhase.NOT_STARTED)
    assert machine.transition_to(MatchPhase.IN_PROGRESS)
    assert machine.get_previous_phase() is MatchPhase.FINISHED


def test_handlers_run_and_errors_are_contained():
    """处理函数异常只记录日志，不影响转换"""
    machine = MatchPhaseMachine()
    calls = []
    machine.register_transition_handler(
        MatchPhase.NOT_STARTED, MatchPhase.IN_PROGRESS, lambda: calls.append("transition"))
    machine.register_phase_handler(MatchPhase.IN_PROGRESS, lambda: calls.append("phase"))

    def broken():
        raise RuntimeError("boom")

    machine.register_phase_handler(MatchPhase.FINISHED, broken)

    assert machine.transition_to(MatchPhase.IN_PROGRESS)
    assert calls == ["transition", "phase"]
    assert machine.transition_to(MatchPhase.FINISHED)
    assert machine.is_in_phase(MatchPhase.FINISHED)


def test_phase_str_is_name():
    assert str(MatchPhase.IN_PROGRESS) == "IN_PROGRESS"
    assert MatchPhase.FINISHED.value == "finished"


class PhaseHolder:
    def __init__(self, phase):
        self.phase = phase


def test_holder_is_the_only_phase_storage():
    """传入 holder 时状态机直接读写 holder.phase"""
    holder = PhaseHolder(MatchPhase.IN_PROGRESS)
    machine = MatchPhaseMachine(holder=holder)
    assert machine.get_current_phase() is MatchPhase.IN_PROGRESS

    assert machine.transition_to(MatchPhase.FINISHED)
    assert holder.phase is MatchPhase.FINISHED

    holder.phase = MatchPhase.NOT_STARTED
    assert machine.is_in_phase(MatchPhase.NOT_STARTED)
    assert not machine.can_transition_to(MatchPhase.FINISHED)
