"""A working day modelled as a chain of states that hand over to each other."""

from __future__ import annotations


def _stamp(work: Work, text: str) -> str:
    return f"当前时间:{work.hour:g}, {text}"


class State:
    """One period of the working day."""

    def write_program(self, work: Work) -> str:
        """Describe the work at ``work.hour``, moving ``work`` on if this period is over."""
        raise NotImplementedError


class ForenoonState(State):
    def write_program(self, work: Work) -> str:
        if work.hour < 12:
            return _stamp(work, "上午精神百倍")
        work.state = NoonState()
        return work.write_program()


class NoonState(State):
    def write_program(self, work: Work) -> str:
        if work.hour < 13:
            return _stamp(work, "中午犯困")
        work.state = AfternoonState()
        return work.write_program()


class AfternoonState(State):
    def write_program(self, work: Work) -> str:
        if work.hour < 17:
            return _stamp(work, "下午快下班了")
        work.state = EveningState()
        return work.write_program()


class EveningState(State):
    def write_program(self, work: Work) -> str:
        if work.finish:
            work.state = RestState()
            return work.write_program()
        if work.hour < 21:
            return _stamp(work, "苦逼加班啊")
        work.state = SleepingState()
        return work.write_program()


class SleepingState(State):
    def write_program(self, work: Work) -> str:
        return _stamp(work, "睡觉了")


class RestState(State):
    def write_program(self, work: Work) -> str:
        return _stamp(work, "下班休息了")


class Work:
    """A working day: the hour, whether the job is done, and the current state."""

    def __init__(self, hour: float = 9, finish: bool = False):
        self.hour = hour
        self.finish = finish
        self.state: State = ForenoonState()

    def write_program(self) -> str:
        """Let the current state describe the work."""
        return self.state.write_program(self)