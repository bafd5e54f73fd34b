"""Observers that react to a shared notice, and a dispatcher that runs callbacks."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

BOSS_NOTICE = "老板来了!"

T = TypeVar("T")


class Viewer:
    """Holds a notice text and tells every registered observer about it."""

    def __init__(self, text: str = ""):
        self.text = text
        self._observers: list[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        """Register an observer; it is notified after those added before it."""
        self._observers.append(observer)

    def notify(self) -> list[str]:
        """Notify every observer in order and return all of their reactions."""
        return [line for observer in self._observers for line in observer.notify()]


class Observer:
    """Someone watching a viewer's notice."""

    reaction = ""

    def __init__(self, name: str, viewer: Viewer):
        self.name = name
        self.viewer = viewer

    def notify(self) -> list[str]:
        """Return the lines this observer reacts with to the current notice."""
        lines = [f"{self.name} 收到消息：{self.viewer.text}"]
        if self.viewer.text == BOSS_NOTICE and self.reaction:
            lines.append(self.reaction)
        return lines


class NBAObserver(Observer):
    reaction = "马上关闭NBA直播，开始工作!"


class StockObserver(Observer):
    reaction = "马上关闭股票软件，开始工作!"


class Dispatcher:
    """Announces itself and then runs a callback it is given."""

    def __init__(self, emit: Callable[[str], object] = print):
        self._emit = emit

    def run(self, callback: Callable[[], T]) -> T:
        """Emit the dispatcher's banner, then call ``callback`` and return its result."""
        self._emit("this is Program2.FunB2")
        return callback()