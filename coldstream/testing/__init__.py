from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, NamedTuple, Self

from coldstream._core.observer import Handlers

__all__ = ("Notification", "Recorder", "Signal")


class Signal(StrEnum):
    NEXT = "next"
    ERROR = "error"
    COMPLETE = "complete"


class Notification(NamedTuple):
    signal: Signal
    value: Any = None


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class Recorder[T]:
    __notifications: list[Notification] = field(default_factory=list, init=False)

    def __iter__(self) -> Iterator[Notification]:
        yield from self.__notifications

    def __len__(self) -> int:
        return len(self.__notifications)

    @property
    def handlers(self) -> Handlers[T]:
        return Handlers(
            next=self.on_next,
            error=self.on_error,
            complete=self.on_complete,
        )

    @property
    def values(self) -> list[T]:
        return self.__filter(Signal.NEXT)

    @property
    def errors(self) -> list[Any]:
        return self.__filter(Signal.ERROR)

    @property
    def completions(self) -> int:
        return len(self.__filter(Signal.COMPLETE))

    def on_next(self, value: T, /) -> None:
        self.__notifications.append(Notification(Signal.NEXT, value))

    def on_error(self, error: Any, /) -> None:
        self.__notifications.append(Notification(Signal.ERROR, error))

    def on_complete(self) -> None:
        self.__notifications.append(Notification(Signal.COMPLETE))

    def clear(self) -> Self:
        self.__notifications.clear()
        return self

    def __filter(self, signal: Signal) -> list[Any]:
        return [
            notification.value
            for notification in self.__notifications
            if notification.signal is signal
        ]
