from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, override
from uuid import uuid4

from coldstream._core.common.event import Dispatcher, Event, no_dispatch

type Teardown = Callable[[], Any]

"""
Events
"""


class Reason(StrEnum):
    COMPLETE = "complete"
    ERROR = "error"
    UNSUBSCRIBE = "unsubscribe"


@dataclass(frozen=True, slots=True)
class ObserverEvent(Event, ABC):
    observer: Observer[Any]


@dataclass(frozen=True, slots=True)
class ObserverSubscribed(ObserverEvent):
    @override
    def __str__(self) -> str:
        return f"`{self.observer}` has subscribed."


@dataclass(frozen=True, slots=True)
class ObserverTerminated(ObserverEvent):
    reason: Reason

    @override
    def __str__(self) -> str:
        return f"`{self.observer}` has been terminated by {self.reason}."


@dataclass(frozen=True, slots=True)
class ObserverTornDown(ObserverEvent):
    @override
    def __str__(self) -> str:
        return f"`{self.observer}` has run its teardown."


"""
Observer
"""


@dataclass(frozen=True, slots=True)
class Handlers[T]:
    next: Callable[[T], Any] | None = None
    error: Callable[[Any], Any] | None = None
    complete: Callable[[], Any] | None = None


class State(StrEnum):
    ACTIVE = "active"
    TERMINATED = "terminated"


class Observer[T]:
    __slots__ = (
        "__dispatch",
        "__handlers",
        "__is_bound",
        "__name",
        "__state",
        "__teardown",
    )

    __dispatch: Dispatcher
    __handlers: Handlers[T]
    __is_bound: bool
    __name: str
    __state: State
    __teardown: Teardown | None

    def __init__(
        self,
        handlers: Handlers[T] | None = None,
        dispatch: Dispatcher = no_dispatch,
    ) -> None:
        self.__dispatch = dispatch
        self.__handlers = Handlers() if handlers is None else handlers
        self.__is_bound = False
        self.__name = f"observer@{uuid4().hex[:7]}"
        self.__state = State.ACTIVE
        self.__teardown = None

    @override
    def __str__(self) -> str:
        return self.__name

    @property
    def handlers(self) -> Handlers[T]:
        return self.__handlers

    @property
    def state(self) -> State:
        return self.__state

    @property
    def is_terminated(self) -> bool:
        return self.__state is State.TERMINATED

    def next(self, value: T, /) -> None:
        if self.is_terminated:
            return

        if (handler := self.__handlers.next) is not None:
            handler(value)

    def error(self, error: Any, /) -> None:
        if not self.__terminate(Reason.ERROR):
            return

        try:
            if (handler := self.__handlers.error) is not None:
                handler(error)
        finally:
            self.__run_teardown()

    def complete(self) -> None:
        if not self.__terminate(Reason.COMPLETE):
            return

        try:
            if (handler := self.__handlers.complete) is not None:
                handler()
        finally:
            self.__run_teardown()

    def unsubscribe(self) -> None:
        self.__terminate(Reason.UNSUBSCRIBE)
        self.__run_teardown()

    def bind_teardown(self, teardown: Teardown | None) -> None:
        if self.__is_bound:
            raise RuntimeError(f"`{self}` already has a teardown.")

        self.__is_bound = True
        self.__teardown = teardown

        # Synchronous producers terminate before their teardown is known.
        if self.is_terminated:
            self.__run_teardown()

    def __terminate(self, reason: Reason) -> bool:
        if self.is_terminated:
            return False

        with self.__dispatch(ObserverTerminated(self, reason)):
            self.__state = State.TERMINATED

        return True

    def __run_teardown(self) -> None:
        teardown, self.__teardown = self.__teardown, None

        if teardown is None:
            return

        with self.__dispatch(ObserverTornDown(self)):
            teardown()
