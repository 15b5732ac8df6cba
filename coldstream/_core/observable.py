from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from logging import Logger, getLogger
from typing import Any, Self

from coldstream._core.common.event import Event, EventChannel, EventListener
from coldstream._core.observer import Handlers, Observer, ObserverSubscribed, Teardown

type Producer[T] = Callable[[Observer[T]], Teardown | None]


class Subscription:
    __slots__ = ("__observer",)

    __observer: Observer[Any]

    def __init__(self, observer: Observer[Any]) -> None:
        self.__observer = observer

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.unsubscribe()

    @property
    def closed(self) -> bool:
        return self.__observer.is_terminated

    def unsubscribe(self) -> None:
        self.__observer.unsubscribe()


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class Observable[T]:
    producer: Producer[T]
    __channel: EventChannel = field(
        default_factory=EventChannel,
        init=False,
    )
    __loggers: list[Logger] = field(
        default_factory=lambda: [getLogger("coldstream")],
        init=False,
    )

    def subscribe(
        self,
        handlers: Handlers[T] | None = None,
        /,
        *,
        next: Callable[[T], Any] | None = None,
        error: Callable[[Any], Any] | None = None,
        complete: Callable[[], Any] | None = None,
    ) -> Subscription:
        handlers = self.__build_handlers(
            handlers,
            next=next,
            error=error,
            complete=complete,
        )
        observer = Observer(handlers, self.dispatch)

        with self.dispatch(ObserverSubscribed(observer)):
            subscription = Subscription(observer)

        teardown = self.producer(observer)
        observer.bind_teardown(teardown)
        return subscription

    def add_logger(self, logger: Logger) -> Self:
        self.__loggers.append(logger)
        return self

    def add_listener(self, listener: EventListener) -> Self:
        self.__channel.add_listener(listener)
        return self

    def remove_listener(self, listener: EventListener) -> Self:
        self.__channel.remove_listener(listener)
        return self

    @contextmanager
    def dispatch(self, event: Event) -> Iterator[None]:
        with self.__channel.dispatch(event):
            yield
            message = str(event)
            self.__debug(message)

    def __debug(self, message: object) -> None:
        for logger in tuple(self.__loggers):
            logger.debug(message)

    @staticmethod
    def __build_handlers(
        handlers: Handlers[T] | None,
        **callbacks: Callable[..., Any] | None,
    ) -> Handlers[T]:
        callbacks = {
            name: callback
            for name, callback in callbacks.items()
            if callback is not None
        }

        if handlers is None:
            return Handlers(**callbacks)

        return replace(handlers, **callbacks)

    @classmethod
    def from_[V](cls, values: Iterable[V]) -> Observable[V]:
        def producer(observer: Observer[V]) -> Teardown:
            def teardown() -> None:
                observable.__debug("unsubscribed")

            try:
                for value in values:
                    observer.next(value)

                observer.complete()

            except BaseException:
                # `subscribe` never binds the teardown when a handler raises.
                observer.bind_teardown(teardown)
                observer.unsubscribe()
                raise

            return teardown

        observable = cls(producer)
        return observable
