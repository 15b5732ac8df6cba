from ._core.common.event import Event, EventListener
from ._core.observable import Observable, Producer, Subscription
from ._core.observer import (
    Handlers,
    Observer,
    ObserverEvent,
    ObserverSubscribed,
    ObserverTerminated,
    ObserverTornDown,
    Reason,
    State,
    Teardown,
)

__all__ = (
    "Event",
    "EventListener",
    "Handlers",
    "Observable",
    "Observer",
    "ObserverEvent",
    "ObserverSubscribed",
    "ObserverTerminated",
    "ObserverTornDown",
    "Producer",
    "Reason",
    "State",
    "Subscription",
    "Teardown",
)
