import logging

import pytest

from coldstream import Observable
from coldstream.testing import Recorder
from tests.helpers import EventHistory

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="function")
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture(scope="function")
def observable() -> Observable[int]:
    return Observable.from_((1, 2, 3))


@pytest.fixture(scope="function")
def event_history(observable) -> EventHistory:
    history = EventHistory()
    observable.add_listener(history)
    return history
