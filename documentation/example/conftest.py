from collections.abc import Callable

import pytest
from faker import Faker
from sources.models import HttpMethod, Request, User


@pytest.fixture(scope="function", autouse=True)
def setup_faker():
    Faker.seed(0)


@pytest.fixture(scope="function")
def make_request() -> Callable[[], Request]:
    faker = Faker()

    def factory() -> Request:
        method = faker.enum(HttpMethod)
        body = None

        if method == HttpMethod.POST:
            body = User(
                name=faker.name(),
                age=faker.pyint(min_value=18, max_value=99),
                roles=faker.words(nb=2),
                created_at=faker.date_time(),
            )

        return Request(
            method=method,
            host=faker.hostname(),
            path=faker.uri_path(),
            body=body,
            params={"id": faker.pystr()},
        )

    return factory
