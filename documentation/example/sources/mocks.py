from datetime import datetime

from .models import HttpMethod, Request, User

user_mock = User(
    name="User Name",
    age=26,
    roles=["user", "admin"],
    created_at=datetime.now(),
)

requests_mock = (
    Request(
        method=HttpMethod.POST,
        host="service.example",
        path="user",
        body=user_mock,
    ),
    Request(
        method=HttpMethod.GET,
        host="service.example",
        path="user",
        params={"id": "3f5h67s4s"},
    ),
)
