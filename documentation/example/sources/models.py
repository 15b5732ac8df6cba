from datetime import datetime
from enum import IntEnum, StrEnum

from pydantic import BaseModel, Field


class HttpMethod(StrEnum):
    POST = "POST"
    GET = "GET"


class HttpStatus(IntEnum):
    OK = 200
    INTERNAL_SERVER_ERROR = 500


class User(BaseModel):
    name: str
    age: int
    roles: list[str]
    created_at: datetime
    is_deleted: bool = False


class Request(BaseModel):
    method: HttpMethod
    host: str
    path: str
    body: User | None = None
    params: dict[str, str] = Field(default_factory=dict)


class Response(BaseModel):
    status: HttpStatus
