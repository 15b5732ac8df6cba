from logging import getLogger
from typing import Any

from .models import HttpStatus, Request, Response

logger = getLogger("coldstream.example")


def handle_request(request: Request) -> Response:
    logger.info("%s %s/%s", request.method, request.host, request.path)
    return Response(status=HttpStatus.OK)


def handle_error(error: Any) -> Response:
    logger.error("Request failed: %r", error)
    return Response(status=HttpStatus.INTERNAL_SERVER_ERROR)


def handle_complete() -> None:
    logger.info("complete")
