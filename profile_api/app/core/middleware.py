"""
Middleware for request tracing, access logging and connection timeouts.

``RequestContextMiddleware`` tags every request with an id, writes
one access log line per request and turns unhandled exceptions into
the standard 500 envelope.  ``TimeoutMiddleware`` enforces the read
and write timeouts from the settings on each HTTP request.
"""

import asyncio
import logging
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from ..api.responses import server_error
from .logging_config import ACCESS_LOGGER_NAME, request_id_var


REQUEST_ID_HEADER = "X-Request-ID"

access_logger = logging.getLogger(ACCESS_LOGGER_NAME)
logger = logging.getLogger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Assign a request id, log the request and recover from crashes."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.url.path)
            response = server_error()

        duration_ms = (time.perf_counter() - start_time) * 1000
        response.headers[REQUEST_ID_HEADER] = request_id
        access_logger.info(
            '"%s %s" %s %.1fms',
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        request_id_var.reset(token)
        return response


class TimeoutMiddleware:
    """Bound the time spent reading a request and writing its response.

    Only receives made while the request body is still arriving are
    timed; once the last body chunk is in, later receives (which wait
    for a client disconnect) pass through untouched.

    The application runs in its own task.  When a body read misses its
    deadline that task is cancelled and anything it still tries to
    send is discarded, so no response goes out and
    :class:`asyncio.TimeoutError` reaches the server, which drops the
    connection.  A slow send raises the same error from the send call.
    """

    def __init__(self, app: ASGIApp, read_timeout: float, write_timeout: float) -> None:
        self.app = app
        self.read_timeout = read_timeout
        self.write_timeout = write_timeout

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        body_complete = False
        read_timed_out = False

        async def timed_receive() -> Message:
            nonlocal body_complete, read_timed_out
            if body_complete:
                return await receive()
            try:
                message = await asyncio.wait_for(receive(), self.read_timeout)
            except asyncio.TimeoutError:
                read_timed_out = True
                app_task.cancel()
                raise
            if message["type"] != "http.request" or not message.get("more_body", False):
                body_complete = True
            return message

        async def timed_send(message: Message) -> None:
            if read_timed_out:
                return
            await asyncio.wait_for(send(message), self.write_timeout)

        app_task = asyncio.ensure_future(self.app(scope, timed_receive, timed_send))
        try:
            await app_task
        except (asyncio.CancelledError, asyncio.TimeoutError):
            if not read_timed_out:
                raise
        if read_timed_out:
            logger.warning(
                "Request body for %s not received within %ss", scope.get("path"), self.read_timeout
            )
            raise asyncio.TimeoutError(f"request body not received within {self.read_timeout}s")
