"""Request telemetry: one ``request.completed`` log line per HTTP request."""

import time
import uuid
from typing import Any

from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from core.config import get_settings
from core.logger import bind_contextvars, clear_contextvars, get_logger
from core.wide_event import clear_wide_event, get_wide_event, init_wide_event

logger = get_logger(__name__)

SERVICE_NAME = get_settings().service_name
SERVICE_VERSION = "1.0.0"

REQUEST_ID_HEADER = "x-request-id"
DURATION_HEADER = "x-request-duration-ms"

# Requests slower than this are logged at warning level
SLOW_REQUEST_THRESHOLD_MS = 1000


def _outcome_for(status_code: int | None) -> str:
    """Outcome vocabulary of the log line: success, not_found, validation_failure, fault."""
    if status_code is None:
        return "unknown"
    if status_code == 404:
        return "not_found"
    if status_code in (400, 422):
        return "validation_failure"
    if status_code >= 500:
        return "fault"
    return "success"


class RequestTimingMiddleware:
    """Pure ASGI middleware owning the wide event of each request.

    A caller-supplied ``x-request-id`` is reused so a request can be traced
    across services; otherwise one is generated. Both the id and the elapsed
    time are echoed as response headers.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = Headers(scope=scope).get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        client = scope.get("client")
        init_wide_event(
            service_name=SERVICE_NAME,
            service_version=SERVICE_VERSION,
            request_id=request_id,
            http_method=scope.get("method", "UNKNOWN"),
            http_path=scope.get("path", ""),
            http_client_ip=client[0] if client else "unknown",
        )
        bind_contextvars(request_id=request_id)

        started = time.perf_counter()
        status_code: int | None = None

        def elapsed_ms() -> float:
            return (time.perf_counter() - started) * 1000

        async def send_wrapper(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = MutableHeaders(scope=message)
                headers.append(REQUEST_ID_HEADER, request_id)
                headers.append(DURATION_HEADER, f"{elapsed_ms():.2f}")
            elif message["type"] == "http.response.body" and not message.get(
                "more_body", False
            ):
                self._emit(scope, status_code, elapsed_ms())
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            event = self._finish(scope, elapsed_ms())
            event["outcome"] = "exception"
            event["exception_type"] = type(exc).__name__
            logger.error("request.completed", **event)
            raise
        finally:
            clear_wide_event()
            clear_contextvars()

    @staticmethod
    def _finish(scope: Scope, duration_ms: float) -> dict[str, Any]:
        event = get_wide_event()
        route = scope.get("route")
        event["http_route"] = getattr(route, "path", None) or scope.get("path", "")
        event["duration_ms"] = round(duration_ms, 2)
        return event

    def _emit(self, scope: Scope, status_code: int | None, duration_ms: float) -> None:
        event = self._finish(scope, duration_ms)
        event["http_status_code"] = status_code
        event["outcome"] = _outcome_for(status_code)

        slow = duration_ms > SLOW_REQUEST_THRESHOLD_MS
        if status_code is None or status_code >= 500 or slow:
            logger.warning("request.completed", **event)
        else:
            logger.info("request.completed", **event)
