"""Per-request canonical log line ("wide event").

RequestTimingMiddleware opens an event for each HTTP request; code further
down adds fields to it, and the middleware logs it once as
``request.completed`` when the response ends. Outside a request (CLI, plain
unit tests) there is no open event and every setter is a no-op.

    from core.wide_event import record_store_call, set_wide_event_fields

    set_wide_event_fields(faq_query="vacaciones")
    record_store_call("faqs.search", duration_ms=4.2)
"""

from contextvars import ContextVar
from typing import Any

_wide_event: ContextVar[dict[str, Any] | None] = ContextVar("wide_event", default=None)


def init_wide_event(**fields: Any) -> dict[str, Any]:
    """Open a new event for the current context, seeded with ``fields``."""
    event: dict[str, Any] = dict(fields)
    _wide_event.set(event)
    return event


def get_wide_event() -> dict[str, Any]:
    """The open event, or an empty detached dict when none is open."""
    event = _wide_event.get()
    return event if event is not None else {}


def set_wide_event_fields(**fields: Any) -> None:
    event = _wide_event.get()
    if event is not None:
        event.update(fields)


def record_store_call(
    operation: str,
    duration_ms: float,
    *,
    error: str | None = None,
    error_type: str | None = None,
) -> None:
    """Account one repository call against the open event.

    Keeps a running count and total time of store calls, and remembers the
    last operation. A failed call also sets ``db_fault`` and its error.
    """
    event = _wide_event.get()
    if event is None:
        return

    event["db_calls"] = event.get("db_calls", 0) + 1
    event["db_time_ms"] = round(event.get("db_time_ms", 0.0) + duration_ms, 2)
    event["db_operation"] = operation
    if error is not None:
        event["db_fault"] = True
        event["db_error"] = error
        event["db_error_type"] = error_type


def clear_wide_event() -> None:
    _wide_event.set(None)
