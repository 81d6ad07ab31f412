"""Cross-cutting plumbing: settings, logging, MongoDB client, API errors.

    from core import get_logger, record_store_call
"""

from core.logger import bind_contextvars, clear_contextvars, get_logger
from core.wide_event import get_wide_event, record_store_call, set_wide_event_fields

__all__ = [
    "bind_contextvars",
    "clear_contextvars",
    "get_logger",
    "get_wide_event",
    "record_store_call",
    "set_wide_event_fields",
]
