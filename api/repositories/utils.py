"""Repository utility functions for common store operations."""

import time
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any

from bson import ObjectId
from bson.errors import BSONError
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from core.logger import get_logger
from core.wide_event import record_store_call, set_wide_event_fields
from repositories.result import Fault, Ok, Result

logger = get_logger(__name__)

# Threshold for logging slow operations (milliseconds)
SLOW_QUERY_THRESHOLD_MS = 500

# Driver, BSON and (de)serialization failures are faults; anything else is a bug
STORE_FAULTS: tuple[type[Exception], ...] = (PyMongoError, BSONError, ValidationError)


def parse_object_id(value: str) -> ObjectId | None:
    """Return the ObjectId for a 24-hex string, or None when malformed."""
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def store_operation[**P, R](
    operation_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[Result[R]]]]:
    """Decorator turning a repository coroutine into one that returns a Result.

    Store faults are logged once at ERROR level and returned as ``Fault``;
    they are never retried. Slow operations are flagged on the wide event.

    Usage:
        @store_operation("get_by_id")
        async def get_by_id(self, entity_id: str) -> Actividad | None:
            ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[Result[R]]]:
        @wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[R]:
            operation = _qualified_name(args, operation_name)
            start_time = time.perf_counter()
            try:
                value = await func(*args, **kwargs)
            except STORE_FAULTS as e:
                record_store_call(
                    operation,
                    (time.perf_counter() - start_time) * 1000,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                logger.error(
                    "store.fault",
                    operation=operation,
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=True,
                )
                return Fault(
                    operation=operation,
                    description=str(e),
                    error_type=type(e).__name__,
                )

            duration_ms = (time.perf_counter() - start_time) * 1000
            record_store_call(operation, duration_ms)
            if duration_ms > SLOW_QUERY_THRESHOLD_MS:
                set_wide_event_fields(db_slow_query=True)
                logger.warning(
                    "store.slow_operation",
                    operation=operation,
                    duration_ms=round(duration_ms, 2),
                )
            return Ok(value)

        return wrapper

    return decorator


def _qualified_name(args: tuple[Any, ...], operation_name: str) -> str:
    collection_name = getattr(args[0], "collection_name", None) if args else None
    if collection_name:
        return f"{collection_name}.{operation_name}"
    return operation_name
