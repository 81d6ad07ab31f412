"""Translate repository results into values or boundary errors."""

from core.errors import StoreFaultError
from repositories.result import Fault, Ok, Result


def unwrap[T](result: Result[T], fault_message: str) -> T:
    """Return the value of an ``Ok`` or raise ``StoreFaultError`` for a ``Fault``.

    The fault's description is surfaced as the ``error`` field of the 500 body.
    """
    match result:
        case Ok(value):
            return value
        case Fault(description=description):
            raise StoreFaultError(fault_message, description)
        case _:
            raise TypeError(f"Unexpected repository result: {result!r}")
