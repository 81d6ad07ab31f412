"""Explicit outcome types returned by every repository operation.

A repository never raises for a store fault; it returns ``Fault`` and the
route decides how to surface it::

    match await repo.get_by_id(entity_id):
        case Ok(None):
            ...  # not found
        case Ok(entity):
            ...
        case Fault() as fault:
            ...
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T


@dataclass(frozen=True, slots=True)
class Fault:
    """A store/driver failure captured at the repository boundary."""

    operation: str
    description: str
    error_type: str


type Result[T] = Ok[T] | Fault
