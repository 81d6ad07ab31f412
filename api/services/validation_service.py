"""Required-field validation applied before a create or update reaches the store."""

from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import BaseModel

from core.errors import BadInputError
from core.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RequiredField:
    """A field that must be present and not blank, with its rejection message."""

    name: str
    message: str


def is_blank(value: object) -> bool:
    """True for None, the empty string, or whitespace only."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_required(entity: BaseModel, fields: Sequence[RequiredField]) -> None:
    """Raise ``BadInputError`` for the first required field that is blank.

    Fields are checked in declaration order, so the message names the first
    missing one.
    """
    for field in fields:
        if is_blank(getattr(entity, field.name, None)):
            logger.warning(
                "validation.required_field_missing",
                entity=type(entity).__name__,
                field=field.name,
            )
            raise BadInputError(field.message)
