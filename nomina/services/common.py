"""Helpers shared by every service: text normalization and update-param checks."""
import dataclasses
import logging
from typing import Any

from nomina.errors import ValidationError
from nomina.fields import Unchanged

logger = logging.getLogger(__name__)

NO_FIELDS_MESSAGE = "no fields supplied for update"


def invalid(message: str) -> ValidationError:
    """Build a ValidationError, logging the rejection at DEBUG."""
    logger.debug("validation rejected: %s", message)
    return ValidationError(message)


def normalize_text(value: str, field: str) -> str:
    """Trim *value*; an empty result is rejected with a message naming *field*."""
    trimmed = value.strip()
    if not trimmed:
        raise invalid(f"{field} cannot be empty")
    return trimmed


def normalize_optional(value: str | None, field: str) -> str | None:
    """``normalize_text`` for an update field where ``None`` means "not supplied"."""
    if value is None:
        return None
    return normalize_text(value, field)


def supplied_fields(params: Any) -> dict[str, Any]:
    """
    Return the fields of an update-params dataclass that the caller supplied.

    ``None`` marks an absent non-nullable field and ``UNCHANGED`` an absent
    tri-state field; everything else (including ``CLEAR``) counts.
    Raises ValidationError when nothing was supplied.
    """
    supplied = {
        field.name: getattr(params, field.name)
        for field in dataclasses.fields(params)
        if getattr(params, field.name) is not None
        and not isinstance(getattr(params, field.name), Unchanged)
    }
    if not supplied:
        raise invalid(NO_FIELDS_MESSAGE)
    return supplied
