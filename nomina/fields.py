"""
Tri-state update fields.

A nullable column can be updated three ways, and the three must never be
confused:

- ``UNCHANGED``  the caller did not mention the field; keep the stored value
- ``CLEAR``      the caller sent an explicit null; store NULL
- ``Set(v)``     the caller sent a value; store *v* (after validation)

Non-nullable fields do not need this: for them ``None`` already means
"not supplied", because null is never a legal value.
"""
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel

T = TypeVar("T")


@dataclass(frozen=True)
class Unchanged:
    def __repr__(self) -> str:
        return "UNCHANGED"


@dataclass(frozen=True)
class Clear:
    def __repr__(self) -> str:
        return "CLEAR"


@dataclass(frozen=True)
class Set(Generic[T]):
    value: T


UNCHANGED = Unchanged()
CLEAR = Clear()

Patch = Union[Unchanged, Clear, Set[T]]


def is_supplied(patch: Patch) -> bool:
    """True for ``CLEAR`` and ``Set``; False for ``UNCHANGED``."""
    return not isinstance(patch, Unchanged)


def value_of(patch: Patch) -> Any:
    """
    Return the value a supplied patch stores: ``None`` for ``CLEAR``, the
    wrapped value for ``Set``.  Asking for the value of ``UNCHANGED`` is a
    programming error.
    """
    if isinstance(patch, Set):
        return patch.value
    if isinstance(patch, Clear):
        return None
    raise TypeError("an UNCHANGED field has no value")


def from_optional(value: T | None) -> Patch:
    """Map an explicit optional value to ``CLEAR`` (None) or ``Set``."""
    return CLEAR if value is None else Set(value)


def patch_from_model(model: BaseModel, field: str) -> Patch:
    """
    Build the patch for *field* of a parsed request body.

    Pydantic records which keys were present in the payload in
    ``model_fields_set``; that is what separates an omitted key from one
    sent as ``null``.
    """
    if field not in model.model_fields_set:
        return UNCHANGED
    return from_optional(getattr(model, field))
