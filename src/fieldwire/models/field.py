"""A single numbered field of a message."""

from __future__ import annotations

from .base import ValueModel
from .fields import BoundedInt
from .values import TypedValue


class Field(ValueModel):
    """A (field-number, value) pair, usually parsed from one input line.

    Range and uniqueness of ``number`` are checked when the field is
    inserted into a Message, not here.

    Attributes:
        number: Slot identifying the field in the presence bitmap
        value: The typed value carried by the field

    Example:
        >>> from fieldwire.models.values import ShortValue
        >>> Field(number=0, value=ShortValue(value=42))
        Field(number=0, value=ShortValue(tag='N', value=42))
    """

    number: int = BoundedInt(ge=0)
    value: TypedValue
