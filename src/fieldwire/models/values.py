"""Typed values carried by message fields.

A field value is exactly one of five variants, discriminated by the
one-character type tag used in the textual input grammar:

    N  ShortValue    16-bit unsigned integer
    U  LongValue     32-bit unsigned integer
    S  TextValue     UTF-8 text
    H  BlobValue     raw bytes (hex in the input)
    D  DecimalValue  fixed-point number

``TypedValue`` is the discriminated union of the variant classes; Pydantic
selects the variant from the ``tag`` attribute when validating.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field, field_validator, model_validator

from .base import ValueModel
from .fields import UINT16_MAX, UINT32_MAX, BoundedInt, DigitString


class FixedPointNumber(ValueModel):
    """Unsigned decimal number stored as its digits and a fractional precision.

    ``12.345`` is held as ``digits="12345"`` and ``precision=3``. Digits are
    kept verbatim: no sign and no leading-zero normalization.

    Attributes:
        digits: ASCII decimal digits, integer and fractional parts concatenated
        precision: Number of trailing digits after the decimal point
    """

    digits: str = DigitString()
    precision: int = BoundedInt(ge=0)

    @model_validator(mode="after")
    def _check_precision(self) -> FixedPointNumber:
        if self.precision > len(self.digits):
            raise ValueError(
                f"precision {self.precision} exceeds digit count {len(self.digits)}"
            )
        return self

    def __str__(self) -> str:
        if self.precision == 0:
            return self.digits
        split = len(self.digits) - self.precision
        return f"{self.digits[:split]}.{self.digits[split:]}"


class ShortValue(ValueModel):
    """16-bit unsigned integer (tag ``N``)."""

    tag: Literal["N"] = "N"
    value: int = BoundedInt(ge=0, le=UINT16_MAX)


class LongValue(ValueModel):
    """32-bit unsigned integer (tag ``U``)."""

    tag: Literal["U"] = "U"
    value: int = BoundedInt(ge=0, le=UINT32_MAX)


class TextValue(ValueModel):
    """UTF-8 text (tag ``S``)."""

    tag: Literal["S"] = "S"
    value: str = Field(strict=True)

    @field_validator("value")
    @classmethod
    def _check_utf8(cls, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as e:
            raise ValueError(f"text is not encodable as UTF-8: {e.reason}") from e
        return value


class BlobValue(ValueModel):
    """Raw byte sequence (tag ``H``)."""

    tag: Literal["H"] = "H"
    value: bytes = Field(strict=True)


class DecimalValue(ValueModel):
    """Fixed-point decimal number (tag ``D``)."""

    tag: Literal["D"] = "D"
    value: FixedPointNumber


TypedValue = Annotated[
    Union[ShortValue, LongValue, TextValue, BlobValue, DecimalValue],
    Field(discriminator="tag"),
]

# Variant class for each type tag, in grammar order
VALUE_TYPES: dict[str, type[ValueModel]] = {
    "N": ShortValue,
    "U": LongValue,
    "S": TextValue,
    "H": BlobValue,
    "D": DecimalValue,
}

TYPE_TAGS: tuple[str, ...] = tuple(VALUE_TYPES)
