"""Field type helpers and utilities.

This module provides convenience functions for declaring constrained
attributes on fieldwire value models.
"""

from __future__ import annotations

from typing import Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF


def BoundedInt(*, ge: int | None = None, le: int | None = None, **kwargs: Any) -> FieldInfo:
    """Create a bounded, strictly typed integer field.

    This is a convenience wrapper around Pydantic's Field() that rejects
    non-int input (strings, floats and bools are not coerced).

    Args:
        ge: Minimum value (inclusive)
        le: Maximum value (inclusive)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class ShortValue(ValueModel):
        ...     value: int = BoundedInt(ge=0, le=UINT16_MAX)
    """
    return cast(FieldInfo, Field(ge=ge, le=le, strict=True, **kwargs))


def DigitString(**kwargs: Any) -> FieldInfo:
    """Create a non-empty field holding only ASCII decimal digits.

    Args:
        **kwargs: Additional Field() arguments

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class FixedPointNumber(ValueModel):
        ...     digits: str = DigitString()
    """
    return cast(FieldInfo, Field(min_length=1, pattern=r"^[0-9]+$", strict=True, **kwargs))
