"""Data model for fieldwire.

This module provides the typed values, fields and the message collection
that the codec serializes.
"""

from __future__ import annotations

from .field import Field
from .message import BITMAP_WIDTH, Message
from .values import (
    TYPE_TAGS,
    VALUE_TYPES,
    BlobValue,
    DecimalValue,
    FixedPointNumber,
    LongValue,
    ShortValue,
    TextValue,
    TypedValue,
)

__all__ = [
    "BITMAP_WIDTH",
    "Field",
    "Message",
    "TYPE_TAGS",
    "VALUE_TYPES",
    "BlobValue",
    "DecimalValue",
    "FixedPointNumber",
    "LongValue",
    "ShortValue",
    "TextValue",
    "TypedValue",
]
