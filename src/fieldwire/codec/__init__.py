"""Binary codec for fieldwire.

This module provides the message serializer (bitmap + concatenated value
encodings) and its inverse, driven by an out-of-band wire schema.
"""

from __future__ import annotations

from .decoder import decode, decode_value
from .encoder import build_bitmap, encode_value, serialize
from .reader import ByteReader
from .schema import WireSchema

__all__ = [
    "serialize",
    "build_bitmap",
    "encode_value",
    "decode",
    "decode_value",
    "ByteReader",
    "WireSchema",
]
