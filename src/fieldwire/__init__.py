"""fieldwire: Typed Field Message Encoder

A Python library and command-line tool that turns a line-based description
of typed fields into a compact binary message.

Each input line is ``<field-number> <type-tag> <value>``; the message is a
32-bit presence bitmap followed by the encoded values in ascending
field-number order.

Key Features:
- Pydantic-based immutable value model (N, U, S, H, D types)
- Insert-only message with duplicate and range checks
- Byte-exact serializer and a schema-driven decoder
- TCP and file sinks with a small CLI

Quick Start:
    >>> from fieldwire import read_message, serialize
    >>> message = read_message(["0 N 42", "1 U 1000000", ""])
    >>> serialize(message).hex()
    '030000002a0040420f00'
"""

from __future__ import annotations

from .codec import WireSchema, build_bitmap, decode, encode_value, serialize
from .exceptions import (
    DecodeError,
    DuplicateFieldNumber,
    EncodeError,
    FieldNumberTooLarge,
    FieldwireError,
    MalformedDecimal,
    MalformedText,
    MalformedHex,
    MalformedLine,
    MessageError,
    NumberParseFailure,
    NumericOverflow,
    ParseError,
    PayloadTooLarge,
    SchemaError,
    TransportError,
    UnknownType,
)
from .models import (
    BITMAP_WIDTH,
    BlobValue,
    DecimalValue,
    Field,
    FixedPointNumber,
    LongValue,
    Message,
    ShortValue,
    TextValue,
    TypedValue,
)
from .parsing import parse_decimal, parse_field, parse_value, read_message
from .utils import encoded_size, field_sizes

__version__ = "0.1.0"

__all__ = [
    # Data model
    "BITMAP_WIDTH",
    "Message",
    "Field",
    "TypedValue",
    "ShortValue",
    "LongValue",
    "TextValue",
    "BlobValue",
    "DecimalValue",
    "FixedPointNumber",
    # Parsing
    "parse_decimal",
    "parse_value",
    "parse_field",
    "read_message",
    # Codec
    "serialize",
    "build_bitmap",
    "encode_value",
    "decode",
    "WireSchema",
    # Sizing
    "encoded_size",
    "field_sizes",
    # Exceptions
    "FieldwireError",
    "ParseError",
    "MalformedLine",
    "NumberParseFailure",
    "UnknownType",
    "NumericOverflow",
    "MalformedHex",
    "MalformedDecimal",
    "MalformedText",
    "MessageError",
    "FieldNumberTooLarge",
    "DuplicateFieldNumber",
    "EncodeError",
    "PayloadTooLarge",
    "DecodeError",
    "SchemaError",
    "TransportError",
    # Version
    "__version__",
]
