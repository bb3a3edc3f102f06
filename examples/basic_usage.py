#!/usr/bin/env python3
"""Basic usage example for fieldwire.

This example demonstrates:
1. Building a message from input lines
2. Handling rejected lines
3. Serializing to the wire format
4. Decoding back with a shared schema
"""

from __future__ import annotations

from fieldwire import (
    FieldwireError,
    WireSchema,
    decode,
    encoded_size,
    field_sizes,
    read_message,
    serialize,
)

INPUT_LINES = [
    "0 N 42",
    "1 U 1000000",
    "2 S hello world",
    "3 H deadbeef",
    "4 D 12.345",
    "4 N 7",  # duplicate field number, rejected
    "",
]


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("fieldwire Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Reading input lines...")

    def report(line: str, err: FieldwireError) -> None:
        print(f"   Rejected {line!r}: {err}")

    message = read_message(INPUT_LINES, on_error=report)
    for number, value in message.items():
        print(f"   Field {number}: {value!r}")
    print()

    print("2. Analyzing field sizes...")
    for number, size in field_sizes(message).items():
        print(f"   Field {number}: {size} bytes")
    print(f"   Total: {encoded_size(message)} bytes (including 4-byte bitmap)")
    print()

    print("3. Serializing...")
    data = serialize(message)
    print(f"   {data.hex(' ')}")
    print()

    print("4. Decoding with the shared schema...")
    schema = WireSchema.from_message(message)
    print(f"   Schema: {schema}")
    decoded = decode(data, schema)
    print(f"   Round trip {'succeeded' if decoded == message else 'FAILED'}")


if __name__ == "__main__":
    main()
