"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from fieldwire import Message, read_message


@pytest.fixture
def sample_lines() -> list[str]:
    """One input line of every value type, followed by the blank terminator."""
    return [
        "0 N 42",
        "1 U 1000000",
        "2 S hello",
        "3 H deadbeef",
        "4 D 12.345",
        "",
    ]


@pytest.fixture
def sample_message(sample_lines: list[str]) -> Message:
    """Message built from sample_lines."""
    return read_message(sample_lines)


@pytest.fixture
def sample_wire() -> bytes:
    """Wire bytes of sample_message."""
    return bytes.fromhex(
        "1f000000"  # bitmap: fields 0-4
        "2a00"  # 0 N 42
        "40420f00"  # 1 U 1000000
        "303035" "68656c6c6f"  # 2 S hello
        "303034" "deadbeef"  # 3 H deadbeef
        "3503" "3132333435"  # 4 D 12.345
    )
