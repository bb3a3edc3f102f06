"""Unit tests for the Message collection."""

from __future__ import annotations

import pytest

from fieldwire import (
    BITMAP_WIDTH,
    DuplicateFieldNumber,
    Field,
    FieldNumberTooLarge,
    LongValue,
    MalformedLine,
    Message,
    ShortValue,
    TextValue,
    build_bitmap,
)


def short_field(number: int, value: int = 1) -> Field:
    return Field(number=number, value=ShortValue(value=value))


class TestInsert:
    """Test insertion and its invariants."""

    def test_empty(self) -> None:
        """Test a new message has no fields."""
        message = Message()
        assert len(message) == 0
        assert message.numbers() == []
        assert build_bitmap(message) == 0

    def test_ascending_iteration(self) -> None:
        """Test iteration is by field number, not insertion order."""
        message = Message()
        for number in (7, 0, 31, 3):
            message.insert(short_field(number, number))

        assert list(message) == [0, 3, 7, 31]
        assert [value.value for value in message.values()] == [0, 3, 7, 31]
        assert [field.number for field in message.fields()] == [0, 3, 7, 31]

    def test_duplicate(self) -> None:
        """Test a repeated number fails and keeps the first value."""
        message = Message()
        message.insert(short_field(5, 1))

        with pytest.raises(DuplicateFieldNumber, match="5") as exc_info:
            message.insert(Field(number=5, value=LongValue(value=2)))

        assert exc_info.value.number == 5
        assert len(message) == 1
        assert message[5] == ShortValue(value=1)

    def test_boundary(self) -> None:
        """Test 31 is the largest valid number and 32 is rejected."""
        message = Message()
        message.insert(short_field(31))

        with pytest.raises(FieldNumberTooLarge, match="32") as exc_info:
            message.insert(short_field(32))

        assert exc_info.value.number == 32
        assert message.numbers() == [31]

    def test_too_large_on_empty_message(self) -> None:
        """Test a rejected insertion leaves an empty message empty."""
        message = Message()
        with pytest.raises(FieldNumberTooLarge):
            message.insert(short_field(1000))
        assert len(message) == 0

    def test_add_line(self) -> None:
        """Test parsing and inserting a line in one call."""
        message = Message()
        field = message.add_line("2 S hello")

        assert field.number == 2
        assert message[2] == TextValue(value="hello")

    def test_add_line_error_leaves_message(self) -> None:
        """Test a malformed line does not touch the message."""
        message = Message()
        with pytest.raises(MalformedLine):
            message.add_line("2 S")
        assert len(message) == 0


class TestAccessors:
    """Test read-only accessors."""

    def test_contains_and_get(self) -> None:
        """Test membership and lookup."""
        message = Message()
        message.insert(short_field(4, 9))

        assert 4 in message
        assert 5 not in message
        assert message.get(4) == ShortValue(value=9)
        assert message.get(5) is None
        with pytest.raises(KeyError):
            message[5]

    def test_equality(self) -> None:
        """Test messages compare by content, not insertion order."""
        first = Message()
        first.insert(short_field(1))
        first.insert(short_field(2))
        second = Message()
        second.insert(short_field(2))
        second.insert(short_field(1))

        assert first == second
        partial = Message()
        partial.insert(short_field(1))
        assert first != partial

    def test_repr(self) -> None:
        """Test repr lists fields in order."""
        message = Message()
        message.insert(short_field(1, 3))
        assert repr(message) == "Message({1: ShortValue(tag='N', value=3)})"


class TestBitmap:
    """Test the presence bitmap."""

    @pytest.mark.parametrize("number", range(BITMAP_WIDTH))
    def test_single_bit(self, number: int) -> None:
        """Test field n sets exactly bit n."""
        message = Message()
        message.insert(short_field(number))
        assert build_bitmap(message) == 1 << number

    def test_all_fields(self) -> None:
        """Test a full message sets every bit."""
        message = Message()
        for number in range(BITMAP_WIDTH):
            message.insert(short_field(number))
        assert build_bitmap(message) == 0xFFFFFFFF

    def test_independent_of_values(self) -> None:
        """Test the bitmap depends on numbers only."""
        message = Message()
        message.insert(Field(number=3, value=LongValue(value=0xFFFFFFFF)))
        assert build_bitmap(message) == 0b1000
