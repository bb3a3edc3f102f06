"""Message: the ordered, insert-only collection of fields.

A message maps field numbers to typed values. Iteration is always in
ascending field-number order, which is also the wire order of the encoded
values.
"""

from __future__ import annotations

import bisect
import logging
from typing import Iterator

from ..exceptions import DuplicateFieldNumber, FieldNumberTooLarge
from .field import Field
from .values import TypedValue

logger = logging.getLogger(__name__)

# Width of the presence bitmap; field numbers must be below it
BITMAP_WIDTH = 32


class Message:
    """Ordered mapping from field number to typed value.

    Insertion is the only mutation. Field numbers are unique and must be
    strictly less than BITMAP_WIDTH; a failed insertion leaves the message
    unchanged.

    Example:
        >>> from fieldwire.models.values import LongValue, ShortValue
        >>> message = Message()
        >>> message.insert(Field(number=1, value=LongValue(value=1000000)))
        >>> message.insert(Field(number=0, value=ShortValue(value=42)))
        >>> list(message)
        [0, 1]
    """

    def __init__(self) -> None:
        """Initialize an empty message."""
        self._numbers: list[int] = []  # Kept sorted
        self._values: dict[int, TypedValue] = {}

    def insert(self, field: Field) -> None:
        """Insert a field into the message.

        Args:
            field: Field to insert

        Raises:
            FieldNumberTooLarge: If field.number >= BITMAP_WIDTH
            DuplicateFieldNumber: If field.number is already present
        """
        number = field.number
        if number >= BITMAP_WIDTH:
            raise FieldNumberTooLarge(number)
        if number in self._values:
            raise DuplicateFieldNumber(number)

        bisect.insort(self._numbers, number)
        self._values[number] = field.value
        logger.debug("Inserted field %d (%s)", number, field.value.tag)

    def add_line(self, line: str) -> Field:
        """Parse one input line and insert the resulting field.

        Args:
            line: Text of the form ``<number> <tag> <value...>``

        Returns:
            The inserted field

        Raises:
            ParseError: If the line cannot be parsed
            MessageError: If the field cannot be inserted
        """
        # Import here to avoid circular dependency
        from ..parsing import parse_field

        field = parse_field(line)
        self.insert(field)
        return field

    def get(self, number: int, default: TypedValue | None = None) -> TypedValue | None:
        """Return the value for ``number``, or ``default`` if absent."""
        return self._values.get(number, default)

    def numbers(self) -> list[int]:
        """Return the present field numbers in ascending order."""
        return list(self._numbers)

    def values(self) -> Iterator[TypedValue]:
        """Iterate over values in ascending field-number order."""
        for number in self._numbers:
            yield self._values[number]

    def items(self) -> Iterator[tuple[int, TypedValue]]:
        """Iterate over (number, value) pairs in ascending field-number order."""
        for number in self._numbers:
            yield number, self._values[number]

    def fields(self) -> Iterator[Field]:
        """Iterate over the message as Field objects, in wire order."""
        for number, value in self.items():
            yield Field(number=number, value=value)

    def to_bytes(self) -> bytes:
        """Serialize the message (see fieldwire.codec.serialize)."""
        from ..codec.encoder import serialize

        return serialize(self)

    def __getitem__(self, number: int) -> TypedValue:
        return self._values[number]

    def __contains__(self, number: object) -> bool:
        return number in self._values

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._numbers))

    def __len__(self) -> int:
        return len(self._numbers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Message):
            return NotImplemented
        return list(self.items()) == list(other.items())

    def __repr__(self) -> str:
        body = ", ".join(f"{number}: {value!r}" for number, value in self.items())
        return f"Message({{{body}}})"
