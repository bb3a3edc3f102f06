"""Wire schema: which type each field number carries.

The wire format writes neither field numbers nor type tags; the presence
bitmap says which fields follow, and both sides must agree out of band on
the type of each field number. WireSchema is that agreement, used by the
decoder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from ..exceptions import SchemaError
from ..models.message import BITMAP_WIDTH, Message
from ..models.values import TYPE_TAGS


@dataclass(frozen=True)
class WireSchema:
    """Mapping from field number to type tag.

    Attributes:
        entries: (number, tag) pairs sorted by number

    Example:
        >>> schema = WireSchema.parse("0:N, 1:U, 2:S")
        >>> schema.tag_for(1)
        'U'
    """

    entries: tuple[tuple[int, str], ...]

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for number, tag in self.entries:
            if not 0 <= number < BITMAP_WIDTH:
                raise SchemaError(
                    f"Field number {number} out of range [0, {BITMAP_WIDTH - 1}]"
                )
            if tag not in TYPE_TAGS:
                raise SchemaError(f"Field {number}: unknown type tag {tag!r}")
            if number in seen:
                raise SchemaError(f"Field {number} declared more than once")
            seen.add(number)

        object.__setattr__(self, "entries", tuple(sorted(self.entries)))

    @classmethod
    def from_mapping(cls, tags: Mapping[int, str]) -> WireSchema:
        """Build a schema from a {number: tag} mapping."""
        return cls(tuple(tags.items()))

    @classmethod
    def from_message(cls, message: Message) -> WireSchema:
        """Derive the schema a receiver needs to decode ``message``."""
        return cls(tuple((number, value.tag) for number, value in message.items()))

    @classmethod
    def parse(cls, text: str) -> WireSchema:
        """Parse a schema description such as ``"0:N,1:U,4:D"``.

        Args:
            text: Comma-separated ``number:tag`` entries (whitespace is ignored)

        Returns:
            The parsed schema

        Raises:
            SchemaError: If an entry is malformed or invalid
        """
        entries: list[tuple[int, str]] = []
        for item in text.split(","):
            item = item.strip()
            if not item:
                continue
            number_text, sep, tag = item.partition(":")
            number_text = number_text.strip()
            if not sep or not number_text.isdigit() or not number_text.isascii():
                raise SchemaError(f"Invalid schema entry {item!r} (expected number:tag)")
            entries.append((int(number_text), tag.strip()))
        return cls(tuple(entries))

    def tag_for(self, number: int) -> str:
        """Return the type tag of ``number``.

        Raises:
            KeyError: If the schema does not declare ``number``
        """
        for entry_number, tag in self.entries:
            if entry_number == number:
                return tag
        raise KeyError(number)

    def numbers(self) -> list[int]:
        """Return the declared field numbers in ascending order."""
        return [number for number, _tag in self.entries]

    def __contains__(self, number: object) -> bool:
        return any(entry_number == number for entry_number, _tag in self.entries)

    def __str__(self) -> str:
        return ",".join(f"{number}:{tag}" for number, tag in self.entries)
