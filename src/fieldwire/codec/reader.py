"""Byte-level reading utilities for the decoder.

This module provides a cursor over an immutable byte buffer. Integer reads
are little-endian, matching the wire format.
"""

from __future__ import annotations


class ByteReader:
    """Reads bytes and little-endian integers from a buffer.

    Example:
        >>> reader = ByteReader(b"\\x2a\\x00abc")
        >>> reader.read_uint_le(2)
        42
        >>> reader.read_bytes(3)
        b'abc'
    """

    def __init__(self, data: bytes) -> None:
        """Initialize reader with data.

        Args:
            data: Bytes to read from
        """
        self._data = bytes(data)
        self._position = 0

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from buffer

        Raises:
            ValueError: If num_bytes is negative
            IndexError: If not enough bytes are available
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")

        if self._position + num_bytes > len(self._data):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )

        result = self._data[self._position : self._position + num_bytes]
        self._position += num_bytes
        return result

    def read_byte(self) -> int:
        """Read a single byte as an integer (0-255).

        Raises:
            IndexError: If no more bytes are available
        """
        return self.read_bytes(1)[0]

    def read_uint_le(self, num_bytes: int) -> int:
        """Read a little-endian unsigned integer.

        Args:
            num_bytes: Width of the integer in bytes (1-8)

        Returns:
            Unsigned integer value

        Raises:
            ValueError: If num_bytes is out of range
            IndexError: If not enough bytes are available
        """
        if num_bytes < 1 or num_bytes > 8:
            raise ValueError(f"num_bytes must be 1-8, got {num_bytes}")

        return int.from_bytes(self.read_bytes(num_bytes), "little")

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position
