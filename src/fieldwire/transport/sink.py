"""Destinations for serialized messages.

A sink accepts one byte string and reports how many bytes it actually
wrote. Short writes are reported, never retried, and operating system
errors propagate unchanged as ``OSError``.

Available sinks:
- TcpSink: sends to a TCP server
- FileSink: writes to a file
- MemorySink: keeps the bytes in memory (testing, embedding)
"""

from __future__ import annotations

import logging
import socket
from abc import ABC, abstractmethod
from pathlib import Path
from typing import BinaryIO, Optional

from ..exceptions import TransportError
from .config import SinkConfig

logger = logging.getLogger(__name__)


class Sink(ABC):
    """Abstract destination for message bytes.

    Sinks are context managers: entering opens the sink, leaving closes it.

    Examples:
        ```python
        from fieldwire import read_message, serialize
        from fieldwire.transport import FileSink

        message = read_message(["0 N 42", ""])
        with FileSink("message.bin") as sink:
            written = sink.write(serialize(message))
        ```
    """

    def __init__(self, config: SinkConfig | None = None) -> None:
        """Initialize sink.

        Args:
            config: Sink configuration. If None, uses default config.
        """
        self.config = config if config is not None else SinkConfig()

    @abstractmethod
    def open(self) -> None:
        """Open the underlying connection or file.

        Raises:
            OSError: If the destination cannot be opened
        """

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write ``data`` with a single call to the destination.

        Args:
            data: Bytes to write

        Returns:
            Number of bytes actually written (may be less than len(data))

        Raises:
            TransportError: If the sink is not open
            OSError: If the write fails
        """

    @abstractmethod
    def close(self) -> None:
        """Close the sink. Closing a closed sink does nothing."""

    @property
    @abstractmethod
    def is_open(self) -> bool:
        """Whether the sink is currently open."""

    def _not_open(self) -> TransportError:
        return TransportError(f"{self} is not open. Call open() before write().")

    def _report(self, written: int, data: bytes) -> int:
        if written < len(data):
            logger.warning("Short write to %s: %d of %d bytes", self, written, len(data))
        else:
            logger.debug("Wrote %d bytes to %s", written, self)
        return written

    def __enter__(self) -> Sink:
        self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def parse_address(address: str) -> tuple[str, int]:
    """Split a ``host:port`` address; IPv6 hosts may be bracketed.

    Raises:
        ValueError: If the address has no valid port

    Example:
        >>> parse_address("[::1]:9000")
        ('::1', 9000)
    """
    host, sep, port_text = address.rpartition(":")
    if not sep or not host or not port_text.isdigit():
        raise ValueError(f"Invalid address {address!r} (expected host:port)")

    port = int(port_text)
    if not 0 < port <= 65535:
        raise ValueError(f"Port must be 1-65535, got {port}")

    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


class TcpSink(Sink):
    """Sends the message to a TCP server.

    Attributes:
        host: Server host name or address
        port: Server port
    """

    def __init__(self, address: str, config: SinkConfig | None = None) -> None:
        """Initialize TCP sink.

        Args:
            address: Server address as ``host:port``
            config: Sink configuration

        Raises:
            ValueError: If the address is invalid
        """
        super().__init__(config)
        self.host, self.port = parse_address(address)
        self._sock: Optional[socket.socket] = None

    def open(self) -> None:
        if self._sock is not None:
            return
        self._sock = socket.create_connection(
            (self.host, self.port), timeout=self.config.connect_timeout
        )
        logger.debug("Connected to %s:%d", self.host, self.port)

    def write(self, data: bytes) -> int:
        sock = self._sock
        if sock is None:
            raise self._not_open()
        return self._report(sock.send(data), data)

    def close(self) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    def __str__(self) -> str:
        return f"tcp://{self.host}:{self.port}"


class FileSink(Sink):
    """Writes the message to a file, truncating it unless ``config.append`` is set.

    Attributes:
        path: Destination file path
    """

    def __init__(self, path: str | Path, config: SinkConfig | None = None) -> None:
        super().__init__(config)
        self.path = Path(path)
        self._file: Optional[BinaryIO] = None

    def open(self) -> None:
        if self._file is not None:
            return
        mode = "ab" if self.config.append else "wb"
        # Unbuffered so write() reports what the OS accepted
        self._file = open(self.path, mode, buffering=0)
        logger.debug("Opened %s (%s)", self.path, mode)

    def write(self, data: bytes) -> int:
        file = self._file
        if file is None:
            raise self._not_open()
        written = file.write(data)
        return self._report(written or 0, data)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def __str__(self) -> str:
        return f"file://{self.path}"


class MemorySink(Sink):
    """Keeps written bytes in memory.

    Attributes:
        max_write: If set, at most this many bytes are accepted per write,
            simulating a short write
    """

    def __init__(self, max_write: int | None = None, config: SinkConfig | None = None) -> None:
        super().__init__(config)
        if max_write is not None and max_write < 0:
            raise ValueError(f"max_write must be >= 0, got {max_write}")
        self.max_write = max_write
        self._buffer = bytearray()
        self._open = False

    def open(self) -> None:
        self._open = True

    def write(self, data: bytes) -> int:
        if not self._open:
            raise self._not_open()
        accepted = data if self.max_write is None else data[: self.max_write]
        self._buffer.extend(accepted)
        return self._report(len(accepted), data)

    def close(self) -> None:
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def data(self) -> bytes:
        """All bytes written so far."""
        return bytes(self._buffer)

    def __str__(self) -> str:
        return "memory://"
