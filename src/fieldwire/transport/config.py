"""Configuration for message sinks."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class SinkConfig:
    """Configuration shared by the message sinks.

    Attributes:
        connect_timeout: Seconds to wait for a TCP connection (default 10.0).
            Also bounds the blocking send once connected.
        append: Append to an existing file instead of truncating it (default False).
            Only used by FileSink.

    Examples:
        ```python
        from fieldwire.transport import SinkConfig, TcpSink

        sink = TcpSink("localhost:9000", SinkConfig(connect_timeout=2.5))
        ```
    """

    connect_timeout: float = 10.0
    append: bool = False

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.connect_timeout <= 0:
            raise ValueError(f"connect_timeout must be > 0, got {self.connect_timeout}")
