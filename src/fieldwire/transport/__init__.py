"""Message transport for fieldwire.

This module provides the sinks a serialized message is written to:

- **TcpSink**: one message per connection to a TCP server
- **FileSink**: message persisted to a file
- **MemorySink**: in-memory sink for tests and embedding

## Quick Start

```python
from fieldwire import read_message, serialize
from fieldwire.transport import SinkConfig, TcpSink

message = read_message(["0 N 42", "1 U 1000000", ""])
with TcpSink("localhost:9000", SinkConfig(connect_timeout=5.0)) as sink:
    print(f"Written {sink.write(serialize(message))} bytes")
```
"""

from __future__ import annotations

from .config import SinkConfig
from .sink import FileSink, MemorySink, Sink, TcpSink, parse_address

__all__ = [
    "Sink",
    "SinkConfig",
    "TcpSink",
    "FileSink",
    "MemorySink",
    "parse_address",
]
