"""Main CLI entry point for fieldwire."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.describe import describe_file
from ..codec.encoder import serialize
from ..codec.schema import WireSchema
from ..exceptions import FieldwireError
from ..parsing import read_message
from ..transport import FileSink, Sink, SinkConfig, TcpSink

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the fieldwire CLI."""
    parser = argparse.ArgumentParser(
        prog="fieldwire",
        description="fieldwire: typed field message encoder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fieldwire tcp --addr localhost:9000        Send a message to a TCP server
  fieldwire file --file-name message.bin     Write a message to a file
  fieldwire decode --schema 0:N,1:U message.bin
                                             Describe a stored message

Input lines have the form <number> <type> <value>, with type one of
N (uint16), U (uint32), S (string), H (hex bytes), D (decimal).
An empty line ends the message.
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"fieldwire {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    tcp = subparsers.add_parser("tcp", help="Send the message to a TCP server")
    tcp.add_argument("-a", "--addr", required=True, help="Server address (host:port)")
    tcp.add_argument(
        "--connect-timeout",
        type=float,
        default=SinkConfig.connect_timeout,
        help="Connection timeout in seconds (default: %(default)s)",
    )

    file = subparsers.add_parser("file", help="Write the message to a file")
    file.add_argument("-f", "--file-name", required=True, help="Output file")
    file.add_argument("--append", action="store_true", help="Append instead of truncating")

    decode = subparsers.add_parser("decode", help="Describe a stored message")
    decode.add_argument(
        "--schema", required=True, help="Field types as number:tag pairs, e.g. 0:N,1:U"
    )
    decode.add_argument("file", metavar="FILE", help="File holding the message")

    return parser


def send_message(sink: Sink) -> int:
    """Read a message from stdin and write it to ``sink``.

    Args:
        sink: Destination for the serialized message

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        sink.open()
    except OSError as e:
        print(f"Error: could not open {sink}: {e}", file=sys.stderr)
        return 1

    try:
        print("Enter message")
        message = read_message(sys.stdin, on_error=lambda _line, err: print(err))
        data = serialize(message)
        written = sink.write(data)
    except (FieldwireError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        sink.close()

    print(f"Written {written} bytes")
    print("Quit")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the fieldwire CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "tcp":
        try:
            sink: Sink = TcpSink(args.addr, SinkConfig(connect_timeout=args.connect_timeout))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return send_message(sink)

    if args.command == "file":
        return send_message(FileSink(args.file_name, SinkConfig(append=args.append)))

    if args.command == "decode":
        file_path = Path(args.file)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            describe_file(file_path, WireSchema.parse(args.schema))
            return 0
        except (FieldwireError, OSError) as e:
            print(f"Error decoding file: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
