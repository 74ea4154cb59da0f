"""Main CLI entry point for protoserdes."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .. import __version__
from ..cli.inspect import inspect_frame, parse_hex
from ..exceptions import FormatError


def main() -> int:
    """Main entry point for the protoserdes CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="protoserdes: Schema Registry wire format for Protocol Buffers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  protoserdes --inspect "00 00 00 00 07 02 04"     Inspect a framed message given as hex
  protoserdes --inspect-file message.bin           Inspect a framed message stored in a file
  protoserdes --version                            Show version
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--inspect",
        metavar="HEX",
        type=str,
        help="Decode the wire header of a framed message given as hex",
    )
    group.add_argument(
        "--inspect-file",
        metavar="FILE",
        type=str,
        help="Decode the wire header of a framed message stored in a file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"protoserdes {__version__}",
    )

    args = parser.parse_args()

    if args.inspect is not None:
        try:
            data = parse_hex(args.inspect)
        except ValueError as e:
            print(f"Error: invalid hex input: {e}", file=sys.stderr)
            return 1
        return _inspect(data)

    if args.inspect_file is not None:
        file_path = Path(args.inspect_file)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1
        return _inspect(file_path.read_bytes())

    # If no command specified, show help
    parser.print_help()
    return 0


def _inspect(data: bytes) -> int:
    try:
        inspect_frame(data)
        return 0
    except FormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
