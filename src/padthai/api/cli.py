"""
Command-line interface for padthai.

Encodes binary data from stdin (or a file) to Thai text on stdout, or
decodes it back with -d.

Environment:
    PADTHAI_WRAP    Default wrap column for encoded output (default: 0, no wrap)
"""
from __future__ import annotations

import argparse
import os
import sys

from ..core.codec import encode, decode
from ..core.errors import DecodeError
from ..utils.logging import get_logger, setup_logging

logger = get_logger("cli")


def default_wrap() -> int:
    return int(os.environ.get("PADTHAI_WRAP", "0"))


def fail(stage: str, err) -> int:
    print(f"padthai: {stage} error: {err}", file=sys.stderr)
    return 1


def wrap_lines(text: str, cols: int) -> str:
    """Break text into lines of at most cols characters."""
    if cols <= 0 or not text:
        return text
    lines = [text[i:i + cols] for i in range(0, len(text), cols)]
    return "\n".join(lines) + "\n"


def read_input(path: str | None) -> bytes:
    if path is None or path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def cmd_encode(args: argparse.Namespace, data: bytes) -> int:
    text = wrap_lines(encode(data), args.wrap)
    logger.debug("encoded %d bytes into %d characters", len(data), len(text))
    try:
        sys.stdout.buffer.write(text.encode("utf-8"))
        sys.stdout.buffer.flush()
    except OSError as e:
        return fail("write", e)
    return 0


def cmd_decode(args: argparse.Namespace, data: bytes) -> int:
    try:
        decoded = decode(data.decode("utf-8"))
    except UnicodeDecodeError as e:
        return fail("decode", f"input is not valid UTF-8: {e}")
    except DecodeError as e:
        return fail("decode", e)

    logger.debug("decoded %d input bytes into %d bytes", len(data), len(decoded))
    try:
        sys.stdout.buffer.write(decoded)
        sys.stdout.buffer.flush()
    except OSError as e:
        return fail("write", e)
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="padthai",
        description="Encode binary data to Thai Unicode characters, or decode back. "
                    "Reads from stdin, writes to stdout.",
    )
    parser.add_argument(
        "-d", "--decode",
        action="store_true",
        help="Decode mode: read Thai-encoded UTF-8 and write binary",
    )
    parser.add_argument(
        "-w", "--wrap",
        type=int,
        default=default_wrap(),
        metavar="COLS",
        help="Wrap encoded lines after COLS characters (0 disables wrapping)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output on stderr",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Input file (default: stdin, or '-')",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    if args.wrap < 0:
        parser.error("--wrap must be 0 or greater")

    setup_logging(args.verbose)

    try:
        data = read_input(args.file)
    except OSError as e:
        return fail("read", e)

    if args.decode:
        return cmd_decode(args, data)
    return cmd_encode(args, data)


if __name__ == "__main__":
    sys.exit(main())
