"""Command-line front end: ``xml-struct`` / ``python -m xml_struct.cli``."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import IO

from .document import to_structure
from .errors import XMLSerializationError
from .options import DEFAULT_ATTRIBUTE_PREFIX, DEFAULT_VALUE_KEY, SerializerOptions
from .values import to_python

logger = logging.getLogger(__name__)


def configure_logging(level: str = "WARNING", stream: IO[str] | None = None) -> None:
    """Send ``xml_struct`` log records to stderr (or *stream*) with a simple format.

    Only the package logger is touched; handlers on the root logger stay.
    """
    package_logger = logging.getLogger("xml_struct")
    package_logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    # drop the handler of a previous call
    package_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    package_logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="xml-struct",
        description="Convert an XML document into JSON-shaped data.",
    )
    parser.add_argument("path", nargs="?", default="-", help="XML file to read ('-' for stdin)")
    parser.add_argument(
        "--coerce",
        action="store_true",
        help="convert boolean / integer / float looking text into JSON primitives",
    )
    parser.add_argument("--attribute-prefix", default=DEFAULT_ATTRIBUTE_PREFIX)
    parser.add_argument("--value-key", default=DEFAULT_VALUE_KEY)
    parser.add_argument("--indent", type=int, default=2, help="JSON indent (0 for compact)")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def _read_input(path: str, stdin: IO[bytes]) -> bytes:
    if path == "-":
        return stdin.read()
    with open(path, "rb") as fh:
        return fh.read()


def main(argv: list[str] | None = None, stdin: IO[bytes] | None = None,
         stdout: IO[str] | None = None) -> int:
    """Entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout

    try:
        options = SerializerOptions(
            attribute_prefix=args.attribute_prefix,
            value_key=args.value_key,
            coerce_values=args.coerce,
        )
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        data = _read_input(args.path, stdin)
    except OSError as exc:
        print(f"error: cannot read '{args.path}': {exc}", file=sys.stderr)
        return 2

    try:
        result = to_structure(data, options=options)
    except XMLSerializationError as exc:
        logger.debug("Serialization of %s failed", args.path, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    indent = args.indent if args.indent > 0 else None
    json.dump(to_python(result), stdout, indent=indent, ensure_ascii=False)
    stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
