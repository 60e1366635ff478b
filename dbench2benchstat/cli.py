"""Command line entry point: dbench report on stdin, benchstat lines on stdout."""

from __future__ import annotations

import argparse
import sys
from contextlib import ExitStack
from typing import List, Optional

from .config import LOG_LEVELS, get_settings
from .exceptions import StreamError
from .formatters import BenchstatFormatter
from .processor import StreamProcessor
from .utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dbench2benchstat",
        description="Convert dbench result lines into benchstat input.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="dbench report to read (default: standard input)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="file to write benchstat lines to (default: standard output)",
    )
    parser.add_argument("--prefix", help="name prefix for output lines")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="diagnostic log level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = get_settings()
    except ValueError as exc:
        parser.error(str(exc))
    logger = get_logger(level=args.log_level or settings.log_level)

    prefix = args.prefix if args.prefix is not None else settings.name_prefix
    processor = StreamProcessor(formatter=BenchstatFormatter(name_prefix=prefix))

    with ExitStack() as stack:
        try:
            source = stack.enter_context(open(args.input, encoding="utf-8")) if args.input else sys.stdin
            target = (
                stack.enter_context(open(args.output, "w", encoding="utf-8"))
                if args.output
                else sys.stdout
            )
        except OSError as exc:
            logger.error("Could not open stream: %s", exc)
            return 1

        try:
            processor.process(source, target)
        except StreamError as exc:
            logger.error("Could not process input: %s", exc)
            return 1
    return 0
