"""Command-line entry point: run a file, or read forms interactively."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from oats.config import get_log_level, get_recursion_limit
from oats.interpreter import Interpreter

logger = logging.getLogger("oats")

PROMPT = "> "


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="oats",
        description="Evaluate a file of oats forms, or start an interactive session",
    )

    parser.add_argument(
        'file',
        nargs='?',
        help='Source file to evaluate (omit for an interactive session)'
    )

    parser.add_argument(
        '--no-prelude',
        action='store_true',
        help='Do not load the prelude file'
    )

    return parser.parse_args(argv)


def repl(interp: Interpreter) -> None:
    """Read one line at a time until end of input."""
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return
        except KeyboardInterrupt:
            print()
            continue
        interp.run(line)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)
    logging.basicConfig(level=get_log_level())
    sys.setrecursionlimit(get_recursion_limit())

    interp = Interpreter(prelude=None if args.no_prelude else 'auto')

    if args.file is None:
        repl(interp)
        return 0

    path = Path(args.file)
    logger.debug("running %s", path)
    try:
        source = path.read_text(encoding="utf-8")
    except OSError as ex:
        print(f"error: {ex}")
        return 1
    return 0 if interp.run(source) else 1


if __name__ == "__main__":
    sys.exit(main())
