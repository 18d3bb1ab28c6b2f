from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from .report import format_table
from .scanner import Scanner

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

logger = logging.getLogger(__name__)


def _default_log_level() -> str:
    level = os.environ.get("IFSTACK_LOG_LEVEL", "WARNING").upper()
    return level if level in _LOG_LEVELS else "WARNING"


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="ifstack", description="Trace IF/ELSE/ENDIF nesting in a text file")
    parser.add_argument("path", help="Path to the input text file")
    parser.add_argument("--emit", action="store_true", help="Print only the active text lines instead of the table")
    parser.add_argument("--keep-going", action="store_true", help="Continue scanning after a directive error")
    parser.add_argument("--strict", action="store_true", help="Treat an IF left open at end of input as an error")
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default=_default_log_level(),
        help="Logging verbosity on stderr (default: $IFSTACK_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    scanner = Scanner(keep_going=args.keep_going)
    try:
        result = scanner.scan_file(args.path)
    except OSError as exc:
        print(f"error: failed to open \"{args.path}\": {exc.strerror or exc}", file=sys.stderr)
        return 1
    finally:
        scanner.stack.shutdown()

    if args.emit:
        for line in result.emitted:
            print(line)
    else:
        print(f"Parsing \"{args.path}\"")
        print(format_table(result))

    status = 0
    for error in result.errors:
        print(f"error: {error}", file=sys.stderr)
        status = 1
    if result.unterminated:
        message = f"{result.unterminated} unterminated IF block(s) at end of input"
        if args.strict:
            print(f"error: {message}", file=sys.stderr)
            status = 1
        else:
            logger.warning("%s", message)
    return status


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
