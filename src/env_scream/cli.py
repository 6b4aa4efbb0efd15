"""
env-scream CLI entrypoint.

Usage:
    env-scream <logfile>

Exit Codes:
  0 - Analysis ran (report printed, no screams, or log file not found)
  1 - No log file given
"""

from __future__ import annotations

import argparse
import sys

from env_scream import report
from env_scream.config import get_config
from env_scream.detector import EnvScreamDetector
from env_scream.observability import configure_logging, get_logger

logger = get_logger(__name__)

PROG = "env-scream"


def _build_parser() -> argparse.ArgumentParser:
    # No options at all, not even -h: a NUL prefix keeps "-app.log" a path.
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Detect which .env variable is haunting your logs",
        add_help=False,
        prefix_chars="\0",
    )
    parser.add_argument("logfile", nargs="?", help="Log file to analyze")
    return parser


def main(args: list[str] | None = None) -> None:
    config = get_config()
    configure_logging(config.log_level)

    parsed, _extra = _build_parser().parse_known_args(args)
    if parsed.logfile is None:
        report.print_usage(PROG)
        sys.exit(1)

    logger.debug("analysis_start", logfile=parsed.logfile)
    EnvScreamDetector(config=config).analyze(parsed.logfile)


if __name__ == "__main__":
    main()
