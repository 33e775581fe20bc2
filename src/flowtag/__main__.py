import argparse
import sys
from pathlib import Path
from typing import List

from .core.config import settings
from .exceptions import FlowTagError
from .logging import get_logger, set_log_level
from .pipeline_app import run_flow_tagging

logger = get_logger(__name__)

USAGE = "flowtag <flow_log_file> <lookup_table_file> <output_file> [protocol_map_file]"


def positive_int(value: str) -> int:
    """argparse type accepting integers greater than zero."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def positive_float(value: str) -> float:
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: {value!r}") from None
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flowtag",
        usage=USAGE,
        description="Tag flow log records by destination port and protocol and count them",
    )
    parser.add_argument("paths", nargs="*", type=Path, help=argparse.SUPPRESS)
    parser.add_argument("--workers", type=positive_int, default=None, help="worker threads (default: CPU count)")
    parser.add_argument("--timeout", type=positive_float, default=None, help="seconds to wait for workers")
    parser.add_argument("--csv-dir", type=Path, default=None, help="also export the counts as CSV files here")
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if len(args.paths) not in (3, 4):
        print(f"Usage: {USAGE}")
        return 0

    set_log_level(args.log_level)
    flow_log, lookup_table, output = args.paths[:3]
    protocol_map = args.paths[3] if len(args.paths) == 4 else None

    try:
        run_flow_tagging(
            flow_log,
            lookup_table,
            output,
            protocol_map,
            max_workers=args.workers,
            timeout=args.timeout,
            csv_dir=args.csv_dir,
        )
    except FlowTagError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        if exc.suggestion:
            logger.error("Hint: %s", exc.suggestion)
        return 1

    print(f"Output is written to file : {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
