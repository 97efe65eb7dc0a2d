"""Inspect attendance buckets for an event window from the command line.

Run with:   lanparty-attendance --begin 2025-01-17T18:00 --end 2025-01-19T12:00 \
                --attendance 1,0,0,0,1,0,0,1
Buckets:    lanparty-attendance --begin ... --end ... --buckets
Default:    lanparty-attendance --begin ... --end ... --default
Validate:   lanparty-attendance --begin ... --end ... --attendance 1,1 --validate

Exit codes:
  0 = success (result on stdout)
  1 = error (message on stderr)
"""

import argparse
import json
import sys
from datetime import datetime

from lanparty_attendance.codec import default_attendance, validate_attendance
from lanparty_attendance.description import describe_attendance
from lanparty_attendance.errors import AttendanceError
from lanparty_attendance.logging import get_logger, setup_logging
from lanparty_attendance.timeline import generate_buckets

log = get_logger(__name__)


def _parse_attendance(value: str) -> list[int]:
    """Parse "1,0,1" into [1, 0, 1]."""
    if not value.strip():
        return []
    try:
        return [int(part) for part in value.split(",")]
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"attendance must be comma-separated integers, got {value!r}"
        )


def _parse_datetime(value: str) -> datetime:
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO 8601 datetime: {value!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lanparty-attendance",
        description="Describe or inspect attendance buckets for an event.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--begin", type=_parse_datetime, required=True, help="Event start (ISO 8601)."
    )
    parser.add_argument(
        "--end", type=_parse_datetime, required=True, help="Event end (ISO 8601)."
    )
    parser.add_argument(
        "--attendance",
        type=_parse_attendance,
        default=None,
        help="Comma-separated 0/1 values, one per bucket.",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--buckets",
        action="store_true",
        help="Print the event's buckets as JSON.",
    )
    output_group.add_argument(
        "--default",
        action="store_true",
        help="Print the attend-everything attendance array as JSON.",
    )
    output_group.add_argument(
        "--validate",
        action="store_true",
        help="Check that --attendance fits the event and print 'ok'.",
    )
    return parser


def run(args: argparse.Namespace) -> str:
    """Compute the output for parsed arguments."""
    if (args.begin.tzinfo is None) != (args.end.tzinfo is None):
        raise AttendanceError(
            "--begin and --end must both include a UTC offset or both omit it"
        )

    if args.buckets:
        buckets = generate_buckets(args.begin, args.end)
        return json.dumps([b.model_dump(mode="json") for b in buckets], indent=2)

    if args.default:
        return json.dumps(default_attendance(args.begin, args.end))

    if args.validate:
        if args.attendance is None:
            raise AttendanceError("--validate requires --attendance")
        validate_attendance(args.attendance, args.begin, args.end)
        return "ok"

    return describe_attendance(args.attendance, args.begin, args.end)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    setup_logging()

    try:
        output = run(args)
    except AttendanceError as e:
        log.error("command_failed", error=str(e), type=type(e).__name__)
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
