"""Bucket timeline generation for an event window.

Each calendar day touched by the event is split into four 6-hour buckets
starting at 06:00, 12:00, 18:00 and 24:00 (midnight of the following day).
Only buckets overlapping the event window are kept, so the resulting list
is trimmed at both ends relative to the full day grid. The position of a
bucket in this list is what aligns it with an attendance array.
"""

from datetime import datetime, timedelta

from lanparty_attendance.logging import get_logger
from lanparty_attendance.models import PERIOD_NAMES, Bucket

log = get_logger(__name__)

BUCKET_HOURS = 6
BUCKETS_PER_DAY = 4
BUCKET_LENGTH = timedelta(hours=BUCKET_HOURS)

# Indexed by datetime.weekday(); kept in English regardless of locale.
DAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


def start_of_day(moment: datetime) -> datetime:
    """Truncate a datetime to midnight, keeping its tzinfo."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def days_between(begin: datetime, end: datetime) -> int:
    """Number of calendar days from begin's date to end's date."""
    return (start_of_day(end).date() - start_of_day(begin).date()).days


def bucket_start(first_day: datetime, day_offset: int, bucket_of_day: int) -> datetime:
    """Start time of a bucket relative to the midnight the event begins on."""
    return first_day + timedelta(
        days=day_offset, hours=BUCKET_HOURS * (bucket_of_day + 1)
    )


def generate_buckets(begin: datetime, end: datetime) -> list[Bucket]:
    """Build the ordered list of buckets overlapping [begin, end].

    A slot [start, start + 6h) is included when begin < start + 6h and
    end >= start. The comparison is strict on one side and inclusive on the
    other, so an event ending exactly at 12:00 still includes the afternoon
    bucket starting at 12:00.

    Args:
        begin: Event start time.
        end: Event end time.

    Returns:
        Buckets in day-major, bucket-minor order. Empty when begin > end.
    """
    if begin > end:
        log.warning(
            "inverted_interval",
            begin=begin.isoformat(),
            end=end.isoformat(),
        )
        return []

    first_day = start_of_day(begin)
    number_of_days = days_between(begin, end) + 1

    buckets: list[Bucket] = []
    for day_offset in range(number_of_days):
        day_name = DAY_NAMES[(first_day + timedelta(days=day_offset)).weekday()]
        for bucket_of_day in range(BUCKETS_PER_DAY):
            start = bucket_start(first_day, day_offset, bucket_of_day)
            if begin < start + BUCKET_LENGTH and end >= start:
                buckets.append(
                    Bucket(
                        day_offset=day_offset,
                        bucket_of_day=bucket_of_day,
                        day_name=day_name,
                        period=PERIOD_NAMES[bucket_of_day],
                    )
                )

    log.debug(
        "buckets_generated",
        days=number_of_days,
        count=len(buckets),
    )
    return buckets
