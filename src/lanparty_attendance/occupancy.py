"""Queries over attendance arrays: shared buckets and point-in-time lookups.

Used by seat reservations (two people may share a seat only if they never
attend the same bucket) and by the game schedule (who is around when a game
starts).
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from lanparty_attendance.config import get_config
from lanparty_attendance.logging import get_logger
from lanparty_attendance.timeline import (
    BUCKET_HOURS,
    BUCKET_LENGTH,
    BUCKETS_PER_DAY,
    start_of_day,
)

log = get_logger(__name__)


def has_bucket_overlap(first: Sequence[int], second: Sequence[int]) -> bool:
    """True if both arrays mark the same bucket as attended.

    Arrays of different lengths belong to different event windows and are
    never considered overlapping.
    """
    if len(first) != len(second):
        return False
    return any(a == 1 and b == 1 for a, b in zip(first, second))


def _first_valid_slot(begin: datetime, end: datetime) -> int | None:
    # An inverted window has no buckets, matching generate_buckets().
    if begin > end:
        return None

    first_day = start_of_day(begin)
    max_slots = get_config().max_event_duration_days * BUCKETS_PER_DAY

    for slot in range(max_slots):
        bucket_start = first_day + timedelta(hours=BUCKET_HOURS * (slot + 1))
        if begin < bucket_start + BUCKET_LENGTH and end >= bucket_start:
            return slot
    return None


def attendance_index_at(
    moment: datetime, begin: datetime, end: datetime
) -> int | None:
    """Position in the event's attendance array of the bucket holding moment.

    Args:
        moment: Point in time to look up, e.g. a scheduled game's start.
        begin: Event start time.
        end: Event end time.

    Returns:
        The index, or None if the event has no bucket within
        max_event_duration_days or moment falls before the first bucket.
        The index is not checked against the end of the event.
    """
    first_slot = _first_valid_slot(begin, end)
    if first_slot is None:
        log.debug("no_valid_bucket", begin=begin.isoformat(), end=end.isoformat())
        return None

    # Whole hours, truncated toward zero.
    hours = int((moment - start_of_day(begin)).total_seconds() / 3600)
    moment_slot = (hours - BUCKET_HOURS) // BUCKET_HOURS

    index = moment_slot - first_slot
    if index < 0:
        return None
    return index


def is_attending_at(
    attendance: Sequence[int] | None,
    moment: datetime,
    begin: datetime,
    end: datetime,
) -> bool:
    """True if the attendance array marks the bucket holding moment."""
    if not attendance:
        return False

    index = attendance_index_at(moment, begin, end)
    if index is None or index >= len(attendance):
        return False
    return attendance[index] == 1
