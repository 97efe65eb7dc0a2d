"""Conversion between selector state and persisted attendance arrays.

The interactive selector addresses buttons by global slot index
(day_offset * 4 + bucket_of_day), including slots that are disabled because
they fall outside the event. The persisted attendance array only has one
entry per valid bucket. Both representations are aligned through the
timeline produced by generate_buckets() for the same event window.
"""

from collections.abc import Iterable, Sequence
from datetime import datetime

from lanparty_attendance.errors import AttendanceLengthError, InvalidBucketValueError
from lanparty_attendance.logging import get_logger
from lanparty_attendance.models import Bucket
from lanparty_attendance.timeline import generate_buckets

log = get_logger(__name__)

ATTENDING = 1
NOT_ATTENDING = 0


def to_selection_indices(
    attendance: Sequence[int] | None, timeline: Sequence[Bucket]
) -> set[int]:
    """Global slot indices of every bucket marked as attended.

    Entries past the end of the timeline are ignored and missing trailing
    entries count as not attending.
    """
    if not attendance:
        return set()

    return {
        bucket.slot_index
        for i, bucket in enumerate(timeline)
        if i < len(attendance) and attendance[i] == ATTENDING
    }


def from_selection_indices(
    selected: Iterable[int], timeline: Sequence[Bucket]
) -> list[int]:
    """Attendance array for a set of selected global slot indices.

    Selected slots that are not part of the timeline (disabled buttons) are
    dropped.
    """
    selected_slots = set(selected)
    return [
        ATTENDING if bucket.slot_index in selected_slots else NOT_ATTENDING
        for bucket in timeline
    ]


def default_attendance(begin: datetime, end: datetime) -> list[int]:
    """Attendance array for someone attending the whole event."""
    return [ATTENDING] * len(generate_buckets(begin, end))


def merge_with_default(
    value: Sequence[int] | None, timeline: Sequence[Bucket]
) -> list[int]:
    """Starting state for the selector.

    Positions covered by a previously saved array keep their value; anything
    beyond it (or everything, when nothing was saved) defaults to attending.
    """
    if value is None:
        return [ATTENDING] * len(timeline)

    return [value[i] if i < len(value) else ATTENDING for i in range(len(timeline))]


def validate_attendance(
    attendance: Sequence[int], begin: datetime, end: datetime
) -> list[int]:
    """Check an attendance array before it is persisted for an event.

    Args:
        attendance: Submitted attendance array.
        begin: Event start time.
        end: Event end time.

    Returns:
        The attendance array as a list.

    Raises:
        AttendanceLengthError: If the array does not cover exactly the
            event's buckets.
        InvalidBucketValueError: If an entry is not 0 or 1.
    """
    expected = len(generate_buckets(begin, end))
    if len(attendance) != expected:
        log.warning(
            "attendance_length_mismatch",
            expected=expected,
            actual=len(attendance),
        )
        raise AttendanceLengthError(expected=expected, actual=len(attendance))

    for index, value in enumerate(attendance):
        if value not in (ATTENDING, NOT_ATTENDING):
            log.warning("invalid_bucket_value", index=index, value=value)
            raise InvalidBucketValueError(index=index, value=value)

    return list(attendance)
