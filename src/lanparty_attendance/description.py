"""Human-readable summaries of attendance arrays.

Selected buckets are collapsed into contiguous runs and each run is rendered
as a short phrase:

    Friday evening
    Friday evening and overnight
    Saturday morning to evening
    Friday evening until Sunday afternoon

Runs are then joined with English list grammar (Oxford comma for three or
more).
"""

from collections.abc import Sequence
from datetime import datetime

from lanparty_attendance.logging import get_logger
from lanparty_attendance.models import Bucket
from lanparty_attendance.timeline import generate_buckets

log = get_logger(__name__)

NO_ATTENDANCE = "No attendance selected"


def find_runs(buckets: Sequence[Bucket]) -> list[tuple[int, int]]:
    """Split buckets into maximal runs of consecutive slot indices.

    Returns:
        (start, end) positions into ``buckets``, both inclusive.
    """
    if not buckets:
        return []

    runs: list[tuple[int, int]] = []
    run_start = 0
    for i in range(1, len(buckets)):
        if buckets[i].slot_index != buckets[i - 1].slot_index + 1:
            runs.append((run_start, i - 1))
            run_start = i
    runs.append((run_start, len(buckets) - 1))
    return runs


def format_run(start: Bucket, end: Bucket, length: int) -> str:
    """Render one run given its first and last bucket and its bucket count."""
    start_period = start.period.value.lower()
    end_period = end.period.value.lower()

    if length == 1:
        return f"{start.day_name} {start_period}"

    if start.day_offset == end.day_offset:
        joiner = "and" if length == 2 else "to"
        return f"{start.day_name} {start_period} {joiner} {end_period}"

    return f"{start.day_name} {start_period} until {end.day_name} {end_period}"


def join_phrases(phrases: Sequence[str]) -> str:
    """Join phrases as "a", "a and b" or "a, b, and c"."""
    if not phrases:
        return ""
    if len(phrases) == 1:
        return phrases[0]
    if len(phrases) == 2:
        return f"{phrases[0]} and {phrases[1]}"
    return f"{', '.join(phrases[:-1])}, and {phrases[-1]}"


def describe_attendance(
    attendance: Sequence[int] | None, begin: datetime, end: datetime
) -> str:
    """Describe which parts of an event someone is attending.

    Args:
        attendance: Attendance array aligned to the event's buckets, or None.
        begin: Event start time.
        end: Event end time.

    Returns:
        A phrase such as "Friday evening, Saturday evening, and Sunday
        afternoon", or NO_ATTENDANCE when nothing is selected.
    """
    if not attendance:
        return NO_ATTENDANCE

    timeline = generate_buckets(begin, end)
    selected = [
        bucket
        for i, bucket in enumerate(timeline)
        if i < len(attendance) and attendance[i] == 1
    ]
    if not selected:
        return NO_ATTENDANCE

    runs = find_runs(selected)
    log.debug("attendance_runs", selected=len(selected), runs=len(runs))

    return join_phrases(
        [
            format_run(selected[first], selected[last], last - first + 1)
            for first, last in runs
        ]
    )
