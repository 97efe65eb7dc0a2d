from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from lanparty_attendance.models import Bucket, EventWindow, Period
from lanparty_attendance.timeline import days_between, generate_buckets, start_of_day


def _labels(buckets):
    return [b.label for b in buckets]


def test_weekend_has_eight_buckets(weekend):
    buckets = generate_buckets(*weekend)

    assert _labels(buckets) == [
        "Friday evening",
        "Friday overnight",
        "Saturday morning",
        "Saturday afternoon",
        "Saturday evening",
        "Saturday overnight",
        "Sunday morning",
        "Sunday afternoon",
    ]
    assert [b.slot_index for b in buckets] == [2, 3, 4, 5, 6, 7, 8, 9]


def test_midday_start_skips_morning(midday):
    buckets = generate_buckets(*midday)

    assert buckets[0] == Bucket(
        day_offset=0, bucket_of_day=1, day_name="Friday", period=Period.AFTERNOON
    )
    assert len(buckets) == 5
    assert buckets[-1].label == "Saturday afternoon"


def test_order_is_day_major():
    buckets = generate_buckets(datetime(2025, 1, 17, 6), datetime(2025, 1, 20, 6))
    keys = [(b.day_offset, b.bucket_of_day) for b in buckets]

    assert keys == sorted(keys)
    assert len(buckets) == 13


def test_window_inside_one_bucket():
    buckets = generate_buckets(datetime(2025, 1, 18, 13), datetime(2025, 1, 18, 14))

    assert _labels(buckets) == ["Saturday afternoon"]


def test_end_on_bucket_boundary_includes_next_bucket():
    # end >= bucket start is inclusive, begin < bucket end is strict
    buckets = generate_buckets(datetime(2025, 1, 18, 12), datetime(2025, 1, 18, 18))

    assert _labels(buckets) == ["Saturday afternoon", "Saturday evening"]


def test_begin_on_bucket_end_excludes_that_bucket():
    buckets = generate_buckets(datetime(2025, 1, 18, 12), datetime(2025, 1, 18, 13))

    assert _labels(buckets) == ["Saturday afternoon"]


def test_week_wraps_day_names():
    buckets = generate_buckets(datetime(2025, 1, 19, 20), datetime(2025, 1, 20, 8))

    assert _labels(buckets) == [
        "Sunday evening",
        "Sunday overnight",
        "Monday morning",
    ]


def test_inverted_interval_is_empty(weekend):
    begin, end = weekend

    assert generate_buckets(end, begin) == []


def test_timezone_aware_datetimes():
    tz = timezone(timedelta(hours=2))
    buckets = generate_buckets(
        datetime(2025, 1, 17, 18, tzinfo=tz), datetime(2025, 1, 19, 12, tzinfo=tz)
    )

    assert len(buckets) == 8
    assert buckets[0].label == "Friday evening"


@pytest.mark.parametrize("begin_hour", [0, 5, 6, 11, 12, 17, 18, 23])
@pytest.mark.parametrize("hours", [6, 13, 30, 47, 96])
def test_bucket_count_is_bounded(begin_hour, hours):
    begin = datetime(2025, 3, 7, begin_hour)
    end = begin + timedelta(hours=hours)
    buckets = generate_buckets(begin, end)

    assert 1 <= len(buckets) <= 4 * (days_between(begin, end) + 1)


def test_start_of_day_and_days_between():
    moment = datetime(2025, 1, 17, 18, 30, 15, 42)

    assert start_of_day(moment) == datetime(2025, 1, 17)
    assert days_between(moment, datetime(2025, 1, 19, 0, 1)) == 2
    assert days_between(moment, datetime(2025, 1, 17, 23, 59)) == 0


def test_event_window_delegates(weekend):
    window = EventWindow(begin=weekend[0], end=weekend[1])

    assert not window.is_inverted
    assert window.buckets() == generate_buckets(*weekend)
    assert window.default_attendance() == [1] * 8
    assert window.describe([1, 0, 0, 0, 0, 0, 0, 0]) == "Friday evening"
    assert EventWindow(begin=weekend[1], end=weekend[0]).is_inverted


def test_bucket_is_frozen(weekend):
    bucket = generate_buckets(*weekend)[0]

    with pytest.raises(ValidationError):
        bucket.day_offset = 3
