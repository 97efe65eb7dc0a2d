"""Attendance buckets for LAN party events.

Splits an event window into 6-hour buckets, converts between selector state
and persisted attendance arrays, and describes attendance in plain English.
"""

from lanparty_attendance.codec import (
    default_attendance,
    from_selection_indices,
    merge_with_default,
    to_selection_indices,
    validate_attendance,
)
from lanparty_attendance.config import AttendanceConfig, get_config
from lanparty_attendance.description import NO_ATTENDANCE, describe_attendance
from lanparty_attendance.errors import (
    AttendanceError,
    AttendanceLengthError,
    AttendanceValidationError,
    InvalidBucketValueError,
)
from lanparty_attendance.logging import get_logger, setup_logging
from lanparty_attendance.models import Bucket, EventWindow, Period
from lanparty_attendance.occupancy import (
    attendance_index_at,
    has_bucket_overlap,
    is_attending_at,
)
from lanparty_attendance.timeline import generate_buckets

__all__ = [
    "AttendanceConfig",
    "AttendanceError",
    "AttendanceLengthError",
    "AttendanceValidationError",
    "Bucket",
    "EventWindow",
    "InvalidBucketValueError",
    "NO_ATTENDANCE",
    "Period",
    "attendance_index_at",
    "default_attendance",
    "describe_attendance",
    "from_selection_indices",
    "generate_buckets",
    "get_config",
    "get_logger",
    "has_bucket_overlap",
    "is_attending_at",
    "merge_with_default",
    "setup_logging",
    "to_selection_indices",
    "validate_attendance",
]
