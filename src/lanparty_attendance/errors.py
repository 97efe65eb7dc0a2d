"""Error hierarchy for attendance validation.

The bucket and description functions are total and never raise for
well-typed input. These errors are raised only where an attendance array is
checked before being stored (validate_attendance) so callers can tell a bad
submission apart from other failures.

Example usage:
    try:
        validate_attendance(submitted, event.begin, event.end)
    except AttendanceLengthError as e:
        return bad_request(f"Expected {e.expected} buckets, got {e.actual}")
"""


class AttendanceError(Exception):
    """Base exception for all attendance errors."""

    pass


class AttendanceValidationError(AttendanceError, ValueError):
    """Submitted attendance cannot be accepted for the event.

    Requires the caller to resubmit; the same input will always fail.
    """

    pass


class AttendanceLengthError(AttendanceValidationError):
    """Attendance array does not cover exactly the event's buckets."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            "Attendance buckets length mismatch. "
            f"Expected {expected}, got {actual}"
        )


class InvalidBucketValueError(AttendanceValidationError):
    """Attendance entry is neither 0 nor 1."""

    def __init__(self, index: int, value: object) -> None:
        self.index = index
        self.value = value
        super().__init__(f"Attendance bucket {index} must be 0 or 1, got {value!r}")
