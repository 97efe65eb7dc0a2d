"""Pydantic models for attendance buckets and event windows.

All value types are frozen Pydantic v2 models so they can be shared freely
between callers and compared by value.
"""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


class Period(str, Enum):
    """Part of the day covered by one 6-hour bucket, in bucket-of-day order."""

    MORNING = "Morning"  # 06:00-12:00
    AFTERNOON = "Afternoon"  # 12:00-18:00
    EVENING = "Evening"  # 18:00-24:00
    OVERNIGHT = "Overnight"  # 00:00-06:00 of the next calendar day


PERIOD_NAMES: tuple[Period, ...] = tuple(Period)


class Bucket(BaseModel):
    """A single 6-hour attendance slot anchored to a day of the event.

    day_offset counts calendar days from the day the event begins, and
    bucket_of_day selects the period within that day (0=Morning .. 3=Overnight).
    """

    model_config = ConfigDict(frozen=True)

    day_offset: int = Field(ge=0)
    bucket_of_day: int = Field(ge=0, le=3)
    day_name: str  # "Friday"
    period: Period

    @computed_field  # type: ignore[prop-decorator]
    @property
    def slot_index(self) -> int:
        """Global slot index used by the selector: day_offset * 4 + bucket_of_day."""
        return self.day_offset * 4 + self.bucket_of_day

    @property
    def label(self) -> str:
        return f"{self.day_name} {self.period.value.lower()}"


class EventWindow(BaseModel):
    """The active window of an event.

    begin <= end is expected but not enforced; an inverted window simply has
    no buckets.
    """

    model_config = ConfigDict(frozen=True)

    begin: datetime
    end: datetime

    @property
    def is_inverted(self) -> bool:
        return self.begin > self.end

    def buckets(self) -> list[Bucket]:
        from lanparty_attendance.timeline import generate_buckets

        return generate_buckets(self.begin, self.end)

    def default_attendance(self) -> list[int]:
        from lanparty_attendance.codec import default_attendance

        return default_attendance(self.begin, self.end)

    def describe(self, attendance: list[int] | None) -> str:
        from lanparty_attendance.description import describe_attendance

        return describe_attendance(attendance, self.begin, self.end)
