from dataclasses import dataclass
from enum import Enum

from fsx_windows.errors import TimeRangeError


class Weekday(Enum):
    """Days of the week, in the order FSx numbers them (Monday is 1)"""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def index(self) -> int:
        return list(Weekday).index(self) + 1


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_time(label: str, hour, minute) -> None:
    """Shared hour/minute range check for every scheduled time"""
    if not _is_int(hour) or hour < 0 or hour > 24:
        raise TimeRangeError(f"{label} hour must be an integer between 0 and 24", field="hour")
    if not _is_int(minute) or minute < 0 or minute > 59:
        raise TimeRangeError(
            f"{label} minute must be an integer between 0 and 59", field="minute"
        )


@dataclass(frozen=True)
class BackupStartTime:
    """
    Daily automatic backup start time, in UTC.
    Rendered as HH:MM for the DailyAutomaticBackupStartTime field.
    """

    hour: int
    minute: int

    def __post_init__(self) -> None:
        validate_time("Backup start time", self.hour, self.minute)

    def to_timestamp(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True)
class MaintenanceTime:
    """
    Weekly maintenance start time, in UTC.
    Rendered as D:HH:MM where D is 1 for Monday through 7 for Sunday,
    e.g. '2:20:30' is Tuesdays at 20:30.
    """

    day: Weekday
    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not isinstance(self.day, Weekday):
            raise TimeRangeError("Maintenance time day must be a Weekday", field="day")
        validate_time("Maintenance time", self.hour, self.minute)

    def to_timestamp(self) -> str:
        return f"{self.day.index}:{self.hour:02d}:{self.minute:02d}"
