import dataclasses

import pytest
from fsx_windows import BackupStartTime, MaintenanceTime, TimeRangeError, ValidationError, Weekday


class TestBackupStartTime:
    """Test daily automatic backup start time"""

    @pytest.mark.parametrize(
        "hour, minute, expected",
        [(5, 0, "05:00"), (23, 59, "23:59"), (0, 7, "00:07"), (24, 0, "24:00")],
    )
    def test_timestamp(self, hour, minute, expected):
        """Test hour and minute are zero padded to HH:MM"""
        assert BackupStartTime(hour=hour, minute=minute).to_timestamp() == expected

    @pytest.mark.parametrize("hour", [-1, 25, 1.2, True])
    def test_invalid_hour(self, hour):
        """Test hours outside 0-24 or not integers are rejected"""
        with pytest.raises(TimeRangeError, match="hour must be an integer between 0 and 24") as exc:
            BackupStartTime(hour=hour, minute=0)

        assert exc.value.field == "hour"

    @pytest.mark.parametrize("minute", [-1, 60, 1.2])
    def test_invalid_minute(self, minute):
        """Test minutes outside 0-59 or not integers are rejected"""
        with pytest.raises(TimeRangeError, match="minute must be an integer between 0 and 59"):
            BackupStartTime(hour=0, minute=minute)

    def test_is_immutable(self):
        """Test a backup start time cannot be changed after construction"""
        start = BackupStartTime(hour=5, minute=0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            start.hour = 6


class TestMaintenanceTime:
    """Test weekly maintenance start time"""

    @pytest.mark.parametrize(
        "day, hour, minute, expected",
        [
            (Weekday.SUNDAY, 0, 0, "7:00:00"),
            (Weekday.SATURDAY, 0, 0, "6:00:00"),
            (Weekday.SUNDAY, 24, 0, "7:24:00"),
            (Weekday.SUNDAY, 0, 59, "7:00:59"),
            (Weekday.TUESDAY, 20, 30, "2:20:30"),
        ],
    )
    def test_timestamp(self, day, hour, minute, expected):
        """Test the weekday index and padded time form D:HH:MM"""
        assert MaintenanceTime(day=day, hour=hour, minute=minute).to_timestamp() == expected

    def test_weekdays_start_at_monday(self):
        """Test Monday is 1 and Sunday is 7"""
        assert [day.index for day in Weekday] == [1, 2, 3, 4, 5, 6, 7]
        assert Weekday.MONDAY.index == 1

    @pytest.mark.parametrize("hour", [-1, 25, 1.2])
    def test_invalid_hour(self, hour):
        """Test invalid hours are rejected with the maintenance message"""
        with pytest.raises(
            TimeRangeError, match="Maintenance time hour must be an integer between 0 and 24"
        ):
            MaintenanceTime(day=Weekday.TUESDAY, hour=hour, minute=0)

    @pytest.mark.parametrize("minute", [-1, 60, 1.2])
    def test_invalid_minute(self, minute):
        """Test invalid minutes are rejected with the maintenance message"""
        with pytest.raises(
            TimeRangeError, match="Maintenance time minute must be an integer between 0 and 59"
        ) as exc:
            MaintenanceTime(day=Weekday.TUESDAY, hour=0, minute=minute)

        assert exc.value.field == "minute"

    def test_range_error_is_a_validation_error(self):
        """Test time range errors can be caught as validation errors"""
        with pytest.raises(ValidationError):
            MaintenanceTime(day=Weekday.MONDAY, hour=30, minute=0)
