from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status labels as stored in the database."""

    PRESENT = "Present"
    LATE_CHECK_IN = "Late Check-in"
    LATE_CHECK_OUT = "Late Check-out"
    LATE_CHECK_IN_AND_OUT = "Late Check-in & Late Check-out"
    LOW_WORK_HOURS = "Low Work Hours"
    ABSENT = "Absent"
    LEAVE = "Leave"

    @property
    def is_late(self) -> bool:
        return self in {
            AttendanceStatus.LATE_CHECK_IN,
            AttendanceStatus.LATE_CHECK_OUT,
            AttendanceStatus.LATE_CHECK_IN_AND_OUT,
        }
