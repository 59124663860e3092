from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceReportRow, AttendanceSession, LocationDetails


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceSession]:
        raise NotImplementedError

    def list_for_employee(
        self,
        employee_id: int,
        *,
        limit: int,
        offset: int = 0,
        work_date: Optional[date] = None,
    ) -> Sequence[AttendanceSession]:
        """Newest first."""

        raise NotImplementedError

    def count_for_employee(self, employee_id: int, *, work_date: Optional[date] = None) -> int:
        raise NotImplementedError

    def create_checkin(
        self,
        *,
        employee_id: int,
        work_date: date,
        punch_in: datetime,
        status: AttendanceStatus,
        location: LocationDetails,
        selfie: Optional[str] = None,
    ) -> AttendanceSession:
        """Insert the day's session.

        Must raise AlreadyCheckedInError when (employee_id, work_date) already exists.
        """

        raise NotImplementedError

    def update_checkout(
        self,
        *,
        attendance_id: int,
        punch_out: datetime,
        status: AttendanceStatus,
        work_hours: float,
        location: Optional[LocationDetails] = None,
        selfie: Optional[str] = None,
    ) -> bool:
        """Set punch-out only if none is recorded yet; False when nothing was updated."""

        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
        branch_id: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError
