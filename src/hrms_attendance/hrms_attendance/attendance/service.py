from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import coerce_positive_int, has_coordinates, require_coordinates
from ..core.constants import DEFAULT_GEOFENCE_RADIUS_METERS, DEFAULT_HISTORY_LIMIT, DEFAULT_HISTORY_PAGE, MAX_HISTORY_LIMIT
from ..core.exceptions import (
    AlreadyCheckedInError,
    AlreadyCheckedOutError,
    GeofenceRejectedError,
    SessionNotFoundError,
    ValidationError,
)
from ..employees.model import Employee, OfficeLocation
from ..employees.repository import EmployeeRepository
from ..geofence.locator import ReferenceLocator
from ..geofence.model import GeoPoint, NotSet
from ..geofence.validator import validate_proximity
from .deriver import StatusDeriver
from .model import AttendanceSession, HistoryPage, LocationDetails, PunchRequest, TodayView
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: geofenced check-in, check-out, and the employee's own attendance views."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        locator: ReferenceLocator,
        *,
        deriver: StatusDeriver | None = None,
        radius_meters: float = DEFAULT_GEOFENCE_RADIUS_METERS,
    ):
        self._attendance = attendance
        self._employees = employees
        self._locator = locator
        self._deriver = deriver or StatusDeriver()
        self._radius_meters = float(radius_meters)

    def _get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee or not employee.is_active:
            raise ValidationError("Employee not found")
        return employee

    def _check_geofence(self, employee: Employee, location: LocationDetails) -> None:
        lookup = self._locator.lookup(employee)

        if isinstance(lookup, NotSet):
            # First punch ever: adopt the claimed point as the office location.
            office = OfficeLocation(latitude=location.latitude, longitude=location.longitude, address=location.address)
            if self._employees.set_office_location(employee.employee_id, office):
                logger.info("Bootstrapped office location for employee_id=%s", employee.employee_id)
                return

            # A concurrent check-in stored the office location first; measure against it.
            lookup = self._locator.lookup(self._get_employee(employee.employee_id))
            if isinstance(lookup, NotSet):
                raise ValidationError("Office location could not be determined")

        reference = lookup.location
        result = validate_proximity(
            GeoPoint(location.latitude, location.longitude),
            reference.point,
            self._radius_meters,
        )
        if not result.accepted:
            logger.info(
                "Geofence rejected employee_id=%s distance=%.0fm reference=%s",
                employee.employee_id,
                result.distance_meters,
                reference.name,
            )
            raise GeofenceRejectedError(
                distance_meters=result.distance_meters,
                radius_meters=self._radius_meters,
                reference_name=reference.name,
            )

    def check_in(self, employee_id: int, punch: PunchRequest, *, now: datetime | None = None) -> AttendanceSession:
        latitude, longitude = require_coordinates(punch.latitude, punch.longitude)
        now = now or now_local()
        today = now.date()

        employee = self._get_employee(employee_id)
        if self._attendance.get_for_employee_and_date(employee_id, today):
            raise AlreadyCheckedInError()

        location = punch.location(latitude, longitude)
        self._check_geofence(employee, location)

        status = self._deriver.derive_check_in_status(now)
        session = self._attendance.create_checkin(
            employee_id=employee_id,
            work_date=today,
            punch_in=now,
            status=status,
            location=location,
            selfie=punch.selfie,
        )
        logger.info("Check-in employee_id=%s date=%s status=%s", employee_id, today, status.value)
        return session

    def check_out(self, employee_id: int, punch: PunchRequest, *, now: datetime | None = None) -> AttendanceSession:
        now = now or now_local()
        today = now.date()

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if not record:
            raise SessionNotFoundError()
        if record.punch_out is not None:
            raise AlreadyCheckedOutError()

        location = None
        if has_coordinates(punch.latitude, punch.longitude):
            location = punch.location(*require_coordinates(punch.latitude, punch.longitude))

        decision = self._deriver.derive_check_out_status(record.punch_in, now, record.status)
        updated = self._attendance.update_checkout(
            attendance_id=record.attendance_id,
            punch_out=now,
            status=decision.status,
            work_hours=decision.work_hours,
            location=location,
            selfie=punch.selfie or None,
        )
        if not updated:
            raise AlreadyCheckedOutError()

        logger.info(
            "Check-out employee_id=%s date=%s status=%s hours=%.2f",
            employee_id,
            today,
            decision.status.value,
            decision.work_hours,
        )
        return self._attendance.get_for_employee_and_date(employee_id, today)

    def get_today(self, employee_id: int, *, work_date: Optional[date] = None, now: datetime | None = None) -> TodayView:
        work_date = work_date or (now or now_local()).date()
        session = self._attendance.get_for_employee_and_date(employee_id, work_date)

        branch = None
        employee = self._employees.get_by_id(employee_id)
        if employee:
            branch = self._locator.branch_for(employee)
        return TodayView(session=session, branch=branch)

    def get_history(
        self,
        employee_id: int,
        *,
        page: object = DEFAULT_HISTORY_PAGE,
        limit: object = DEFAULT_HISTORY_LIMIT,
        work_date: Optional[date] = None,
    ) -> HistoryPage:
        page = coerce_positive_int(page, DEFAULT_HISTORY_PAGE)
        limit = coerce_positive_int(limit, DEFAULT_HISTORY_LIMIT, maximum=MAX_HISTORY_LIMIT)

        items = self._attendance.list_for_employee(
            employee_id,
            limit=limit,
            offset=(page - 1) * limit,
            work_date=work_date,
        )
        total = self._attendance.count_for_employee(employee_id, work_date=work_date)
        return HistoryPage(items=list(items), page=page, limit=limit, total=total)
