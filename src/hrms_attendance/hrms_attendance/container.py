from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from typing import Optional

from .attendance.deriver import StatusDeriver
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .branches.mysql_branch_repository import MySQLBranchRepository
from .branches.repository import BranchRepository
from .core.constants import DEFAULT_GEOFENCE_RADIUS_METERS, DEFAULT_LOW_WORK_HOURS, DEFAULT_WORK_END, DEFAULT_WORK_START
from .database.connection import DatabaseConnection, DBConfig
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import AuthService
from .geofence.locator import ReferenceLocator
from .reports.service import AttendanceReportService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    branches_repo: BranchRepository
    attendance_repo: AttendanceRepository

    auth_service: AuthService
    attendance_service: AttendanceService
    report_service: AttendanceReportService


def assemble(
    *,
    attendance_repo: AttendanceRepository,
    employees_repo: EmployeeRepository,
    branches_repo: BranchRepository,
    conn: Optional[DatabaseConnection] = None,
    radius_meters: float = DEFAULT_GEOFENCE_RADIUS_METERS,
    work_start: time = DEFAULT_WORK_START,
    work_end: time = DEFAULT_WORK_END,
    low_work_hours: float = DEFAULT_LOW_WORK_HOURS,
) -> Container:
    deriver = StatusDeriver(work_start=work_start, work_end=work_end, low_work_hours=low_work_hours)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        ReferenceLocator(branches_repo),
        deriver=deriver,
        radius_meters=radius_meters,
    )
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        branches_repo=branches_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(employees_repo),
        attendance_service=attendance_service,
        report_service=AttendanceReportService(attendance_repo),
    )


def build_container(*, db_config: dict, **policy) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return assemble(
        attendance_repo=MySQLAttendanceRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        branches_repo=MySQLBranchRepository(conn),
        conn=conn,
        **policy,
    )
