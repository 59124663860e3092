from __future__ import annotations

from datetime import date, datetime

import pytest
from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from src.hrms_attendance.hrms_attendance.attendance.model import LocationDetails
from src.hrms_attendance.hrms_attendance.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from src.hrms_attendance.hrms_attendance.core.enums import AttendanceStatus
from src.hrms_attendance.hrms_attendance.core.exceptions import AlreadyCheckedInError


class FailingCursor:
    def __init__(self, error: Exception):
        self.error = error
        self.closed = False

    def execute(self, sql, params=None):
        raise self.error

    def close(self):
        self.closed = True


class StubConnection:
    def __init__(self, cursor: FailingCursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary: bool = False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class StubConnectionFactory:
    def __init__(self, error: Exception):
        self.conn = StubConnection(FailingCursor(error))

    def connect(self, *, with_database: bool = True):
        return self.conn


def _create_checkin(repo: MySQLAttendanceRepository):
    return repo.create_checkin(
        employee_id=1,
        work_date=date(2026, 3, 2),
        punch_in=datetime(2026, 3, 2, 9, 0),
        status=AttendanceStatus.PRESENT,
        location=LocationDetails(latitude=12.9716, longitude=77.5946),
    )


def test_duplicate_key_becomes_already_checked_in():
    factory = StubConnectionFactory(IntegrityError(msg="Duplicate entry", errno=errorcode.ER_DUP_ENTRY))

    with pytest.raises(AlreadyCheckedInError):
        _create_checkin(MySQLAttendanceRepository(factory))

    assert factory.conn.rolled_back
    assert not factory.conn.committed
    assert factory.conn.closed


def test_other_integrity_errors_propagate():
    factory = StubConnectionFactory(IntegrityError(msg="FK fails", errno=errorcode.ER_NO_REFERENCED_ROW_2))

    with pytest.raises(IntegrityError) as exc:
        _create_checkin(MySQLAttendanceRepository(factory))

    assert exc.value.errno == errorcode.ER_NO_REFERENCED_ROW_2
    assert factory.conn.rolled_back
