from datetime import datetime, time

import pytest

from src.hrms_attendance.hrms_attendance.attendance.deriver import StatusDeriver, compute_work_hours
from src.hrms_attendance.hrms_attendance.core.enums import AttendanceStatus
from src.hrms_attendance.hrms_attendance.core.exceptions import ValidationError

DAY = (2026, 3, 2)


def at(hour: int, minute: int = 0, second: int = 0) -> datetime:
    return datetime(*DAY, hour, minute, second)


def test_checkin_after_930_is_late():
    assert StatusDeriver().derive_check_in_status(at(9, 45)) == AttendanceStatus.LATE_CHECK_IN


def test_checkin_exactly_at_930_is_present():
    assert StatusDeriver().derive_check_in_status(at(9, 30)) == AttendanceStatus.PRESENT


def test_checkin_one_second_after_930_is_late():
    assert StatusDeriver().derive_check_in_status(at(9, 30, 1)) == AttendanceStatus.LATE_CHECK_IN


def test_checkout_after_1830_is_late_checkout():
    decision = StatusDeriver().derive_check_out_status(at(9), at(18, 45), AttendanceStatus.PRESENT)

    assert decision.work_hours == 9.75
    assert decision.status == AttendanceStatus.LATE_CHECK_OUT


def test_late_checkin_and_late_checkout_combine():
    decision = StatusDeriver().derive_check_out_status(at(9, 45), at(19), AttendanceStatus.LATE_CHECK_IN)

    assert decision.status == AttendanceStatus.LATE_CHECK_IN_AND_OUT


def test_checkout_before_1830_keeps_prior_status():
    deriver = StatusDeriver()

    assert deriver.derive_check_out_status(at(9), at(18), AttendanceStatus.PRESENT).status == AttendanceStatus.PRESENT
    assert (
        deriver.derive_check_out_status(at(9, 40), at(18, 30), AttendanceStatus.LATE_CHECK_IN).status
        == AttendanceStatus.LATE_CHECK_IN
    )


def test_four_hours_is_low_work_hours():
    decision = StatusDeriver().derive_check_out_status(at(9), at(13), AttendanceStatus.PRESENT)

    assert decision.work_hours == 4.0
    assert decision.status == AttendanceStatus.LOW_WORK_HOURS


@pytest.mark.parametrize(
    "punch_in,punch_out,prior",
    [
        (at(15), at(19), AttendanceStatus.LATE_CHECK_IN),
        (at(14), at(18, 45), AttendanceStatus.LATE_CHECK_IN),
        (at(9), at(9, 1), AttendanceStatus.PRESENT),
        (at(18, 40), at(23), AttendanceStatus.LATE_CHECK_IN),
    ],
)
def test_low_work_hours_overrides_lateness(punch_in, punch_out, prior):
    decision = StatusDeriver().derive_check_out_status(punch_in, punch_out, prior)

    assert decision.work_hours < 5
    assert decision.status == AttendanceStatus.LOW_WORK_HOURS


def test_exactly_five_hours_is_not_low():
    decision = StatusDeriver().derive_check_out_status(at(9), at(14), AttendanceStatus.PRESENT)

    assert decision.status == AttendanceStatus.PRESENT


def test_work_hours_rounded_to_two_decimals():
    assert compute_work_hours(at(9), at(17, 20)) == 8.33
    assert compute_work_hours(at(9), at(9)) == 0.0


def test_punch_out_before_punch_in_is_invalid():
    with pytest.raises(ValidationError):
        StatusDeriver().derive_check_out_status(at(12), at(11), AttendanceStatus.PRESENT)


def test_custom_work_window():
    deriver = StatusDeriver(work_start=time(8, 0), work_end=time(17, 0), low_work_hours=4)

    assert deriver.derive_check_in_status(at(8, 15)) == AttendanceStatus.LATE_CHECK_IN
    decision = deriver.derive_check_out_status(at(8), at(17, 30), AttendanceStatus.PRESENT)
    assert decision.status == AttendanceStatus.LATE_CHECK_OUT
    assert deriver.derive_check_out_status(at(13), at(17), AttendanceStatus.PRESENT).status == AttendanceStatus.PRESENT
