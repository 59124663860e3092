from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import CheckInContext, CheckInStrategy, CheckOutContext, CheckOutStrategy


class LateCheckInStrategy(CheckInStrategy):
    """Check-in strictly after the work start boundary."""

    def matches(self, ctx: CheckInContext) -> bool:
        return ctx.now > ctx.work_start

    def decide(self, ctx: CheckInContext) -> AttendanceStatus:
        return AttendanceStatus.LATE_CHECK_IN


class LateCheckOutStrategy(CheckOutStrategy):
    """Checkout strictly after the work end boundary; combines with a late check-in."""

    def matches(self, ctx: CheckOutContext) -> bool:
        return ctx.punch_out > ctx.work_end

    def decide(self, ctx: CheckOutContext) -> AttendanceStatus:
        if ctx.prior_status == AttendanceStatus.LATE_CHECK_IN:
            return AttendanceStatus.LATE_CHECK_IN_AND_OUT
        return AttendanceStatus.LATE_CHECK_OUT
