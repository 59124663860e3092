from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import CheckInContext, CheckInStrategy, CheckOutContext, CheckOutStrategy


class OnTimeStrategy(CheckInStrategy):
    """Check-in at or before the work start boundary."""

    def matches(self, ctx: CheckInContext) -> bool:
        return ctx.now <= ctx.work_start

    def decide(self, ctx: CheckInContext) -> AttendanceStatus:
        return AttendanceStatus.PRESENT


class UnchangedStrategy(CheckOutStrategy):
    """Fallback: checkout keeps the status assigned at check-in."""

    def matches(self, ctx: CheckOutContext) -> bool:
        return True

    def decide(self, ctx: CheckOutContext) -> AttendanceStatus:
        return ctx.prior_status
