from __future__ import annotations

from ...core.enums import AttendanceStatus
from .base import CheckOutContext, CheckOutStrategy


class LowWorkHoursStrategy(CheckOutStrategy):
    """Fewer worked hours than the threshold; dominates any lateness label."""

    def matches(self, ctx: CheckOutContext) -> bool:
        return ctx.work_hours < ctx.low_work_hours

    def decide(self, ctx: CheckOutContext) -> AttendanceStatus:
        return AttendanceStatus.LOW_WORK_HOURS
