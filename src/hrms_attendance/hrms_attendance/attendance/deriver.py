from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time

from ..core.constants import DEFAULT_LOW_WORK_HOURS, DEFAULT_WORK_END, DEFAULT_WORK_START
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .factory import AttendanceStrategyFactory
from .strategies.base import CheckInContext, CheckOutContext, StatusDecision


def compute_work_hours(punch_in: datetime, punch_out: datetime) -> float:
    if punch_out < punch_in:
        raise ValidationError("punch-out cannot be earlier than punch-in")
    return round((punch_out - punch_in).total_seconds() / 3600, 2)


@dataclass
class StatusDeriver:
    """Turn punch instants into the canonical status label and work hours.

    Work window boundaries are wall-clock times on the punch's own calendar day.
    The clock is always passed in; nothing here reads the current time.
    """

    work_start: time = DEFAULT_WORK_START
    work_end: time = DEFAULT_WORK_END
    low_work_hours: float = DEFAULT_LOW_WORK_HOURS
    factory: AttendanceStrategyFactory = field(default_factory=AttendanceStrategyFactory)

    def derive_check_in_status(self, now: datetime) -> AttendanceStatus:
        ctx = CheckInContext(now=now, work_start=datetime.combine(now.date(), self.work_start))
        return self.factory.for_checkin(ctx).decide(ctx)

    def derive_check_out_status(
        self,
        punch_in: datetime,
        punch_out: datetime,
        prior_status: AttendanceStatus,
    ) -> StatusDecision:
        ctx = CheckOutContext(
            punch_in=punch_in,
            punch_out=punch_out,
            prior_status=prior_status,
            work_hours=compute_work_hours(punch_in, punch_out),
            work_end=datetime.combine(punch_out.date(), self.work_end),
            low_work_hours=float(self.low_work_hours),
        )
        status = self.factory.for_checkout(ctx).decide(ctx)
        return StatusDecision(status=status, work_hours=ctx.work_hours)
