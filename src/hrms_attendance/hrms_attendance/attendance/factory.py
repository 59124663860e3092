from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from .strategies.base import CheckInContext, CheckInStrategy, CheckOutContext, CheckOutStrategy
from .strategies.late_strategy import LateCheckInStrategy, LateCheckOutStrategy
from .strategies.low_hours_strategy import LowWorkHoursStrategy
from .strategies.normal_strategy import OnTimeStrategy, UnchangedStrategy


def _default_checkin_rules() -> tuple[CheckInStrategy, ...]:
    return (LateCheckInStrategy(), OnTimeStrategy())


def _default_checkout_rules() -> tuple[CheckOutStrategy, ...]:
    # Order is precedence: first match wins.
    return (LowWorkHoursStrategy(), LateCheckOutStrategy(), UnchangedStrategy())


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: pick the first strategy in an ordered rule list that matches."""

    checkin_rules: Sequence[CheckInStrategy] = field(default_factory=_default_checkin_rules)
    checkout_rules: Sequence[CheckOutStrategy] = field(default_factory=_default_checkout_rules)

    def for_checkin(self, ctx: CheckInContext) -> CheckInStrategy:
        for rule in self.checkin_rules:
            if rule.matches(ctx):
                return rule
        raise LookupError("no check-in rule matched")

    def for_checkout(self, ctx: CheckOutContext) -> CheckOutStrategy:
        for rule in self.checkout_rules:
            if rule.matches(ctx):
                return rule
        raise LookupError("no check-out rule matched")
