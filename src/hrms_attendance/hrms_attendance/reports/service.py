from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.repository import AttendanceRepository
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError

REPORT_COLUMNS = [
    "work_date",
    "employee_id",
    "full_name",
    "username",
    "branch_name",
    "punch_in",
    "punch_out",
    "status",
    "work_hours",
]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: list[dict]

    def to_dict(self) -> dict:
        return {"rows": self.rows, "summary": self.summary}

    def to_csv(self) -> bytes:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_COLUMNS)
        writer.writeheader()
        for row in self.rows:
            writer.writerow(row)
        return out.getvalue().encode("utf-8-sig")


class AttendanceReportService:
    """Date-range attendance report with a per-employee summary."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def build_attendance_report(
        self,
        *,
        start: date,
        end: date,
        employee_id: Optional[int] = None,
        branch_id: Optional[int] = None,
    ) -> ReportData:
        if start > end:
            raise ValidationError("start must not be after end")

        query_rows = self._attendance.get_report_rows(
            start_date=start,
            end_date=end,
            employee_id=employee_id,
            branch_id=branch_id,
        )

        summary_map: dict[int, dict] = {}
        out_rows: list[dict] = []

        for r in query_rows:
            hours = float(r.work_hours or 0.0)
            out_rows.append(
                {
                    "work_date": r.work_date.strftime("%Y-%m-%d"),
                    "employee_id": r.employee_id,
                    "full_name": r.full_name,
                    "username": r.username,
                    "branch_name": r.branch_name or "-",
                    "punch_in": r.punch_in.strftime("%H:%M"),
                    "punch_out": r.punch_out.strftime("%H:%M") if r.punch_out else "-",
                    "status": r.status.value,
                    "work_hours": f"{hours:.2f}",
                }
            )

            s = summary_map.get(r.employee_id)
            if not s:
                s = {
                    "employee_id": r.employee_id,
                    "full_name": r.full_name,
                    "username": r.username,
                    "total_hours": 0.0,
                    "days_present": 0,
                    "late_days": 0,
                    "low_hours_days": 0,
                }
                summary_map[r.employee_id] = s
            s["total_hours"] += hours
            if r.status not in {AttendanceStatus.ABSENT, AttendanceStatus.LEAVE}:
                s["days_present"] += 1
            if r.status.is_late:
                s["late_days"] += 1
            if r.status == AttendanceStatus.LOW_WORK_HOURS:
                s["low_hours_days"] += 1

        summary = sorted(summary_map.values(), key=lambda x: x["total_hours"], reverse=True)
        for s in summary:
            s["total_hours"] = round(s["total_hours"], 2)
        return ReportData(rows=out_rows, summary=summary)
