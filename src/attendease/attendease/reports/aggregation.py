"""Attendance aggregation.

Every report and dashboard reduces raw attendance rows through :func:`tally`
and rates them with :func:`attendance_percentage`, so the three report shapes
can never disagree on rounding:

* daily class report (admin, whole course, one month) grouped by date
* class range report (teacher, one subject, date range) grouped by student
* student month stats (one student, one subject, one month), flat
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Hashable, Iterable, Optional, Sequence

from ..attendance.model import AttendanceRow
from ..common.datetime_utils import weekday_name, weekday_short
from ..core.constants import NO_DATA_MESSAGE
from ..core.enums import AttendanceStatus
from ..students.model import Student


def attendance_percentage(present: int, late: int, total: int) -> int:
    """``round(100 * (present + late) / total)`` with halves rounded up; 0 when total is 0."""

    if total <= 0:
        return 0
    attended = int(present) + int(late)
    return (200 * attended + total) // (2 * total)


@dataclass
class StatusCounts:
    present: int = 0
    absent: int = 0
    late: int = 0

    def add(self, status: AttendanceStatus) -> None:
        if status is AttendanceStatus.PRESENT:
            self.present += 1
        elif status is AttendanceStatus.ABSENT:
            self.absent += 1
        else:
            self.late += 1

    def merge(self, other: "StatusCounts") -> None:
        self.present += other.present
        self.absent += other.absent
        self.late += other.late

    @property
    def total(self) -> int:
        return self.present + self.absent + self.late

    @property
    def percentage(self) -> int:
        return attendance_percentage(self.present, self.late, self.total)


@dataclass
class _Bucket:
    counts: StatusCounts = field(default_factory=StatusCounts)
    subject_names: list[str] = field(default_factory=list)

    def add(self, row: AttendanceRow) -> None:
        self.counts.add(row.status)
        if row.subject_name not in self.subject_names:
            self.subject_names.append(row.subject_name)


def tally(
    rows: Iterable[AttendanceRow],
    key: Optional[Callable[[AttendanceRow], Hashable]] = None,
) -> dict[Hashable, _Bucket]:
    """Group rows by ``key`` and count statuses per group.

    With no key every row lands in the single ``None`` group.
    """

    buckets: dict[Hashable, _Bucket] = {}
    for row in rows:
        k = key(row) if key else None
        bucket = buckets.get(k)
        if bucket is None:
            bucket = _Bucket()
            buckets[k] = bucket
        bucket.add(row)
    return buckets


def by_date(row: AttendanceRow) -> date:
    return row.attendance_date


def by_student(row: AttendanceRow) -> int:
    return row.student_id


@dataclass(frozen=True)
class DailyClassReport:
    table: list[dict]
    summary: dict


def empty_daily_class_report(message: str = NO_DATA_MESSAGE) -> DailyClassReport:
    return DailyClassReport(
        table=[],
        summary={
            "total_days": 0,
            "total_present": 0,
            "total_absent": 0,
            "total_late": 0,
            "average_attendance_percent": 0,
            "message": message,
        },
    )


def build_daily_class_report(
    rows: Iterable[AttendanceRow],
    *,
    subject_ids: Sequence[int],
    student_ids: Sequence[int],
    start_date: date,
    end_date: date,
) -> DailyClassReport:
    """Bucket a course's rows for one month by calendar date."""

    subjects = set(subject_ids)
    students = set(student_ids)
    in_scope = (
        r
        for r in rows
        if r.subject_id in subjects and r.student_id in students and start_date <= r.attendance_date <= end_date
    )

    buckets = tally(in_scope, key=by_date)
    totals = StatusCounts()
    table: list[dict] = []
    for day in sorted(buckets):
        bucket = buckets[day]
        totals.merge(bucket.counts)
        table.append(
            {
                "date": day.isoformat(),
                "day": weekday_name(day),
                "present": bucket.counts.present,
                "absent": bucket.counts.absent,
                "late": bucket.counts.late,
                "subjects": ", ".join(sorted(bucket.subject_names)),
            }
        )

    return DailyClassReport(
        table=table,
        summary={
            "total_days": len(table),
            "total_present": totals.present,
            "total_absent": totals.absent,
            "total_late": totals.late,
            "average_attendance_percent": totals.percentage,
        },
    )


def build_class_range_report(students: Sequence[Student], rows: Iterable[AttendanceRow]) -> list[dict]:
    """One row per enrolled student, roster order kept; unmarked students get zeros."""

    buckets = tally(rows, key=by_student)
    report: list[dict] = []
    for s in students:
        bucket = buckets.get(s.student_id)
        counts = bucket.counts if bucket else StatusCounts()
        report.append(
            {
                "student_id": s.student_id,
                "roll_number": s.roll_number,
                "name": s.name,
                "total_classes": counts.total,
                "total_present": counts.present,
                "total_absent": counts.absent,
                "total_late": counts.late,
                "attendance_percentage": counts.percentage,
            }
        )
    return report


def build_student_month_stats(rows: Sequence[AttendanceRow]) -> dict:
    counts = tally(rows).get(None, _Bucket()).counts
    days = [
        {
            "date": r.attendance_date.isoformat(),
            "day_number": r.attendance_date.day,
            "day": weekday_short(r.attendance_date),
            "status": r.status.value,
        }
        for r in sorted(rows, key=by_date)
    ]
    return {
        "total_days": counts.total,
        "present_days": counts.present,
        "absent_days": counts.absent,
        "late_days": counts.late,
        "attendance_percentage": counts.percentage,
        "days": days,
    }


def build_recent_attendance(rows: Iterable[AttendanceRow]) -> list[dict]:
    """Per-date counts, newest first."""

    buckets = tally(rows, key=by_date)
    return [
        {
            "date": day.isoformat(),
            "present": buckets[day].counts.present,
            "absent": buckets[day].counts.absent,
            "late": buckets[day].counts.late,
        }
        for day in sorted(buckets, reverse=True)
    ]
