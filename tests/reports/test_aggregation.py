from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

import pytest

from src.attendease.attendease.attendance.model import AttendanceRow
from src.attendease.attendease.core.enums import AttendanceStatus
from src.attendease.attendease.reports.aggregation import (
    StatusCounts,
    attendance_percentage,
    build_class_range_report,
    build_daily_class_report,
    build_recent_attendance,
    build_student_month_stats,
    tally,
)
from src.attendease.attendease.students.model import Student

P, A, L = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE
JAN = (date(2025, 1, 1), date(2025, 1, 31))
NAMES = {10: "Math", 11: "Physics"}


def row(student_id, subject_id, day, status):
    return AttendanceRow(
        student_id=student_id,
        subject_id=subject_id,
        subject_name=NAMES.get(subject_id, f"S{subject_id}"),
        attendance_date=day,
        status=status,
    )


def student(student_id, roll):
    return Student(student_id, f"Name {roll}", f"{roll}@x.io", "h", roll, 1, 1, 1)


def _expected(present, late, total):
    if total == 0:
        return 0
    return int((Decimal(100 * (present + late)) / Decimal(total)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def test_percentage_matches_rounded_ratio_for_all_small_tuples():
    for present in range(0, 9):
        for absent in range(0, 9):
            for late in range(0, 9):
                total = present + absent + late
                assert attendance_percentage(present, late, total) == _expected(present, late, total)


def test_percentage_is_zero_only_without_attendance():
    assert attendance_percentage(0, 0, 0) == 0
    assert attendance_percentage(0, 0, 5) == 0
    assert attendance_percentage(1, 0, 1000) == 0  # 0.1% rounds down
    assert attendance_percentage(1, 0, 200) == 1  # 0.5% rounds up


@pytest.mark.parametrize(
    "present,late,total,expected",
    [(1, 1, 3, 67), (1, 0, 3, 33), (1, 0, 8, 13), (0, 1, 1, 100), (5, 0, 10, 50)],
)
def test_percentage_rounds_half_up(present, late, total, expected):
    assert attendance_percentage(present, late, total) == expected


def test_late_counts_as_attended():
    counts = StatusCounts()
    for s in (P, L, A, L):
        counts.add(s)
    assert (counts.present, counts.absent, counts.late, counts.total) == (1, 1, 2, 4)
    assert counts.percentage == 75


def test_tally_groups_by_key_and_flat():
    rows = [row(100, 10, date(2025, 1, 5), P), row(101, 10, date(2025, 1, 6), A)]

    by_day = tally(rows, key=lambda r: r.attendance_date)
    flat = tally(rows)

    assert set(by_day) == {date(2025, 1, 5), date(2025, 1, 6)}
    assert list(flat) == [None]
    assert flat[None].counts.total == 2


def test_daily_class_report_scenario():
    rows = [
        row(100, 10, date(2025, 1, 5), P),
        row(101, 10, date(2025, 1, 5), A),
        row(100, 11, date(2025, 1, 5), L),
    ]

    report = build_daily_class_report(rows, subject_ids=[10, 11], student_ids=[100, 101], start_date=JAN[0], end_date=JAN[1])

    assert report.table == [
        {
            "date": "2025-01-05",
            "day": "Sunday",
            "present": 1,
            "absent": 1,
            "late": 1,
            "subjects": "Math, Physics",
        }
    ]
    assert report.summary == {
        "total_days": 1,
        "total_present": 1,
        "total_absent": 1,
        "total_late": 1,
        "average_attendance_percent": 67,
    }


def test_daily_class_report_ignores_rows_outside_scope():
    rows = [
        row(100, 10, date(2025, 1, 7), P),
        row(100, 10, date(2025, 1, 3), A),
        row(999, 10, date(2025, 1, 3), P),  # not enrolled
        row(100, 12, date(2025, 1, 3), P),  # other course
        row(100, 10, date(2025, 2, 1), P),  # next month
    ]

    report = build_daily_class_report(rows, subject_ids=[10, 11], student_ids=[100, 101], start_date=JAN[0], end_date=JAN[1])

    assert [r["date"] for r in report.table] == ["2025-01-03", "2025-01-07"]
    assert report.summary["total_days"] == 2
    assert report.summary["average_attendance_percent"] == 50


def test_class_range_report_keeps_roster_order_and_zero_rows():
    roster = [student(2, "R001"), student(1, "R002")]
    rows = [row(1, 10, date(2025, 1, 5), P), row(1, 10, date(2025, 1, 6), L), row(1, 10, date(2025, 1, 7), A)]

    report = build_class_range_report(roster, rows)

    assert [r["roll_number"] for r in report] == ["R001", "R002"]
    assert report[0]["total_classes"] == 0
    assert report[0]["attendance_percentage"] == 0
    assert report[1] == {
        "student_id": 1,
        "roll_number": "R002",
        "name": "Name R002",
        "total_classes": 3,
        "total_present": 1,
        "total_absent": 1,
        "total_late": 1,
        "attendance_percentage": 67,
    }


def test_class_range_footer_sum_is_exact():
    roster = [student(1, "R1"), student(2, "R2")]
    rows = [row(1, 10, date(2025, 1, 5), P), row(2, 10, date(2025, 1, 5), A), row(2, 10, date(2025, 1, 6), L)]

    report = build_class_range_report(roster, rows)

    assert sum(r["total_present"] + r["total_absent"] + r["total_late"] for r in report) == len(rows)


def test_student_month_stats_lists_days_ascending():
    rows = [row(1, 10, date(2025, 1, 9), A), row(1, 10, date(2025, 1, 2), P), row(1, 10, date(2025, 1, 3), L)]

    stats = build_student_month_stats(rows)

    assert stats["total_days"] == 3
    assert (stats["present_days"], stats["absent_days"], stats["late_days"]) == (1, 1, 1)
    assert stats["attendance_percentage"] == 67
    assert [d["day_number"] for d in stats["days"]] == [2, 3, 9]
    assert stats["days"][0] == {"date": "2025-01-02", "day_number": 2, "day": "Thu", "status": "present"}


def test_student_month_stats_without_rows():
    stats = build_student_month_stats([])
    assert stats["total_days"] == 0
    assert stats["attendance_percentage"] == 0
    assert stats["days"] == []


def test_recent_attendance_newest_first():
    rows = [row(1, 10, date(2025, 1, 5), P), row(2, 10, date(2025, 1, 6), A), row(1, 10, date(2025, 1, 6), L)]

    recent = build_recent_attendance(rows)

    assert recent == [
        {"date": "2025-01-06", "present": 0, "absent": 1, "late": 1},
        {"date": "2025-01-05", "present": 1, "absent": 0, "late": 0},
    ]
