from __future__ import annotations

from datetime import date

import pytest

from src.attendease.attendease.core.exceptions import ValidationError
from src.attendease.attendease.reports.schemas import (
    ClassRangeQuery,
    MonthlyReportQuery,
    StudentStatsQuery,
    TeacherDashboardQuery,
    day_from_args,
)


def test_monthly_query_month_is_zero_indexed():
    query = MonthlyReportQuery.from_args({"program_id": "1", "department_id": "2", "semester": "3", "month": "1", "year": "2024"})

    assert query.month == 2
    assert query.bounds == (date(2024, 2, 1), date(2024, 2, 29))
    assert query.period_label == "February 2024"


@pytest.mark.parametrize("month", ["-1", "12", "x", None])
def test_monthly_query_rejects_bad_month(month):
    with pytest.raises(ValidationError):
        MonthlyReportQuery.from_args({"program_id": 1, "department_id": 1, "semester": 1, "month": month, "year": 2025})


def test_student_stats_query_december():
    query = StudentStatsQuery.from_args({"studentId": "5", "subjectId": "9", "month": "11", "year": "2025"})
    assert query.bounds == (date(2025, 12, 1), date(2025, 12, 31))


def test_class_range_query_validation():
    with pytest.raises(ValidationError, match="Subject ID, start date, and end date are required."):
        ClassRangeQuery.from_args({"subjectId": "1", "startDate": "2025-01-01"})
    with pytest.raises(ValidationError, match="Start date must not be after end date."):
        ClassRangeQuery.from_args({"subjectId": "1", "startDate": "2025-02-01", "endDate": "2025-01-01"})


def test_teacher_dashboard_query():
    query = TeacherDashboardQuery.from_args({"teacherId": "T1", "today": "2025-03-04"})
    assert (query.teacher_id, query.today) == ("T1", date(2025, 3, 4))


def test_day_from_args_defaults_to_local_today(monkeypatch):
    monkeypatch.setattr(
        "src.attendease.attendease.reports.schemas.today_local", lambda: date(2030, 1, 1)
    )
    assert day_from_args({}) == date(2030, 1, 1)
    assert day_from_args({"today": "2025-01-05"}) == date(2025, 1, 5)
