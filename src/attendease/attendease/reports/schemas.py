from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from ..academics.schemas import CourseSelector
from ..common.datetime_utils import month_bounds, today_local
from ..common.validators import require_date, require_int, require_non_empty
from ..core.exceptions import ValidationError


def _month_and_year(args: Mapping[str, Any]) -> tuple[int, int]:
    # Clients send JavaScript month numbers (January is 0).
    month = require_int(args.get("month"), "Month", minimum=0, maximum=11)
    year = require_int(args.get("year"), "Year", minimum=1900, maximum=9999)
    return month + 1, year


@dataclass(frozen=True)
class MonthlyReportQuery:
    course: CourseSelector
    month: int
    year: int

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "MonthlyReportQuery":
        month, year = _month_and_year(args)
        return cls(course=CourseSelector.from_args(args), month=month, year=year)

    @property
    def bounds(self) -> tuple[date, date]:
        return month_bounds(self.year, self.month)

    @property
    def period_label(self) -> str:
        return date(self.year, self.month, 1).strftime("%B %Y")


@dataclass(frozen=True)
class ClassRangeQuery:
    subject_id: int
    start_date: date
    end_date: date

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "ClassRangeQuery":
        if not args.get("subjectId") or not args.get("startDate") or not args.get("endDate"):
            raise ValidationError("Subject ID, start date, and end date are required.")
        start = require_date(args.get("startDate"), "Start date")
        end = require_date(args.get("endDate"), "End date")
        if start > end:
            raise ValidationError("Start date must not be after end date.")
        return cls(
            subject_id=require_int(args.get("subjectId"), "Subject ID", minimum=1),
            start_date=start,
            end_date=end,
        )


@dataclass(frozen=True)
class StudentStatsQuery:
    student_id: int
    subject_id: int
    month: int
    year: int

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "StudentStatsQuery":
        month, year = _month_and_year(args)
        return cls(
            student_id=require_int(args.get("studentId"), "Student ID", minimum=1),
            subject_id=require_int(args.get("subjectId"), "Subject ID", minimum=1),
            month=month,
            year=year,
        )

    @property
    def bounds(self) -> tuple[date, date]:
        return month_bounds(self.year, self.month)


@dataclass(frozen=True)
class TeacherDashboardQuery:
    teacher_id: str
    today: date

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "TeacherDashboardQuery":
        if not args.get("teacherId") or not args.get("today"):
            raise ValidationError("Teacher ID and today's date are required.")
        return cls(
            teacher_id=require_non_empty(args.get("teacherId"), "Teacher ID"),
            today=require_date(args.get("today"), "Today"),
        )


def day_from_args(args: Mapping[str, Any]) -> date:
    """``today`` query argument, falling back to the server's local date."""

    raw = args.get("today")
    if not raw:
        return today_local()
    return require_date(raw, "Today")
