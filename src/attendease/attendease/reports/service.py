from __future__ import annotations

import logging
from datetime import date, timedelta

from ..academics.service import CatalogService
from ..attendance.repository import AttendanceRepository
from ..core.constants import DEFAULT_RECENT_DAYS
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from .aggregation import (
    DailyClassReport,
    StatusCounts,
    build_class_range_report,
    build_daily_class_report,
    build_recent_attendance,
    build_student_month_stats,
    empty_daily_class_report,
    tally,
)
from .schemas import ClassRangeQuery, MonthlyReportQuery, StudentStatsQuery, TeacherDashboardQuery

logger = logging.getLogger(__name__)


class ReportService:
    """Read-only use cases: monthly/range reports and dashboard numbers."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        teachers: TeacherRepository,
        catalog: CatalogService,
        *,
        recent_days: int = DEFAULT_RECENT_DAYS,
    ):
        self._attendance = attendance
        self._students = students
        self._teachers = teachers
        self._catalog = catalog
        self._recent_days = recent_days

    def monthly_course_report(self, query: MonthlyReportQuery) -> dict:
        course = self._catalog.require_course(query.course)
        subject_ids = self._catalog.subject_ids_for(course)
        student_ids = [
            s.student_id
            for s in self._students.list_for_course(
                program_id=course.program_id,
                department_id=course.department_id,
                semester=course.semester,
            )
        ]

        if not subject_ids or not student_ids:
            logger.info("Course %s has no students or subjects; skipping attendance query", course.course_id)
            report: DailyClassReport = empty_daily_class_report()
        else:
            start, end = query.bounds
            rows = self._attendance.list_rows(
                start_date=start,
                end_date=end,
                subject_ids=subject_ids,
                student_ids=student_ids,
            )
            report = build_daily_class_report(
                rows,
                subject_ids=subject_ids,
                student_ids=student_ids,
                start_date=start,
                end_date=end,
            )

        program_name, department_name = self._catalog.course_names(course)
        return {
            "studentInfo": {
                "Program": program_name,
                "Department": department_name,
                "Semester": course.semester,
                "Report Period": query.period_label,
                "Total Students": len(student_ids),
            },
            "summary": report.summary,
            "tableData": report.table,
        }

    def class_range_report(self, query: ClassRangeQuery) -> list[dict]:
        course = self._catalog.require_course_for_subject(query.subject_id)
        roster = self._students.list_for_course(
            program_id=course.program_id,
            department_id=course.department_id,
            semester=course.semester,
        )
        if not roster:
            return []
        rows = self._attendance.list_rows(
            start_date=query.start_date,
            end_date=query.end_date,
            subject_ids=[query.subject_id],
            student_ids=[s.student_id for s in roster],
        )
        return build_class_range_report(roster, rows)

    def student_month_stats(self, query: StudentStatsQuery) -> dict:
        start, end = query.bounds
        rows = self._attendance.list_rows(
            start_date=start,
            end_date=end,
            subject_ids=[query.subject_id],
            student_ids=[query.student_id],
        )
        return build_student_month_stats(rows)

    def admin_dashboard_stats(self, day: date) -> dict:
        rows = self._attendance.list_rows(start_date=day, end_date=day)
        bucket = tally(rows).get(None)
        marked = bucket.counts if bucket else StatusCounts()
        present_students = {r.student_id for r in rows if r.status.attended}
        return {
            "totalTeachers": self._teachers.count_all(),
            "totalStudents": self._students.count_all(),
            "presentToday": len(present_students),
            "attendanceRate": marked.percentage,
        }

    def teacher_dashboard_stats(self, query: TeacherDashboardQuery) -> dict:
        subject_ids = list(self._teachers.list_subject_ids(query.teacher_id))
        if not subject_ids:
            return {
                "totalStudents": 0,
                "presentToday": 0,
                "absentToday": 0,
                "lateToday": 0,
                "recentAttendance": [],
            }

        courses = self._teachers.list_courses(query.teacher_id)
        start = query.today - timedelta(days=self._recent_days - 1)
        rows = self._attendance.list_rows(
            start_date=start,
            end_date=query.today,
            subject_ids=subject_ids,
            teacher_id=query.teacher_id,
        )
        today_bucket = tally(r for r in rows if r.attendance_date == query.today).get(None)
        today = today_bucket.counts if today_bucket else StatusCounts()
        return {
            "totalStudents": self._students.count_in_courses(courses),
            "presentToday": today.present,
            "absentToday": today.absent,
            "lateToday": today.late,
            "recentAttendance": build_recent_attendance(rows),
        }
