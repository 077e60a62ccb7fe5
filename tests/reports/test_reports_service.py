from __future__ import annotations

from datetime import date

import pytest

from src.attendease.attendease.academics.schemas import CourseSelector
from src.attendease.attendease.attendance.model import AttendanceMark
from src.attendease.attendease.core.enums import AttendanceStatus
from src.attendease.attendease.core.exceptions import NotFoundError
from src.attendease.attendease.reports.schemas import (
    ClassRangeQuery,
    MonthlyReportQuery,
    StudentStatsQuery,
    TeacherDashboardQuery,
)
from tests.fakes import World

P, A, L = AttendanceStatus.PRESENT, AttendanceStatus.ABSENT, AttendanceStatus.LATE


@pytest.fixture()
def world():
    w = World()
    course = w.academics.add_course(1, 1, 1, course_id=1)
    w.academics.add_subject(course, "Math", subject_id=10)
    w.academics.add_subject(course, "Physics", subject_id=11)
    w.students.add(100, "R100")
    w.students.add(101, "R101")
    return w


def mark(world, subject_id, day, *pairs, teacher_id="T1"):
    world.attendance.save_marks(
        subject_id=subject_id,
        attendance_date=day,
        teacher_id=teacher_id,
        marks=[AttendanceMark(s, status) for s, status in pairs],
    )


def test_monthly_course_report_scenario(world):
    mark(world, 10, date(2025, 1, 5), (100, P), (101, A))
    mark(world, 11, date(2025, 1, 5), (100, L))

    query = MonthlyReportQuery(course=CourseSelector(1, 1, 1), month=1, year=2025)
    report = world.container.report_service.monthly_course_report(query)

    assert report["summary"]["average_attendance_percent"] == 67
    assert report["summary"]["total_days"] == 1
    assert report["tableData"][0]["subjects"] == "Math, Physics"
    assert report["studentInfo"]["Program"] == "B.Tech"
    assert report["studentInfo"]["Report Period"] == "January 2025"
    assert report["studentInfo"]["Total Students"] == 2


def test_monthly_course_report_without_students_skips_attendance_query(world):
    world.students.students.clear()

    query = MonthlyReportQuery(course=CourseSelector(1, 1, 1), month=1, year=2025)
    report = world.container.report_service.monthly_course_report(query)

    assert report["tableData"] == []
    assert report["summary"]["message"] == "No students or subjects found for this course."
    assert report["summary"]["average_attendance_percent"] == 0
    assert world.attendance.queries == []


def test_monthly_course_report_unknown_course_is_not_found(world):
    query = MonthlyReportQuery(course=CourseSelector(1, 2, 7), month=1, year=2025)

    with pytest.raises(NotFoundError):
        world.container.report_service.monthly_course_report(query)


def test_class_range_report_covers_whole_roster(world):
    mark(world, 10, date(2025, 1, 5), (100, P))
    mark(world, 10, date(2025, 1, 6), (100, A))
    mark(world, 10, date(2025, 1, 20), (100, P))  # outside range

    query = ClassRangeQuery(subject_id=10, start_date=date(2025, 1, 1), end_date=date(2025, 1, 10))
    report = world.container.report_service.class_range_report(query)

    assert [r["student_id"] for r in report] == [100, 101]
    assert report[0]["total_classes"] == 2
    assert report[0]["attendance_percentage"] == 50
    assert report[1]["total_classes"] == 0


def test_class_range_report_unknown_subject(world):
    query = ClassRangeQuery(subject_id=999, start_date=date(2025, 1, 1), end_date=date(2025, 1, 10))
    with pytest.raises(NotFoundError):
        world.container.report_service.class_range_report(query)


def test_student_month_stats_scoped_to_student_and_subject(world):
    mark(world, 10, date(2025, 1, 5), (100, P), (101, A))
    mark(world, 10, date(2025, 1, 6), (100, L))
    mark(world, 11, date(2025, 1, 6), (100, A))

    stats = world.container.report_service.student_month_stats(
        StudentStatsQuery(student_id=100, subject_id=10, month=1, year=2025)
    )

    assert stats["total_days"] == 2
    assert stats["attendance_percentage"] == 100
    assert [d["status"] for d in stats["days"]] == ["present", "late"]


def test_admin_dashboard_counts_distinct_attending_students(world):
    world.teachers.create_teacher(teacher_id="T1", name="T", email="t@x.io", password_hash="h", department_id=1)
    day = date(2025, 1, 5)
    mark(world, 10, day, (100, P), (101, A))
    mark(world, 11, day, (100, L))

    stats = world.container.report_service.admin_dashboard_stats(day)

    assert stats == {"totalTeachers": 1, "totalStudents": 2, "presentToday": 1, "attendanceRate": 67}


def test_teacher_dashboard_without_subjects_is_all_zero(world):
    world.teachers.create_teacher(teacher_id="T1", name="T", email="t@x.io", password_hash="h", department_id=1)

    stats = world.container.report_service.teacher_dashboard_stats(TeacherDashboardQuery("T1", date(2025, 1, 5)))

    assert stats == {"totalStudents": 0, "presentToday": 0, "absentToday": 0, "lateToday": 0, "recentAttendance": []}
    assert world.attendance.queries == []


def test_teacher_dashboard_today_and_recent(world):
    world.teachers.create_teacher(
        teacher_id="T1", name="T", email="t@x.io", password_hash="h", department_id=1, subject_ids=[10]
    )
    mark(world, 10, date(2025, 1, 5), (100, P), (101, L))
    mark(world, 10, date(2025, 1, 3), (100, A))
    mark(world, 10, date(2024, 12, 31), (100, A))  # older than five days
    mark(world, 10, date(2025, 1, 5), (100, P), teacher_id="T2")  # re-marked by someone else

    stats = world.container.report_service.teacher_dashboard_stats(TeacherDashboardQuery("T1", date(2025, 1, 5)))

    assert stats["totalStudents"] == 2
    assert (stats["presentToday"], stats["absentToday"], stats["lateToday"]) == (0, 0, 1)
    assert [r["date"] for r in stats["recentAttendance"]] == ["2025-01-05", "2025-01-03"]
