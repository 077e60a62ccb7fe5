from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from src.attendease.attendease.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.attendease.attendease.students.schemas import StudentSignupRequest
from tests.fakes import World

SIGNUP = {
    "name": "Ravi",
    "email": "Ravi@Example.com",
    "password": "secret1",
    "rollNumber": "2025042",
    "program": "B.Tech",
    "department": "Computer Science",
    "semester": "Semester 2",
}


@pytest.fixture()
def world():
    return World()


def test_signup_parses_semester_label_and_resolves_names(world):
    student_id = world.container.student_service.signup(StudentSignupRequest.from_json(SIGNUP))

    student = world.students.students[student_id]
    assert (student.program_id, student.department_id, student.semester) == (1, 1, 2)
    assert student.email == "ravi@example.com"
    assert check_password_hash(student.password_hash, "secret1")


@pytest.mark.parametrize("semester,expected", [(4, 4), ("4", 4), ("Semester 7", 7)])
def test_semester_forms(semester, expected):
    assert StudentSignupRequest.from_json({**SIGNUP, "semester": semester}).semester == expected


def test_signup_requires_every_field():
    with pytest.raises(ValidationError, match="All fields are required."):
        StudentSignupRequest.from_json({**SIGNUP, "rollNumber": ""})


def test_signup_with_unknown_program(world):
    with pytest.raises(ValidationError, match="Invalid program selected."):
        world.container.student_service.signup(StudentSignupRequest.from_json({**SIGNUP, "program": "PhD"}))


def test_duplicate_roll_number(world):
    svc = world.container.student_service
    svc.signup(StudentSignupRequest.from_json(SIGNUP))

    with pytest.raises(ConflictError, match="Roll number already exists."):
        svc.signup(StudentSignupRequest.from_json({**SIGNUP, "email": "other@example.com"}))


def test_roster_for_subject_is_course_students_by_roll(world):
    course = world.academics.add_course(1, 1, 1)
    world.academics.add_subject(course, "Math", subject_id=10)
    world.students.add(2, "R2")
    world.students.add(1, "R1")
    world.students.add(3, "R3", semester=2)

    roster = world.container.student_service.roster_for_subject(10)

    assert [s.roll_number for s in roster] == ["R1", "R2"]


def test_roster_for_unknown_subject(world):
    with pytest.raises(NotFoundError, match="Course not found for this subject."):
        world.container.student_service.roster_for_subject(404)
