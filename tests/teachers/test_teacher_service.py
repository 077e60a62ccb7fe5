from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from src.attendease.attendease.core.exceptions import ConflictError, NotFoundError, ValidationError
from src.attendease.attendease.teachers.schemas import (
    AssignSubjectRequest,
    CreateTeacherRequest,
    TeacherSignupRequest,
    UpdateTeacherRequest,
)
from src.attendease.attendease.teachers.service import generate_password
from tests.fakes import World


@pytest.fixture()
def world():
    w = World()
    course = w.academics.add_course(1, 1, 1)
    for sid, name in ((10, "Math"), (11, "Physics"), (12, "Chemistry")):
        w.academics.add_subject(course, name, subject_id=sid)
    return w


def create(world, teacher_id="T1", **extra):
    body = {"teacher_id": teacher_id, "name": "Ada", "email": f"{teacher_id}@x.io", "department_id": 1}
    body.update(extra)
    return world.container.teacher_service.create(CreateTeacherRequest.from_json(body))


def test_signup_resolves_department_and_hashes_password(world):
    req = TeacherSignupRequest.from_json(
        {"teacherId": "T9", "name": "Bo", "email": "BO@X.IO", "password": "secret1", "department": "Electronics"}
    )

    world.container.teacher_service.signup(req)

    teacher = world.teachers.get_by_id("T9")
    assert teacher.department_id == 2
    assert teacher.email == "bo@x.io"
    assert check_password_hash(teacher.password_hash, "secret1")


def test_signup_with_unknown_department(world):
    req = TeacherSignupRequest.from_json(
        {"teacherId": "T9", "name": "Bo", "email": "b@x.io", "password": "secret1", "department": "Nope"}
    )
    with pytest.raises(ValidationError):
        world.container.teacher_service.signup(req)


def test_create_generates_password_when_missing(world):
    created = create(world, subject_ids=[10, 10, 11])

    assert created.generated_password
    assert check_password_hash(world.teachers.get_by_id("T1").password_hash, created.generated_password)
    assert sorted(world.teachers.list_subject_ids("T1")) == [10, 11]


def test_create_duplicate_id(world):
    create(world)
    with pytest.raises(ConflictError, match="Teacher ID already exists."):
        create(world, email="other@x.io")


def test_sync_replaces_exactly_and_is_idempotent(world):
    create(world, subject_ids=[10])
    svc = world.container.teacher_service

    svc.sync_subjects("T1", [11, 12, 11])
    first = sorted(world.teachers.list_subject_ids("T1"))
    svc.sync_subjects("T1", [11, 12])

    assert first == sorted(world.teachers.list_subject_ids("T1")) == [11, 12]


def test_sync_with_invalid_subject_keeps_prior_set(world):
    create(world, subject_ids=[10])

    with pytest.raises(NotFoundError):
        world.container.teacher_service.sync_subjects("T1", [11, 999])

    assert world.teachers.list_subject_ids("T1") == [10]


def test_sync_unknown_teacher(world):
    with pytest.raises(NotFoundError, match="Teacher not found."):
        world.container.teacher_service.sync_subjects("nobody", [10])


def test_update_without_subject_ids_keeps_assignments(world):
    create(world, subject_ids=[10])
    req = UpdateTeacherRequest.from_json({"name": "Ada L", "email": "ada@x.io", "department_id": 2})

    world.container.teacher_service.update("T1", req)

    assert world.teachers.get_by_id("T1").name == "Ada L"
    assert world.teachers.list_subject_ids("T1") == [10]


def test_update_with_empty_subject_ids_clears_them(world):
    create(world, subject_ids=[10])
    req = UpdateTeacherRequest.from_json({"name": "Ada", "email": "ada@x.io", "department_id": 1, "subject_ids": []})

    world.container.teacher_service.update("T1", req)

    assert world.teachers.list_subject_ids("T1") == []


def test_update_missing_teacher(world):
    req = UpdateTeacherRequest.from_json({"name": "A", "email": "a@x.io", "department_id": 1})
    with pytest.raises(NotFoundError):
        world.container.teacher_service.update("ghost", req)


def test_assign_then_assign_again_conflicts(world):
    create(world)
    svc = world.container.teacher_service
    assignment_id = svc.assign(AssignSubjectRequest.from_json({"teacher_id": "T1", "subject_id": "10"}))

    with pytest.raises(ConflictError, match="already assigned"):
        svc.assign(AssignSubjectRequest(teacher_id="T1", subject_id=10))

    svc.unassign(assignment_id)
    with pytest.raises(NotFoundError, match="Assignment not found."):
        svc.unassign(assignment_id)


def test_assign_request_requires_both_ids():
    with pytest.raises(ValidationError, match="Teacher ID and Subject ID are both required."):
        AssignSubjectRequest.from_json({"teacher_id": "T1"})


def test_delete_teacher(world):
    create(world, subject_ids=[10])
    world.container.teacher_service.delete("T1")

    assert world.teachers.get_by_id("T1") is None
    assert world.teachers.assignments == {}
    with pytest.raises(NotFoundError):
        world.container.teacher_service.delete("T1")


def test_generate_password_shape():
    password = generate_password()
    assert len(password) == 8
    assert password.isalnum()
