from __future__ import annotations

import logging
import secrets
import string
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import generate_password_hash

from ..academics.model import SubjectDetail
from ..academics.service import CatalogService
from ..core.exceptions import NotFoundError
from .repository import TeacherRepository
from .schemas import AssignSubjectRequest, CreateTeacherRequest, TeacherSignupRequest, UpdateTeacherRequest

logger = logging.getLogger(__name__)

_PASSWORD_ALPHABET = string.ascii_letters + string.digits


def generate_password(length: int = 8) -> str:
    return "".join(secrets.choice(_PASSWORD_ALPHABET) for _ in range(length))


@dataclass(frozen=True)
class CreatedTeacher:
    teacher_id: str
    # Only set when the password was generated for the admin to hand over.
    generated_password: Optional[str]


class TeacherService:
    """Use cases: teacher accounts and teacher/subject assignments."""

    def __init__(self, teachers: TeacherRepository, catalog: CatalogService):
        self._teachers = teachers
        self._catalog = catalog

    def signup(self, req: TeacherSignupRequest) -> str:
        department_id = self._catalog.resolve_department_id(req.department_name)
        teacher_id = self._teachers.create_teacher(
            teacher_id=req.teacher_id,
            name=req.name,
            email=req.email,
            password_hash=generate_password_hash(req.password),
            department_id=department_id,
        )
        logger.info("Teacher %s signed up", teacher_id)
        return teacher_id

    def create(self, req: CreateTeacherRequest) -> CreatedTeacher:
        generated = None if req.password else generate_password()
        teacher_id = self._teachers.create_teacher(
            teacher_id=req.teacher_id,
            name=req.name,
            email=req.email,
            password_hash=generate_password_hash(req.password or generated),
            department_id=req.department_id,
            subject_ids=req.subject_ids,
        )
        logger.info("Teacher %s created with %d subjects", teacher_id, len(req.subject_ids))
        return CreatedTeacher(teacher_id=teacher_id, generated_password=generated)

    def update(self, teacher_id: str, req: UpdateTeacherRequest) -> None:
        updated = self._teachers.update_teacher(
            teacher_id=teacher_id,
            name=req.name,
            email=req.email,
            department_id=req.department_id,
            subject_ids=req.subject_ids,
        )
        if not updated:
            raise NotFoundError("Teacher not found.")
        logger.info("Teacher %s updated", teacher_id)

    def delete(self, teacher_id: str) -> None:
        if not self._teachers.delete_teacher(teacher_id):
            raise NotFoundError("Teacher not found.")
        logger.info("Teacher %s deleted", teacher_id)

    def list_admin_view(self) -> Sequence[dict]:
        return self._teachers.list_admin_view()

    def subjects(self, teacher_id: str) -> Sequence[SubjectDetail]:
        return self._teachers.list_subjects(teacher_id)

    def sync_subjects(self, teacher_id: str, subject_ids: Sequence[int]) -> None:
        if not self._teachers.get_by_id(teacher_id):
            raise NotFoundError("Teacher not found.")
        target = list(dict.fromkeys(int(s) for s in subject_ids))
        self._teachers.sync_subjects(teacher_id=teacher_id, subject_ids=target)
        logger.info("Synced %d subjects for teacher %s", len(target), teacher_id)

    def assign(self, req: AssignSubjectRequest) -> int:
        assignment_id = self._teachers.assign_subject(teacher_id=req.teacher_id, subject_id=req.subject_id)
        logger.info("Assigned subject %s to teacher %s (%s)", req.subject_id, req.teacher_id, assignment_id)
        return assignment_id

    def unassign(self, assignment_id: int) -> None:
        if not self._teachers.unassign(int(assignment_id)):
            raise NotFoundError("Assignment not found.")
        logger.info("Removed assignment %s", assignment_id)
