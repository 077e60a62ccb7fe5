from __future__ import annotations

import logging
from typing import Sequence

from werkzeug.security import generate_password_hash

from ..academics.model import Course
from ..academics.service import CatalogService
from .model import Student
from .repository import StudentRepository
from .schemas import StudentSignupRequest

logger = logging.getLogger(__name__)


class StudentService:
    def __init__(self, students: StudentRepository, catalog: CatalogService):
        self._students = students
        self._catalog = catalog

    def signup(self, req: StudentSignupRequest) -> int:
        program_id = self._catalog.resolve_program_id(req.program_name)
        department_id = self._catalog.resolve_department_id(req.department_name)

        student_id = self._students.create_student(
            name=req.name,
            email=req.email,
            password_hash=generate_password_hash(req.password),
            roll_number=req.roll_number,
            program_id=program_id,
            department_id=department_id,
            semester=req.semester,
        )
        logger.info("Student %s signed up (roll %s)", student_id, req.roll_number)
        return student_id

    def roster(self, course: Course) -> Sequence[Student]:
        return self._students.list_for_course(
            program_id=course.program_id,
            department_id=course.department_id,
            semester=course.semester,
        )

    def roster_for_subject(self, subject_id: int) -> Sequence[Student]:
        return self.roster(self._catalog.require_course_for_subject(subject_id))
