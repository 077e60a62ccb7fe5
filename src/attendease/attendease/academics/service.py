from __future__ import annotations

import logging
from typing import Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Course, Subject
from .repository import AcademicRepository
from .schemas import AddSubjectRequest, CourseSelector

logger = logging.getLogger(__name__)


class CatalogService:
    """Use cases over programs, departments, courses and subjects."""

    def __init__(self, academics: AcademicRepository):
        self._academics = academics

    def program_names(self) -> list[str]:
        return [p.program_name for p in self._academics.list_programs()]

    def department_names(self) -> list[str]:
        return [d.department_name for d in self._academics.list_departments()]

    def departments(self) -> list[dict]:
        return [{"id": d.department_id, "name": d.department_name} for d in self._academics.list_departments()]

    def semester_labels(self) -> list[str]:
        return [f"Semester {s}" for s in self._academics.list_semesters()]

    def subjects(self) -> list[dict]:
        return [{"id": s.subject_id, "name": s.subject_name} for s in self._academics.list_subjects()]

    def subject_names_for(self, *, program_name: str, department_name: str, semester: int) -> Sequence[str]:
        return self._academics.list_subject_names(
            program_name=program_name,
            department_name=department_name,
            semester=int(semester),
        )

    def course_subjects(self, selector: CourseSelector) -> list[dict]:
        # A course row only exists once its first subject is added.
        course = self._academics.find_course(
            program_id=selector.program_id,
            department_id=selector.department_id,
            semester=selector.semester,
        )
        if not course:
            return []
        return [
            {"id": s.subject_id, "name": s.subject_name, "course_id": s.course_id}
            for s in self._academics.list_course_subjects(course.course_id)
        ]

    def require_course(self, selector: CourseSelector) -> Course:
        course = self._academics.find_course(
            program_id=selector.program_id,
            department_id=selector.department_id,
            semester=selector.semester,
        )
        if not course:
            raise NotFoundError("Course not found for the selected program, department and semester.")
        return course

    def require_course_for_subject(self, subject_id: int) -> Course:
        course = self._academics.get_course_for_subject(int(subject_id))
        if not course:
            raise NotFoundError("Course not found for this subject.")
        return course

    def resolve_program_id(self, program_name: str) -> int:
        program = self._academics.get_program_by_name(require_non_empty(program_name, "Program"))
        if not program:
            raise ValidationError("Invalid program selected.")
        return program.program_id

    def resolve_department_id(self, department_name: str) -> int:
        department = self._academics.get_department_by_name(require_non_empty(department_name, "Department"))
        if not department:
            raise ValidationError("Invalid department selected.")
        return department.department_id

    def add_subject_to_course(self, req: AddSubjectRequest) -> Subject:
        subject = self._academics.add_subject_to_course(
            program_id=req.course.program_id,
            department_id=req.course.department_id,
            semester=req.course.semester,
            subject_name=req.subject_name,
        )
        logger.info("Added subject %s (%s) to course %s", subject.subject_id, subject.subject_name, subject.course_id)
        return subject

    def delete_subject(self, subject_id: int) -> None:
        if not self._academics.delete_subject(int(subject_id)):
            raise NotFoundError("Subject not found.")
        logger.info("Deleted subject %s", subject_id)

    def subject_ids_for(self, course: Course) -> list[int]:
        return [s.subject_id for s in self._academics.list_course_subjects(course.course_id)]

    def course_names(self, course: Course) -> tuple[str, str]:
        programs = {p.program_id: p.program_name for p in self._academics.list_programs()}
        departments = {d.department_id: d.department_name for d in self._academics.list_departments()}
        return (
            programs.get(course.program_id, str(course.program_id)),
            departments.get(course.department_id, str(course.department_id)),
        )
