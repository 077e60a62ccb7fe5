from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Course, Department, Program, Subject


class AcademicRepository(Protocol):
    """Reference data: programs, departments, courses and their subjects."""

    def list_programs(self) -> Sequence[Program]:
        raise NotImplementedError

    def list_departments(self) -> Sequence[Department]:
        raise NotImplementedError

    def list_semesters(self) -> Sequence[int]:
        raise NotImplementedError

    def get_program_by_name(self, program_name: str) -> Optional[Program]:
        raise NotImplementedError

    def get_department_by_name(self, department_name: str) -> Optional[Department]:
        raise NotImplementedError

    def find_course(self, *, program_id: int, department_id: int, semester: int) -> Optional[Course]:
        raise NotImplementedError

    def get_course_for_subject(self, subject_id: int) -> Optional[Course]:
        raise NotImplementedError

    def list_subjects(self) -> Sequence[Subject]:
        raise NotImplementedError

    def list_course_subjects(self, course_id: int) -> Sequence[Subject]:
        raise NotImplementedError

    def list_subject_names(self, *, program_name: str, department_name: str, semester: int) -> Sequence[str]:
        raise NotImplementedError

    def add_subject_to_course(
        self,
        *,
        program_id: int,
        department_id: int,
        semester: int,
        subject_name: str,
    ) -> Subject:
        """Find-or-create the course and insert the subject in one transaction."""

        raise NotImplementedError

    def delete_subject(self, subject_id: int) -> bool:
        raise NotImplementedError
