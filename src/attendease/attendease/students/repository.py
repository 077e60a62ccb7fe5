from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..academics.model import Course
from .model import Student


class StudentRepository(Protocol):
    def get_by_email(self, email: str) -> Optional[Student]:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError

    def create_student(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        roll_number: str,
        program_id: int,
        department_id: int,
        semester: int,
    ) -> int:
        raise NotImplementedError

    def list_for_course(self, *, program_id: int, department_id: int, semester: int) -> Sequence[Student]:
        """Enrolled students of a course ordered by roll number."""

        raise NotImplementedError

    def count_in_courses(self, courses: Sequence[Course]) -> int:
        raise NotImplementedError
