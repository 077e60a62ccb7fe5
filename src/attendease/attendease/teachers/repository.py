from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..academics.model import Course, SubjectDetail
from .model import Teacher


class TeacherRepository(Protocol):
    def get_by_id(self, teacher_id: str) -> Optional[Teacher]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Teacher]:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError

    def create_teacher(
        self,
        *,
        teacher_id: str,
        name: str,
        email: str,
        password_hash: str,
        department_id: Optional[int],
        subject_ids: Sequence[int] = (),
    ) -> str:
        raise NotImplementedError

    def update_teacher(
        self,
        *,
        teacher_id: str,
        name: str,
        email: str,
        department_id: int,
        subject_ids: Optional[Sequence[int]] = None,
    ) -> bool:
        """Update profile and, when ``subject_ids`` is given, sync assignments in the same transaction."""

        raise NotImplementedError

    def delete_teacher(self, teacher_id: str) -> bool:
        raise NotImplementedError

    def list_admin_view(self) -> Sequence[dict]:
        raise NotImplementedError

    def list_subjects(self, teacher_id: str) -> Sequence[SubjectDetail]:
        raise NotImplementedError

    def list_subject_ids(self, teacher_id: str) -> Sequence[int]:
        raise NotImplementedError

    def list_courses(self, teacher_id: str) -> Sequence[Course]:
        raise NotImplementedError

    def sync_subjects(self, *, teacher_id: str, subject_ids: Sequence[int]) -> None:
        """Replace the teacher's assignments with exactly ``subject_ids`` (all or nothing)."""

        raise NotImplementedError

    def assign_subject(self, *, teacher_id: str, subject_id: int) -> int:
        raise NotImplementedError

    def unassign(self, assignment_id: int) -> bool:
        raise NotImplementedError
