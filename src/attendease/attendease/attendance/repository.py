from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceMark, AttendanceRecord, AttendanceRow


class AttendanceRepository(Protocol):
    def list_for_subject_date(self, *, subject_id: int, attendance_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def save_marks(
        self,
        *,
        subject_id: int,
        attendance_date: date,
        teacher_id: str,
        marks: Sequence[AttendanceMark],
    ) -> int:
        """Upsert every mark in one transaction; any failure leaves nothing written."""

        raise NotImplementedError

    def list_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        subject_ids: Optional[Sequence[int]] = None,
        student_ids: Optional[Sequence[int]] = None,
        teacher_id: Optional[str] = None,
    ) -> Sequence[AttendanceRow]:
        """Rows in the inclusive range; a given filter must not be empty."""

        raise NotImplementedError
