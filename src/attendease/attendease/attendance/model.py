from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one status for one student, subject and day."""

    record_id: int
    student_id: int
    subject_id: int
    attendance_date: date
    status: AttendanceStatus
    teacher_id: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model feeding the report aggregation (subject name joined in)."""

    student_id: int
    subject_id: int
    subject_name: str
    attendance_date: date
    status: AttendanceStatus


@dataclass(frozen=True)
class AttendanceMark:
    student_id: int
    status: AttendanceStatus
