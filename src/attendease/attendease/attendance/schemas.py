from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from ..common.validators import require_date, require_int, require_non_empty
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .model import AttendanceMark


def parse_status(value: Any) -> AttendanceStatus:
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Invalid attendance status: {value!r}.")


@dataclass(frozen=True)
class SubjectDateQuery:
    subject_id: int
    attendance_date: date

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "SubjectDateQuery":
        if not args.get("subjectId") or not args.get("date"):
            raise ValidationError("Subject ID and date are required.")
        return cls(
            subject_id=require_int(args.get("subjectId"), "Subject ID", minimum=1),
            attendance_date=require_date(args.get("date"), "Date"),
        )


@dataclass(frozen=True)
class SaveAttendanceRequest:
    subject_id: int
    attendance_date: date
    teacher_id: str
    marks: tuple[AttendanceMark, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "SaveAttendanceRequest":
        entries = data.get("attendance")
        if not data.get("subjectId") or not data.get("date") or not data.get("teacherId") or not isinstance(entries, list):
            raise ValidationError("Missing required data.")

        # Unmarked students arrive without a status and are not written.
        by_student: dict[int, AttendanceMark] = {}
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise ValidationError("Each attendance entry must be an object.")
            if entry.get("status") in (None, ""):
                continue
            student_id = require_int(entry.get("student_id"), "Student ID", minimum=1)
            by_student[student_id] = AttendanceMark(student_id=student_id, status=parse_status(entry["status"]))

        if not by_student:
            raise ValidationError("Missing required data.")

        return cls(
            subject_id=require_int(data.get("subjectId"), "Subject ID", minimum=1),
            attendance_date=require_date(data.get("date"), "Date"),
            teacher_id=require_non_empty(data.get("teacherId"), "Teacher ID"),
            marks=tuple(by_student.values()),
        )
