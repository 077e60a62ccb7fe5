from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.validators import require_int, require_non_empty


@dataclass(frozen=True)
class CourseSelector:
    program_id: int
    department_id: int
    semester: int

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "CourseSelector":
        return cls(
            program_id=require_int(args.get("program_id"), "Program", minimum=1),
            department_id=require_int(args.get("department_id"), "Department", minimum=1),
            semester=require_int(args.get("semester"), "Semester", minimum=1),
        )


@dataclass(frozen=True)
class AddSubjectRequest:
    course: CourseSelector
    subject_name: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AddSubjectRequest":
        return cls(
            course=CourseSelector.from_args(data),
            subject_name=require_non_empty(data.get("subject_name"), "Subject name"),
        )
