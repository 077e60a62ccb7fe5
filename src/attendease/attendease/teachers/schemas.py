from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..common.validators import require_int, require_int_list, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import ValidationError


def _dedupe(ids: list[int]) -> tuple[int, ...]:
    return tuple(dict.fromkeys(ids))


@dataclass(frozen=True)
class TeacherSignupRequest:
    teacher_id: str
    name: str
    email: str
    password: str
    department_name: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "TeacherSignupRequest":
        return cls(
            teacher_id=require_non_empty(data.get("teacherId"), "Teacher ID"),
            name=require_non_empty(data.get("name"), "Name"),
            email=require_non_empty(data.get("email"), "Email").lower(),
            password=require_min_length(data.get("password"), "Password", MIN_PASSWORD_LENGTH),
            department_name=require_non_empty(data.get("department"), "Department"),
        )


@dataclass(frozen=True)
class CreateTeacherRequest:
    """Admin-created teacher; a password is generated when none is given."""

    teacher_id: str
    name: str
    email: str
    password: Optional[str]
    department_id: int
    subject_ids: tuple[int, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "CreateTeacherRequest":
        password = data.get("password") or None
        if password is not None:
            require_min_length(password, "Password", MIN_PASSWORD_LENGTH)
        return cls(
            teacher_id=require_non_empty(data.get("teacher_id"), "Teacher ID"),
            name=require_non_empty(data.get("name"), "Name"),
            email=require_non_empty(data.get("email"), "Email").lower(),
            password=password,
            department_id=require_int(data.get("department_id"), "Department", minimum=1),
            subject_ids=_dedupe(require_int_list(data.get("subject_ids"), "Subject IDs")),
        )


@dataclass(frozen=True)
class UpdateTeacherRequest:
    name: str
    email: str
    department_id: int
    # None leaves assignments untouched; an empty tuple clears them.
    subject_ids: Optional[tuple[int, ...]]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "UpdateTeacherRequest":
        subject_ids = None
        if "subject_ids" in data:
            subject_ids = _dedupe(require_int_list(data.get("subject_ids"), "Subject IDs"))
        return cls(
            name=require_non_empty(data.get("name"), "Name"),
            email=require_non_empty(data.get("email"), "Email").lower(),
            department_id=require_int(data.get("department_id"), "Department", minimum=1),
            subject_ids=subject_ids,
        )


@dataclass(frozen=True)
class AssignSubjectRequest:
    teacher_id: str
    subject_id: int

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AssignSubjectRequest":
        if not data.get("teacher_id") or not data.get("subject_id"):
            raise ValidationError("Teacher ID and Subject ID are both required.")
        return cls(
            teacher_id=require_non_empty(data.get("teacher_id"), "Teacher ID"),
            subject_id=require_int(data.get("subject_id"), "Subject ID", minimum=1),
        )


@dataclass(frozen=True)
class SyncSubjectsRequest:
    """Full target set of a teacher's subjects; an explicit empty list clears them."""

    subject_ids: tuple[int, ...]

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "SyncSubjectsRequest":
        if data.get("subject_ids") is None:
            raise ValidationError("Subject IDs are required.")
        return cls(subject_ids=_dedupe(require_int_list(data.get("subject_ids"), "Subject IDs")))
