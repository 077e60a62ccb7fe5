from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

from ..academics.model import SubjectDetail
from ..core.enums import Role


@dataclass(frozen=True)
class Admin:
    admin_id: str
    name: str
    email: str
    password_hash: str


@dataclass(frozen=True)
class AdminSession:
    """What the client keeps after an admin login."""

    admin_id: str
    name: str
    email: str
    role: Role = field(default=Role.ADMIN, init=False)

    def to_json(self) -> dict:
        return {"admin_id": self.admin_id, "name": self.name, "email": self.email, "role": self.role.value}


@dataclass(frozen=True)
class TeacherSession:
    teacher_id: str
    name: str
    email: str
    department_id: Optional[int]
    subjects: tuple[SubjectDetail, ...]
    role: Role = field(default=Role.TEACHER, init=False)

    def to_json(self) -> dict:
        return {
            "teacher_id": self.teacher_id,
            "name": self.name,
            "email": self.email,
            "department_id": self.department_id,
            "subjects": [s.to_json() for s in self.subjects],
            "role": self.role.value,
        }


@dataclass(frozen=True)
class StudentSession:
    student_id: int
    name: str
    email: str
    roll_number: str
    program_id: int
    department_id: int
    semester: int
    program_name: Optional[str]
    department_name: Optional[str]
    role: Role = field(default=Role.STUDENT, init=False)

    def to_json(self) -> dict:
        return {
            "student_id": self.student_id,
            "name": self.name,
            "email": self.email,
            "roll_number": self.roll_number,
            "program_id": self.program_id,
            "department_id": self.department_id,
            "semester": self.semester,
            "program_name": self.program_name,
            "department_name": self.department_name,
            "role": self.role.value,
        }


Session = Union[AdminSession, TeacherSession, StudentSession]
