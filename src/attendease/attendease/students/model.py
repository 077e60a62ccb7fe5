from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Student:
    student_id: int
    name: str
    email: str
    password_hash: str
    roll_number: str
    program_id: int
    department_id: int
    semester: int
    program_name: Optional[str] = None
    department_name: Optional[str] = None

    def to_public_json(self) -> dict:
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
        }
