from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.validators import parse_semester, require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import ValidationError

_REQUIRED = ("name", "email", "password", "rollNumber", "program", "department", "semester")


@dataclass(frozen=True)
class StudentSignupRequest:
    name: str
    email: str
    password: str
    roll_number: str
    program_name: str
    department_name: str
    semester: int

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "StudentSignupRequest":
        if any(data.get(k) in (None, "") for k in _REQUIRED):
            raise ValidationError("All fields are required.")
        return cls(
            name=require_non_empty(data.get("name"), "Name"),
            email=require_non_empty(data.get("email"), "Email").lower(),
            password=require_min_length(data.get("password"), "Password", MIN_PASSWORD_LENGTH),
            roll_number=require_non_empty(data.get("rollNumber"), "Roll number"),
            program_name=require_non_empty(data.get("program"), "Program"),
            department_name=require_non_empty(data.get("department"), "Department"),
            semester=parse_semester(data.get("semester")),
        )
