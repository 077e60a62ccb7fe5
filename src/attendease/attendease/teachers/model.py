from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Teacher:
    teacher_id: str
    name: str
    email: str
    password_hash: str
    department_id: Optional[int]
