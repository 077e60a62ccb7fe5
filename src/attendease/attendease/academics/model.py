from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Program:
    program_id: int
    program_name: str


@dataclass(frozen=True)
class Department:
    department_id: int
    department_name: str


@dataclass(frozen=True)
class Course:
    """A (program, department, semester) slot; unique per triple."""

    course_id: int
    program_id: int
    department_id: int
    semester: int


@dataclass(frozen=True)
class Subject:
    subject_id: int
    subject_name: str
    course_id: int


@dataclass(frozen=True)
class SubjectDetail:
    """Read-model: subject resolved to its course's program/department/semester."""

    subject_id: int
    subject_name: str
    course_id: int
    semester: int
    program_name: str
    department_name: str

    def to_json(self) -> dict:
        return {
            "subject_id": self.subject_id,
            "subject_name": self.subject_name,
            "course_id": self.course_id,
            "semester": self.semester,
            "program_name": self.program_name,
            "department_name": self.department_name,
        }
