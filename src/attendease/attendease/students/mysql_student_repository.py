from __future__ import annotations

from typing import Optional, Sequence

from ..academics.model import Course
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, integrity_errors
from .model import Student
from .repository import StudentRepository

_SELECT = """
    SELECT s.student_id, s.name, s.email, s.password_hash, s.roll_number,
           s.program_id, s.department_id, s.semester,
           p.program_name, d.department_name
    FROM students s
    LEFT JOIN programs p ON s.program_id = p.program_id
    LEFT JOIN departments d ON s.department_id = d.department_id
"""


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["student_id"]),
        name=r["name"],
        email=r["email"],
        password_hash=r["password_hash"],
        roll_number=str(r["roll_number"]),
        program_id=int(r["program_id"]),
        department_id=int(r["department_id"]),
        semester=int(r["semester"]),
        program_name=r.get("program_name"),
        department_name=r.get("department_name"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE s.email=%s", (email,))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM students")
            return int(fetchone(cur)["total"])

    def create_student(
        self,
        *,
        name: str,
        email: str,
        password_hash: str,
        roll_number: str,
        program_id: int,
        department_id: int,
        semester: int,
    ) -> int:
        with integrity_errors(
            duplicate_keys={
                "students_email_key": "Email already exists.",
                "students_roll_number_key": "Roll number already exists.",
            },
            duplicate="Email or roll number already exists.",
            missing_parent="Invalid program or department selected.",
        ), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO students(name, email, password_hash, roll_number, program_id, department_id, semester)
                VALUES(%s,%s,%s,%s,%s,%s,%s)
                """,
                (name, email, password_hash, roll_number, int(program_id), int(department_id), int(semester)),
            )
            return int(cur.lastrowid)

    def list_for_course(self, *, program_id: int, department_id: int, semester: int) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT
                + """
                WHERE s.program_id=%s AND s.department_id=%s AND s.semester=%s
                ORDER BY s.roll_number
                """,
                (int(program_id), int(department_id), int(semester)),
            )
            return [_to_student(r) for r in fetchall(cur)]

    def count_in_courses(self, courses: Sequence[Course]) -> int:
        if not courses:
            return 0
        clauses = " OR ".join(["(program_id=%s AND department_id=%s AND semester=%s)"] * len(courses))
        params: list[object] = []
        for c in courses:
            params.extend([c.program_id, c.department_id, c.semester])

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(DISTINCT student_id) AS total FROM students WHERE {clauses}", tuple(params))
            return int(fetchone(cur)["total"])
