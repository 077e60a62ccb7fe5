from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, integrity_errors
from .model import Course, Department, Program, Subject
from .repository import AcademicRepository


def _to_course(r: dict) -> Course:
    return Course(
        course_id=int(r["course_id"]),
        program_id=int(r["program_id"]),
        department_id=int(r["department_id"]),
        semester=int(r["semester"]),
    )


def _to_subject(r: dict) -> Subject:
    return Subject(subject_id=int(r["subject_id"]), subject_name=r["subject_name"], course_id=int(r["course_id"]))


class MySQLAcademicRepository(AcademicRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_programs(self) -> Sequence[Program]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT program_id, program_name FROM programs ORDER BY program_id")
            return [Program(program_id=int(r["program_id"]), program_name=r["program_name"]) for r in fetchall(cur)]

    def list_departments(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department_id, department_name FROM departments ORDER BY department_id")
            return [
                Department(department_id=int(r["department_id"]), department_name=r["department_name"])
                for r in fetchall(cur)
            ]

    def list_semesters(self) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT DISTINCT semester FROM courses ORDER BY semester")
            return [int(r["semester"]) for r in fetchall(cur)]

    def get_program_by_name(self, program_name: str) -> Optional[Program]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT program_id, program_name FROM programs WHERE program_name=%s", (program_name,))
            r = fetchone(cur)
            return Program(program_id=int(r["program_id"]), program_name=r["program_name"]) if r else None

    def get_department_by_name(self, department_name: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT department_id, department_name FROM departments WHERE department_name=%s",
                (department_name,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Department(department_id=int(r["department_id"]), department_name=r["department_name"])

    def find_course(self, *, program_id: int, department_id: int, semester: int) -> Optional[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT course_id, program_id, department_id, semester
                FROM courses
                WHERE program_id=%s AND department_id=%s AND semester=%s
                """,
                (int(program_id), int(department_id), int(semester)),
            )
            r = fetchone(cur)
            return _to_course(r) if r else None

    def get_course_for_subject(self, subject_id: int) -> Optional[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.course_id, c.program_id, c.department_id, c.semester
                FROM subjects s
                JOIN courses c ON s.course_id = c.course_id
                WHERE s.subject_id=%s
                """,
                (int(subject_id),),
            )
            r = fetchone(cur)
            return _to_course(r) if r else None

    def list_subjects(self) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT subject_id, subject_name, course_id FROM subjects ORDER BY course_id, subject_name")
            return [_to_subject(r) for r in fetchall(cur)]

    def list_course_subjects(self, course_id: int) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT subject_id, subject_name, course_id
                FROM subjects
                WHERE course_id=%s
                ORDER BY subject_name
                """,
                (int(course_id),),
            )
            return [_to_subject(r) for r in fetchall(cur)]

    def list_subject_names(self, *, program_name: str, department_name: str, semester: int) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.subject_name
                FROM subjects s
                JOIN courses c ON s.course_id = c.course_id
                JOIN programs p ON c.program_id = p.program_id
                JOIN departments d ON c.department_id = d.department_id
                WHERE p.program_name=%s AND d.department_name=%s AND c.semester=%s
                ORDER BY s.subject_name
                """,
                (program_name, department_name, int(semester)),
            )
            return [r["subject_name"] for r in fetchall(cur)]

    def add_subject_to_course(
        self,
        *,
        program_id: int,
        department_id: int,
        semester: int,
        subject_name: str,
    ) -> Subject:
        with integrity_errors(
            duplicate_keys={"subjects_course_name_key": "Subject already exists for this course."},
            missing_parent="Program or department does not exist.",
        ), db_cursor(self._conn_factory) as (_, cur):
            # Find-or-create in one statement; LAST_INSERT_ID(expr) reports the existing id on a duplicate.
            cur.execute(
                """
                INSERT INTO courses(program_id, department_id, semester) VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE course_id=LAST_INSERT_ID(course_id)
                """,
                (int(program_id), int(department_id), int(semester)),
            )
            course_id = int(cur.lastrowid)

            cur.execute(
                "INSERT INTO subjects(subject_name, course_id) VALUES(%s,%s)",
                (subject_name, course_id),
            )
            return Subject(subject_id=int(cur.lastrowid), subject_name=subject_name, course_id=course_id)

    def delete_subject(self, subject_id: int) -> bool:
        with integrity_errors(
            referenced="Subject is assigned to a teacher or has attendance records and cannot be deleted.",
        ), db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM subjects WHERE subject_id=%s", (int(subject_id),))
            return cur.rowcount > 0
