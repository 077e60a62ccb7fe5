from __future__ import annotations

from typing import Optional, Sequence

from ..academics.model import Course, SubjectDetail
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, integrity_errors
from .model import Teacher
from .repository import TeacherRepository

_DUPLICATE_KEYS = {
    "PRIMARY": "Teacher ID already exists.",
    "teachers_email_key": "Email already exists.",
}
_MISSING_PARENT = "The provided teacher, subject or department does not exist."


def _to_teacher(r: dict) -> Teacher:
    return Teacher(
        teacher_id=str(r["teacher_id"]),
        name=r["name"],
        email=r["email"],
        password_hash=r["password_hash"],
        department_id=int(r["department_id"]) if r.get("department_id") is not None else None,
    )


def _replace_subjects(cur, teacher_id: str, subject_ids: Sequence[int]) -> None:
    cur.execute("DELETE FROM teacher_subjects WHERE teacher_id=%s", (teacher_id,))
    if subject_ids:
        cur.executemany(
            "INSERT INTO teacher_subjects(teacher_id, subject_id) VALUES(%s,%s)",
            [(teacher_id, int(subject_id)) for subject_id in subject_ids],
        )


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, teacher_id: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT teacher_id, name, email, password_hash, department_id
                FROM teachers
                WHERE teacher_id=%s
                """,
                (teacher_id,),
            )
            r = fetchone(cur)
            return _to_teacher(r) if r else None

    def get_by_email(self, email: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT teacher_id, name, email, password_hash, department_id
                FROM teachers
                WHERE email=%s
                """,
                (email,),
            )
            r = fetchone(cur)
            return _to_teacher(r) if r else None

    def count_all(self) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM teachers")
            return int(fetchone(cur)["total"])

    def create_teacher(
        self,
        *,
        teacher_id: str,
        name: str,
        email: str,
        password_hash: str,
        department_id: Optional[int],
        subject_ids: Sequence[int] = (),
    ) -> str:
        with integrity_errors(duplicate_keys=_DUPLICATE_KEYS, missing_parent=_MISSING_PARENT), db_cursor(
            self._conn_factory
        ) as (_, cur):
            cur.execute(
                """
                INSERT INTO teachers(teacher_id, name, email, password_hash, department_id)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (teacher_id, name, email, password_hash, department_id),
            )
            if subject_ids:
                _replace_subjects(cur, teacher_id, subject_ids)
            return teacher_id

    def update_teacher(
        self,
        *,
        teacher_id: str,
        name: str,
        email: str,
        department_id: int,
        subject_ids: Optional[Sequence[int]] = None,
    ) -> bool:
        with integrity_errors(duplicate_keys=_DUPLICATE_KEYS, missing_parent=_MISSING_PARENT), db_cursor(
            self._conn_factory
        ) as (_, cur):
            cur.execute("SELECT teacher_id FROM teachers WHERE teacher_id=%s FOR UPDATE", (teacher_id,))
            if not fetchone(cur):
                return False

            cur.execute(
                """
                UPDATE teachers
                SET name=%s, email=%s, department_id=%s
                WHERE teacher_id=%s
                """,
                (name, email, int(department_id), teacher_id),
            )
            if subject_ids is not None:
                _replace_subjects(cur, teacher_id, subject_ids)
            return True

    def delete_teacher(self, teacher_id: str) -> bool:
        with integrity_errors(referenced="Teacher is still referenced and cannot be deleted."), db_cursor(
            self._conn_factory
        ) as (_, cur):
            cur.execute("DELETE FROM teachers WHERE teacher_id=%s", (teacher_id,))
            return cur.rowcount > 0

    def list_admin_view(self) -> Sequence[dict]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT t.teacher_id, t.name, t.email, t.department_id, d.department_name
                FROM teachers t
                LEFT JOIN departments d ON d.department_id = t.department_id
                ORDER BY t.name
                """
            )
            teachers = fetchall(cur)

            cur.execute(
                """
                SELECT ts.assignment_id, ts.teacher_id, s.subject_id, s.subject_name, c.semester
                FROM teacher_subjects ts
                JOIN subjects s ON s.subject_id = ts.subject_id
                JOIN courses c ON c.course_id = s.course_id
                ORDER BY s.subject_name
                """
            )
            by_teacher: dict[str, list[dict]] = {}
            for r in fetchall(cur):
                by_teacher.setdefault(str(r["teacher_id"]), []).append(
                    {
                        "assignment_id": int(r["assignment_id"]),
                        "subject_id": int(r["subject_id"]),
                        "subject_name": r["subject_name"],
                        "semester": int(r["semester"]),
                    }
                )

            return [
                {
                    "teacher_id": str(t["teacher_id"]),
                    "name": t["name"],
                    "email": t["email"],
                    "department_id": t.get("department_id"),
                    "department_name": t.get("department_name") or "-",
                    "subjects": by_teacher.get(str(t["teacher_id"]), []),
                }
                for t in teachers
            ]

    def list_subjects(self, teacher_id: str) -> Sequence[SubjectDetail]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT s.subject_id, s.subject_name, c.course_id, c.semester,
                       p.program_name, d.department_name
                FROM teacher_subjects ts
                JOIN subjects s ON ts.subject_id = s.subject_id
                JOIN courses c ON s.course_id = c.course_id
                JOIN programs p ON c.program_id = p.program_id
                JOIN departments d ON c.department_id = d.department_id
                WHERE ts.teacher_id=%s
                ORDER BY s.subject_name
                """,
                (teacher_id,),
            )
            return [
                SubjectDetail(
                    subject_id=int(r["subject_id"]),
                    subject_name=r["subject_name"],
                    course_id=int(r["course_id"]),
                    semester=int(r["semester"]),
                    program_name=r["program_name"],
                    department_name=r["department_name"],
                )
                for r in fetchall(cur)
            ]

    def list_subject_ids(self, teacher_id: str) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT subject_id FROM teacher_subjects WHERE teacher_id=%s ORDER BY subject_id",
                (teacher_id,),
            )
            return [int(r["subject_id"]) for r in fetchall(cur)]

    def list_courses(self, teacher_id: str) -> Sequence[Course]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT c.course_id, c.program_id, c.department_id, c.semester
                FROM teacher_subjects ts
                JOIN subjects s ON s.subject_id = ts.subject_id
                JOIN courses c ON c.course_id = s.course_id
                WHERE ts.teacher_id=%s
                ORDER BY c.course_id
                """,
                (teacher_id,),
            )
            return [
                Course(
                    course_id=int(r["course_id"]),
                    program_id=int(r["program_id"]),
                    department_id=int(r["department_id"]),
                    semester=int(r["semester"]),
                )
                for r in fetchall(cur)
            ]

    def sync_subjects(self, *, teacher_id: str, subject_ids: Sequence[int]) -> None:
        with integrity_errors(missing_parent=_MISSING_PARENT), db_cursor(self._conn_factory) as (_, cur):
            _replace_subjects(cur, teacher_id, subject_ids)

    def assign_subject(self, *, teacher_id: str, subject_id: int) -> int:
        with integrity_errors(
            duplicate="This teacher is already assigned to this subject.",
            missing_parent="The provided Teacher or Subject ID does not exist.",
        ), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO teacher_subjects(teacher_id, subject_id) VALUES(%s,%s)",
                (teacher_id, int(subject_id)),
            )
            return int(cur.lastrowid)

    def unassign(self, assignment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM teacher_subjects WHERE assignment_id=%s", (int(assignment_id),))
            return cur.rowcount > 0
