from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, in_clause, integrity_errors
from .model import AttendanceMark, AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_subject_date(self, *, subject_id: int, attendance_date: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, student_id, subject_id, attendance_date, status, teacher_id
                FROM attendance_records
                WHERE subject_id=%s AND attendance_date=%s
                ORDER BY student_id
                """,
                (int(subject_id), attendance_date),
            )
            return [
                AttendanceRecord(
                    record_id=int(r["record_id"]),
                    student_id=int(r["student_id"]),
                    subject_id=int(r["subject_id"]),
                    attendance_date=r["attendance_date"],
                    status=AttendanceStatus(r["status"]),
                    teacher_id=r.get("teacher_id"),
                )
                for r in fetchall(cur)
            ]

    def save_marks(
        self,
        *,
        subject_id: int,
        attendance_date: date,
        teacher_id: str,
        marks: Sequence[AttendanceMark],
    ) -> int:
        with integrity_errors(
            missing_parent="The provided student, subject or teacher does not exist.",
        ), db_cursor(self._conn_factory) as (_, cur):
            for mark in marks:
                cur.execute(
                    """
                    INSERT INTO attendance_records(student_id, subject_id, teacher_id, attendance_date, status)
                    VALUES(%s,%s,%s,%s,%s) AS new
                    ON DUPLICATE KEY UPDATE status=new.status, teacher_id=new.teacher_id
                    """,
                    (int(mark.student_id), int(subject_id), teacher_id, attendance_date, mark.status.value),
                )
            return len(marks)

    def list_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        subject_ids: Optional[Sequence[int]] = None,
        student_ids: Optional[Sequence[int]] = None,
        teacher_id: Optional[str] = None,
    ) -> Sequence[AttendanceRow]:
        clauses = ["ar.attendance_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]

        if subject_ids is not None:
            clauses.append(f"ar.subject_id IN ({in_clause(subject_ids)})")
            params.extend(int(s) for s in subject_ids)
        if student_ids is not None:
            clauses.append(f"ar.student_id IN ({in_clause(student_ids)})")
            params.extend(int(s) for s in student_ids)
        if teacher_id is not None:
            clauses.append("ar.teacher_id = %s")
            params.append(teacher_id)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT ar.student_id, ar.subject_id, s.subject_name, ar.attendance_date, ar.status
                FROM attendance_records ar
                JOIN subjects s ON s.subject_id = ar.subject_id
                WHERE {where}
                ORDER BY ar.attendance_date ASC, ar.student_id ASC
                """,
                tuple(params),
            )
            return [
                AttendanceRow(
                    student_id=int(r["student_id"]),
                    subject_id=int(r["subject_id"]),
                    subject_name=r["subject_name"],
                    attendance_date=r["attendance_date"],
                    status=AttendanceStatus(r["status"]),
                )
                for r in fetchall(cur)
            ]
