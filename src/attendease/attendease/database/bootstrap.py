from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "attendease_db")),
    )


def _connect(target: DBTarget, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _strip_line_comments(sql: str) -> str:
    return re.sub(r"(?m)^\s*--.*$", "", sql)


def iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        elif ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _apply_sql_file(db_config: dict, path: str | Path) -> None:
    target = _as_target(db_config)
    sql = _strip_line_comments(_strip_create_db_and_use(Path(path).read_text(encoding="utf-8")))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        for stmt in iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    _apply_sql_file(db_config, schema_path)
    logger.info("Applied schema %s", schema_path)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    _apply_sql_file(db_config, seed_path)
    logger.info("Applied seed %s", seed_path)


def ensure_demo_accounts(db_config: dict) -> None:
    """Upsert one admin, one teacher and one student for local logins."""

    target = _as_target(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)

        def get_id(sql: str, value: str) -> int:
            cur.execute(sql, (value,))
            row = cur.fetchone()
            if not row:
                raise RuntimeError(f"Missing seed row for {value!r}; run seed.sql first")
            return int(row["id"])

        program_id = get_id("SELECT program_id AS id FROM programs WHERE program_name=%s", "B.Tech")
        department_id = get_id("SELECT department_id AS id FROM departments WHERE department_name=%s", "Computer Science")

        cur.execute(
            """
            INSERT INTO admins (admin_id, name, email, password_hash)
            VALUES (%s, %s, %s, %s) AS new
            ON DUPLICATE KEY UPDATE name=new.name, password_hash=new.password_hash
            """,
            ("ADM001", "Administrator", "admin@attendease.local", generate_password_hash("admin123")),
        )
        cur.execute(
            """
            INSERT INTO teachers (teacher_id, name, email, password_hash, department_id)
            VALUES (%s, %s, %s, %s, %s) AS new
            ON DUPLICATE KEY UPDATE name=new.name, password_hash=new.password_hash,
                                    department_id=new.department_id
            """,
            ("T001", "Demo Teacher", "teacher@attendease.local", generate_password_hash("teacher123"), department_id),
        )
        cur.execute(
            """
            INSERT INTO students (name, email, password_hash, roll_number, program_id, department_id, semester)
            VALUES (%s, %s, %s, %s, %s, %s, %s) AS new
            ON DUPLICATE KEY UPDATE name=new.name, password_hash=new.password_hash
            """,
            ("Demo Student", "student@attendease.local", generate_password_hash("student123"), "2025001",
             program_id, department_id, 1),
        )
        cur.execute(
            """
            INSERT IGNORE INTO teacher_subjects (teacher_id, subject_id)
            SELECT %s, s.subject_id
            FROM subjects s
            JOIN courses c ON c.course_id = s.course_id
            WHERE c.program_id=%s AND c.department_id=%s AND c.semester=1
            """,
            ("T001", program_id, department_id),
        )

        conn.commit()
        logger.info("Demo accounts ready")
    finally:
        conn.close()


def list_tables(db_config: dict) -> list[str]:
    target = _as_target(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
