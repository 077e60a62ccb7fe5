from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.exceptions import ConflictError, NotFoundError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """One connection, one transaction.

    Commits when the block exits normally, rolls back on any exception and
    always hands the connection back.
    """

    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary, buffered=True)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def in_clause(values) -> str:
    """Placeholder list for ``IN (...)``; callers must not pass an empty sequence."""

    if not values:
        raise ValueError("IN clause needs at least one value")
    return ", ".join(["%s"] * len(values))


class IntegrityKind(str, Enum):
    DUPLICATE = "duplicate"
    MISSING_PARENT = "missing_parent"
    REFERENCED = "referenced"


_KIND_BY_ERRNO = {
    errorcode.ER_DUP_ENTRY: IntegrityKind.DUPLICATE,
    errorcode.ER_NO_REFERENCED_ROW: IntegrityKind.MISSING_PARENT,
    errorcode.ER_NO_REFERENCED_ROW_2: IntegrityKind.MISSING_PARENT,
    errorcode.ER_ROW_IS_REFERENCED: IntegrityKind.REFERENCED,
    errorcode.ER_ROW_IS_REFERENCED_2: IntegrityKind.REFERENCED,
}


def integrity_kind(err: mysql.connector.Error) -> Optional[IntegrityKind]:
    return _KIND_BY_ERRNO.get(getattr(err, "errno", None))


def duplicate_key_name(err: mysql.connector.Error) -> Optional[str]:
    """Key name from "Duplicate entry 'x' for key 'teachers.email'" -> ``email``."""

    msg = getattr(err, "msg", None) or str(err)
    marker = "for key '"
    start = msg.rfind(marker)
    if start < 0:
        return None
    key = msg[start + len(marker):].split("'", 1)[0]
    return key.rsplit(".", 1)[-1] or None


@contextmanager
def integrity_errors(
    *,
    duplicate: Optional[str] = None,
    duplicate_keys: Optional[Mapping[str, str]] = None,
    missing_parent: Optional[str] = None,
    referenced: Optional[str] = None,
):
    """Translate store constraint violations into domain errors.

    Wrap it around ``db_cursor`` so the rollback happens before translation.
    Violations without a configured message propagate unchanged.
    """

    try:
        yield
    except mysql.connector.IntegrityError as e:
        kind = integrity_kind(e)
        if kind is IntegrityKind.DUPLICATE:
            key = duplicate_key_name(e)
            if duplicate_keys and key in duplicate_keys:
                raise ConflictError(duplicate_keys[key]) from e
            if duplicate:
                raise ConflictError(duplicate) from e
        if kind is IntegrityKind.MISSING_PARENT and missing_parent:
            raise NotFoundError(missing_parent) from e
        if kind is IntegrityKind.REFERENCED and referenced:
            raise ConflictError(referenced) from e
        raise
