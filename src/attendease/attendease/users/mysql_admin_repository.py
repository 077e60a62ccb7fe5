from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, integrity_errors
from .model import Admin
from .repository import AdminRepository


class MySQLAdminRepository(AdminRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_email(self, email: str) -> Optional[Admin]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT admin_id, name, email, password_hash FROM admins WHERE email=%s",
                (email,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return Admin(
                admin_id=str(row["admin_id"]),
                name=row["name"],
                email=row["email"],
                password_hash=row["password_hash"],
            )

    def create_admin(self, *, admin_id: str, name: str, email: str, password_hash: str) -> str:
        with integrity_errors(
            duplicate_keys={"PRIMARY": "Admin ID already exists.", "admins_email_key": "Email already exists."},
            duplicate="A unique field already exists.",
        ), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO admins(admin_id, name, email, password_hash) VALUES(%s,%s,%s,%s)",
                (admin_id, name, email, password_hash),
            )
            return admin_id
