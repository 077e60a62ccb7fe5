from __future__ import annotations

from typing import Optional, Protocol

from .model import Admin


class AdminRepository(Protocol):
    """Repository interface for admin accounts.

    Note (DIP): services depend on this interface, not on a concrete DB.
    """

    def get_by_email(self, email: str) -> Optional[Admin]:
        raise NotImplementedError

    def create_admin(self, *, admin_id: str, name: str, email: str, password_hash: str) -> str:
        raise NotImplementedError
