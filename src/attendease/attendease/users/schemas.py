from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class LoginRequest:
    email: str
    password: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "LoginRequest":
        email = data.get("email")
        password = data.get("password")
        if not email or not password:
            raise ValidationError("Email and password are required.")
        return cls(email=str(email).strip().lower(), password=str(password))


@dataclass(frozen=True)
class AdminSignupRequest:
    admin_id: str
    name: str
    email: str
    password: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AdminSignupRequest":
        if not all(data.get(k) for k in ("adminId", "name", "email", "password")):
            raise ValidationError("All fields (Admin ID, Name, Email, Password) are required.")
        return cls(
            admin_id=require_non_empty(data.get("adminId"), "Admin ID"),
            name=require_non_empty(data.get("name"), "Name"),
            email=require_non_empty(data.get("email"), "Email").lower(),
            password=require_min_length(data.get("password"), "Password", MIN_PASSWORD_LENGTH),
        )
