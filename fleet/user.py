"""User accounts, roles and email validation."""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Optional

from . import config, errors
from .model import Model, parse_timestamp, plain_value, utcnow
from .passwords import check_password, make_password

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


def validate_email(value: Optional[str]) -> str:
    """Return the email if it is well formed."""
    if not value:
        raise errors.EmailEmpty()
    if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
        raise errors.InvalidEmail()
    return value


class Role(str, Enum):
    """Account roles."""

    ADMIN = "admin"
    USER = "user"

    @classmethod
    def validate(cls, value: Any) -> "Role":
        if not value:
            raise errors.RoleEmpty()
        try:
            return cls(value)
        except ValueError:
            raise errors.InvalidRole() from None


@dataclass
class User(Model):
    """An account; password holds the Argon2 hash, never the plain text."""

    email: str = ""
    password: str = ""
    role: str = ""

    JSON_FIELDS = ("email", "role")
    DOCUMENT_FIELDS = ("email", "password", "role")
    SECRET_FIELDS = ("password",)

    def set_email(self, email: str) -> "User":
        self.email = validate_email(email)
        return self

    def set_password(self, password: str) -> "User":
        if not password:
            raise errors.PasswordEmpty()
        self.password = make_password(password)
        return self

    def set_role(self, role: Any) -> "User":
        self.role = Role.validate(role).value
        return self

    def verify_password(self, password: str) -> bool:
        """Check a plain-text password against the stored hash."""
        if not self.password or not password:
            return False
        return check_password(password, self.password)

    def validate(self) -> None:
        validate_email(self.email)
        if not self.password:
            raise errors.PasswordEmpty()
        Role.validate(self.role)

    def claims(self) -> Dict[str, Any]:
        """Standard token claims identifying this user."""
        now = utcnow()
        expires = now + timedelta(hours=config.TOKEN_TTL_HOURS)
        return {
            "jti": str(self.id) if self.id is not None else "",
            "sub": self.email,
            "aud": plain_value(self.role),
            "iat": int(now.timestamp()),
            "nbf": int(now.timestamp()),
            "exp": int(expires.timestamp()),
            "iss": config.TOKEN_ISSUER,
        }


class AuthUser:
    """The authenticated user as reported by the auth service."""

    def __init__(
        self,
        id: str,
        email: str,
        role: str,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self.id = id
        self.email = email
        self.role = role
        self.created_at = created_at
        self.updated_at = updated_at

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN.value

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "AuthUser":
        """Parse the ``{"data": {...}}`` envelope."""
        data = payload.get("data") or {}
        return cls(
            data.get("id", ""),
            data.get("email", ""),
            data.get("role", ""),
            parse_timestamp(data.get("created_at")),
            parse_timestamp(data.get("updated_at")),
        )
