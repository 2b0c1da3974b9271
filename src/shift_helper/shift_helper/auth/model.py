from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthUser:
    """Signed-in account as reported by the auth provider."""

    user_id: str
    email: Optional[str] = None

    def to_dict(self) -> dict:
        return {"id": self.user_id, "email": self.email}


@dataclass(frozen=True)
class AuthSession:
    """Tokens of one caller's provider session; kept in that caller's Flask session."""

    user: AuthUser
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class LoginResult:
    success: bool
    session: Optional[AuthSession] = None
    message: Optional[str] = None

    @property
    def user(self) -> Optional[AuthUser]:
        return self.session.user if self.session else None

    def to_dict(self) -> dict:
        if self.success:
            return {"success": True, "user": self.user.to_dict() if self.user else None}
        return {"success": False, "message": self.message}
