from __future__ import annotations

from typing import Callable, Optional, Protocol

from .model import AuthSession, AuthUser

AuthListener = Callable[[Optional[AuthUser]], None]


class AuthGateway(Protocol):
    def sign_in(self, *, email: str, password: str) -> AuthSession:
        """Raises AuthenticationError carrying the provider message."""

        raise NotImplementedError

    def sign_out(self, *, access_token: str, refresh_token: str) -> None:
        """End only the session these tokens belong to."""

        raise NotImplementedError

    def user_for_token(self, access_token: str) -> Optional[AuthUser]:
        """None when the token is expired, revoked or unknown."""

        raise NotImplementedError

    def subscribe(self, listener: AuthListener) -> None:
        raise NotImplementedError
