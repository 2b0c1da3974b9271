from __future__ import annotations

import logging
from typing import Any, List, Optional

from supabase import AuthError

from ..core.exceptions import AuthenticationError
from ..database.connection import SupabaseConnection
from .gateway import AuthGateway, AuthListener
from .model import AuthSession, AuthUser

logger = logging.getLogger(__name__)


def _to_user(user: Any) -> Optional[AuthUser]:
    if user is None:
        return None
    return AuthUser(user_id=str(user.id), email=getattr(user, "email", None))


class SupabaseAuthGateway(AuthGateway):
    """Auth calls on short-lived clients; the caller keeps the tokens."""

    def __init__(self, conn_factory: SupabaseConnection):
        self._conn_factory = conn_factory
        self._listeners: List[AuthListener] = []

    def _notify(self, user: Optional[AuthUser]) -> None:
        for listener in self._listeners:
            listener(user)

    def sign_in(self, *, email: str, password: str) -> AuthSession:
        try:
            response = self._conn_factory.new_client().auth.sign_in_with_password(
                {"email": email, "password": password}
            )
        except AuthError as exc:
            raise AuthenticationError(exc.message or str(exc)) from exc

        user = _to_user(response.user)
        if user is None or response.session is None:
            raise AuthenticationError("Sign-in returned no session")

        self._notify(user)
        return AuthSession(
            user=user,
            access_token=response.session.access_token,
            refresh_token=response.session.refresh_token,
        )

    def sign_out(self, *, access_token: str, refresh_token: str) -> None:
        client = self._conn_factory.new_client()
        try:
            client.auth.set_session(access_token, refresh_token)
            client.auth.sign_out({"scope": "local"})
        except AuthError as exc:
            # Already expired or revoked at the provider; the caller's session ends anyway.
            logger.warning("Provider sign-out failed: %s", exc.message or exc)
        self._notify(None)

    def user_for_token(self, access_token: str) -> Optional[AuthUser]:
        try:
            response = self._conn_factory.new_client().auth.get_user(access_token)
        except AuthError as exc:
            logger.info("Rejected access token: %s", exc.message or exc)
            return None
        return _to_user(response.user) if response else None

    def subscribe(self, listener: AuthListener) -> None:
        self._listeners.append(listener)
