from __future__ import annotations

import logging
from typing import Optional

from ..core.exceptions import AuthenticationError
from .gateway import AuthGateway, AuthListener
from .model import AuthUser, LoginResult

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: sign in/out against the hosted auth provider."""

    def __init__(self, gateway: AuthGateway):
        self._gateway = gateway

    def login(self, email: str, password: str) -> LoginResult:
        if not email or not email.strip() or not password:
            return LoginResult(success=False, message="Email and password are required")

        try:
            auth_session = self._gateway.sign_in(email=email.strip(), password=password)
        except AuthenticationError as e:
            logger.error("Login failed: %s", e)
            return LoginResult(success=False, message=str(e))

        return LoginResult(success=True, session=auth_session)

    def logout(self, *, access_token: Optional[str], refresh_token: Optional[str]) -> None:
        if access_token and refresh_token:
            self._gateway.sign_out(access_token=access_token, refresh_token=refresh_token)

    def get_current_user(self, access_token: Optional[str]) -> Optional[AuthUser]:
        if not access_token:
            return None
        return self._gateway.user_for_token(access_token)

    def on_auth_state_change(self, callback: AuthListener) -> None:
        self._gateway.subscribe(callback)
