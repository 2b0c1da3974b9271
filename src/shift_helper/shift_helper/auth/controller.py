from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import json_body, login_required
from ..container import Container
from ..core.exceptions import AuthorizationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body()
        result = container.auth_service.login(str(data.get("email") or ""), str(data.get("password") or ""))
        if not result.success:
            return jsonify(result.to_dict()), 401

        session.clear()
        session.permanent = bool(data.get("remember"))
        session["user_id"] = result.user.user_id
        session["email"] = result.user.email
        session["access_token"] = result.session.access_token
        session["refresh_token"] = result.session.refresh_token
        return jsonify(result.to_dict())

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        container.auth_service.logout(
            access_token=session.get("access_token"),
            refresh_token=session.get("refresh_token"),
        )
        session.clear()
        return jsonify({"success": True, "message": "Signed out"})

    @app.route("/api/auth/me", endpoint="me")
    @login_required
    def me():
        user = container.auth_service.get_current_user(session.get("access_token"))
        if user is None:
            session.clear()
            raise AuthorizationError("Session expired, please sign in again")
        return jsonify({"success": True, "user": user.to_dict()})
