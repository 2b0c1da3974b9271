from __future__ import annotations

from functools import wraps
from typing import Any, Dict

from flask import request, session

from ..core.exceptions import AuthorizationError, ValidationError


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthorizationError("Please sign in to continue")
        return view(*args, **kwargs)

    return wrapper


def json_body() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
