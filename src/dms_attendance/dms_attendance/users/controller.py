from __future__ import annotations

from datetime import timedelta
from functools import wraps
from typing import Optional

from flask import Flask, jsonify, request, session

from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import ActingUser
from .service import SessionUser


def acting_user_from_session() -> Optional[ActingUser]:
    if "user_id" not in session:
        return None
    student_id = session.get("student_id")
    s_user = SessionUser(
        user_id=int(session["user_id"]),
        full_name=session.get("name", ""),
        role=Role(session["role"]),
        student_id=int(student_id) if student_id is not None else None,
    )
    return s_user.as_acting_user()


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            raise AuthenticationError("Please log in to continue")
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        payload = request.get_json(silent=True) or {}
        s_user = container.auth_service.authenticate(payload.get("username", ""), payload.get("password", ""))

        session.clear()
        session.permanent = bool(payload.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)

        session["user_id"] = s_user.user_id
        session["name"] = s_user.full_name
        session["role"] = s_user.role.value
        session["student_id"] = s_user.student_id

        return jsonify({"user_id": s_user.user_id, "name": s_user.full_name, "role": s_user.role.value})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"ok": True})
