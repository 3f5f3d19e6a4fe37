from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from dms_attendance.core.enums import Role
from dms_attendance.core.exceptions import AuthenticationError
from dms_attendance.users.model import User
from dms_attendance.users.service import AuthService


@dataclass
class InMemoryUsers:
    users_by_username: dict[str, User]

    def get_by_username(self, username: str) -> Optional[User]:
        return self.users_by_username.get(username)


def make_user(**overrides) -> User:
    fields = dict(
        user_id=9,
        full_name="Iris Instructor",
        username="iris",
        password_hash=generate_password_hash("secret1"),
        role=Role.INSTRUCTOR,
    )
    fields.update(overrides)
    return User(**fields)


def test_authenticate_returns_session_user():
    svc = AuthService(InMemoryUsers({"iris": make_user()}))

    s_user = svc.authenticate("iris", "secret1")

    assert s_user.user_id == 9
    assert s_user.role == Role.INSTRUCTOR
    acting = s_user.as_acting_user()
    assert acting.user_id == 9
    assert acting.student_id is None


def test_client_session_carries_student_link():
    client = make_user(user_id=20, username="ben", role=Role.CLIENT, student_id=2)
    svc = AuthService(InMemoryUsers({"ben": client}))

    assert svc.authenticate("ben", "secret1").as_acting_user().student_id == 2


@pytest.mark.parametrize(
    "username,password",
    [("iris", "wrong"), ("nobody", "secret1"), ("", "secret1")],
)
def test_bad_credentials_rejected(username, password):
    svc = AuthService(InMemoryUsers({"iris": make_user()}))
    with pytest.raises(AuthenticationError):
        svc.authenticate(username, password)


def test_inactive_user_rejected():
    svc = AuthService(InMemoryUsers({"iris": make_user(is_active=False)}))
    with pytest.raises(AuthenticationError):
        svc.authenticate("iris", "secret1")


def test_placeholder_hash_rejected():
    svc = AuthService(InMemoryUsers({"iris": make_user(password_hash="CHANGE_ME")}))
    with pytest.raises(AuthenticationError):
        svc.authenticate("iris", "secret1")
