from __future__ import annotations

import pytest

from dms_attendance.access.policy import RoleBasedAccessControl
from dms_attendance.core.enums import Role
from dms_attendance.core.exceptions import AuthorizationError
from dms_attendance.users.model import ActingUser


policy = RoleBasedAccessControl()


def test_enforce_role_allows_listed_roles():
    policy.enforce_role(ActingUser(1, Role.INSTRUCTOR), "Mark Attendance", Role.INSTRUCTOR, Role.ADMINISTRATOR)
    policy.enforce_role(ActingUser(2, Role.ADMINISTRATOR), "Mark Attendance", Role.INSTRUCTOR, Role.ADMINISTRATOR)


def test_enforce_role_rejects_other_roles():
    with pytest.raises(AuthorizationError, match="Mark Attendance"):
        policy.enforce_role(ActingUser(3, Role.CLIENT), "Mark Attendance", Role.INSTRUCTOR, Role.ADMINISTRATOR)


def test_enforce_role_rejects_anonymous():
    with pytest.raises(AuthorizationError):
        policy.enforce_role(None, "Mark Attendance", Role.INSTRUCTOR)


@pytest.mark.parametrize("role", [Role.INSTRUCTOR, Role.ADMINISTRATOR])
def test_staff_roles_see_any_student(role):
    policy.enforce_student_access(ActingUser(1, role), 42)


def test_client_sees_only_linked_student():
    client = ActingUser(user_id=7, role=Role.CLIENT, student_id=42)
    policy.enforce_student_access(client, 42)
    with pytest.raises(AuthorizationError):
        policy.enforce_student_access(client, 43)


def test_unlinked_client_sees_nothing():
    with pytest.raises(AuthorizationError):
        policy.enforce_student_access(ActingUser(user_id=42, role=Role.CLIENT), 42)
