from __future__ import annotations

import logging
from typing import Optional, Protocol

from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..users.model import ActingUser

logger = logging.getLogger(__name__)


class AccessControl(Protocol):
    def enforce_role(self, acting_user: Optional[ActingUser], action_name: str, *allowed_roles: Role) -> None:
        raise NotImplementedError

    def enforce_student_access(self, acting_user: Optional[ActingUser], student_id: int) -> None:
        raise NotImplementedError


class RoleBasedAccessControl(AccessControl):
    """Default policy.

    Instructors and administrators may view any student's data; a client may
    only view the student record it is linked to.
    """

    BROAD_ACCESS_ROLES = frozenset({Role.INSTRUCTOR, Role.ADMINISTRATOR})

    def enforce_role(self, acting_user: Optional[ActingUser], action_name: str, *allowed_roles: Role) -> None:
        if acting_user is None:
            raise AuthorizationError(f"Authentication required to {action_name}")
        if acting_user.role not in allowed_roles:
            logger.warning(
                "Denied %r for user_id=%s role=%s", action_name, acting_user.user_id, acting_user.role.value
            )
            raise AuthorizationError(f"Role {acting_user.role.value} is not allowed to {action_name}")

    def enforce_student_access(self, acting_user: Optional[ActingUser], student_id: int) -> None:
        if acting_user is None:
            raise AuthorizationError("Authentication required to view student data")
        if acting_user.role in self.BROAD_ACCESS_ROLES:
            return
        if acting_user.student_id is not None and int(acting_user.student_id) == int(student_id):
            return
        logger.warning("Denied student data access user_id=%s student_id=%s", acting_user.user_id, student_id)
        raise AuthorizationError("You may only view your own attendance")
