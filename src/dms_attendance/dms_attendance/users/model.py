from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class ActingUser:
    """The authenticated principal performing a call.

    CLIENT principals may be linked to the student record they represent.
    """

    user_id: int
    role: Role
    student_id: Optional[int] = None


@dataclass(frozen=True)
class User:
    """Domain entity: login account.

    Plain data object (no DB access code).
    """

    user_id: int
    full_name: str
    username: str
    password_hash: str
    role: Role
    student_id: Optional[int] = None
    is_active: bool = True
