from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Registered student, owned by the student directory."""

    student_id: int
    first_name: str
    email: str
