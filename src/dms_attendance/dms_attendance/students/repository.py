from __future__ import annotations

from typing import Optional, Protocol

from .model import Student


class StudentRepository(Protocol):
    """Student directory: authoritative source of registered students."""

    def exists(self, student_id: int) -> bool:
        raise NotImplementedError

    def find(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError
