from __future__ import annotations

from typing import List, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def save_all(self, records: Sequence[AttendanceRecord]) -> List[AttendanceRecord]:
        """Persist every record; returns copies with storage-assigned ids."""

        raise NotImplementedError

    def find_by_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError
