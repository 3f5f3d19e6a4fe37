from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass
class AttendanceRecord:
    """Domain entity: one student's attendance for one class.

    Built by the caller, stamped with the marker by the service, then stored
    as immutable history. ``attendance_id`` is assigned by storage.
    """

    student_id: int
    attendance_date: datetime
    status: AttendanceStatus
    marked_by_user_id: Optional[int] = None
    attendance_id: Optional[int] = None

    def __post_init__(self) -> None:
        self.status = AttendanceStatus.parse(self.status)

    @property
    def is_absent(self) -> bool:
        return self.status == AttendanceStatus.ABSENT

    def to_dict(self) -> dict:
        return {
            "attendance_id": self.attendance_id,
            "student_id": self.student_id,
            "attendance_date": self.attendance_date.isoformat(),
            "status": self.status.value,
            "marked_by_user_id": self.marked_by_user_id,
        }
