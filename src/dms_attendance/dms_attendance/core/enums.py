from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class Role(str, Enum):
    """Roles used for authorization checks."""

    INSTRUCTOR = "INSTRUCTOR"
    ADMINISTRATOR = "ADMINISTRATOR"
    CLIENT = "CLIENT"


class AttendanceStatus(str, Enum):
    """Attendance status as stored in the database."""

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    LATE = "LATE"
    EXCUSED = "EXCUSED"

    @classmethod
    def parse(cls, value: "AttendanceStatus | str") -> "AttendanceStatus":
        """Accept enum members or strings in any case ("Absent" -> ABSENT)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().upper())
        except ValueError:
            raise ValidationError(f"Unknown attendance status: {value!r}")


class NotificationChannel(str, Enum):
    EMAIL = "EMAIL"
    SMS = "SMS"


class NotificationKind(str, Enum):
    ABSENCE_ALERT = "ABSENCE_ALERT"
