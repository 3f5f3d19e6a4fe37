from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import replace
from typing import Callable, ContextManager, Iterable, List, Optional, Sequence

from ..access.policy import AccessControl
from ..core.constants import (
    ABSENCE_ALERT_BODY,
    ABSENCE_ALERT_DELAY_SECONDS,
    ABSENCE_ALERT_SUBJECT,
    MARK_ATTENDANCE_ACTION,
)
from ..core.enums import NotificationChannel, NotificationKind, Role
from ..core.exceptions import ValidationError
from ..notifications.model import NotificationRequest, NotificationTarget
from ..notifications.scheduler import NotificationScheduler
from ..students.repository import StudentRepository
from ..users.model import ActingUser
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """Use cases: mark a batch of attendance, read a student's history."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        access: AccessControl,
        notifications: NotificationScheduler,
        *,
        transaction: Optional[Callable[[], ContextManager]] = None,
    ):
        self._attendance = attendance
        self._students = students
        self._access = access
        self._notifications = notifications
        self._transaction = transaction or nullcontext

    def record_batch(self, acting_user: ActingUser, records: Iterable[AttendanceRecord]) -> List[AttendanceRecord]:
        """Validate, stamp and persist a batch of records as one unit.

        Any unregistered student aborts the whole batch before anything is
        saved. Absent students get an immediate absence alert.
        """

        self._access.enforce_role(acting_user, MARK_ATTENDANCE_ACTION, Role.INSTRUCTOR, Role.ADMINISTRATOR)

        records = list(records)
        with self._transaction():
            for record in records:
                if not self._students.exists(record.student_id):
                    raise ValidationError(
                        f"Cannot mark attendance: Student ID {record.student_id} is unregistered."
                    )

            # Never trust a caller-supplied marker. Stamp copies so an aborted
            # batch leaves the caller's records untouched.
            stamped = [replace(record, marked_by_user_id=acting_user.user_id) for record in records]
            for record in stamped:
                if record.is_absent:
                    self._trigger_absence_notification(record)

            saved = self._attendance.save_all(stamped)

        logger.info("Recorded %d attendance records marked_by=%s", len(saved), acting_user.user_id)
        return list(saved)

    def get_history(self, acting_user: ActingUser, student_id: int) -> Sequence[AttendanceRecord]:
        self._access.enforce_student_access(acting_user, student_id)
        return self._attendance.find_by_student(student_id)

    def _trigger_absence_notification(self, record: AttendanceRecord) -> None:
        student = self._students.find(record.student_id)
        if student is None:
            # Removed between the existence check and now; the alert is best-effort.
            logger.warning("Skipping absence alert: student_id=%s not found", record.student_id)
            return

        request = NotificationRequest(
            kind=NotificationKind.ABSENCE_ALERT,
            target=NotificationTarget(
                name=student.first_name,
                address=student.email,
                channel=NotificationChannel.EMAIL,
            ),
            subject=ABSENCE_ALERT_SUBJECT,
            body=ABSENCE_ALERT_BODY.format(date=record.attendance_date.date().isoformat()),
            channel=NotificationChannel.EMAIL,
        )
        try:
            self._notifications.schedule(request, ABSENCE_ALERT_DELAY_SECONDS)
        except Exception:
            logger.exception("Failed to queue absence alert for student_id=%s", record.student_id)
