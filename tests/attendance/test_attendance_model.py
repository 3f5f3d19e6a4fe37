from __future__ import annotations

from datetime import datetime

import pytest

from dms_attendance.attendance.model import AttendanceRecord
from dms_attendance.core.enums import AttendanceStatus
from dms_attendance.core.exceptions import ValidationError


@pytest.mark.parametrize("raw", ["ABSENT", "absent", "Absent", " aBsEnT "])
def test_status_parse_is_case_insensitive(raw):
    assert AttendanceStatus.parse(raw) is AttendanceStatus.ABSENT


def test_status_parse_rejects_unknown_values():
    with pytest.raises(ValidationError):
        AttendanceStatus.parse("sleeping")
    with pytest.raises(ValidationError):
        AttendanceStatus.parse(None)


def test_record_normalizes_string_status():
    r = AttendanceRecord(student_id=4, attendance_date=datetime(2026, 3, 2, 9, 30), status="late")
    assert r.status is AttendanceStatus.LATE
    assert not r.is_absent


def test_record_to_dict():
    r = AttendanceRecord(
        student_id=4,
        attendance_date=datetime(2026, 3, 2, 9, 30),
        status=AttendanceStatus.ABSENT,
        marked_by_user_id=9,
        attendance_id=12,
    )
    assert r.is_absent
    assert r.to_dict() == {
        "attendance_id": 12,
        "student_id": 4,
        "attendance_date": "2026-03-02T09:30:00",
        "status": "ABSENT",
        "marked_by_user_id": 9,
    }
