from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_datetime
from ..common.validators import require_positive_int
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..users.controller import acting_user_from_session, login_required
from .model import AttendanceRecord


def _record_from_json(item: dict) -> AttendanceRecord:
    if not isinstance(item, dict):
        raise ValidationError("Each record must be an object")
    marker = item.get("marked_by_user_id")
    return AttendanceRecord(
        student_id=require_positive_int(item.get("student_id"), "student_id"),
        attendance_date=parse_iso_datetime(item.get("attendance_date", "")),
        status=AttendanceStatus.parse(item.get("status", "")),
        # Accepted for compatibility; the service overwrites it.
        marked_by_user_id=marker if isinstance(marker, int) else None,
    )


def register(app: Flask, container) -> None:
    @app.route("/attendance/batch", methods=["POST"], endpoint="attendance_batch")
    @login_required
    def record_batch():
        payload = request.get_json(silent=True) or {}
        items = payload.get("records")
        if not isinstance(items, list):
            raise ValidationError("'records' must be a list")

        records = [_record_from_json(item) for item in items]
        saved = container.attendance_service.record_batch(acting_user_from_session(), records)
        return jsonify({"records": [r.to_dict() for r in saved]}), 201

    @app.route("/attendance/students/<int:student_id>", methods=["GET"], endpoint="attendance_history")
    @login_required
    def history(student_id: int):
        rows = container.attendance_service.get_history(acting_user_from_session(), student_id)
        return jsonify({"student_id": student_id, "records": [r.to_dict() for r in rows]})
