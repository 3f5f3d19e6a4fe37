from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import AttendanceRecord
from .repository import AttendanceRepository


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def save_all(self, records: Sequence[AttendanceRecord]) -> List[AttendanceRecord]:
        if not records:
            return []

        saved: List[AttendanceRecord] = []
        # One cursor, one commit: the batch is written as a unit.
        with db_cursor(self._conn_factory) as (_, cur):
            for record in records:
                cur.execute(
                    """
                    INSERT INTO attendance_records(student_id, attendance_date, status, marked_by_user_id)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (
                        int(record.student_id),
                        record.attendance_date,
                        record.status.value,
                        record.marked_by_user_id,
                    ),
                )
                saved.append(replace(record, attendance_id=int(cur.lastrowid)))
        return saved

    def find_by_student(self, student_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT attendance_id, student_id, attendance_date, status, marked_by_user_id
                FROM attendance_records
                WHERE student_id=%s
                ORDER BY attendance_date ASC, attendance_id ASC
                """,
                (int(student_id),),
            )
            rows = fetchall(cur)
            return [
                AttendanceRecord(
                    attendance_id=int(r["attendance_id"]),
                    student_id=int(r["student_id"]),
                    attendance_date=r["attendance_date"],
                    status=AttendanceStatus(r["status"]),
                    marked_by_user_id=int(r["marked_by_user_id"]),
                )
                for r in rows
            ]
