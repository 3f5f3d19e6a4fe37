from __future__ import annotations

from datetime import datetime

import pytest

from dms_attendance.core.enums import NotificationChannel, NotificationKind
from dms_attendance.core.exceptions import ValidationError
from dms_attendance.database.connection import DBConfig, DatabaseConnection
from dms_attendance.notifications.model import NotificationRequest, NotificationTarget
from dms_attendance.notifications.mysql_notification_scheduler import MySQLNotificationScheduler


class OutboxCursor:
    def __init__(self, conn):
        self._conn = conn
        self.lastrowid = 0

    def execute(self, sql, params=None):
        self._conn.inserts.append((sql, params))
        self.lastrowid = len(self._conn.inserts)

    def close(self):
        pass


class OutboxConn:
    def __init__(self):
        self.inserts = []
        self.commits = 0

    def cursor(self, dictionary=True):
        return OutboxCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        pass

    def close(self):
        pass


class OutboxFactory(DatabaseConnection):
    def __init__(self):
        super().__init__(DBConfig(host="h", port=3306, user="u", password="p", database="d"))
        self.conn = OutboxConn()

    def connect(self):
        return self.conn


def make_request() -> NotificationRequest:
    return NotificationRequest(
        kind=NotificationKind.ABSENCE_ALERT,
        target=NotificationTarget(name="Ben", address="ben@example.com", channel=NotificationChannel.EMAIL),
        subject="Missed Class Alert",
        body="You have been marked absent for the class on 2026-03-02",
        channel=NotificationChannel.EMAIL,
    )


def test_schedule_writes_pending_outbox_row():
    factory = OutboxFactory()
    now = datetime(2026, 3, 2, 9, 0)
    scheduler = MySQLNotificationScheduler(factory, clock=lambda: now)

    scheduler.schedule(make_request(), 0)

    sql, params = factory.conn.inserts[0]
    assert "notification_outbox" in sql
    assert params == (
        "ABSENCE_ALERT",
        "Ben",
        "ben@example.com",
        "EMAIL",
        "Missed Class Alert",
        "You have been marked absent for the class on 2026-03-02",
        now,
    )
    assert factory.conn.commits == 1


def test_schedule_applies_delay():
    factory = OutboxFactory()
    scheduler = MySQLNotificationScheduler(factory, clock=lambda: datetime(2026, 3, 2, 9, 0))

    scheduler.schedule(make_request(), 90)

    _, params = factory.conn.inserts[0]
    assert params[-1] == datetime(2026, 3, 2, 9, 1, 30)


def test_negative_delay_rejected():
    factory = OutboxFactory()
    scheduler = MySQLNotificationScheduler(factory)

    with pytest.raises(ValidationError):
        scheduler.schedule(make_request(), -1)
    assert factory.conn.inserts == []
