from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import NotificationRequest
from .scheduler import NotificationScheduler

logger = logging.getLogger(__name__)


class MySQLNotificationScheduler(NotificationScheduler):
    """Writes notifications to the ``notification_outbox`` table.

    A separate delivery worker picks up PENDING rows whose ``send_after`` has
    passed.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, clock: Optional[Callable[[], datetime]] = None):
        self._conn_factory = conn_factory
        self._clock = clock or now_local

    def schedule(self, request: NotificationRequest, delay_seconds: int) -> None:
        if int(delay_seconds) < 0:
            raise ValidationError("Notification delay cannot be negative")

        send_after = self._clock() + timedelta(seconds=int(delay_seconds))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO notification_outbox(
                    kind, recipient_name, recipient_address, channel, subject, body, send_after, status
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,'PENDING')
                """,
                (
                    request.kind.value,
                    request.target.name,
                    request.target.address,
                    request.channel.value,
                    request.subject,
                    request.body,
                    send_after,
                ),
            )
            notification_id = int(cur.lastrowid)

        logger.info(
            "Queued %s notification id=%s channel=%s send_after=%s",
            request.kind.value,
            notification_id,
            request.channel.value,
            send_after.isoformat(),
        )
