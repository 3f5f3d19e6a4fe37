from __future__ import annotations

from typing import Protocol

from .model import NotificationRequest


class NotificationScheduler(Protocol):
    """Accepts a notification for delivery after ``delay_seconds``.

    Fire-and-forget: callers do not consume a result.
    """

    def schedule(self, request: NotificationRequest, delay_seconds: int) -> None:
        raise NotImplementedError
