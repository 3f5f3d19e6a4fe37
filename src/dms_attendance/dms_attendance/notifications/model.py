from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import NotificationChannel, NotificationKind


@dataclass(frozen=True)
class NotificationTarget:
    """Delivery address for a notification (not an authentication principal)."""

    name: str
    address: str
    channel: NotificationChannel


@dataclass(frozen=True)
class NotificationRequest:
    kind: NotificationKind
    target: NotificationTarget
    subject: str
    body: str
    channel: NotificationChannel
