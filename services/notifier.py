"""Notification sinks used by the controller."""

from __future__ import annotations

import logging
from typing import Protocol

from engine.messages import (
    COMPLETE_DESCRIPTION,
    COMPLETE_TITLE,
    FAILED_TITLE,
    UNKNOWN_ERROR_MESSAGE,
    VALIDATION_DESCRIPTION,
    VALIDATION_TITLE,
)
from schemas.response import Notification, NotificationKind, NotificationVariant

logger = logging.getLogger("detector.notifications")


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class ToastQueue:
    """Collects notifications until the view picks them up."""

    def __init__(self) -> None:
        self._pending: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self._pending.append(notification)

    @property
    def pending(self) -> list[Notification]:
        return list(self._pending)

    def drain(self) -> list[Notification]:
        pending, self._pending = self._pending, []
        return pending


class LoggingNotifier:
    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.variant == NotificationVariant.DESTRUCTIVE else logging.INFO
        logger.log(level, "[%s] %s — %s", notification.kind.value, notification.title, notification.description)


# ── Catalog ────────────────────────────────────────────────────────────

def validation_error() -> Notification:
    return Notification(
        kind=NotificationKind.VALIDATION_ERROR,
        title=VALIDATION_TITLE,
        description=VALIDATION_DESCRIPTION,
        variant=NotificationVariant.DESTRUCTIVE,
    )


def analysis_failed(message: str) -> Notification:
    return Notification(
        kind=NotificationKind.ANALYSIS_FAILED,
        title=FAILED_TITLE,
        description=message or UNKNOWN_ERROR_MESSAGE,
        variant=NotificationVariant.DESTRUCTIVE,
    )


def analysis_complete() -> Notification:
    return Notification(
        kind=NotificationKind.ANALYSIS_COMPLETE,
        title=COMPLETE_TITLE,
        description=COMPLETE_DESCRIPTION,
    )
