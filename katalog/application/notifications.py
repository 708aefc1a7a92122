"""Single, auto-expiring status notification."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from ..constants import DEFAULT_NOTIFICATION_DURATION_MS
from ..logging_config import get_logger
from ..utils import monotonic_ms

logger: Final = get_logger(__name__)


class Severity(StrEnum):
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class Notification:
    message: str
    severity: Severity
    expires_at: float


class NotificationCenter:
    """Holds at most one notification; a new one replaces the previous one.

    The center never starts timers itself. The Renderer schedules a timer for
    ``expires_at`` and calls ``expire()`` when it fires; ``current()`` also
    hides a notification whose time has passed.
    """

    def __init__(
        self,
        duration_ms: float = DEFAULT_NOTIFICATION_DURATION_MS,
        clock: Callable[[], float] = monotonic_ms,
    ):
        self.duration_ms = duration_ms
        self._clock = clock
        self._active: Notification | None = None

    def notify(self, message: str, severity: Severity) -> Notification:
        notification = Notification(
            message=message,
            severity=Severity(severity),
            expires_at=self._clock() + self.duration_ms,
        )
        if self._active is not None:
            logger.debug("Notification superseded", message=self._active.message)
        self._active = notification
        return notification

    def success(self, message: str) -> Notification:
        return self.notify(message, Severity.SUCCESS)

    def danger(self, message: str) -> Notification:
        return self.notify(message, Severity.DANGER)

    def current(self) -> Notification | None:
        self.expire()
        return self._active

    def dismiss(self) -> None:
        self._active = None

    def expire(self) -> bool:
        """Clear the notification if it is due.

        Returns:
            True if a notification was cleared
        """
        if self._active is None or self._clock() < self._active.expires_at:
            return False
        self._active = None
        return True
