"""Centralized error handling for the presentation layer."""

from typing import Final

from ..application.notifications import NotificationCenter
from ..domain import messages
from ..domain.exceptions import DomainError, PersistenceWriteError
from ..logging_config import get_logger

logger: Final = get_logger(__name__)


class ErrorFormatter:
    """Formats errors for consistent user experience."""

    @staticmethod
    def format_user_friendly_message(error: Exception) -> str:
        """Convert technical errors to user-friendly messages."""
        if isinstance(error, PersistenceWriteError):
            return messages.SAVE_FAILED

        else:
            # Fallback for unexpected errors
            return messages.UNEXPECTED_ERROR


def handle_domain_error(
    error: DomainError, notifications: NotificationCenter, action: str
) -> None:
    """Log a failed intent and surface it as a danger notification."""
    logger.error(
        "Intent failed",
        action=action,
        error_type=type(error).__name__,
        error=str(error),
    )
    notifications.danger(ErrorFormatter.format_user_friendly_message(error))
