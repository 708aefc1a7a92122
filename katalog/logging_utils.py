import logging
from datetime import UTC, datetime
from typing import Any


def log_user_action(
    action: str, logger_name: str = "user_actions", **kwargs: Any
) -> None:
    """Log user intents with consistent structure.

    Args:
        action: The intent being handled (e.g., 'submit', 'confirm_delete')
        logger_name: Name of the logger to use
        **kwargs: Additional context data
    """
    logger = logging.getLogger(logger_name)

    log_data = {
        "action": action,
        "timestamp": datetime.now(UTC).isoformat(),
        **kwargs,
    }

    logger.info(f"User action: {action}", extra=log_data)


def log_catalog_operation(
    operation: str,
    success: bool = True,
    logger_name: str = "catalog",
    **kwargs: Any,
) -> None:
    """Log catalog mutations and storage operations.

    Args:
        operation: Operation name (create, update, delete, load, save)
        success: Whether the operation was successful
        logger_name: Name of the logger to use
        **kwargs: Additional context data
    """
    logger = logging.getLogger(logger_name)

    log_data = {"operation": operation, "success": success, **kwargs}

    level = logging.INFO if success else logging.ERROR
    status = "succeeded" if success else "failed"

    logger.log(level, f"Catalog {operation} {status}", extra=log_data)


def log_system_info(app_name: str, version: str, variant: str, debug: bool) -> None:
    """Log application startup information."""
    logger = logging.getLogger("system")

    logger.info(
        "Application startup",
        extra={
            "app_name": app_name,
            "version": version,
            "variant": variant,
            "debug_mode": debug,
            "timestamp": datetime.now(UTC).isoformat(),
        },
    )


def log_validation_error(
    field: str, value: Any, error_message: str, logger_name: str = "validation"
) -> None:
    """Log validation errors with context.

    Args:
        field: Field name that failed validation
        value: The invalid value (truncated to 100 characters)
        error_message: Validation error message
        logger_name: Name of the logger to use
    """
    logger = logging.getLogger(logger_name)

    safe_value = str(value)[:100]

    logger.warning(
        f"Validation failed for field '{field}': {error_message}",
        extra={"field": field, "value": safe_value, "error": error_message},
    )

