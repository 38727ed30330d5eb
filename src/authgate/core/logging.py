"""
Logging configuration for AuthGate.

This module sets up structured logging using structlog with support for
both JSON and human-readable formats.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
from structlog.types import FilteringBoundLogger

from .config import LoggingConfig, get_settings


SENSITIVE_KEYS = {
    "password", "token", "secret", "authorization", "cookie", "code",
    "access_token", "refresh_token", "client_secret", "credential", "github_token"
}


def setup_logging(config: Optional[LoggingConfig] = None) -> None:
    """
    Setup application logging configuration.

    Args:
        config: Logging configuration. If None, uses settings from environment.
    """
    if config is None:
        config = get_settings().logging

    # Configure standard library logging
    logging.basicConfig(
        level=getattr(logging, config.level),
        format="%(message)s",
        handlers=_get_handlers(config),
        force=True
    )

    # Configure structlog
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _add_request_id,
            _filter_sensitive_data,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer() if config.format == "json"
            else structlog.dev.ConsoleRenderer(colors=True)
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.level)
        ),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _get_handlers(config: LoggingConfig) -> list[logging.Handler]:
    """Get logging handlers based on configuration."""
    handlers = []

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, config.level))
    handlers.append(console_handler)

    # File handler (if configured)
    if config.file_path:
        file_path = Path(config.file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            filename=file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8"
        )
        file_handler.setLevel(getattr(logging, config.level))
        handlers.append(file_handler)

    return handlers


def _add_request_id(
    logger: FilteringBoundLogger,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Add request ID to log entries if available."""
    # Bound by the request logging middleware
    request_id = structlog.contextvars.get_contextvars().get("request_id")
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def _filter_sensitive_data(
    logger: FilteringBoundLogger,
    method_name: str,
    event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """Filter sensitive data from log entries."""

    def _filter_dict(data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: "[REDACTED]" if str(key).lower() in SENSITIVE_KEYS
                else _filter_dict(value)
                for key, value in data.items()
            }
        elif isinstance(data, list):
            return [_filter_dict(item) for item in data]
        return data

    return _filter_dict(event_dict)


def get_logger(name: str = __name__) -> FilteringBoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, typically __name__ of the calling module.

    Returns:
        Configured structlog logger instance.
    """
    return structlog.get_logger(name)


def log_request_start(
    logger: FilteringBoundLogger,
    method: str,
    path: str,
    client_ip: str,
    user_agent: Optional[str] = None
) -> None:
    """Log the start of an HTTP request."""
    logger.info(
        "Request started",
        method=method,
        path=path,
        client_ip=client_ip,
        user_agent=user_agent
    )


def log_request_end(
    logger: FilteringBoundLogger,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float
) -> None:
    """Log the end of an HTTP request."""
    logger.info(
        "Request completed",
        method=method,
        path=path,
        status_code=status_code,
        duration_ms=duration_ms
    )


def log_auth_event(
    logger: FilteringBoundLogger,
    event_type: str,
    user_id: Optional[str] = None,
    success: bool = True,
    details: Optional[Dict[str, Any]] = None
) -> None:
    """Log authentication events."""
    log = logger.info if success else logger.warning
    log(
        "Authentication event",
        event_type=event_type,
        user_id=user_id,
        success=success,
        **(details or {})
    )


def log_api_call(
    logger: FilteringBoundLogger,
    service: str,
    endpoint: str,
    method: str,
    status_code: int,
    duration_ms: float
) -> None:
    """Log external API calls."""
    logger.info(
        "External API call",
        service=service,
        endpoint=endpoint,
        method=method,
        status_code=status_code,
        duration_ms=duration_ms
    )


def log_error(
    logger: FilteringBoundLogger,
    error: Exception,
    context: Optional[Dict[str, Any]] = None
) -> None:
    """Log errors with context."""
    fields = {
        "error_type": type(error).__name__,
        "error_message": str(error),
    }
    fields.update(context or {})
    logger.error("Error occurred", **fields, exc_info=error)


# Initialize logging on module import
setup_logging()
