"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logging. Implementations MUST emit
structured records (message + key-value context) and MUST NOT be handed
secrets: credentials, ciphertext and data keys never appear in log context.

Log Levels:
    - DEBUG: Detailed diagnostic info (dev only)
    - INFO: Normal operational events
    - WARNING: Degraded behaviour (failed operations, handler errors)
    - ERROR: Operation failed unexpectedly, system continues
    - CRITICAL: System-wide failure, immediate attention

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("app_connection_created", connection_id=str(connection_id))

    request_logger = logger.bind(trace_id=trace_id, org_id=str(org_id))
    request_logger.info("request_started")  # trace_id, org_id auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Implementations may enrich logs with timestamp, level, and trace
    correlation.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Event name (snake_case; avoid f-strings, use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name.
            error: Optional exception instance; implementation adds
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Bound context is included in all subsequent log calls. The original
        logger instance remains unchanged.

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
