"""
Secure logging utilities for the database bootstrap.

This module provides logging helpers that keep connection credentials out of
the logs while still leaving an audit trail of every database operation.
"""

import logging
import logging.config
import re
from typing import Any, Optional, TextIO


class SecureLogger:
    """
    Secure logging wrapper that sanitizes sensitive data before logging.

    Connection strings and property dumps may carry passwords; everything that
    passes through this wrapper is filtered first.
    """

    # Patterns that should never appear in logs
    SENSITIVE_PATTERNS = [
        r'(?i)(password)[\'"]?\s*[:=]\s*[\'"]?([^\s\'";]+)',  # Password fields
        r'(?i)(pwd)[\'"]?\s*[:=]\s*[\'"]?([^\s\'";]+)',  # ODBC PWD fields
        r'(?i)(secret)[\'"]?\s*[:=]\s*[\'"]?([^\s\'";]+)',  # Secret fields
        r'(?i)(token)[\'"]?\s*[:=]\s*[\'"]?([^\s\'";]+)',  # Token fields
    ]

    def __init__(self, logger: logging.Logger, production_mode: Optional[bool] = None):
        """
        Initialize secure logger wrapper.

        Args:
            logger: The underlying logger instance
            production_mode: If True, SQL text is reduced to a short summary.
                None follows the process-wide mode.
        """
        self.logger = logger
        self._production_mode = production_mode

    @property
    def production_mode(self) -> bool:
        if self._production_mode is None:
            return _PRODUCTION_MODE
        return self._production_mode

    def _sanitize_message(self, message: str) -> str:
        """
        Sanitize log message by masking credentials.

        Args:
            message: Original log message

        Returns:
            Sanitized message safe for logging
        """
        sanitized = str(message)
        for pattern in self.SENSITIVE_PATTERNS:
            sanitized = re.sub(pattern, r"\1=***REDACTED***", sanitized)
        return sanitized

    def _get_sql_summary(self, sql: Optional[str]) -> str:
        """
        Create a safe summary of a SQL statement for logging.

        Args:
            sql: SQL statement text

        Returns:
            Safe summary of the SQL statement
        """
        if not sql:
            return "<empty query>"

        sql_clean = " ".join(sql.split())  # Normalize whitespace
        words = sql_clean.split()
        first_word = words[0].upper() if words else "UNKNOWN"

        if self.production_mode:
            return f"<{first_word} statement, {len(words)} tokens>"
        if len(sql_clean) > 100:
            return f"{first_word}: {sql_clean[:50]}...{sql_clean[-20:]}"
        return f"{first_word}: {sql_clean}"

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message with security filtering."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(self._sanitize_message(message), **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message with security filtering."""
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(self._sanitize_message(message), **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message with security filtering."""
        self.logger.warning(self._sanitize_message(message), **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message with security filtering."""
        self.logger.error(self._sanitize_message(message), **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        """Log critical message with security filtering."""
        self.logger.critical(self._sanitize_message(message), **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log exception message with security filtering."""
        self.logger.exception(self._sanitize_message(message), **kwargs)

    def log_database_operation(
        self,
        operation: str,
        success: bool = True,
        duration_ms: Optional[float] = None,
        row_count: Optional[int] = None,
    ) -> None:
        """
        Log database operation in an audit-friendly way.

        Args:
            operation: Type of operation (CONNECT, SCHEMA, SEED, FETCH, ...)
            success: Whether operation succeeded
            duration_ms: Operation duration in milliseconds
            row_count: Number of rows affected/returned
        """
        status = "SUCCESS" if success else "FAILED"
        duration_str = f", {duration_ms:.2f}ms" if duration_ms is not None else ""
        row_str = f", {row_count} rows" if row_count is not None else ""

        self.info(f"DB_AUDIT: {operation} {status}{duration_str}{row_str}")

    def log_sql_execution(
        self,
        sql: Optional[str],
        success: bool = True,
        duration_ms: Optional[float] = None,
    ) -> None:
        """
        Securely log SQL statement execution.

        Args:
            sql: SQL statement text
            success: Whether execution succeeded
            duration_ms: Execution duration in milliseconds
        """
        sql_summary = self._get_sql_summary(sql)
        status = "SUCCESS" if success else "FAILED"
        duration_str = f" ({duration_ms:.2f}ms)" if duration_ms is not None else ""

        self.debug(f"SQL_EXEC: {sql_summary} | {status}{duration_str}")

    def log_authentication_event(
        self,
        event_type: str,
        username: Optional[str] = None,
        success: bool = True,
        details: Optional[str] = None,
    ) -> None:
        """
        Log authentication events securely.

        Args:
            event_type: Type of event (DB_CONNECT, ...)
            username: Username (will be partially masked)
            success: Whether event succeeded
            details: Additional details (will be sanitized)
        """
        status = "SUCCESS" if success else "FAILED"
        user_str = ""

        if username:
            masked_user = f"{username[:2]}***{username[-1:]}" if len(username) > 4 else "***"
            user_str = f" user={masked_user}"

        details_str = f" | {self._sanitize_message(details)}" if details else ""

        self.info(f"AUTH: {event_type} {status}{user_str}{details_str}")


def get_secure_logger(name: str, production_mode: Optional[bool] = None) -> SecureLogger:
    """
    Get a secure logger instance.

    Args:
        name: Logger name (typically __name__)
        production_mode: Enable production filtering; defaults to the
            process-wide mode set by configure_secure_logging

    Returns:
        SecureLogger instance
    """
    return SecureLogger(logging.getLogger(name), production_mode=production_mode)


def configure_secure_logging(config_stream: TextIO, production_mode: bool = True) -> None:
    """
    Configure logging for the entire application from an INI style stream.

    Args:
        config_stream: Text stream in logging.config.fileConfig format
        production_mode: Enable production security filtering
    """
    logging.config.fileConfig(config_stream, disable_existing_loggers=False)

    global _PRODUCTION_MODE
    _PRODUCTION_MODE = production_mode


# Module-level variable to track production mode
_PRODUCTION_MODE = True

