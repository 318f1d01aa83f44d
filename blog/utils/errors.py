"""
Error types and handling utilities.

Provides consistent error handling across the application:
- Classified, user-visible errors carrying an entity name and reason code
- Sanitizes unexpected error messages to prevent information leakage
- Logs detailed error information for debugging
"""

from __future__ import annotations
from flask import current_app, jsonify

# User-friendly generic error messages
GENERIC_MESSAGES = {
    "database": "We're experiencing technical difficulties. Please try again.",
    "validation": "The information provided is invalid. Please check and try again.",
    "not_found": "The requested item was not found.",
    "rate_limit": "Too many requests. Please slow down and try again.",
}


class BlogAlertError(Exception):
    """
    Base class for classified errors surfaced to the caller.

    Attributes:
        message: Short human-readable message
        entity_name: Entity the error relates to ("blog" or "entry")
        error_key: Machine-readable reason code (e.g. "invalidEmoji")
        status: HTTP status code used when rendered by the API
    """

    status = 400

    def __init__(self, message: str, entity_name: str, error_key: str, status: int | None = None):
        super().__init__(message)
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key
        if status is not None:
            self.status = status

    def to_dict(self) -> dict:
        return {
            "success": False,
            "error": self.message,
            "entityName": self.entity_name,
            "errorKey": self.error_key,
        }


class BadRequestError(BlogAlertError):
    """Malformed request (id present/missing, bad payload)."""


class NotFoundError(BlogAlertError):
    status = 404


class InvalidEmojiError(BlogAlertError):
    def __init__(self, entity_name: str = "entry"):
        super().__init__("Invalid Emoji", entity_name, "invalidEmoji")


class InvalidContentError(BlogAlertError):
    def __init__(self, entity_name: str = "entry"):
        super().__init__("Invalid Content", entity_name, "invalidContent")


class BlogNotFoundError(BlogAlertError):
    def __init__(self, entity_name: str = "entry"):
        super().__init__("Blog does not exist", entity_name, "blognotfound")


class InvalidPatternError(BlogAlertError):
    """A keyword pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str = "", entity_name: str = "blog"):
        message = f"Invalid keyword pattern: {pattern!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, entity_name, "invalidPattern")
        self.pattern = pattern


class StorageError(Exception):
    """Raised by the storage layer when a read or write fails."""


def sanitize_error(
    error: Exception,
    error_type: str = "database",
    log_prefix: str = ""
) -> str:
    """
    Sanitize error message for user display and log full details.

    Security: Prevents exposing internal error messages, stack traces, or
    database schema information to end users. Full details are logged for debugging.

    Args:
        error: The exception that occurred
        error_type: Type of error (database, validation, not_found, rate_limit)
        log_prefix: Optional prefix for log message context

    Returns:
        User-friendly error message
    """
    error_message = str(error)
    log_message = f"{log_prefix}: {error_message}" if log_prefix else error_message

    if error_type in ["validation", "not_found"]:
        # Expected errors (user mistakes), log as info
        current_app.logger.info(f"Expected error - {log_message}")
    else:
        current_app.logger.error(f"Unexpected error - {log_message}", exc_info=True)

    return GENERIC_MESSAGES.get(error_type, GENERIC_MESSAGES["database"])


def log_info(message: str, **context) -> None:
    """
    Log an info message with optional context.

    Examples:
        >>> log_info("Entry created", entry_id=12, blog_id=3)
    """
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        message = f"{message} | Context: {context_str}"

    current_app.logger.info(message)


def register_error_handlers(app) -> None:
    """Render classified and storage errors as JSON responses."""

    @app.errorhandler(BlogAlertError)
    def handle_alert(err: BlogAlertError):
        current_app.logger.info(
            f"Rejected request: {err.message} (entity={err.entity_name}, key={err.error_key})"
        )
        return jsonify(err.to_dict()), err.status

    @app.errorhandler(StorageError)
    def handle_storage(err: StorageError):
        return jsonify({
            "success": False,
            "error": sanitize_error(err, "database", "Storage failure"),
        }), 500

    @app.errorhandler(429)
    def handle_rate_limit(err):
        return jsonify({"success": False, "error": GENERIC_MESSAGES["rate_limit"]}), 429
