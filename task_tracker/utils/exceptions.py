"""
Exception Hierarchy for the Task Tracker

Every error the service raises on purpose derives from TaskTrackerError and
carries the HTTP status the API answers with, so handlers never need to map
exception types to codes by hand.

Exception Categories:
- Configuration Errors: invalid settings passed to the server
- Request Errors: malformed task ids or request bodies, unsupported methods
- Lookup Errors: no task stored under the requested id

Usage:
    from task_tracker.utils.exceptions import TaskNotFoundError

    task = store.get(task_id)   # raises TaskNotFoundError when absent
"""

from typing import Optional, Any, Dict


# ============================================================================
# Base Exception
# ============================================================================

class TaskTrackerError(Exception):
    """
    Base exception for all task tracker errors.

    Subclasses set ``http_status`` and a default message; the API layer turns
    any TaskTrackerError into a plain-text response with that status.
    """

    http_status: int = 500
    default_message: str = "Internal Server Error"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message (defaults per subclass)
            error_code: Optional error code for categorization
            details: Optional dictionary with additional error context
        """
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "status": self.http_status,
            "details": self.details
        }

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigurationError(TaskTrackerError):
    """Raised when a server setting has an invalid value."""

    def __init__(
        self,
        setting_name: str,
        message: str,
        actual_value: Optional[Any] = None
    ):
        details = {"setting_name": setting_name}
        if actual_value is not None:
            details["actual_value"] = str(actual_value)

        super().__init__(
            message=f"Configuration error for '{setting_name}': {message}",
            error_code="CONFIG_ERROR",
            details=details
        )
        self.setting_name = setting_name


# ============================================================================
# Request Errors
# ============================================================================

class BadRequestError(TaskTrackerError):
    """Raised when the client sent something the service cannot parse."""

    http_status = 400
    default_message = "Bad Request"


class InvalidTaskIdError(BadRequestError):
    """Raised when the path suffix after /tasks/ is not an integer."""

    default_message = "Invalid Task ID"

    def __init__(self, raw_id: str):
        super().__init__(
            error_code="INVALID_TASK_ID",
            details={"raw_id": raw_id}
        )
        self.raw_id = raw_id


class MalformedBodyError(BadRequestError):
    """Raised when a request body is not a valid JSON task."""

    def __init__(self, reason: Optional[str] = None):
        super().__init__(
            error_code="MALFORMED_BODY",
            details={"reason": reason} if reason else None
        )


class MethodNotAllowedError(TaskTrackerError):
    """Raised when a path does not support the request method."""

    http_status = 405
    default_message = "Method Not Allowed"

    def __init__(self, method: str, path: str):
        super().__init__(
            error_code="METHOD_NOT_ALLOWED",
            details={"method": method, "path": path}
        )


# ============================================================================
# Lookup Errors
# ============================================================================

class TaskNotFoundError(TaskTrackerError):
    """Raised by the task store when no task has the requested id."""

    http_status = 404
    default_message = "Task Not Found"

    def __init__(self, task_id: int):
        super().__init__(
            error_code="TASK_NOT_FOUND",
            details={"task_id": task_id}
        )
        self.task_id = task_id
