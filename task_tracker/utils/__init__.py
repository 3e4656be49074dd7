"""
Utilities module - Logging and the exception hierarchy
"""

from .logger import get_logger
from .comprehensive_logger import ComprehensiveLogger, TaskLogger
from .exceptions import (
    TaskTrackerError,
    ConfigurationError,
    BadRequestError,
    InvalidTaskIdError,
    MalformedBodyError,
    MethodNotAllowedError,
    TaskNotFoundError,
)

__all__ = [
    'get_logger',
    'ComprehensiveLogger',
    'TaskLogger',
    'TaskTrackerError',
    'ConfigurationError',
    'BadRequestError',
    'InvalidTaskIdError',
    'MalformedBodyError',
    'MethodNotAllowedError',
    'TaskNotFoundError',
]
