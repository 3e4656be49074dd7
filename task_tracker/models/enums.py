"""
Enums module - Task status enumeration
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Well-known task statuses. Any other string is still a valid status."""
    PENDING = "pending"
    COMPLETED = "completed"
