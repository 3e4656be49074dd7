"""
Models module - Data structures for the task tracker
"""

from .enums import TaskStatus
from .task import Task

__all__ = [
    'TaskStatus',
    'Task',
]
