"""
Task Tracker - In-memory task tracking HTTP service

Clients create, list, fetch, update, and delete task records over a small
REST surface:

    GET    /tasks          list every task in creation order
    POST   /tasks          create a task (status defaults to "pending")
    GET    /tasks/{id}     fetch one task
    PUT    /tasks/{id}     merge non-empty fields into a task
    DELETE /tasks/{id}     remove a task

Installation:
pip install -e .

Configuration:
    Settings come from the environment, a .env file, or config.properties:

    TRACKER_HOST=127.0.0.1
    TRACKER_PORT=8080
    TRACKER_LOG_LEVEL=INFO

Example:
    >>> from api.task_store import InMemoryTaskStore
    >>> store = InMemoryTaskStore()
    >>> task = store.create(title="Buy milk")
    >>> task.to_dict()
    {'id': 1, 'title': 'Buy milk', 'description': '', 'status': 'pending'}
"""

__version__ = "1.0.0"
__all__ = [
    'ServerConfig',
    'EnvConfig',
    'ConfigProperties',
    'TaskStatus',
    'Task',
]

from task_tracker.config import ServerConfig, EnvConfig, ConfigProperties
from task_tracker.models import TaskStatus, Task
