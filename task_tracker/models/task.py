"""
Task module - The task record tracked by the service
"""

from dataclasses import dataclass, asdict, replace
from typing import Any, Dict

from .enums import TaskStatus


@dataclass
class Task:
    """A single tracked task."""
    id: int
    title: str = ""
    description: str = ""
    status: str = TaskStatus.PENDING.value

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def copy(self) -> "Task":
        return replace(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            description=data.get("description", ""),
            status=data.get("status") or TaskStatus.PENDING.value,
        )
