"""
Task data shapes.

The task collection is owned by the external REST API, so these are plain
data classes rather than database models:

- TaskStatus: the four board columns (closed enumeration)
- Task: a task as returned by the API, identified by its server-assigned id
- NewTask: the mutable subset sent on create and update (full replace)
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Optional

from django.db import models
from django.utils import timezone
from django.utils.dateparse import parse_datetime


class TaskStatus(models.TextChoices):
    TODO = 'TODO', 'To Do'
    INPROGRESS = 'INPROGRESS', 'In Progress'
    BLOCKED = 'BLOCKED', 'Blocked'
    DONE = 'DONE', 'Done'


def parse_status(value) -> TaskStatus:
    """Return the TaskStatus for ``value``; anything else is a ValueError."""
    if value not in TaskStatus.values:
        raise ValueError(f'Invalid status: {value}')
    return TaskStatus(value)


def parse_deadline(value: Optional[str]) -> Optional[datetime]:
    """
    Parse an API timestamp into an aware datetime.

    Naive timestamps (the API sends local time without offset) are read in
    the current time zone. Returns None for a missing deadline; raises
    ValueError for an unparseable one.
    """
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f'Invalid timestamp: {value!r}')
    parsed = parse_datetime(value)
    if parsed is None:
        raise ValueError(f'Invalid timestamp: {value!r}')
    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed)
    return parsed


def _optional_timestamp(payload: Dict[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    # Empty string is not a valid "no deadline" marker
    if value == '':
        raise ValueError(f'{key} must be a timestamp or null')
    if value is not None:
        parse_deadline(value)
    return value


@dataclass(frozen=True)
class NewTask:
    """Body of create and update requests."""

    title: str
    content: str
    status: TaskStatus
    deadline: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'title': self.title,
            'content': self.content,
            'deadline': self.deadline,
            'status': str(self.status),
        }


@dataclass(frozen=True)
class Task:
    """
    A task as stored by the API.

    ``deadline`` and ``deleted_at`` keep the API's timestamp strings
    verbatim so an update can send them back unchanged.
    """

    id: int
    title: str
    content: str
    status: TaskStatus
    deadline: Optional[str] = None
    deleted_at: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'Task':
        """Build a Task from an API payload. Raises ValueError if malformed."""
        if not isinstance(payload, dict):
            raise ValueError('Task payload must be an object')
        try:
            task_id = payload['id']
            title = payload['title']
            status = payload['status']
        except KeyError as e:
            raise ValueError(f'Task payload is missing {e.args[0]!r}') from e
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise ValueError(f'Invalid task id: {task_id!r}')

        return cls(
            id=task_id,
            title=str(title),
            content=str(payload.get('content') or ''),
            status=parse_status(status),
            deadline=_optional_timestamp(payload, 'deadline'),
            deleted_at=_optional_timestamp(payload, 'deleted_at'),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'content': self.content,
            'deadline': self.deadline,
            'status': str(self.status),
            'deleted_at': self.deleted_at,
        }

    @property
    def deadline_at(self) -> Optional[datetime]:
        return parse_deadline(self.deadline)

    def to_new_task(self, status: Optional[TaskStatus] = None) -> NewTask:
        """The mutable fields of this task, optionally with another status."""
        return NewTask(
            title=self.title,
            content=self.content,
            deadline=self.deadline,
            status=status if status is not None else self.status,
        )

    def with_status(self, status: TaskStatus) -> 'Task':
        return replace(self, status=status)
