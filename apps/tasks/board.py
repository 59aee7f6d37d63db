"""
Board logic: the visitor's copy of the task collection and display rules.

BoardState is immutable; every mutation returns a new state so a handler
always applies its change on top of the latest stored state. The state
lives in the session between requests (load_board / save_board).

Display rules (never mutate state):
- sort_for_display: ascending deadline, undated tasks last, stable
- deadline_urgency: overdue / upcoming / normal
- truncate_title: cut long titles for card display
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from django.utils import timezone

from .models import Task, TaskStatus

SESSION_KEY = 'kanban_board'

STATUSES: Tuple[TaskStatus, ...] = (
    TaskStatus.TODO,
    TaskStatus.INPROGRESS,
    TaskStatus.BLOCKED,
    TaskStatus.DONE,
)

OVERDUE = 'overdue'
UPCOMING = 'upcoming'
NORMAL = 'normal'

ELLIPSIS = '...'


def _empty_drafts() -> Dict[str, str]:
    return {str(status): '' for status in STATUSES}


@dataclass(frozen=True)
class BoardState:
    tasks: Tuple[Task, ...] = ()
    drafts: Mapping[str, str] = field(default_factory=_empty_drafts)

    # -------------------- queries --------------------
    def find(self, task_id: Optional[int]) -> Optional[Task]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def column(self, status: TaskStatus) -> List[Task]:
        """Tasks of one column in display order."""
        return sort_for_display(t for t in self.tasks if t.status == status)

    def draft(self, status: TaskStatus) -> str:
        return self.drafts.get(str(status), '')

    def columns(self) -> List[Dict[str, object]]:
        return [
            {
                'status': status,
                'title': status.label,
                'tasks': self.column(status),
                'draft': self.draft(status),
            }
            for status in STATUSES
        ]

    # -------------------- transforms --------------------
    def with_tasks(self, tasks: Iterable[Task]) -> 'BoardState':
        return replace(self, tasks=tuple(tasks))

    def with_created(self, task: Task) -> 'BoardState':
        """Append a task returned by the API and clear its column's draft."""
        drafts = dict(self.drafts)
        drafts[str(task.status)] = ''
        return replace(self, tasks=self.tasks + (task,), drafts=drafts)

    def with_deleted(self, task_id: int) -> 'BoardState':
        return replace(self, tasks=tuple(t for t in self.tasks if t.id != task_id))

    def with_moved(self, task_id: int, status: TaskStatus) -> 'BoardState':
        return replace(self, tasks=tuple(
            t.with_status(status) if t.id == task_id else t for t in self.tasks
        ))

    def with_draft(self, status: TaskStatus, value: str) -> 'BoardState':
        drafts = dict(self.drafts)
        drafts[str(status)] = value
        return replace(self, drafts=drafts)

    def with_drafts(self, values: Mapping[str, str]) -> 'BoardState':
        """Replace the drafts of the columns present in ``values``."""
        drafts = dict(self.drafts)
        for status in STATUSES:
            if str(status) in values:
                drafts[str(status)] = values[str(status)]
        return replace(self, drafts=drafts)

    # -------------------- serialization --------------------
    def to_session(self) -> Dict[str, object]:
        return {
            'tasks': [t.to_dict() for t in self.tasks],
            'drafts': dict(self.drafts),
        }

    @classmethod
    def from_session(cls, data: Optional[Mapping[str, object]]) -> 'BoardState':
        if not data:
            return cls()
        state = cls(tasks=tuple(Task.from_dict(item) for item in data.get('tasks', [])))
        return state.with_drafts(data.get('drafts') or {})


def load_board(session) -> BoardState:
    return BoardState.from_session(session.get(SESSION_KEY))


def save_board(session, state: BoardState) -> None:
    session[SESSION_KEY] = state.to_session()


# -------------------- display rules --------------------

def sort_for_display(tasks: Iterable[Task]) -> List[Task]:
    """Ascending deadline; tasks without one after all dated tasks."""
    def key(task: Task):
        deadline_at = task.deadline_at
        return (deadline_at is None, deadline_at.timestamp() if deadline_at else 0)
    return sorted(tasks, key=key)


def deadline_urgency(deadline: Optional[datetime], now: Optional[datetime] = None, upcoming_days: int = 7) -> Optional[str]:
    """
    Classify a deadline for display.

    Returns None without a deadline, OVERDUE strictly before now, UPCOMING
    within the next ``upcoming_days``, NORMAL otherwise.
    """
    if deadline is None:
        return None
    now = now or timezone.now()
    if deadline < now:
        return OVERDUE
    if deadline <= now + timedelta(days=upcoming_days):
        return UPCOMING
    return NORMAL


def truncate_title(text: str, max_length: int = 50) -> str:
    """Cut ``text`` to ``max_length`` characters and mark the cut with an ellipsis."""
    if len(text) <= max_length:
        return text
    return text[:max_length].strip() + ELLIPSIS
