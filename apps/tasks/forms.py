"""
Forms for tasks app.

Includes:
- NewTaskForm: Per-column draft titles on the board; creates a task
- MoveTaskForm: Drag-and-drop status change posted by the board
- TaskForm: Working copy of a task on the details page
"""

import re

from django import forms
from django.core.exceptions import ValidationError
from django.utils import timezone

from .models import NewTask, TaskStatus, parse_deadline
from .board import STATUSES

DATETIME_LOCAL_FORMAT = '%Y-%m-%dT%H:%M'
MINUTE_PRECISION_RE = re.compile(r'^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}$')

INPUT_CLASS = 'input input-bordered w-full'


def draft_field_name(status):
    return f'draft_{str(status)}'


def canonical_deadline(value):
    """
    Map the datetime-local input value to the API's deadline string.

    "" -> None; "YYYY-MM-DDTHH:MM" -> "YYYY-MM-DDTHH:MM:00". Values that
    already carry seconds are passed through.
    """
    if not value:
        return None
    if MINUTE_PRECISION_RE.match(value):
        return f'{value}:00'
    return value


def editable_deadline(deadline):
    """
    Format an API deadline for a datetime-local input (local time, no seconds).

    Returns "" when there is no deadline.
    """
    deadline_at = parse_deadline(deadline)
    if deadline_at is None:
        return ''
    return timezone.localtime(deadline_at).strftime(DATETIME_LOCAL_FORMAT)


class NewTaskForm(forms.Form):
    """
    Board creation form.

    Every board action posts the drafts of all four columns
    (``draft_<STATUS>``) so typed text survives a re-render; ``status``
    names the column whose draft is being submitted.
    """

    status = forms.ChoiceField(choices=TaskStatus.choices, widget=forms.HiddenInput)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for status in STATUSES:
            self.fields[draft_field_name(status)] = forms.CharField(
                required=False,
                strip=False,
                widget=forms.TextInput(attrs={
                    'class': INPUT_CLASS,
                    'placeholder': 'Add new task (press Enter)',
                }),
            )

    def drafts(self):
        """Raw draft values of the columns present in the submitted data."""
        return {
            str(status): self.data[draft_field_name(status)]
            for status in STATUSES
            if draft_field_name(status) in self.data
        }

    def title(self):
        """Trimmed draft of the submitting column ("" means nothing to create)."""
        status = self.cleaned_data['status']
        return (self.cleaned_data.get(draft_field_name(status)) or '').strip()

    def to_new_task(self):
        return NewTask(
            title=self.title(),
            content='',
            deadline=None,
            status=TaskStatus(self.cleaned_data['status']),
        )


class MoveTaskForm(forms.Form):
    """Drop of a dragged card onto a column."""

    task_id = forms.CharField(required=False)
    new_status = forms.ChoiceField(choices=TaskStatus.choices)

    def task_pk(self):
        """Dragged task id, or None when it cannot be read as an integer."""
        try:
            return int(self.cleaned_data.get('task_id'))
        except (TypeError, ValueError):
            return None


def _status_option_label(status):
    return str(status).replace('INPROGRESS', 'IN PROGRESS')


class TaskForm(forms.Form):
    """
    Working copy of a task on the details page.

    ``deadline`` holds the datetime-local string shown to the user; the
    canonical API value (seconds appended, "" -> None) is derived in
    ``clean_deadline`` and sent by ``to_new_task``.
    """

    title = forms.CharField(
        widget=forms.TextInput(attrs={'class': INPUT_CLASS}),
    )
    content = forms.CharField(
        required=False,
        strip=False,
        widget=forms.Textarea(attrs={
            'class': 'textarea textarea-bordered min-h-[200px] w-full',
        }),
    )
    deadline = forms.CharField(
        required=False,
        widget=forms.DateTimeInput(attrs={
            'type': 'datetime-local',
            'class': INPUT_CLASS,
        }),
    )
    status = forms.ChoiceField(
        choices=[(str(s), _status_option_label(s)) for s in STATUSES],
        widget=forms.Select(attrs={'class': 'select select-bordered w-full'}),
    )

    @classmethod
    def from_task(cls, task):
        """Unbound form populated from a fetched task."""
        return cls(initial={
            'title': task.title,
            'content': task.content,
            'deadline': editable_deadline(task.deadline),
            'status': str(task.status),
        })

    def clean_deadline(self):
        value = self.cleaned_data.get('deadline', '')
        deadline = canonical_deadline(value)
        if deadline is not None:
            try:
                parse_deadline(deadline)
            except ValueError:
                raise ValidationError('Enter a valid date and time.')
        return deadline

    def to_new_task(self):
        return NewTask(
            title=self.cleaned_data['title'],
            content=self.cleaned_data.get('content', ''),
            deadline=self.cleaned_data.get('deadline'),
            status=TaskStatus(self.cleaned_data['status']),
        )
