"""
Tests for task data shapes: parsing API payloads and building request bodies.
"""
from datetime import datetime, timezone as dt_timezone

import pytest

from apps.tasks.models import NewTask, Task, TaskStatus, parse_deadline


def test_task_from_api_payload():
    """Test a full API payload is read verbatim"""
    task = Task.from_dict({
        'id': 7,
        'title': 'Ship release',
        'content': 'Tag and publish',
        'deadline': '2030-03-01T10:30:00',
        'status': 'INPROGRESS',
        'deleted_at': None,
    })
    assert task.id == 7
    assert task.status == TaskStatus.INPROGRESS
    assert task.deadline == '2030-03-01T10:30:00'
    assert task.deleted_at is None


def test_task_optional_fields_may_be_absent():
    task = Task.from_dict({'id': 1, 'title': 'T', 'content': '', 'status': 'DONE'})
    assert task.deadline is None
    assert task.deleted_at is None
    assert task.deadline_at is None


@pytest.mark.parametrize('status', ['todo', 'IN_PROGRESS', 'ARCHIVED', '', None])
def test_unknown_status_is_rejected(status):
    with pytest.raises(ValueError):
        Task.from_dict({'id': 1, 'title': 'T', 'content': '', 'status': status})


def test_empty_string_deadline_is_not_null():
    """Absence of a deadline must be null, not an empty string"""
    with pytest.raises(ValueError):
        Task.from_dict({'id': 1, 'title': 'T', 'content': '', 'status': 'TODO', 'deadline': ''})


def test_unparseable_deadline_is_rejected():
    with pytest.raises(ValueError):
        Task.from_dict({'id': 1, 'title': 'T', 'content': '', 'status': 'TODO', 'deadline': 'tomorrow'})


def test_missing_id_is_rejected():
    with pytest.raises(ValueError):
        Task.from_dict({'title': 'T', 'content': '', 'status': 'TODO'})


def test_naive_deadline_is_read_in_current_timezone():
    """TIME_ZONE is UTC in test settings"""
    parsed = parse_deadline('2030-01-05T12:00:00')
    assert parsed == datetime(2030, 1, 5, 12, 0, tzinfo=dt_timezone.utc)


def test_to_new_task_replaces_only_status():
    task = Task(id=3, title='T', content='C', status=TaskStatus.TODO, deadline='2030-01-05T12:00:00')
    new_task = task.to_new_task(status=TaskStatus.DONE)
    assert new_task == NewTask(title='T', content='C', status=TaskStatus.DONE, deadline='2030-01-05T12:00:00')


def test_new_task_body_has_all_mutable_fields():
    body = NewTask(title='Buy milk', content='', status=TaskStatus.BLOCKED).to_dict()
    assert body == {'title': 'Buy milk', 'content': '', 'deadline': None, 'status': 'BLOCKED'}


def test_status_labels():
    assert [s.label for s in TaskStatus] == ['To Do', 'In Progress', 'Blocked', 'Done']
