"""
Tests for task template filters.
"""
from datetime import timedelta

from django.utils import timezone

from apps.tasks.models import Task, TaskStatus
from apps.tasks.templatetags import task_tags


def _task(deadline=None):
    return Task(id=1, title='T', content='', status=TaskStatus.TODO, deadline=deadline)


def _iso(dt):
    return dt.isoformat()


def test_truncate_title_uses_setting_by_default(settings):
    settings.TITLE_TRUNCATE_LENGTH = 5
    assert task_tags.truncate_title('abcdefgh') == 'abcde...'


def test_truncate_title_with_argument():
    assert task_tags.truncate_title('abcdefgh', 3) == 'abc...'
    assert task_tags.truncate_title('', 3) == ''


def test_deadline_class_by_urgency():
    now = timezone.now()
    assert task_tags.deadline_class(_task(_iso(now - timedelta(hours=1)))) == 'text-error'
    assert task_tags.deadline_class(_task(_iso(now + timedelta(days=2)))) == 'text-warning'
    assert task_tags.deadline_class(_task(_iso(now + timedelta(days=30)))) == ''
    assert task_tags.deadline_class(_task()) == ''


def test_deadline_urgency_filter():
    now = timezone.now()
    assert task_tags.deadline_urgency(_task(_iso(now - timedelta(days=1)))) == 'overdue'
    assert task_tags.deadline_urgency(_task()) == ''


def test_format_deadline():
    assert task_tags.format_deadline(_task('2030-01-05T14:30:00')) == 'Jan 5, 2030 14:30'
    assert task_tags.format_deadline(_task()) == ''


def test_status_display():
    assert task_tags.status_display('INPROGRESS') == 'In Progress'
    assert task_tags.status_display('OTHER') == 'OTHER'
