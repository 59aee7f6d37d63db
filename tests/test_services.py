"""
Tests for the task API client: request shapes and failure mapping.
"""
import pytest

from apps.core.errors import TaskAPIError, TaskBoardError
from apps.tasks.models import NewTask, TaskStatus
from apps.tasks.services import TaskAPIClient, get_task_client

from .fakes import FakeResponse, FakeSession, connection_error

BASE = 'http://api.test/api'

TASK_PAYLOAD = {
    'id': 5,
    'title': 'Buy milk',
    'content': '',
    'deadline': None,
    'status': 'BLOCKED',
    'deleted_at': None,
}


def _client(*responses):
    session = FakeSession(*responses)
    return TaskAPIClient(BASE + '/', session=session), session


def test_list_tasks_parses_payload():
    client, session = _client(FakeResponse(200, [TASK_PAYLOAD]))
    tasks = client.list_tasks()

    assert [t.id for t in tasks] == [5]
    method, url, kwargs = session.requests[0]
    assert (method, url) == ('GET', f'{BASE}/tasks')
    assert kwargs['timeout'] is None


def test_create_task_posts_new_task_body():
    client, session = _client(FakeResponse(200, TASK_PAYLOAD))
    task = client.create_task(NewTask(title='Buy milk', content='', status=TaskStatus.BLOCKED))

    assert task.id == 5
    method, url, kwargs = session.requests[0]
    assert (method, url) == ('POST', f'{BASE}/tasks')
    assert kwargs['json'] == {'title': 'Buy milk', 'content': '', 'deadline': None, 'status': 'BLOCKED'}


def test_update_task_puts_full_record():
    client, session = _client(FakeResponse(200, TASK_PAYLOAD))
    new_task = NewTask(title='T', content='C', status=TaskStatus.DONE, deadline='2030-01-01T10:00:00')
    client.update_task(5, new_task)

    method, url, kwargs = session.requests[0]
    assert (method, url) == ('PUT', f'{BASE}/tasks/5')
    assert set(kwargs['json']) == {'title', 'content', 'deadline', 'status'}


def test_update_task_accepts_empty_body():
    client, _ = _client(FakeResponse(204))
    assert client.update_task(5, NewTask(title='T', content='', status=TaskStatus.TODO)) is None


def test_delete_task_sends_delete():
    client, session = _client(FakeResponse(200))
    client.delete_task(5)
    assert session.requests[0][:2] == ('DELETE', f'{BASE}/tasks/5')


def test_configured_timeout_is_passed_through():
    session = FakeSession(FakeResponse(200, []))
    TaskAPIClient(BASE, timeout=2.5, session=session).list_tasks()
    assert session.requests[0][2]['timeout'] == 2.5


@pytest.mark.parametrize('status_code', [400, 404, 500, 503])
def test_non_2xx_is_a_failure(status_code):
    client, _ = _client(FakeResponse(status_code))
    with pytest.raises(TaskAPIError) as exc_info:
        client.list_tasks()
    assert exc_info.value.message == 'Failed to fetch tasks'
    assert exc_info.value.status_code == status_code


def test_update_and_delete_failures_carry_status():
    client, _ = _client(FakeResponse(500), FakeResponse(404))
    with pytest.raises(TaskAPIError, match='Failed to update task: 500'):
        client.update_task(1, NewTask(title='T', content='', status=TaskStatus.TODO))
    with pytest.raises(TaskAPIError, match='Failed to delete task: 404'):
        client.delete_task(1)


def test_network_error_is_a_failure():
    client, _ = _client(connection_error())
    with pytest.raises(TaskAPIError, match='Failed to fetch task'):
        client.get_task(1)


def test_malformed_payload_is_a_failure():
    client, _ = _client(FakeResponse(200, {**TASK_PAYLOAD, 'status': 'ARCHIVED'}))
    with pytest.raises(TaskAPIError, match='Failed to create task'):
        client.create_task(NewTask(title='T', content='', status=TaskStatus.TODO))


def test_list_must_be_an_array():
    client, _ = _client(FakeResponse(200, {'tasks': []}))
    with pytest.raises(TaskAPIError):
        client.list_tasks()


def test_api_errors_are_board_errors():
    assert issubclass(TaskAPIError, TaskBoardError)


def test_get_task_client_uses_settings(settings):
    settings.KANBAN_API_URL = 'http://elsewhere:9000/api'
    settings.KANBAN_API_TIMEOUT = 4.0
    client = get_task_client()
    assert client.base_url == 'http://elsewhere:9000/api'
    assert client.timeout == 4.0
