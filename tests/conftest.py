# tests/conftest.py

import pytest

from apps.tasks.models import Task, TaskStatus

from .fakes import FakeTaskAPI


@pytest.fixture()
def sample_tasks():
    """A small board: two dated tasks, one undated, one in BLOCKED."""
    return [
        Task(id=1, title='Write report', content='Q3 numbers', status=TaskStatus.TODO,
             deadline='2030-01-10T09:00:00'),
        Task(id=2, title='Call supplier', content='', status=TaskStatus.TODO),
        Task(id=3, title='Fix login bug', content='', status=TaskStatus.TODO,
             deadline='2030-01-05T12:00:00'),
        Task(id=4, title='Wait for review', content='', status=TaskStatus.BLOCKED),
    ]


@pytest.fixture()
def fake_api(monkeypatch, sample_tasks):
    """
    Replace the HTTP client used by the views with an in-memory fake.
    """
    api = FakeTaskAPI(sample_tasks)
    monkeypatch.setattr('apps.tasks.views.get_task_client', lambda: api)
    return api


@pytest.fixture()
def loaded_client(client, fake_api):
    """Test client whose session already holds the board (GET / done)."""
    response = client.get('/')
    assert response.status_code == 200
    fake_api.calls.clear()
    return client


@pytest.fixture()
def htmx_headers():
    return {'HTTP_HX_REQUEST': 'true'}
