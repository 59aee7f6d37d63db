"""
Service layer for tasks app: HTTP client for the task REST API.

All calls to the API go through TaskAPIClient so views never deal with
transport details. Every failure (network error, non-2xx status,
malformed payload) is raised as TaskAPIError; callers escalate it to the
error boundary.

Endpoints:
- GET    /tasks        -> list of tasks
- GET    /tasks/<id>   -> task
- POST   /tasks        -> created task
- PUT    /tasks/<id>   -> updated task or empty body
- DELETE /tasks/<id>   -> empty body
"""

import logging
from typing import List, Optional

import requests
from django.conf import settings

from apps.core.errors import TaskAPIError
from .models import NewTask, Task

logger = logging.getLogger(__name__)


class TaskAPIClient:
    """
    Thin client over ``requests`` for the task API.

    Args:
        base_url: API root, e.g. ``http://localhost:3000/api``
        timeout: Seconds per request; None keeps the transport default
        session: Optional ``requests.Session`` (or compatible) to reuse
    """

    def __init__(self, base_url: str, timeout: Optional[float] = None, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _request(self, method: str, path: str, failure: str, include_status: bool = False, **kwargs):
        url = self._url(path)
        logger.debug('%s %s', method, url)
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.warning('%s %s failed: %s', method, url, e)
            raise TaskAPIError(failure) from e

        if not response.ok:
            logger.warning('%s %s returned %s', method, url, response.status_code)
            message = f'{failure}: {response.status_code}' if include_status else failure
            raise TaskAPIError(message, status_code=response.status_code)
        return response

    @staticmethod
    def _json(response, failure: str):
        try:
            return response.json()
        except ValueError as e:
            raise TaskAPIError(failure) from e

    @staticmethod
    def _task(payload, failure: str) -> Task:
        try:
            return Task.from_dict(payload)
        except ValueError as e:
            logger.warning('Malformed task payload: %s', e)
            raise TaskAPIError(failure) from e

    # -------------------- operations --------------------

    def list_tasks(self) -> List[Task]:
        failure = 'Failed to fetch tasks'
        payload = self._json(self._request('GET', 'tasks', failure), failure)
        if not isinstance(payload, list):
            raise TaskAPIError(failure)
        return [self._task(item, failure) for item in payload]

    def get_task(self, task_id: int) -> Task:
        failure = 'Failed to fetch task'
        response = self._request('GET', f'tasks/{task_id}', failure)
        return self._task(self._json(response, failure), failure)

    def create_task(self, new_task: NewTask) -> Task:
        failure = 'Failed to create task'
        response = self._request('POST', 'tasks', failure, json=new_task.to_dict())
        task = self._task(self._json(response, failure), failure)
        logger.info('Created task %s in %s', task.id, task.status)
        return task

    def update_task(self, task_id: int, new_task: NewTask) -> Optional[Task]:
        """Replace all mutable fields. Returns None when the API sends no body."""
        failure = 'Failed to update task'
        response = self._request(
            'PUT', f'tasks/{task_id}', failure, include_status=True, json=new_task.to_dict()
        )
        logger.info('Updated task %s', task_id)
        if not response.content:
            return None
        return self._task(self._json(response, failure), failure)

    def delete_task(self, task_id: int) -> None:
        self._request('DELETE', f'tasks/{task_id}', 'Failed to delete task', include_status=True)
        logger.info('Deleted task %s', task_id)


def get_task_client() -> TaskAPIClient:
    """Build a client from settings (KANBAN_API_URL, KANBAN_API_TIMEOUT)."""
    return TaskAPIClient(settings.KANBAN_API_URL, timeout=settings.KANBAN_API_TIMEOUT)
