"""
Failure types and the per-request error handler.

Every failure of a data operation is normalised into a ``TaskBoardError``
and escalated to the error boundary (see ``apps.core.middleware``) instead
of being reported inline.

Usage in a view:

    handler = get_error_handler(request)
    try:
        tasks = client.list_tasks()
    except TaskAPIError as e:
        handler.throw_error(e)
"""

from typing import Optional, Union


class TaskBoardError(Exception):
    """Generic failure carrying a human-readable message."""

    default_message = 'An unknown error occurred'

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class TaskAPIError(TaskBoardError):
    """Network failure, non-2xx response or malformed payload from the task API."""

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class InvalidNavigationError(TaskBoardError):
    """The route does not identify a task (missing or non-numeric id)."""


class ErrorHandler:
    """
    Records a failure and re-raises it.

    ``throw_error`` halts the caller immediately. ``check`` is run before
    every template render (``failure_guard`` context processor), so a
    recorded failure keeps being raised no matter how often the same
    request tries to render.
    """

    def __init__(self):
        self.error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def throw_error(self, error: Union[Exception, str]):
        if not isinstance(error, Exception):
            error = TaskBoardError(str(error))
        self.error = error
        raise error

    def check(self):
        if self.error is not None:
            raise self.error


def get_error_handler(request) -> ErrorHandler:
    """Return the request's handler, creating it outside the middleware stack."""
    handler = getattr(request, 'error_handler', None)
    if handler is None:
        handler = ErrorHandler()
        request.error_handler = handler
    return handler
