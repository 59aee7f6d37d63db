"""
Error boundary middleware.

Catches any failure raised while a view runs or while its template
renders, and replaces the whole page with a recovery panel. The panel's
single action is a full navigation to the board, which discards the
visitor's in-flight state; there is no retry in place.

HTMX requests get the panel with a 200 status and HX-Retarget/HX-Reswap
headers, because htmx does not swap error responses.
"""

import logging

from django.http import Http404, HttpResponse
from django.template.loader import render_to_string
from django_htmx.http import reswap, retarget

from .errors import TaskBoardError, get_error_handler

logger = logging.getLogger(__name__)


class BoundaryState:
    """Two-state machine: ok -> failed(message), at most once per request."""

    OK = 'ok'
    FAILED = 'failed'

    def __init__(self):
        self.status = self.OK
        self.error_message = None

    @property
    def failed(self):
        return self.status == self.FAILED

    def fail(self, message):
        """Move to failed. Returns False when the boundary had already failed."""
        if self.failed:
            return False
        self.status = self.FAILED
        self.error_message = message
        return True


class ErrorBoundaryMiddleware:
    """
    Wrap every request in an error boundary.

    Attaches ``request.error_handler`` (see ``apps.core.errors``) and
    ``request.error_boundary`` before the view runs.
    """

    template_name = 'errors/boundary.html'

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        get_error_handler(request)
        request.error_boundary = BoundaryState()
        return self.get_response(request)

    def process_exception(self, request, exception):
        # Unknown routes are not failures; the not-found page handles them
        if isinstance(exception, Http404):
            return None

        boundary = getattr(request, 'error_boundary', None)
        if boundary is None:
            boundary = request.error_boundary = BoundaryState()

        message = str(exception) or TaskBoardError.default_message
        if not boundary.fail(message):
            return None

        if isinstance(exception, TaskBoardError):
            logger.error('Error caught by boundary on %s: %s', request.path, message)
        else:
            logger.exception('Unexpected error caught by boundary on %s', request.path)

        return self.render_panel(request, boundary)

    def render_panel(self, request, boundary):
        # Rendered without the request so context processors (and with them
        # the failure guard) do not run again.
        content = render_to_string(self.template_name, {
            'title': 'Something went wrong',
            'message': boundary.error_message,
            'action_label': 'Go to Home',
        })

        if getattr(request, 'htmx', False):
            response = HttpResponse(content, status=200)
            response = retarget(response, 'body')
            return reswap(response, 'innerHTML')

        return HttpResponse(content, status=500)
