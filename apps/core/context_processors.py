"""
Context processors for core app.
"""

from .errors import get_error_handler


def failure_guard(request):
    """
    Re-raise a failure recorded earlier in this request.

    Runs on every template render with a request context, so no page can
    be produced past a signalled failure.
    """
    get_error_handler(request).check()
    return {}
