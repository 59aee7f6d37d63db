"""
Views for core app.

Includes:
- not_found: transient page for unknown routes that sends the visitor
  back to the board after a short delay
"""

from django.conf import settings
from django.shortcuts import render


def not_found(request, exception=None):
    """
    Page not found. Redirects to the board after NOT_FOUND_REDIRECT_SECONDS.

    The redirect is a meta refresh, so it never fires once the visitor has
    left the page.
    """
    return render(request, 'errors/not_found.html', {
        'redirect_seconds': settings.NOT_FOUND_REDIRECT_SECONDS,
    }, status=404)
