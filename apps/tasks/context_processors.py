"""
Context processors for tasks app.

Provides board display settings to templates.
"""

from django.conf import settings


def board_settings(request):
    """Expose display limits used by the board templates."""
    return {
        'title_truncate_length': settings.TITLE_TRUNCATE_LENGTH,
        'deadline_upcoming_days': settings.DEADLINE_UPCOMING_DAYS,
    }
