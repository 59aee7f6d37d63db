"""
Custom template filters for tasks app.

Usage in templates:
    {% load task_tags %}

    {{ task.title|truncate_title:title_truncate_length }}
    {{ task|deadline_urgency }}
    {{ task|deadline_class }}
    {{ task|format_deadline }}
    {{ task.status|status_display }}
"""

from django import template
from django.conf import settings
from django.utils import timezone

from apps.tasks.board import OVERDUE, UPCOMING, deadline_urgency as classify_deadline
from apps.tasks.board import truncate_title as truncate
from apps.tasks.models import TaskStatus

register = template.Library()


# =============================================================================
# FILTERS - Title
# =============================================================================

@register.filter
def truncate_title(title, max_length=None):
    """
    Cut a long title for card display.

    The full title stays available through the card link's title attribute.

    Usage: {{ task.title|truncate_title:50 }}
    """
    if not title:
        return ''
    if max_length in (None, ''):
        max_length = settings.TITLE_TRUNCATE_LENGTH
    return truncate(str(title), int(max_length))


# =============================================================================
# FILTERS - Deadline
# =============================================================================

@register.filter
def deadline_urgency(task):
    """
    Classify a task's deadline: 'overdue', 'upcoming', 'normal'.

    Returns '' for tasks without a deadline.

    Usage: {{ task|deadline_urgency }}
    """
    if not task or not task.deadline:
        return ''
    return classify_deadline(
        task.deadline_at,
        upcoming_days=settings.DEADLINE_UPCOMING_DAYS,
    )


@register.filter
def deadline_class(task):
    """
    Return CSS class for a deadline's urgency.

    - overdue → text-error
    - upcoming → text-warning
    - normal / none → ''

    Usage: <p class="text-sm {{ task|deadline_class }}">
    """
    urgency_classes = {
        OVERDUE: 'text-error',
        UPCOMING: 'text-warning',
    }
    return urgency_classes.get(deadline_urgency(task), '')


@register.filter
def format_deadline(task):
    """
    Format a task's deadline in local time, e.g. "Jan 5, 2025 14:30".

    Usage: {{ task|format_deadline }}
    """
    if not task or not task.deadline:
        return ''
    return timezone.localtime(task.deadline_at).strftime("%b %-d, %Y %H:%M")


# =============================================================================
# FILTERS - Status Display
# =============================================================================

@register.filter
def status_display(status):
    """
    Return the column name for a status.

    Usage: {{ task.status|status_display }}
    """
    if status in TaskStatus.values:
        return TaskStatus(status).label
    return status
