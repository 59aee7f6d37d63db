"""
Django test settings for kanban_board project.

Used by pytest-django (see pyproject.toml).
"""

from .base import *

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

TIME_ZONE = 'UTC'

KANBAN_API_URL = 'http://api.test/api'
KANBAN_API_TIMEOUT = None

TITLE_TRUNCATE_LENGTH = 50
DEADLINE_UPCOMING_DAYS = 7
NOT_FOUND_REDIRECT_SECONDS = 3

CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'kanban-board-tests',
    }
}
SESSION_ENGINE = 'django.contrib.sessions.backends.cache'
