"""
Django base settings for kanban_board project.
Shared settings between development, production and test.

The task collection lives behind an external REST API; this project only
renders the board and talks to that API over HTTP, so no database is
configured.
"""

from pathlib import Path
from decouple import config, Csv

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = config('SECRET_KEY', default='django-insecure-change-me-in-production')

ALLOWED_HOSTS = config('ALLOWED_HOSTS', default='localhost,127.0.0.1', cast=Csv())

# Application definition
DJANGO_APPS = [
    'django.contrib.sessions',
    'django.contrib.staticfiles',
]

THIRD_PARTY_APPS = [
    'django_htmx',
]

LOCAL_APPS = [
    'apps.core',
    'apps.tasks',
]

INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'django.contrib.sessions.middleware.SessionMiddleware',
    'django.middleware.common.CommonMiddleware',
    'django.middleware.csrf.CsrfViewMiddleware',
    'django.middleware.clickjacking.XFrameOptionsMiddleware',
    'django_htmx.middleware.HtmxMiddleware',
    'apps.core.middleware.ErrorBoundaryMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [BASE_DIR / 'templates'],
        'APP_DIRS': True,
        'OPTIONS': {
            'context_processors': [
                'django.template.context_processors.debug',
                'django.template.context_processors.request',
                'apps.core.context_processors.failure_guard',
                'apps.tasks.context_processors.board_settings',
            ],
        },
    },
]

WSGI_APPLICATION = 'config.wsgi.application'

# No local persistence: tasks are owned by the REST API
DATABASES = {}


# =============================================================================
# INTERNATIONALIZATION & TIMEZONE
# =============================================================================
LANGUAGE_CODE = 'en-us'

# Naive deadlines coming from the API are interpreted in this zone
TIME_ZONE = config('TIME_ZONE', default='UTC')

USE_I18N = True

USE_TZ = True


# =============================================================================
# STATIC FILES
# =============================================================================
STATIC_URL = 'static/'
STATICFILES_DIRS = [BASE_DIR / 'static']
STATIC_ROOT = BASE_DIR / 'staticfiles'


# =============================================================================
# SESSION SETTINGS
# =============================================================================
# The board's per-visitor copy of the task collection is kept in the session.
# Cache-backed sessions avoid requiring a database.
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
        'LOCATION': 'kanban-board',
    }
}
SESSION_ENGINE = config('SESSION_ENGINE', default='django.contrib.sessions.backends.cache')
SESSION_COOKIE_AGE = config('SESSION_COOKIE_AGE_HOURS', default=8, cast=int) * 3600


# =============================================================================
# TASK API
# =============================================================================
KANBAN_API_URL = config('KANBAN_API_URL', default='http://localhost:3000/api')

# Seconds; empty means the transport default (no timeout)
KANBAN_API_TIMEOUT = config(
    'KANBAN_API_TIMEOUT',
    default='',
    cast=lambda value: float(value) if value else None,
)


# =============================================================================
# BOARD DISPLAY
# =============================================================================
TITLE_TRUNCATE_LENGTH = config('TITLE_TRUNCATE_LENGTH', default=50, cast=int)
DEADLINE_UPCOMING_DAYS = config('DEADLINE_UPCOMING_DAYS', default=7, cast=int)
NOT_FOUND_REDIRECT_SECONDS = config('NOT_FOUND_REDIRECT_SECONDS', default=3, cast=int)


# =============================================================================
# LOGGING
# =============================================================================
LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'INFO',
    },
    'loggers': {
        'django': {
            'handlers': ['console'],
            'level': 'INFO',
            'propagate': False,
        },
        'apps': {
            'handlers': ['console'],
            'level': config('APPS_LOG_LEVEL', default='INFO'),
            'propagate': False,
        },
    },
}
