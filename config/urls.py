"""
URL configuration for kanban_board project.

Routes:
- /                   Kanban board
- /task/<id>/         Task details
- anything else       Not-found page, redirects home
"""

from django.urls import path, include, re_path
from django.conf import settings

from apps.core import views as core_views

urlpatterns = [
    # App URLs
    path('', include('apps.tasks.urls', namespace='tasks')),
]

# Debug toolbar
if settings.DEBUG and 'debug_toolbar' in settings.INSTALLED_APPS:
    import debug_toolbar
    urlpatterns = [
        path('__debug__/', include(debug_toolbar.urls)),
    ] + urlpatterns

# Catch-all must stay last
urlpatterns += [
    re_path(r'^.*$', core_views.not_found, name='not_found'),
]

handler404 = 'apps.core.views.not_found'
