"""
URL configuration for tasks app.

Includes:
- Kanban board and its HTMX actions
- Task details and delete confirmation
"""

from django.urls import path, re_path
from . import views

app_name = 'tasks'

urlpatterns = [
    # Kanban board (main view)
    path('', views.board, name='board'),

    # Board actions
    path('board/create/', views.board_create, name='board_create'),
    path('board/move/', views.board_move, name='board_move'),
    path('board/<int:pk>/delete/', views.board_delete, name='board_delete'),

    # Task details; non-numeric ids are reported by the view
    path('task/<str:task_id>/', views.task_detail, name='task_detail'),
    path('task/<str:task_id>/delete/', views.task_delete, name='task_delete'),

    # Same routes without the trailing slash (the not-found catch-all
    # keeps APPEND_SLASH from redirecting)
    re_path(r'^task/(?P<task_id>[^/]+)$', views.task_detail),
    re_path(r'^task/(?P<task_id>[^/]+)/delete$', views.task_delete),
]
