"""
Views for tasks app.

Includes:
- Kanban board (load, create, delete, drag-and-drop move)
- Task details (load, save, delete with confirmation)

Board actions answer HTMX requests with the re-rendered columns and plain
form posts with a redirect to the board. Every failure of an API call is
escalated to the error boundary through the request's error handler.
"""

import logging

from django.shortcuts import render, redirect
from django.views.decorators.http import require_http_methods, require_POST

from apps.core.errors import InvalidNavigationError, TaskAPIError, get_error_handler
from .board import load_board, save_board
from .forms import MoveTaskForm, NewTaskForm, TaskForm
from .models import TaskStatus
from .services import get_task_client

logger = logging.getLogger(__name__)


# =============================================================================
# Kanban Board Views
# =============================================================================

def _board_response(request, state):
    """Columns partial for HTMX, redirect to the board otherwise."""
    if request.htmx:
        return render(request, 'tasks/partials/board_columns.html', {
            'columns': state.columns(),
        })
    return redirect('tasks:board')


@require_http_methods(["GET"])
def board(request):
    """
    Kanban board with four status columns.

    Fetches the full task collection once per page load and keeps it in
    the session as the board's working state. Drafts typed earlier in the
    session are kept.
    """
    handler = get_error_handler(request)
    client = get_task_client()

    try:
        tasks = client.list_tasks()
    except TaskAPIError as e:
        handler.throw_error(e)

    state = load_board(request.session).with_tasks(tasks)
    save_board(request.session, state)

    return render(request, 'tasks/board.html', {
        'columns': state.columns(),
    })


@require_POST
def board_create(request):
    """
    Create a task from the submitting column's draft title.

    An empty draft is a no-op. The new task gets empty content, no
    deadline and the column's status; the column's draft is cleared only
    after the API confirms the creation.
    """
    handler = get_error_handler(request)
    form = NewTaskForm(request.POST)
    if not form.is_valid():
        handler.throw_error('Invalid status')

    drafts = form.drafts()
    if not form.title():
        state = load_board(request.session).with_drafts(drafts)
        save_board(request.session, state)
        return _board_response(request, state)

    try:
        task = get_task_client().create_task(form.to_new_task())
    except TaskAPIError as e:
        handler.throw_error(e)

    state = load_board(request.session).with_drafts(drafts).with_created(task)
    save_board(request.session, state)
    return _board_response(request, state)


@require_POST
def board_delete(request, pk):
    """Delete a task from the board without confirmation."""
    handler = get_error_handler(request)

    try:
        get_task_client().delete_task(pk)
    except TaskAPIError as e:
        handler.throw_error(e)

    state = load_board(request.session).with_drafts(NewTaskForm(request.POST).drafts())
    state = state.with_deleted(pk)
    save_board(request.session, state)
    return _board_response(request, state)


@require_POST
def board_move(request):
    """
    HTMX endpoint to update task status via drag-and-drop.

    Dropping a card onto its own column, or a card the board does not
    hold, sends nothing. Otherwise the task's stored title, content and
    deadline are sent back with the new status, and the board changes
    only after the API confirms.
    """
    handler = get_error_handler(request)
    form = MoveTaskForm(request.POST)
    if not form.is_valid():
        handler.throw_error('Invalid status')

    new_status = TaskStatus(form.cleaned_data['new_status'])
    drafts = NewTaskForm(request.POST).drafts()
    current = load_board(request.session)
    task = current.find(form.task_pk())

    if task is None or task.status == new_status:
        state = current.with_drafts(drafts)
        save_board(request.session, state)
        return _board_response(request, state)

    try:
        get_task_client().update_task(task.id, task.to_new_task(status=new_status))
    except TaskAPIError as e:
        handler.throw_error(e)

    logger.debug('Moved task %s from %s to %s', task.id, task.status, new_status)
    state = load_board(request.session).with_drafts(drafts).with_moved(task.id, new_status)
    save_board(request.session, state)
    return _board_response(request, state)


# =============================================================================
# Task Details Views
# =============================================================================

def _task_pk(handler, task_id):
    try:
        return int(task_id)
    except (TypeError, ValueError):
        handler.throw_error(InvalidNavigationError('Invalid task ID'))


@require_http_methods(["GET", "POST"])
def task_detail(request, task_id):
    """
    Edit a task.

    GET loads the task into the form. POST sends a full-record update of
    title, content, deadline and status, then returns to the board.
    """
    handler = get_error_handler(request)
    pk = _task_pk(handler, task_id)
    client = get_task_client()

    if request.method == 'POST':
        form = TaskForm(request.POST)
        if form.is_valid():
            try:
                client.update_task(pk, form.to_new_task())
            except TaskAPIError as e:
                handler.throw_error(e)
            return redirect('tasks:board')
    else:
        try:
            task = client.get_task(pk)
        except TaskAPIError as e:
            handler.throw_error(e)
        form = TaskForm.from_task(task)

    return render(request, 'tasks/task_detail.html', {
        'form': form,
        'task_id': pk,
    })


@require_http_methods(["GET", "POST"])
def task_delete(request, task_id):
    """
    Delete a task after explicit confirmation.

    GET shows the confirmation; declining links back to the details page
    without sending anything. POST deletes and returns to the board.
    """
    handler = get_error_handler(request)
    pk = _task_pk(handler, task_id)

    if request.method == 'POST':
        try:
            get_task_client().delete_task(pk)
        except TaskAPIError as e:
            handler.throw_error(e)
        return redirect('tasks:board')

    return render(request, 'tasks/task_confirm_delete.html', {'task_id': pk})
