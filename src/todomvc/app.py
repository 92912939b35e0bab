"""Flask application for todomvc.

Handlers parse and validate request parameters, run exactly one repository
operation under the state lock and render the result as an HTML fragment.
"""

from __future__ import annotations

import logging
import uuid

from flask import Blueprint, Flask, abort, current_app, request

from todomvc.components import (
    render_footer,
    render_index,
    render_task_edit,
    render_task_item,
    render_task_list,
)
from todomvc.config import AppConfig
from todomvc.models import TaskFilter, ToggleAction
from todomvc.repository import TaskNotFoundError
from todomvc.state import AppState

logger = logging.getLogger(__name__)

EXTENSION_KEY = "todomvc"

_TRUE_VALUES = {"true", "on", "1"}
_FALSE_VALUES = {"false", "off", "0"}

tasks_bp = Blueprint("tasks", __name__)


def create_app(config: AppConfig | None = None, state: AppState | None = None) -> Flask:
    """Application factory."""
    if config is None:
        config = AppConfig()

    app = Flask(__name__, static_folder="static", static_url_path="/assets")
    app.config["TODOMVC"] = config
    app.config["DEBUG"] = config.server.debug

    app.extensions[EXTENSION_KEY] = state if state is not None else AppState()

    app.register_blueprint(tasks_bp)
    app.register_error_handler(TaskNotFoundError, _handle_not_found)

    return app


def get_state() -> AppState:
    """Return the state owned by the running application."""
    return current_app.extensions[EXTENSION_KEY]


def _handle_not_found(error: TaskNotFoundError) -> tuple[str, int]:
    logger.info("Task not found id=%s", error.task_id)
    return "Task not found", 404


def _parse_filter(raw: str | None) -> TaskFilter:
    if raw is None:
        abort(400, description="Missing filter")
    try:
        return TaskFilter.parse(raw)
    except ValueError as e:
        abort(400, description=str(e))


def _parse_action(raw: str | None) -> ToggleAction:
    if raw is None:
        abort(400, description="Missing action")
    try:
        return ToggleAction.parse(raw)
    except ValueError as e:
        abort(400, description=str(e))


def _parse_bool(raw: str | None) -> bool | None:
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    abort(400, description=f"Invalid boolean: {raw!r}")


@tasks_bp.get("/")
def index() -> str:
    return render_index(current_app.config["TODOMVC"].title)


@tasks_bp.get("/tasks")
def list_tasks() -> str:
    """List tasks for a tab and remember it as the selected one."""
    task_filter = _parse_filter(request.args.get("filter"))

    state = get_state()
    with state.lock.write():
        state.selected_filter = task_filter
        tasks = state.repo.list(task_filter)
        return render_task_list(tasks, state.repo.counts(), state.toggle_action)


@tasks_bp.post("/tasks")
def create_task() -> str:
    text = request.form.get("text")
    if text is None:
        abort(400, description="Missing text")

    state = get_state()
    with state.lock.write():
        task = state.repo.create(text)
        state.toggle_action = ToggleAction.CHECK

        # A new task is active, so it has no place in the Completed tab
        visible = task if state.selected_filter is not TaskFilter.COMPLETED else None
        return render_task_item(visible, state.repo.counts(), state.toggle_action)


@tasks_bp.patch("/tasks")
def toggle_all_tasks() -> str:
    """Check or uncheck every task."""
    action = _parse_action(request.args.get("action"))

    state = get_state()
    with state.lock.write():
        state.repo.toggle_all(action)
        state.toggle_action = action.inverse()

        tasks = state.repo.list(state.selected_filter)
        return render_task_list(tasks, state.repo.counts(), state.toggle_action)


@tasks_bp.delete("/tasks")
def delete_completed_tasks() -> str:
    state = get_state()
    with state.lock.write():
        state.repo.delete_completed()
        state.toggle_action = ToggleAction.CHECK

        tasks = state.repo.list(state.selected_filter)
        return render_task_list(tasks, state.repo.counts(), state.toggle_action)


@tasks_bp.get("/tasks/<uuid:task_id>/edit")
def edit_task(task_id: uuid.UUID) -> str:
    state = get_state()
    with state.lock.read():
        task = state.repo.get(task_id)
    return render_task_edit(task)


@tasks_bp.patch("/tasks/<uuid:task_id>")
def update_task(task_id: uuid.UUID) -> str:
    """Update text and/or completion; omitted fields stay as they are."""
    text = request.form.get("text")
    is_completed = _parse_bool(request.form.get("is_completed"))

    state = get_state()
    with state.lock.write():
        task = state.repo.update(task_id, text=text, is_completed=is_completed)
        state.settle_toggle_action()

        visible = task if state.selected_filter.matches(task) else None
        return render_task_item(visible, state.repo.counts(), state.toggle_action)


@tasks_bp.delete("/tasks/<uuid:task_id>")
def delete_task(task_id: uuid.UUID) -> str:
    state = get_state()
    with state.lock.write():
        state.repo.delete(task_id)
        state.settle_toggle_action()
        return render_footer(state.repo.counts(), state.toggle_action)
