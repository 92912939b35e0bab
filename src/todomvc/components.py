"""HTML fragments for todomvc.

Every response is a fragment that htmx swaps into the page. Counters and the
two bulk buttons ride along as out-of-band swaps so they stay in step with
whatever the main target received.
"""

from __future__ import annotations

from jinja2 import DictLoader, Environment, select_autoescape

from todomvc.models import Task, TaskFilter, ToggleAction
from todomvc.repository import TaskCounts

COMPONENTS_TEMPLATE = """\
{% macro task_item(task) -%}
<div class="panel-block is-justify-content-space-between todo-item">
  <input id="todo-done-{{ task.id }}" type="checkbox"{% if task.is_completed %} checked{% endif %}
    hx-patch="/tasks/{{ task.id }}"
    hx-target="closest .panel-block"
    hx-swap="outerHTML"
    hx-vals='{"is_completed": "{{ 'false' if task.is_completed else 'true' }}"}'>
  <p class="is-flex-grow-1 ml-2"
    hx-get="/tasks/{{ task.id }}/edit"
    hx-trigger="dblclick"
    hx-target="this"
    hx-swap="outerHTML">
    {%- if task.is_completed %}<s>{{ task.text }}</s>{% else %}{{ task.text }}{% endif -%}
  </p>
  <button class="delete is-medium ml-2"
    hx-delete="/tasks/{{ task.id }}"
    hx-target="closest .panel-block"
    hx-swap="outerHTML"></button>
</div>
{%- endmacro %}

{% macro task_edit(task) -%}
<form class="is-flex-grow-1 todo-edit"
  hx-patch="/tasks/{{ task.id }}"
  hx-target="closest .panel-block"
  hx-swap="outerHTML">
  <p><input class="input" type="text" name="text" value="{{ task.text }}" autofocus></p>
</form>
{%- endmacro %}

{% macro task_list(tasks) -%}
<span id="todo-list">
{%- for task in tasks %}
{{ task_item(task) }}
{%- endfor %}
</span>
{%- endmacro %}

{% macro counter(task_filter, num_items) -%}
<span id="todo-counter-{{ task_filter.value | lower }}" class="tag is-rounded todo-counter" hx-swap-oob="true">{{ num_items }}</span>
{%- endmacro %}

{% macro counters(counts) -%}
{{ counter(filters.COMPLETED, counts.completed) }}
{{ counter(filters.ACTIVE, counts.active) }}
{{ counter(filters.ALL, counts.all) }}
{%- endmacro %}

{% macro delete_completed_button(is_disabled) -%}
<button id="todo-delete-completed" class="button is-danger is-outlined is-fullwidth ml-1"
  hx-delete="/tasks"
  hx-target="#todo-list"
  hx-swap="outerHTML"
  hx-swap-oob="true"{% if is_disabled %} disabled{% endif %}>Delete completed</button>
{%- endmacro %}

{% macro toggle_all_button(is_disabled, action) -%}
<button id="todo-toggle-completed" class="button is-link is-outlined is-fullwidth mr-1"
  hx-patch="/tasks?action={{ action }}"
  hx-target="#todo-list"
  hx-swap="outerHTML"
  hx-swap-oob="true"{% if is_disabled %} disabled{% endif %}>{{ action }} all</button>
{%- endmacro %}

{% macro footer(counts, action) -%}
{{ counters(counts) }}
{{ delete_completed_button(counts.completed == 0) }}
{{ toggle_all_button(counts.all == 0, action) }}
{%- endmacro %}
"""

INDEX_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{ title }}</title>
  <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/bulma@0.9.4/css/bulma.min.css">
  <script src="https://unpkg.com/htmx.org@1.9.12"></script>
  <script src="/assets/helpers.js"></script>
</head>
<body>
<section class="section">
  <div class="container">
    <h1 class="title has-text-centered">{{ title }}</h1>
    <nav class="panel">
      <div class="panel-block">
        <form class="is-flex-grow-1"
          hx-post="/tasks"
          hx-target="#todo-list"
          hx-swap="afterbegin"
          hx-on::after-request="this.reset()">
          <input class="input" type="text" name="text" placeholder="What needs to be done?" autofocus>
        </form>
      </div>
      <p class="panel-tabs">
      {%- for tab in filters %}
        <a id="tab-{{ tab.value | lower }}"{% if tab is sameas filters.ALL %} class="is-active"{% endif %}
          hx-get="/tasks?filter={{ tab }}"
          hx-target="#todo-list"
          hx-swap="outerHTML"
          onclick="selectTab(this.id)">{{ tab }}
          <span id="todo-counter-{{ tab.value | lower }}" class="tag is-rounded todo-counter">0</span></a>
      {%- endfor %}
      </p>
      <span id="todo-list" hx-get="/tasks?filter=All" hx-trigger="load" hx-swap="outerHTML"></span>
      <div class="panel-block">
        <button id="todo-toggle-completed" class="button is-link is-outlined is-fullwidth mr-1" disabled>Check all</button>
        <button id="todo-delete-completed" class="button is-danger is-outlined is-fullwidth ml-1" disabled>Delete completed</button>
      </div>
    </nav>
  </div>
</section>
</body>
</html>
"""

LIST_TEMPLATE = """\
{% import "components.html" as c -%}
{{ c.task_list(tasks) }}
{{ c.footer(counts, action) }}
"""

ITEM_TEMPLATE = """\
{% import "components.html" as c -%}
{% if task is not none %}{{ c.task_item(task) }}
{% endif %}{{ c.footer(counts, action) }}
"""

FOOTER_TEMPLATE = """\
{% import "components.html" as c -%}
{{ c.footer(counts, action) }}
"""

EDIT_TEMPLATE = """\
{% import "components.html" as c -%}
{{ c.task_edit(task) }}
"""

_env = Environment(
    loader=DictLoader(
        {
            "components.html": COMPONENTS_TEMPLATE,
            "index.html": INDEX_TEMPLATE,
            "list.html": LIST_TEMPLATE,
            "item.html": ITEM_TEMPLATE,
            "footer.html": FOOTER_TEMPLATE,
            "edit.html": EDIT_TEMPLATE,
        }
    ),
    autoescape=select_autoescape(default=True, default_for_string=True),
)
_env.globals["filters"] = TaskFilter


def render_index(title: str) -> str:
    """Render the full page shell; the list itself loads on page load."""
    return _env.get_template("index.html").render(title=title)


def render_task_list(tasks: list[Task], counts: TaskCounts, action: ToggleAction) -> str:
    """Render the task list plus counters and bulk buttons."""
    return _env.get_template("list.html").render(tasks=tasks, counts=counts, action=action)


def render_task_item(task: Task | None, counts: TaskCounts, action: ToggleAction) -> str:
    """Render one task row plus counters and bulk buttons.

    Passing None renders only the out-of-band parts, which removes the row
    from the page when htmx swaps the empty main content in.
    """
    return _env.get_template("item.html").render(task=task, counts=counts, action=action)


def render_footer(counts: TaskCounts, action: ToggleAction) -> str:
    """Render counters and bulk buttons only."""
    return _env.get_template("footer.html").render(counts=counts, action=action)


def render_task_edit(task: Task) -> str:
    """Render the inline edit form for a task."""
    return _env.get_template("edit.html").render(task=task)
