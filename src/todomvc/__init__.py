"""todomvc - server-rendered task list driven by htmx."""

__version__ = "0.1.0"
