"""Logging setup for todomvc."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from todomvc.config import LoggingConfig

FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
FILE_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: LoggingConfig | None = None, console: Console | None = None) -> None:
    """Configure the root logger.

    Console output goes through rich; if `config.file` is set, a plain-text
    copy is written there as well. Safe to call more than once: existing
    handlers are replaced.
    """
    if config is None:
        config = LoggingConfig()

    level = logging.getLevelName(config.level)

    root = logging.getLogger()
    root.setLevel(level)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(level)
    root.addHandler(rich_handler)

    if config.file:
        log_file = Path(config.file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(str(log_file), encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=FILE_DATEFMT))
        root.addHandler(file_handler)

    # Request log lines from the development server
    logging.getLogger("werkzeug").setLevel(level)

    logging.captureWarnings(True)
