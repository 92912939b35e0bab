"""Shared fixtures for todomvc tests."""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from todomvc.app import create_app
from todomvc.config import AppConfig
from todomvc.repository import TaskRepository
from todomvc.state import AppState


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_todomvc_dir(temp_project: Path) -> Path:
    """Create a temporary .todomvc directory."""
    todomvc_dir = temp_project / ".todomvc"
    todomvc_dir.mkdir()
    return todomvc_dir


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data."""
    return {
        "title": "My tasks",
        "server": {"host": "0.0.0.0", "port": 9000, "debug": False},
        "logging": {"level": "DEBUG", "file": "logs/todomvc.log"},
    }


@pytest.fixture
def repo() -> TaskRepository:
    """An empty repository."""
    return TaskRepository()


@pytest.fixture
def state() -> AppState:
    """Fresh application state."""
    return AppState()


@pytest.fixture
def app(state: AppState) -> Flask:
    """Application wired to the `state` fixture."""
    app = create_app(AppConfig(title="Test tasks"), state=state)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Test client for the application."""
    return app.test_client()
