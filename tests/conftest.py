"""Shared pytest fixtures for the Playwright scaffold test suite.

Provides reusable fixtures for:
- A temporary Node project (``package.json`` + ``.gitignore``)
- Scaffold configuration and run options
- A mocked ``npm install`` subprocess
- A helper for listing every path under a directory
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from playwright_scaffold.config import CIProvider, RunOptions, ScaffoldConfig


# ---------------------------------------------------------------------------
# Sample data
# ---------------------------------------------------------------------------

SAMPLE_PACKAGE: dict[str, Any] = {
    "name": "demo-app",
    "version": "1.0.0",
    "private": True,
    "scripts": {
        "dev": "vite",
        "build": "vite build",
        "test:e2e": "echo old",
    },
    "dependencies": {"react": "^19.0.0"},
}

SAMPLE_GITIGNORE = "node_modules\n/dist\n.env\n"


def list_tree(root: Path) -> set[str]:
    """Return every file and directory under *root* as POSIX relative paths."""
    return {p.relative_to(root).as_posix() for p in root.rglob("*")}


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def tmp_project_dir(tmp_path: Path) -> Path:
    """Temporary Node project root with a package.json and a .gitignore."""
    project_dir = tmp_path / "demo-app"
    project_dir.mkdir()
    (project_dir / "package.json").write_text(
        json.dumps(SAMPLE_PACKAGE, indent=2) + "\n", encoding="utf-8"
    )
    (project_dir / ".gitignore").write_text(SAMPLE_GITIGNORE, encoding="utf-8")
    yield project_dir


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Temporary directory that is not a Node project."""
    d = tmp_path / "empty"
    d.mkdir()
    yield d


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def scaffold_config(tmp_project_dir: Path) -> ScaffoldConfig:
    """ScaffoldConfig targeting the temporary project."""
    return ScaffoldConfig(target_dir=tmp_project_dir)


@pytest.fixture
def all_options() -> RunOptions:
    """Every optional artifact enabled."""
    return RunOptions(
        visual_regression=True,
        api_client=True,
        ci_provider=CIProvider.GITHUB,
    )


@pytest.fixture
def minimal_options() -> RunOptions:
    """Every optional artifact disabled."""
    return RunOptions(
        visual_regression=False,
        api_client=False,
        ci_provider=CIProvider.NONE,
    )


# ---------------------------------------------------------------------------
# Mock subprocess
# ---------------------------------------------------------------------------


@pytest.fixture
def mock_npm() -> AsyncMock:
    """Patch the installer's command runner to report a successful install."""
    with patch(
        "playwright_scaffold.installer.run_command",
        new=AsyncMock(return_value=(0, "", "")),
    ) as mock:
        yield mock


@pytest.fixture
def failing_npm() -> AsyncMock:
    """Patch the installer's command runner to report a failed install."""
    with patch(
        "playwright_scaffold.installer.run_command",
        new=AsyncMock(return_value=(1, "", "")),
    ) as mock:
        yield mock


@pytest.fixture
def tree():
    """Callable listing every path under a directory (see ``list_tree``)."""
    return list_tree
