"""Playwright scaffold -- adds an end-to-end test setup to a Node project.

Run ``playwright-scaffold`` from the root of a project that has a
``package.json``.  The tool asks three questions (visual regression, API
client, CI provider), installs the Playwright toolchain with npm, writes an
``e2e/`` tree plus ``playwright.config.ts`` and ``tsconfig.e2e.json``, and
patches ``package.json`` and ``.gitignore``.

Key classes:
    Pipeline          - Step-by-step orchestration and CLI entry point
    ScaffoldGenerator - Directory skeleton and template rendering
    ProjectPatcher    - package.json script merge and .gitignore patch
"""

from .config import CIProvider, RunOptions, ScaffoldConfig
from .patcher import ProjectPatcher
from .pipeline import Pipeline, ScaffoldError, main
from .scaffolder import ScaffoldGenerator

__version__ = "0.1.0"

__all__ = [
    "CIProvider",
    "Pipeline",
    "ProjectPatcher",
    "RunOptions",
    "ScaffoldConfig",
    "ScaffoldError",
    "ScaffoldGenerator",
    "main",
]
