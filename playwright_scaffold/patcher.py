"""Host project file patching.

Two edits are made to files the host project already owns:

- ``package.json``: the Playwright npm scripts are shallow-merged into the
  existing ``scripts`` mapping.  Unrelated scripts and top-level fields are
  kept; colliding script names are overwritten.
- ``.gitignore``: a block of Playwright output paths is appended once.  The
  block is skipped when the marker is already present, and the file is never
  created when it does not exist.
"""

from __future__ import annotations

import asyncio
from typing import Any

from .config import RunOptions, ScaffoldConfig
from .utils import load_json, save_json

GITIGNORE_MARKER = "playwright-report"

BASE_SCRIPTS: dict[str, str] = {
    "test:e2e": "playwright test",
    "test:e2e:ui": "playwright test --ui",
    "test:e2e:debug": "playwright test --debug",
    "test:e2e:codegen": "playwright codegen",
}

UPDATE_SNAPSHOTS_SCRIPT = ("test:e2e:update-snapshots", "playwright test --update-snapshots")


# ---------------------------------------------------------------------------
# Pure helpers
# ---------------------------------------------------------------------------


def scripts_for(options: RunOptions) -> dict[str, str]:
    """Return the npm scripts a scaffold adds for *options*."""
    scripts = dict(BASE_SCRIPTS)
    if options.visual_regression:
        name, command = UPDATE_SNAPSHOTS_SCRIPT
        scripts[name] = command
    return scripts


def merge_scripts(package: dict[str, Any], scripts: dict[str, str]) -> dict[str, Any]:
    """Return a copy of *package* with *scripts* merged into its ``scripts``."""
    existing = package.get("scripts") or {}
    return {**package, "scripts": {**existing, **scripts}}


def ignore_block(e2e_dir: str) -> str:
    """Return the text appended to ``.gitignore``."""
    lines = [
        "",
        "# Playwright",
        "/test-dist",
        "/playwright-report",
        f"/{e2e_dir}/.auth",
        f"/{e2e_dir}/__screenshots__",
    ]
    return "\n".join(lines) + "\n"


def patch_ignore_text(text: str, block: str) -> str:
    """Append *block* to *text* unless the marker is already present."""
    if GITIGNORE_MARKER in text:
        return text
    return text + block


# ---------------------------------------------------------------------------
# ProjectPatcher
# ---------------------------------------------------------------------------


class ProjectPatcher:
    """Applies the scaffold's edits to ``package.json`` and ``.gitignore``."""

    def __init__(self, config: ScaffoldConfig, options: RunOptions) -> None:
        self.config = config
        self.options = options

    async def update_package_json(self) -> dict[str, str]:
        """Merge the scaffold scripts into ``package.json`` and write it back.

        Returns:
            The full ``scripts`` mapping after the merge.
        """
        path = self.config.package_json_path
        package = await asyncio.to_thread(load_json, path)
        patched = merge_scripts(package, scripts_for(self.options))
        await save_json(patched, path)
        return patched["scripts"]

    async def update_gitignore(self) -> bool:
        """Append the ignore block if ``.gitignore`` exists and lacks it.

        Returns:
            ``True`` if the file was changed.
        """
        path = self.config.gitignore_path
        if not path.exists():
            return False

        current = await asyncio.to_thread(
            path.read_text, encoding="utf-8", errors="surrogateescape"
        )
        patched = patch_ignore_text(current, ignore_block(self.config.e2e_dir))
        if patched == current:
            return False

        await asyncio.to_thread(
            path.write_text, patched, encoding="utf-8", errors="surrogateescape"
        )
        return True
