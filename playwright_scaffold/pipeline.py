"""Playwright scaffold pipeline orchestrator.

Runs the six scaffold steps strictly in order and stops at the first failure:

Step 1: CHECK     -- Require ``package.json`` in the target directory.
Step 2: INTERVIEW -- Ask the operator for the run options.
Step 3: INSTALL   -- ``npm install -D`` the Playwright toolchain.
Step 4: SCAFFOLD  -- Create the ``e2e/`` directory skeleton.
Step 5: GENERATE  -- Render config, fixtures, tests, API client, CI workflow.
Step 6: PATCH     -- Merge npm scripts and extend ``.gitignore``.

Nothing is rolled back on failure; files written by earlier steps stay.

Usage::

    cd my-app && playwright-scaffold
    cd my-app && python -m playwright_scaffold
"""

from __future__ import annotations

import asyncio
import sys
import traceback
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from rich.panel import Panel

from .config import RunOptions, ScaffoldConfig
from .installer import DependencyInstaller, InstallError
from .interview import collect_options
from .patcher import ProjectPatcher
from .scaffolder import ScaffoldGenerator
from .utils import (
    STEP_NAMES,
    console,
    print_error,
    print_hint,
    print_step_header,
    print_success,
    print_summary_table,
    print_warning,
    relative_to,
)

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ScaffoldError(Exception):
    """Raised when a scaffold step fails irrecoverably."""

    def __init__(self, step: int, message: str) -> None:
        self.step = step
        self.message = message
        super().__init__(f"Step {step} ({STEP_NAMES.get(step, '?')}): {message}")


# ---------------------------------------------------------------------------
# Pipeline Orchestrator
# ---------------------------------------------------------------------------


class Pipeline:
    """Scaffold pipeline orchestrator.

    Attributes:
        config: Fixed settings for the run.
        options: Operator answers; collected in step 2 unless supplied up front.
        state: Dictionary that accumulates results from each step.
    """

    _STEP_METHODS: dict[int, str] = {
        1: "step_check",
        2: "step_interview",
        3: "step_install",
        4: "step_scaffold",
        5: "step_generate",
        6: "step_patch",
    }

    def __init__(self, config: ScaffoldConfig, options: RunOptions | None = None) -> None:
        self.config = config
        self.options = options
        self.state: dict[str, Any] = {
            "success": False,
            "steps_completed": [],
            "written": [],
        }

    async def run(self) -> dict[str, Any]:
        """Execute every step in order.

        Returns:
            The final state dictionary, including a top-level ``success``
            boolean and, on failure, ``failed_step`` and ``error``.
        """
        console.print(
            Panel(
                f"[bold bright_cyan]Initializing Playwright Scaffold[/bold bright_cyan]\n"
                f"Project : {self.config.target_dir.resolve()}\n"
                f"Tests   : {self.config.e2e_dir}/",
                border_style="bright_cyan",
            )
        )

        for step in sorted(self._STEP_METHODS):
            step_name = STEP_NAMES[step]
            print_step_header(step, step_name)
            try:
                method = getattr(self, self._STEP_METHODS[step])
                await method()
                self.state["steps_completed"].append(step)

            except ScaffoldError as exc:
                self.state["failed_step"] = step
                self.state["error"] = str(exc)
                print_error(str(exc))
                return self.state

            except Exception as exc:
                self.state["failed_step"] = step
                self.state["error"] = f"{type(exc).__name__}: {exc}"
                print_error(f"Failed to initialize ({step_name}): {exc}")
                console.print(traceback.format_exc(), style="dim", markup=False)
                return self.state

        self.state["success"] = True
        self._print_final_summary()
        return self.state

    # ------------------------------------------------------------------
    # Step 1: CHECK
    # ------------------------------------------------------------------

    def check_environment(self) -> None:
        """Fail fast when the target directory is not a Node project root."""
        if not self.config.package_json_path.is_file():
            raise ScaffoldError(
                1,
                "No package.json found. Please run this command inside your project root.",
            )

    async def step_check(self) -> None:
        self.check_environment()
        print_success(f"+ Found {self.config.package_json_path.name}")

    # ------------------------------------------------------------------
    # Step 2: INTERVIEW
    # ------------------------------------------------------------------

    async def step_interview(self) -> None:
        if self.options is None:
            try:
                self.options = collect_options(console)
            except EOFError as exc:
                raise ScaffoldError(2, "Cancelled: no answer received.") from exc
        self.state["options"] = self.options.model_dump(mode="json")

    # ------------------------------------------------------------------
    # Step 3: INSTALL
    # ------------------------------------------------------------------

    async def step_install(self) -> None:
        installer = DependencyInstaller(
            self.config.target_dir,
            self.config.dev_dependencies,
            timeout=self.config.install_timeout,
        )
        console.print(f"Installing dependencies: {' '.join(installer.packages)}")
        try:
            await installer.install()
        except InstallError as exc:
            self.state["install_error"] = str(exc)
            raise ScaffoldError(
                3, "Installation failed. Check your network or permissions."
            ) from exc
        print_success("+ Installed dependencies")

    # ------------------------------------------------------------------
    # Step 4: SCAFFOLD
    # ------------------------------------------------------------------

    async def step_scaffold(self) -> None:
        generator = self._generator()
        dirs = await generator.create_directory_structure()
        self.state["directories"] = [relative_to(d, self.config.target_dir) for d in dirs]
        print_success(f"+ Created {len(dirs)} directories under {self.config.e2e_dir}/")

    # ------------------------------------------------------------------
    # Step 5: GENERATE
    # ------------------------------------------------------------------

    async def step_generate(self) -> None:
        written = await self._generator().generate()
        for path in written:
            rel = relative_to(path, self.config.target_dir)
            if rel not in self.state["written"]:
                self.state["written"].append(rel)
            print_success(f"+ Created {rel}")

    # ------------------------------------------------------------------
    # Step 6: PATCH
    # ------------------------------------------------------------------

    async def step_patch(self) -> None:
        patcher = ProjectPatcher(self.config, self._require_options())
        self.state["scripts"] = await patcher.update_package_json()
        print_success("+ Updated package.json scripts")

        changed = await patcher.update_gitignore()
        self.state["gitignore_updated"] = changed
        if changed:
            print_success("+ Updated .gitignore")
        elif self.config.gitignore_path.exists():
            console.print("  .gitignore already ignores Playwright output")
        else:
            print_warning("  No .gitignore found -- skipped")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_options(self) -> RunOptions:
        if self.options is None:
            raise ScaffoldError(2, "Run options have not been collected.")
        return self.options

    def _generator(self) -> ScaffoldGenerator:
        return ScaffoldGenerator(self.config, self._require_options())

    def _print_final_summary(self) -> None:
        """Print the options, the written files and the next-step hints."""
        options = self._require_options()
        console.print()
        summary = dict(options.as_dict())
        summary["Files written"] = "\n".join(self.state["written"])
        summary["Scripts"] = ", ".join(sorted(self.state.get("scripts", {})))
        print_summary_table(summary, title="Playwright Scaffold")

        print_success("Setup Complete!")
        print_hint('Run "npm run test:e2e" to start testing.')
        if options.visual_regression:
            print_warning('Note: Use "npm run test:e2e:update-snapshots" when design changes.')


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``playwright-scaffold``."""
    import argparse

    parser = argparse.ArgumentParser(
        description=(
            "Add a Playwright end-to-end test scaffold to the Node project in "
            "the current directory. All options are asked interactively."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Environment overrides:\n"
            "  PW_SCAFFOLD_E2E_DIR, PW_SCAFFOLD_BASE_URL,\n"
            "  PW_SCAFFOLD_NODE_VERSION, PW_SCAFFOLD_INSTALL_TIMEOUT\n"
        ),
    )
    parser.parse_args()

    try:
        config = ScaffoldConfig.from_env(Path.cwd())
    except (ValidationError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] Invalid configuration: {exc}")
        sys.exit(1)

    pipeline = Pipeline(config)
    try:
        result = asyncio.run(pipeline.run())
    except KeyboardInterrupt:
        print_error("Cancelled.")
        sys.exit(1)

    if not result.get("success"):
        sys.exit(1)


if __name__ == "__main__":
    main()
