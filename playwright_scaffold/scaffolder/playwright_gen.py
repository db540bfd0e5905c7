"""Playwright configuration and base test generation.

Generates:
- ``playwright.config.ts`` at the project root
- ``tsconfig.e2e.json`` extending the host project's ``tsconfig.json``
- ``<e2e>/fixtures/base.ts``, the plain test fixture
- ``<e2e>/tests/auth.setup.ts``, the authentication bootstrap stub
- ``<e2e>/tests/example.spec.ts``, a minimal smoke test
- ``<e2e>/tests/visual.spec.ts`` when visual regression is enabled
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .templates import TemplateRenderer

VISUAL_CONFIG_TEMPLATE = "playwright.visual.ts.j2"


class PlaywrightGenerator:
    """Generates Playwright configuration and base test files."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate_config(
        self,
        output_dir: Path,
        context: dict[str, Any],
    ) -> Path:
        """Render ``playwright.config.ts`` into *output_dir*.

        The visual regression block is rendered separately and spliced in
        only when ``context["visual_regression"]`` is true.
        """
        visual_config = ""
        if context.get("visual_regression"):
            visual_config = self.renderer.render(VISUAL_CONFIG_TEMPLATE, context)

        return await self.renderer.render_to_file(
            "playwright.config.ts.j2",
            output_dir / "playwright.config.ts",
            {**context, "visual_config": visual_config},
        )

    async def generate_standard_files(
        self,
        output_dir: Path,
        context: dict[str, Any],
    ) -> list[Path]:
        """Render the files every scaffold gets, regardless of options.

        Args:
            output_dir: Project root directory.
            context: Template rendering context (``e2e_dir``, ``auth_file``, ...).

        Returns:
            List of all written file paths.
        """
        e2e = output_dir / context["e2e_dir"]
        files = [
            ("tsconfig.e2e.json.j2", output_dir / "tsconfig.e2e.json"),
            ("e2e/fixtures/base.ts.j2", e2e / "fixtures" / "base.ts"),
            ("e2e/tests/auth.setup.ts.j2", e2e / "tests" / "auth.setup.ts"),
            ("e2e/tests/example.spec.ts.j2", e2e / "tests" / "example.spec.ts"),
        ]

        written: list[Path] = []
        for template_name, out in files:
            written.append(await self.renderer.render_to_file(template_name, out, context))
        return written

    async def generate_visual_test(
        self,
        output_dir: Path,
        context: dict[str, Any],
    ) -> Path:
        """Render the full-page and single-element screenshot examples."""
        return await self.renderer.render_to_file(
            "e2e/tests/visual.spec.ts.j2",
            output_dir / context["e2e_dir"] / "tests" / "visual.spec.ts",
            context,
        )
