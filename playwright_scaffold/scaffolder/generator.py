"""Main scaffolding orchestrator.

Takes a ``ScaffoldConfig`` and the operator's ``RunOptions`` and lays down the
Playwright test tree inside the host project: the directory skeleton first,
then every applicable template.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from ..config import CIProvider, RunOptions, ScaffoldConfig
from ..utils import ensure_dir
from .api_gen import ApiClientGenerator
from .playwright_gen import PlaywrightGenerator
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Directory layout
# ---------------------------------------------------------------------------

BASE_DIRS: tuple[str, ...] = (
    ".auth",
    "fixtures",
    "pages",
    "tests",
    "utils",
)


def directory_layout(e2e_dir: str, options: RunOptions) -> list[str]:
    """Return the directories a scaffold needs, relative to the project root.

    The base list always comes first, followed by the option-gated additions
    in a fixed order.
    """
    dirs = [f"{e2e_dir}/{d}" for d in BASE_DIRS]
    if options.api_client:
        dirs.append(f"{e2e_dir}/api")
    if options.visual_regression:
        dirs.append(f"{e2e_dir}/tests/__snapshots__")
    return dirs


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ScaffoldGenerator:
    """Scaffolding orchestrator.

    Given a ``ScaffoldConfig`` and ``RunOptions``, generates:
    - The ``<e2e>/`` directory skeleton
    - Playwright config and type-check config at the project root
    - Base fixture, auth setup stub and example test
    - API client and API-aware fixture (``api_client``)
    - Visual regression example test (``visual_regression``)
    - GitHub Actions workflow (``ci_provider == github``)

    Every file is written unconditionally; existing files are overwritten.
    """

    def __init__(
        self,
        config: ScaffoldConfig,
        options: RunOptions,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.config = config
        self.options = options
        self.renderer = renderer or TemplateRenderer()
        self.playwright_gen = PlaywrightGenerator(self.renderer)
        self.api_gen = ApiClientGenerator(self.renderer)

    # -- Public API --------------------------------------------------------

    async def create_directory_structure(self) -> list[Path]:
        """Create the scaffold's directories; safe to repeat.

        Returns:
            The directory paths, in layout order.
        """
        root = self.config.target_dir
        created: list[Path] = []
        for d in directory_layout(self.config.e2e_dir, self.options):
            p = root / d
            await asyncio.to_thread(ensure_dir, p)
            created.append(p)
        return created

    async def generate(self) -> list[Path]:
        """Render every applicable template into the project.

        Returns:
            List of written file paths, in write order.  The base fixture
            appears twice when the API client is enabled because it is
            rewritten with the API-aware variant.
        """
        root = self.config.target_dir
        context = self._build_context()
        written: list[Path] = []

        # 1. Playwright run configuration
        written.append(await self.playwright_gen.generate_config(root, context))

        # 2. Files every scaffold gets
        written.extend(await self.playwright_gen.generate_standard_files(root, context))

        # 3. API client (overwrites the plain fixture)
        if self.options.api_client:
            written.extend(await self.api_gen.generate(root, context))

        # 4. CI workflow
        if self.options.ci_provider is CIProvider.GITHUB:
            written.append(await self._render_ci(context))

        # 5. Visual regression example
        if self.options.visual_regression:
            written.append(await self.playwright_gen.generate_visual_test(root, context))

        return written

    # -- Context building --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context from the config and options."""
        return self.config.template_context(self.options)

    # -- CI/CD -------------------------------------------------------------

    async def _render_ci(self, ctx: dict[str, Any]) -> Path:
        """Render the GitHub Actions workflow."""
        return await self.renderer.render_to_file(
            "github/playwright.yml.j2",
            self.config.workflow_path,
            ctx,
        )
