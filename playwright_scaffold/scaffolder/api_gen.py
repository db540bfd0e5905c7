"""API client generation.

Writes ``<e2e>/api/ApiClient.ts`` and replaces the plain fixture with one that
exposes the client to tests as the ``api`` fixture.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .templates import TemplateRenderer


class ApiClientGenerator:
    """Generates the API client module and the API-aware base fixture."""

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    async def generate(
        self,
        output_dir: Path,
        context: dict[str, Any],
    ) -> list[Path]:
        """Write the client, then overwrite ``fixtures/base.ts``.

        Must run after the standard files so the API-aware fixture wins.
        """
        e2e = output_dir / context["e2e_dir"]
        client = await self.renderer.render_to_file(
            "e2e/api/ApiClient.ts.j2",
            e2e / "api" / "ApiClient.ts",
            context,
        )
        fixture = await self.renderer.render_to_file(
            "e2e/fixtures/base.api.ts.j2",
            e2e / "fixtures" / "base.ts",
            context,
        )
        return [client, fixture]
