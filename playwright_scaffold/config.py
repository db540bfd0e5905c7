"""Playwright scaffold configuration.

Two pydantic v2 models drive a run: ``RunOptions`` holds the operator's
answers and ``ScaffoldConfig`` holds the fixed settings (target directory,
test directory name, dependency list) plus the paths derived from them.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DEV_DEPENDENCIES: list[str] = [
    "@playwright/test",
    "typescript",
    "ts-node",
    "eslint-plugin-playwright",
    "dotenv",
]


class CIProvider(str, Enum):
    """CI systems a workflow can be generated for."""

    NONE = "none"
    GITHUB = "github"


class RunOptions(BaseModel):
    """Answers collected from the operator, fixed for the rest of the run."""

    model_config = ConfigDict(frozen=True)

    visual_regression: bool = Field(
        default=True, description="Generate the visual regression config and example"
    )
    api_client: bool = Field(
        default=True, description="Generate the API client and wire it into the fixture"
    )
    ci_provider: CIProvider = Field(
        default=CIProvider.GITHUB, description="CI system to generate a workflow for"
    )

    def as_dict(self) -> dict[str, str]:
        """Return a display-friendly ``{option: value}`` mapping."""
        return {
            "Visual regression": "yes" if self.visual_regression else "no",
            "API client": "yes" if self.api_client else "no",
            "CI provider": self.ci_provider.value,
        }


class ScaffoldConfig(BaseModel):
    """Fixed settings for one scaffold run.

    Instances are usually created by :meth:`from_env` in the CLI entry point
    and passed through the rest of the system.
    """

    target_dir: Path = Field(default_factory=Path.cwd)
    e2e_dir: str = Field(default="e2e", min_length=1)
    base_url: str = Field(default="http://localhost:3000")
    node_version: str = Field(default="18")
    dev_dependencies: list[str] = Field(
        default_factory=lambda: list(DEFAULT_DEV_DEPENDENCIES)
    )
    install_timeout: int = Field(
        default=600, ge=30, description="Package manager timeout in seconds"
    )

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def package_json_path(self) -> Path:
        """The host project's descriptor."""
        return self.target_dir / "package.json"

    @property
    def gitignore_path(self) -> Path:
        return self.target_dir / ".gitignore"

    @property
    def e2e_path(self) -> Path:
        """Root of the generated test tree."""
        return self.target_dir / self.e2e_dir

    @property
    def auth_file(self) -> str:
        """Storage-state path written by the auth setup, relative to the project root."""
        return f"{self.e2e_dir}/.auth/user.json"

    @property
    def workflow_path(self) -> Path:
        return self.target_dir / ".github" / "workflows" / "playwright.yml"

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls, target_dir: Path | None = None) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            PW_SCAFFOLD_E2E_DIR, PW_SCAFFOLD_BASE_URL,
            PW_SCAFFOLD_NODE_VERSION, PW_SCAFFOLD_INSTALL_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if target_dir is not None:
            kwargs["target_dir"] = target_dir
        if os.environ.get("PW_SCAFFOLD_E2E_DIR"):
            kwargs["e2e_dir"] = os.environ["PW_SCAFFOLD_E2E_DIR"]
        if os.environ.get("PW_SCAFFOLD_BASE_URL"):
            kwargs["base_url"] = os.environ["PW_SCAFFOLD_BASE_URL"]
        if os.environ.get("PW_SCAFFOLD_NODE_VERSION"):
            kwargs["node_version"] = os.environ["PW_SCAFFOLD_NODE_VERSION"]
        if os.environ.get("PW_SCAFFOLD_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["PW_SCAFFOLD_INSTALL_TIMEOUT"])
        return cls(**kwargs)

    def template_context(self, options: RunOptions) -> dict[str, Any]:
        """Build the Jinja2 template context for *options*."""
        return {
            "e2e_dir": self.e2e_dir,
            "auth_file": self.auth_file,
            "base_url": self.base_url,
            "node_version": self.node_version,
            "visual_regression": options.visual_regression,
            "api_client": options.api_client,
        }
