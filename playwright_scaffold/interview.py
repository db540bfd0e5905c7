"""Interactive option collection.

Asks the operator three fixed questions, in order, and returns a populated
:class:`RunOptions`.  Input validation is left to the Rich prompt classes:
``Confirm`` re-asks until it gets y/n and ``Prompt`` re-asks until the answer
is one of the listed choices.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .config import CIProvider, RunOptions
from .utils import console as default_console

CI_CHOICES: dict[str, str] = {
    CIProvider.NONE.value: "None",
    CIProvider.GITHUB.value: "GitHub Actions",
}


def collect_options(console: Console | None = None) -> RunOptions:
    """Prompt for every run option and return the answers.

    Defaults match :class:`RunOptions`: visual regression on, API client on,
    GitHub Actions workflow.
    """
    console = console or default_console
    defaults = RunOptions()

    visual_regression = Confirm.ask(
        "Include Visual Regression Setup (optimized config & example)?",
        default=defaults.visual_regression,
        console=console,
    )
    api_client = Confirm.ask(
        "Include API Client Base (for easy data seeding)?",
        default=defaults.api_client,
        console=console,
    )

    listing = ", ".join(f"{value} = {title}" for value, title in CI_CHOICES.items())
    ci_provider = Prompt.ask(
        f"Generate CI/CD Pipeline? [dim]({listing})[/dim]",
        choices=list(CI_CHOICES),
        default=defaults.ci_provider.value,
        console=console,
    )

    return RunOptions(
        visual_regression=visual_regression,
        api_client=api_client,
        ci_provider=CIProvider(ci_provider),
    )
