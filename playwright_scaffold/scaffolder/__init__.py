"""Playwright scaffold generator -- lays down an E2E test tree.

Quick usage::

    from playwright_scaffold.config import RunOptions, ScaffoldConfig
    from playwright_scaffold.scaffolder import ScaffoldGenerator

    generator = ScaffoldGenerator(ScaffoldConfig(target_dir=path), RunOptions())
    await generator.create_directory_structure()
    written = await generator.generate()
"""

from playwright_scaffold.scaffolder.api_gen import ApiClientGenerator
from playwright_scaffold.scaffolder.generator import ScaffoldGenerator, directory_layout
from playwright_scaffold.scaffolder.playwright_gen import PlaywrightGenerator
from playwright_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "ApiClientGenerator",
    "PlaywrightGenerator",
    "ScaffoldGenerator",
    "TemplateRenderer",
    "directory_layout",
]
