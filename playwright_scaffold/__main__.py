"""Allow ``python -m playwright_scaffold``."""

from playwright_scaffold.pipeline import main

main()
