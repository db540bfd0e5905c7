"""Development dependency installation.

Shells out to ``npm install -D`` once with the configured package list.  The
child inherits the parent's stdout/stderr so the operator sees npm's own
progress output.  There is no retry: a failure is reported to the caller as
:class:`InstallError`.
"""

from __future__ import annotations

from pathlib import Path

from .utils import run_command


class InstallError(Exception):
    """Raised when the package manager exits non-zero or cannot be started."""

    def __init__(self, message: str, returncode: int | None = None) -> None:
        self.returncode = returncode
        super().__init__(message)


class DependencyInstaller:
    """Adds a fixed set of packages as development dependencies."""

    def __init__(self, cwd: Path, packages: list[str], timeout: int = 600) -> None:
        self.cwd = cwd
        self.packages = list(packages)
        self.timeout = timeout

    def build_command(self) -> list[str]:
        """Return the argv used to install :attr:`packages`."""
        return ["npm", "install", "-D", *self.packages]

    async def install(self) -> None:
        """Install the packages, blocking until npm exits.

        Raises:
            InstallError: If npm is missing, times out, or exits non-zero.
        """
        cmd = self.build_command()
        try:
            returncode, _, stderr = await run_command(
                cmd, cwd=self.cwd, timeout=self.timeout, capture=False
            )
        except OSError as exc:
            raise InstallError(f"Could not run {cmd[0]}: {exc}") from exc

        if returncode != 0:
            detail = stderr or f"exit code {returncode}"
            raise InstallError(f"{' '.join(cmd)} failed ({detail})", returncode=returncode)
