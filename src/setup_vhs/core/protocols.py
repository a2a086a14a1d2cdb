"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and the CLI
reporter must satisfy.  Core code depends ONLY on these protocols,
never on concrete implementations.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Protocol


class Reporter(Protocol):
    """Sink for run messages, rendered by the CLI layer."""

    def info(self, message: str) -> None:
        ...  # pragma: no cover

    def warning(self, message: str) -> None:
        ...  # pragma: no cover

    def error(self, message: str) -> None:
        ...  # pragma: no cover


class AmbientEnvironment(Protocol):
    """The runner's process-wide environment for the duration of one run.

    Changes made here persist for later steps of the same job (through
    the runner's file commands) and are visible in :attr:`environ`.
    """

    @property
    def environ(self) -> MutableMapping[str, str]:
        """Current environment of the run; child environments clone it."""
        ...  # pragma: no cover

    def add_path(self, directory: str) -> None:
        """Prepend *directory* to PATH for this run and later steps."""
        ...  # pragma: no cover

    def export_variable(self, name: str, value: str) -> None:
        """Set *name* to *value* for this run and later steps."""
        ...  # pragma: no cover


class FontInstaller(Protocol):
    """Installs the fonts VHS renders terminals with."""

    def install(self) -> None:
        """Raises :class:`~setup_vhs.exceptions.FontInstallError` on failure."""
        ...  # pragma: no cover


class DependencyInstaller(Protocol):
    """Installs the system tools VHS shells out to (ttyd, ffmpeg)."""

    def install(self) -> None:
        """Raises :class:`~setup_vhs.exceptions.DependencyInstallError` on failure."""
        ...  # pragma: no cover


class BinaryInstaller(Protocol):
    """Fetches a VHS release and returns where its binary lives."""

    def install(self, version: str) -> str:
        """Install *version* and return the absolute path of the binary.

        An empty *version* or ``"latest"`` selects the newest release.

        Raises
        ------
        BinaryInstallError
            When the release cannot be resolved, downloaded or unpacked.
        """
        ...  # pragma: no cover


class Executor(Protocol):
    """Runs the installed VHS binary against a tape file."""

    def execute(
        self,
        binary_path: str,
        target_file: str,
        *,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
    ) -> object:
        """Run ``<binary_path> <target_file>``.

        Raises
        ------
        ExecutionFailedError
            When the process cannot be started or exits non-zero.
        """
        ...  # pragma: no cover
