"""Workflow-command reporter for the GitHub Actions step log.

Implements :class:`~setup_vhs.core.protocols.Reporter`.  Info lines are
written as-is; warnings and errors become ``::warning::`` and
``::error::`` workflow commands so the runner turns them into
annotations.  Everything goes to stdout, where the runner looks for
workflow commands.
"""

from __future__ import annotations

from setup_vhs.cli.console import get_rich_console
from setup_vhs.exceptions import EnvironmentError


def escape_data(message: str) -> str:
    """Escape a workflow-command payload (``%``, ``\\r`` and ``\\n``)."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowReporter:
    """Writes run messages to stdout in workflow-command syntax."""

    def info(self, message: str) -> None:
        self._emit(message)

    def warning(self, message: str) -> None:
        self._emit(f"::warning::{escape_data(message)}")

    def error(self, message: str) -> None:
        self._emit(f"::error::{escape_data(message)}")

    def set_failed(self, message: str) -> None:
        """Report *message* as the reason the run failed."""
        self.error(message)

    @staticmethod
    def _emit(line: str) -> None:
        try:
            rich_console = get_rich_console(stderr=False)
        except EnvironmentError:
            print(line)
            return
        # Markup and wrapping would corrupt workflow commands.
        rich_console.print(line, markup=False, highlight=False, soft_wrap=True)
