"""Rich consoles for the CLI layer.

Workflow commands go to stdout, where the runner parses them; ``doctor``
diagnostics go to stderr.  Rich is loaded on first use, and both paths
fall back to plain ``print`` without it.
"""

from __future__ import annotations

import sys
from typing import Any

from setup_vhs.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(*, stderr: bool = True) -> Any:
    """Return a Rich console on stderr, or on stdout for workflow commands."""
    return _load_rich_console_class()(stderr=stderr)


class _DiagnosticsConsole:
    """Stderr console used by ``doctor``; prints plainly without Rich."""

    def print(self, *objects: object) -> None:
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _DiagnosticsConsole()
