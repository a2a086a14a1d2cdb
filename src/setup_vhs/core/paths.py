"""Home-directory expansion for user-supplied paths."""

from __future__ import annotations

from pathlib import Path


def expand_home(path: str) -> str:
    """Replace a leading ``~`` with the current user's home directory.

    Only ``"~"`` and paths starting with ``"~/"`` are expanded.  ``~user``
    forms and a ``~`` anywhere else in the string are returned as-is.
    """
    if path == "~" or path.startswith("~/"):
        return str(Path.home()) + path[1:]
    return path
