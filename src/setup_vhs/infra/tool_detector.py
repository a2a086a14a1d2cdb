"""Infrastructure: detection of VHS's runtime tools and install guidance.

Locates ``ttyd``, ``ffmpeg`` and ``vhs`` on the system PATH and knows
the package-manager command that installs each of them on the current
platform.

Rules
-----
* Detection via :func:`shutil.which` only.
* No ``print()``; callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolStatus:
    """Result of a detection probe for one executable.

    Attributes
    ----------
    name : str
        Executable name that was probed.
    found : bool
        Whether the tool was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    install_commands : tuple[str, ...]
        Suggested shell commands for installing the tool on the current
        platform.  Empty when the tool is already present.
    """

    name: str
    found: bool
    path: Path | None
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tool(name: str, path: str | None = None) -> ToolStatus:
    """Probe *path* (default: PATH) for executable *name*.

    Returns a :class:`ToolStatus` whether or not the tool is present.
    """
    result = shutil.which(name, path=path)

    if result is not None:
        return ToolStatus(
            name=name,
            found=True,
            path=Path(result).resolve(),
            install_commands=(),
        )

    return ToolStatus(
        name=name,
        found=False,
        path=None,
        install_commands=platform_install_commands(name),
    )


# ---------------------------------------------------------------------------
# Platform-specific install commands
# ---------------------------------------------------------------------------

_LINUX_PACKAGES: dict[str, str] = {
    "ffmpeg": "ffmpeg",
    "ttyd": "ttyd",
}

_DARWIN_PACKAGES: dict[str, str] = {
    "ffmpeg": "ffmpeg",
    "ttyd": "ttyd",
    "vhs": "vhs",
}

_WINDOWS_PACKAGES: dict[str, str] = {
    "ffmpeg": "ffmpeg",
    "ttyd": "ttyd",
}

_PACKAGES: dict[str, dict[str, str]] = {
    "linux": _LINUX_PACKAGES,
    "darwin": _DARWIN_PACKAGES,
    "windows": _WINDOWS_PACKAGES,
}


def current_system() -> str:
    """Return ``linux``, ``darwin``, ``windows`` or the raw lower-cased name."""
    return platform.system().lower()


def platform_install_commands(*names: str) -> tuple[str, ...]:
    """Return install commands for *names* appropriate for the current OS.

    All tools go into a single package-manager invocation.  Returns an
    empty tuple when any of them has no known package on this platform.
    """
    system = current_system()
    packages = _PACKAGES.get(system, {})
    if names and all(name in packages for name in names):
        joined = " ".join(packages[name] for name in names)
        if system == "linux":
            return (
                "sudo apt-get update",
                f"sudo apt-get install -y {joined}",
            )
        if system == "darwin":
            return (f"brew install {joined}",)
        return (f"choco install {joined} -y",)
    if names == ("vhs",):
        return ("setup-vhs",)
    return ()
