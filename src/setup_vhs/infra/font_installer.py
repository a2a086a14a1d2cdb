"""Installs the monospace and emoji fonts VHS renders terminals with.

Satisfies :class:`~setup_vhs.core.protocols.FontInstaller`.
"""

from __future__ import annotations

from setup_vhs.exceptions import FontInstallError
from setup_vhs.infra.package_manager import run_install_commands
from setup_vhs.infra.tool_detector import current_system

LINUX_FONT_PACKAGES: tuple[str, ...] = (
    "fonts-jetbrains-mono",
    "fonts-firacode",
    "fonts-hack",
    "fonts-noto-color-emoji",
)

DARWIN_FONT_CASKS: tuple[str, ...] = (
    "font-jetbrains-mono",
    "font-fira-code",
    "font-hack",
    "font-noto-color-emoji",
)

WINDOWS_FONT_PACKAGES: tuple[str, ...] = (
    "jetbrainsmono",
    "firacode",
    "hackfont",
)


def font_install_commands(system: str) -> tuple[str, ...]:
    """Return the commands that install the default font set on *system*."""
    if system == "linux":
        return (
            "sudo apt-get update",
            "sudo apt-get install -y " + " ".join(LINUX_FONT_PACKAGES),
        )
    if system == "darwin":
        return ("brew install --cask " + " ".join(DARWIN_FONT_CASKS),)
    if system == "windows":
        return ("choco install -y " + " ".join(WINDOWS_FONT_PACKAGES),)
    return ()


class SystemFontInstaller:
    """Installs the default font set with the platform package manager.

    Platforms without a known package manager are skipped; VHS then
    falls back to whatever fonts the system has.
    """

    def install(self) -> None:
        commands = font_install_commands(current_system())
        if commands:
            run_install_commands(commands, error_class=FontInstallError)
