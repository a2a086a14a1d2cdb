"""Installs the system tools VHS needs at record time: ttyd and ffmpeg.

Satisfies :class:`~setup_vhs.core.protocols.DependencyInstaller`.
Tools already on PATH are left alone; the missing ones are installed
with one package-manager invocation.
"""

from __future__ import annotations

from setup_vhs.exceptions import DependencyInstallError
from setup_vhs.infra.package_manager import run_install_commands
from setup_vhs.infra.tool_detector import detect_tool, platform_install_commands

REQUIRED_TOOLS: tuple[str, ...] = ("ttyd", "ffmpeg")


class SystemDependencyInstaller:
    """Installs missing tools with the platform package manager."""

    def __init__(self, tools: tuple[str, ...] = REQUIRED_TOOLS) -> None:
        self._tools: tuple[str, ...] = tools

    def missing_tools(self) -> list[str]:
        """Return the names of required tools not found on PATH."""
        return [name for name in self._tools if not detect_tool(name).found]

    def install(self) -> None:
        missing = self.missing_tools()
        if not missing:
            return

        names = ", ".join(missing)
        commands = platform_install_commands(*missing)
        if not commands:
            raise DependencyInstallError(
                f"Cannot install {names}: no package manager is known for this platform.",
                hint=f"Install {names} manually before running this action.",
            )
        run_install_commands(commands, error_class=DependencyInstallError)
