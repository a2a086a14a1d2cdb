"""Infrastructure layer — external system integration.

This layer wraps all interaction with the runner environment, package
managers, GitHub releases and the VHS process.  Every raw third-party or
OS exception must be caught here and re-raised as a
:class:`~setup_vhs.exceptions.SetupVhsError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from setup_vhs.infra.dependency_installer import SystemDependencyInstaller
from setup_vhs.infra.executor import SubprocessExecutor
from setup_vhs.infra.font_installer import SystemFontInstaller
from setup_vhs.infra.runner import RunnerContext
from setup_vhs.infra.tool_detector import ToolStatus, detect_tool
from setup_vhs.infra.vhs_installer import VhsReleaseInstaller

__all__: list[str] = [
    "RunnerContext",
    "SubprocessExecutor",
    "SystemDependencyInstaller",
    "SystemFontInstaller",
    "ToolStatus",
    "VhsReleaseInstaller",
    "detect_tool",
]
