"""Core / service layer — pipeline orchestration and data transformations.

Rules
-----
* No ``print()`` calls; messages go through a ``Reporter``.
* No subprocess or network I/O; filesystem access is limited to
  existence and permission probes.
* No imports from ``cli`` or ``infra``.
"""

from setup_vhs.core.environment import EnvironmentComposer
from setup_vhs.core.models import ActionInputs, ComposedEnvironment, ExecutionResult
from setup_vhs.core.paths import expand_home
from setup_vhs.core.preflight import PreflightValidator
from setup_vhs.core.protocols import (
    AmbientEnvironment,
    BinaryInstaller,
    DependencyInstaller,
    Executor,
    FontInstaller,
    Reporter,
)
from setup_vhs.core.setup_service import SetupService

__all__: list[str] = [
    "ActionInputs",
    "AmbientEnvironment",
    "BinaryInstaller",
    "ComposedEnvironment",
    "DependencyInstaller",
    "EnvironmentComposer",
    "ExecutionResult",
    "Executor",
    "FontInstaller",
    "PreflightValidator",
    "Reporter",
    "SetupService",
    "expand_home",
]
