"""Domain models for setup-vhs.

All models are **frozen** dataclasses: immutable value objects built
and discarded within a single run.
"""

from __future__ import annotations

import os.path
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Invocation inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ActionInputs:
    """Configuration values read from the invoking runner.

    An empty string means the input was not provided.
    """

    version: str = ""
    """VHS version to install; passed opaquely to the binary installer."""

    path: str = ""
    """Tape file to run with VHS."""

    working_directory: str = ""
    """Directory VHS is launched in; *path* is relative to it."""

    extra_paths: str = ""
    """Comma-separated directories to put on PATH before running."""

    @property
    def resolved_path(self) -> str:
        """Tape path joined onto the working directory, for preflight checks."""
        if self.working_directory:
            return os.path.join(self.working_directory, self.path)
        return self.path


# ---------------------------------------------------------------------------
# Composed child environment
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ComposedEnvironment:
    """PATH entries and the environment map handed to the VHS process."""

    path_list: tuple[str, ...]
    """Directories prepended to PATH, binary directory first."""

    env: dict[str, str] | None
    """Full child-process environment, or ``None`` to inherit."""


# ---------------------------------------------------------------------------
# Execution outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Outcome of a successful VHS invocation."""

    command: tuple[str, ...]
    exit_code: int
