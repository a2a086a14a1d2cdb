"""Custom exception hierarchy for setup-vhs.

Every error that can terminate a run must inherit from
:class:`SetupVhsError`.  Raw ``OSError``/``httpx`` exceptions are caught
in the infrastructure layer and re-raised as a typed subclass defined
here, so the CLI error boundary only ever reports clean messages.

Hierarchy
---------
SetupVhsError
├── InputError
├── TargetFileError
├── InstallError
│   ├── FontInstallError
│   ├── DependencyInstallError
│   └── BinaryInstallError
├── ExecutionFailedError
└── EnvironmentError
"""

from __future__ import annotations


class SetupVhsError(Exception):
    """Base exception for all setup-vhs errors.

    The CLI error boundary turns any instance into a failed run carrying
    ``str(exc)`` as the failure message.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Inputs / runner environment --------------------------------------------

class InputError(SetupVhsError):
    """Raised when an action input or runner file command is invalid."""


# --- Target tape file ---------------------------------------------------------

class TargetFileError(SetupVhsError):
    """Raised when an existing tape file cannot be accessed or read."""


# --- Installers ---------------------------------------------------------------

class InstallError(SetupVhsError):
    """Base class for failures raised by one of the installers."""


class FontInstallError(InstallError):
    """Raised when the font installer fails."""


class DependencyInstallError(InstallError):
    """Raised when ttyd or ffmpeg cannot be installed."""


class BinaryInstallError(InstallError):
    """Raised when the VHS release cannot be resolved, downloaded or unpacked."""


# --- Execution ----------------------------------------------------------------

class ExecutionFailedError(SetupVhsError):
    """Raised when VHS cannot be started or exits with a non-zero code."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.exit_code: int | None = exit_code


# --- Optional libraries -------------------------------------------------------

class EnvironmentError(SetupVhsError):
    """Raised when a required runtime library is not available."""
