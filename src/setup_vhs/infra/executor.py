"""Runs the installed VHS binary against a tape file.

Satisfies :class:`~setup_vhs.core.protocols.Executor`.  Output is not
captured: VHS writes straight to the step log.  There is no timeout and
no retry.
"""

from __future__ import annotations

import subprocess

from setup_vhs.core.models import ExecutionResult
from setup_vhs.exceptions import ExecutionFailedError


class SubprocessExecutor:
    """Launches ``<binary> <tape>`` with an optional cwd and environment."""

    def execute(
        self,
        binary_path: str,
        target_file: str,
        *,
        cwd: str | None = None,
        env: dict[str, str] | None = None,
    ) -> ExecutionResult:
        """Run VHS and return its result.

        Raises
        ------
        ExecutionFailedError
            When the process cannot be started or exits with a non-zero code.
        """
        command = (binary_path, target_file)
        try:
            completed = subprocess.run(list(command), cwd=cwd, env=env, check=False)
        except OSError as exc:
            raise ExecutionFailedError(
                f"Unable to start '{binary_path}': {exc}",
            ) from exc

        if completed.returncode != 0:
            raise ExecutionFailedError(
                f"The process '{binary_path}' failed with exit code {completed.returncode}",
                exit_code=completed.returncode,
            )
        return ExecutionResult(command=command, exit_code=completed.returncode)
