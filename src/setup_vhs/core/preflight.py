"""Preflight checks on the tape file before anything gets installed."""

from __future__ import annotations

import os

from setup_vhs.core.models import ActionInputs
from setup_vhs.core.protocols import Reporter
from setup_vhs.exceptions import TargetFileError


class PreflightValidator:
    """Checks that the tape file exists and is readable.

    A missing file is only reported: the run carries on and VHS itself
    fails on it later.  An existing file that cannot be read raises
    :class:`TargetFileError`.
    """

    def __init__(self, reporter: Reporter) -> None:
        self._reporter: Reporter = reporter

    def validate(self, file_path: str, working_directory: str = "") -> None:
        if not file_path:
            return

        resolved = ActionInputs(
            path=file_path,
            working_directory=working_directory,
        ).resolved_path

        if not os.path.exists(resolved):
            self._reporter.error(f"File {resolved} does not exist")
            return

        if not os.access(resolved, os.F_OK):
            raise TargetFileError(f"File {resolved} is not accessible")
        if not os.access(resolved, os.R_OK):
            raise TargetFileError(
                f"File {resolved} is not readable",
                hint="Check the file permissions of the tape file.",
            )
