"""Infrastructure: the GitHub Actions runner environment.

:class:`RunnerContext` is the explicit, mutable environment owned by
one run.  It reads action inputs from ``INPUT_*`` variables and persists
PATH and variable changes for later job steps through the runner's
``GITHUB_PATH`` / ``GITHUB_ENV`` file commands.

Rules
-----
* No user-facing output.
* The mapping passed in is the only environment touched.
"""

from __future__ import annotations

import os
import uuid
from collections.abc import MutableMapping
from pathlib import Path

from setup_vhs.core.models import ActionInputs
from setup_vhs.exceptions import InputError


class RunnerContext:
    """Satisfies :class:`~setup_vhs.core.protocols.AmbientEnvironment`.

    Parameters
    ----------
    environ:
        The environment mapping of the run.  The CLI passes
        :data:`os.environ`; tests pass a plain ``dict``.
    """

    def __init__(self, environ: MutableMapping[str, str]) -> None:
        self._environ: MutableMapping[str, str] = environ

    @property
    def environ(self) -> MutableMapping[str, str]:
        return self._environ

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------

    def get_input(self, name: str) -> str:
        """Return the stripped value of action input *name*.

        Inputs arrive as ``INPUT_<NAME>`` with spaces replaced by
        underscores and the name upper-cased; dashes are kept
        (``working-directory`` → ``INPUT_WORKING-DIRECTORY``).
        Every input is optional, so a missing one reads as ``""``.
        """
        key = "INPUT_" + name.replace(" ", "_").upper()
        return self._environ.get(key, "").strip()

    def read_inputs(self) -> ActionInputs:
        """Read every input the action understands."""
        return ActionInputs(
            version=self.get_input("version"),
            path=self.get_input("path"),
            working_directory=self.get_input("working-directory"),
            extra_paths=self.get_input("extra-paths"),
        )

    # ------------------------------------------------------------------
    # Ambient mutations
    # ------------------------------------------------------------------

    def add_path(self, directory: str) -> None:
        """Prepend *directory* to PATH for this run and later steps."""
        path_file = self._environ.get("GITHUB_PATH", "")
        if path_file:
            self._append_file_command(path_file, directory + "\n")

        current = self._environ.get("PATH", "")
        self._environ["PATH"] = directory + os.pathsep + current if current else directory

    def export_variable(self, name: str, value: str) -> None:
        """Set *name* for this run and, via ``GITHUB_ENV``, for later steps."""
        env_file = self._environ.get("GITHUB_ENV", "")
        if env_file:
            self._append_file_command(env_file, self._format_env_entry(name, value))
        self._environ[name] = value

    # ------------------------------------------------------------------
    # File commands
    # ------------------------------------------------------------------

    @staticmethod
    def _format_env_entry(name: str, value: str) -> str:
        """Render a multi-line-safe ``name<<delimiter`` block."""
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name:
            raise InputError(
                f"Unexpected input: name should not contain the delimiter {delimiter!r}",
            )
        if delimiter in value:
            raise InputError(
                f"Unexpected input: value should not contain the delimiter {delimiter!r}",
            )
        return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"

    @staticmethod
    def _append_file_command(file_path: str, content: str) -> None:
        # Text mode translates "\n" to the platform line ending.
        path = Path(file_path)
        if not path.exists():
            raise InputError(
                f"Missing file at path: {file_path}",
                hint="The runner should create this file before the step starts.",
            )
        with path.open("a", encoding="utf-8") as handle:
            handle.write(content)
