"""Infrastructure: run package-manager commands for the installers.

The only place, besides the executor, that spawns subprocesses.  Raw
``subprocess``/``OSError`` failures are re-raised as the installer's
typed :class:`~setup_vhs.exceptions.InstallError` subclass.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Iterable

from setup_vhs.exceptions import InstallError


def run_install_commands(
    commands: Iterable[str],
    *,
    error_class: type[InstallError] = InstallError,
) -> None:
    """Run each shell-style command in order, stopping at the first failure."""
    for command in commands:
        argv = shlex.split(command)
        try:
            subprocess.run(argv, check=True)
        except subprocess.CalledProcessError as exc:
            raise error_class(
                f"Command '{command}' failed with exit code {exc.returncode}",
            ) from exc
        except OSError as exc:
            raise error_class(
                f"Unable to run '{command}': {exc}",
                hint="Make sure the package manager is available on this runner.",
            ) from exc
