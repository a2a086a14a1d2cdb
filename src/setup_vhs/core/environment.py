"""Environment composition — PATH entries and the VHS child environment.

Two effects are produced and kept distinct:

* The **ambient** environment of the run is mutated through
  :class:`~setup_vhs.core.protocols.AmbientEnvironment`, so later steps
  of the same job see VHS on PATH with ``CI`` cleared and true colour on.
* An explicit **child** environment map is built from it; this is the
  map the VHS process is launched with.
"""

from __future__ import annotations

import os

from setup_vhs.core.models import ComposedEnvironment
from setup_vhs.core.paths import expand_home
from setup_vhs.core.protocols import AmbientEnvironment, Reporter

#: Variables forced on every run.  Termenv ignores ANSI sequences when
#: ``CI`` is set, and GitHub-hosted runners render true colour.
TERMINAL_OVERRIDES: dict[str, str] = {
    "CI": "",
    "COLORTERM": "truecolor",
}


def split_extra_paths(extra_paths_csv: str) -> list[str]:
    """Split a comma-separated PATH list into stripped, expanded entries."""
    entries: list[str] = []
    for raw in extra_paths_csv.split(","):
        entry = raw.strip()
        if entry:
            entries.append(expand_home(entry))
    return entries


class EnvironmentComposer:
    """Builds the PATH entry list and the child-process environment.

    Parameters
    ----------
    ambient:
        The run's mutable environment context.
    reporter:
        Receives progress messages and missing-path warnings.
    """

    def __init__(self, ambient: AmbientEnvironment, reporter: Reporter) -> None:
        self._ambient: AmbientEnvironment = ambient
        self._reporter: Reporter = reporter

    def compose(self, bin_dir: str, extra_paths_csv: str = "") -> ComposedEnvironment:
        path_list: list[str] = [bin_dir]

        self._reporter.info("Adding VHS to PATH")
        self._ambient.add_path(bin_dir)

        if extra_paths_csv:
            for entry in split_extra_paths(extra_paths_csv):
                if os.path.exists(entry):
                    self._reporter.info(f"Adding {entry} to PATH")
                    path_list.append(entry)
                    self._ambient.add_path(entry)
                else:
                    self._reporter.warning(f"Path {entry} does not exist, skipping")

        for name, value in TERMINAL_OVERRIDES.items():
            self._ambient.export_variable(name, value)

        env: dict[str, str] | None = None
        if path_list:
            env = self.build_child_env(path_list)

        return ComposedEnvironment(path_list=tuple(path_list), env=env)

    def build_child_env(self, path_list: list[str]) -> dict[str, str]:
        """Clone the ambient environment with PATH and terminal overrides."""
        env = dict(self._ambient.environ)
        current_path = env.get("PATH", "")
        env["PATH"] = os.pathsep.join(path_list) + os.pathsep + current_path
        env.update(TERMINAL_OVERRIDES)
        return env
