"""Core setup service — drives the install-then-record pipeline.

Every collaborator is injected at construction time, so the pipeline
itself performs no installation, network access or subprocess work.

Flow
----
1. Preflight-check the tape file (report only, unless unreadable).
2. Install fonts, then system dependencies, then the VHS binary.
3. Compose PATH and the terminal environment.
4. Run VHS against the tape file, when one was given.

Each step completes before the next begins; the first error aborts the
pipeline and propagates unchanged to the CLI error boundary.
"""

from __future__ import annotations

import os

from setup_vhs.core.environment import EnvironmentComposer
from setup_vhs.core.models import ActionInputs, ComposedEnvironment
from setup_vhs.core.preflight import PreflightValidator
from setup_vhs.core.protocols import (
    AmbientEnvironment,
    BinaryInstaller,
    DependencyInstaller,
    Executor,
    FontInstaller,
    Reporter,
)


class SetupService:
    """Sequential pipeline for one action run.

    Parameters
    ----------
    fonts, dependencies, installer:
        Installer collaborators, called in that order.
    executor:
        Runs the installed binary.
    ambient:
        The run's mutable environment context.
    reporter:
        Message sink shared with the validator and composer.
    """

    def __init__(
        self,
        *,
        fonts: FontInstaller,
        dependencies: DependencyInstaller,
        installer: BinaryInstaller,
        executor: Executor,
        ambient: AmbientEnvironment,
        reporter: Reporter,
    ) -> None:
        self._fonts = fonts
        self._dependencies = dependencies
        self._installer = installer
        self._executor = executor
        self._reporter = reporter
        self._validator = PreflightValidator(reporter)
        self._composer = EnvironmentComposer(ambient, reporter)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, inputs: ActionInputs) -> ComposedEnvironment:
        """Execute the full pipeline and return the composed environment.

        Raises
        ------
        SetupVhsError
            Any installer, permission or execution failure.
        """
        if inputs.path:
            self._validator.validate(inputs.path, inputs.working_directory)

        self._fonts.install()
        self._dependencies.install()
        binary = self._installer.install(inputs.version)

        composed = self._composer.compose(os.path.dirname(binary), inputs.extra_paths)

        if inputs.path:
            self._reporter.info("Running VHS")
            cwd: str | None = None
            if inputs.working_directory:
                cwd = inputs.working_directory
                self._reporter.info(f"Using working directory: {cwd}")
            self._executor.execute(binary, inputs.path, cwd=cwd, env=composed.env)

        return composed
