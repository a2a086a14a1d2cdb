"""CLI application entry point and command routing for setup-vhs.

This module is the **sole error boundary** for the entire application.
It catches :class:`~setup_vhs.exceptions.SetupVhsError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, reports the
failure through the workflow log and returns well-defined exit codes.

Architecture notes
------------------
* No business logic lives here; all work is delegated to the core
  pipeline and the infrastructure adapters.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from collections.abc import MutableMapping

from setup_vhs.cli import exit_codes
from setup_vhs.cli.reporter import WorkflowReporter
from setup_vhs.exceptions import SetupVhsError
from setup_vhs.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``setup-vhs``         — run the action (inputs from ``INPUT_*``)
    * ``setup-vhs doctor``  — environment diagnostics
    * ``setup-vhs --version``

    The input flags override the matching ``INPUT_*`` variable.
    """
    parser = argparse.ArgumentParser(
        prog="setup-vhs",
        description="Install VHS on a CI runner and optionally record a tape.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="run",
        choices=("run", "doctor"),
        help="'run' (default) installs VHS and runs the tape; 'doctor' runs diagnostics.",
    )
    parser.add_argument(
        "--vhs-version",
        dest="version",
        default=None,
        help="VHS version to install (default: latest).",
    )
    parser.add_argument(
        "--path",
        default=None,
        help="Tape file to run with VHS.",
    )
    parser.add_argument(
        "--working-directory",
        dest="working_directory",
        default=None,
        help="Directory to run VHS in; --path is relative to it.",
    )
    parser.add_argument(
        "--extra-paths",
        dest="extra_paths",
        default=None,
        help="Comma-separated directories to add to PATH.",
    )
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_run(
    args: argparse.Namespace,
    environ: MutableMapping[str, str],
    reporter: WorkflowReporter,
) -> int:
    """Install VHS and run the tape file, if any.

    Flow:
    1. Read inputs from the runner, then apply CLI overrides.
    2. Wire the infra adapters into the core pipeline.
    3. Run the pipeline; any error propagates to :func:`cli`.
    """
    from setup_vhs.core.setup_service import SetupService
    from setup_vhs.infra.dependency_installer import SystemDependencyInstaller
    from setup_vhs.infra.executor import SubprocessExecutor
    from setup_vhs.infra.font_installer import SystemFontInstaller
    from setup_vhs.infra.runner import RunnerContext
    from setup_vhs.infra.vhs_installer import VhsReleaseInstaller

    context = RunnerContext(environ)
    inputs = context.read_inputs()
    overrides = {
        field.name: getattr(args, field.name)
        for field in dataclasses.fields(inputs)
        if getattr(args, field.name, None) is not None
    }
    if overrides:
        inputs = dataclasses.replace(inputs, **overrides)

    service = SetupService(
        fonts=SystemFontInstaller(),
        dependencies=SystemDependencyInstaller(),
        installer=VhsReleaseInstaller(environ),
        executor=SubprocessExecutor(),
        ambient=context,
        reporter=reporter,
    )
    service.run(inputs)
    return exit_codes.SUCCESS


def _handle_doctor() -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from setup_vhs.cli.doctor import run_doctor

    return run_doctor()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    environ: MutableMapping[str, str] | None = None,
    reporter: WorkflowReporter | None = None,
) -> int:
    """Run the setup-vhs CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    environ:
        Environment of the run.  Defaults to :data:`os.environ`.
    reporter:
        Output sink.  Defaults to a fresh :class:`WorkflowReporter`.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "doctor":
        return _handle_doctor()

    return _handle_run(
        args,
        os.environ if environ is None else environ,
        reporter or WorkflowReporter(),
    )


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    Any error ends the run as failed, with the error's message reported
    through the workflow log.  Ctrl+C exits without a failure annotation.
    """
    reporter = WorkflowReporter()
    try:
        code = main(reporter=reporter)
        sys.exit(code)
    except SetupVhsError as exc:
        reporter.set_failed(str(exc))
        if exc.hint:
            reporter.info(f"Hint: {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        reporter.info("Aborted by user.")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        reporter.set_failed(str(exc) or type(exc).__name__)
        sys.exit(exit_codes.UNEXPECTED_ERROR)
