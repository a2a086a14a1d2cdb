"""Shared pytest fixtures and configuration for the setup-vhs test suite.

Guidelines
----------
* No internet access in any test; httpx goes through a mock transport.
* Package managers and VHS itself are never spawned; ``subprocess.run``
  is mocked at the infra boundary.
* The run environment is a plain ``dict``, never ``os.environ``.
"""

from __future__ import annotations

from pathlib import Path

import pytest


class RecordingReporter:
    """Reporter double that keeps every message with its level."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def at(self, level: str) -> list[str]:
        return [msg for lvl, msg in self.messages if lvl == level]


@pytest.fixture()
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture()
def runner_env(tmp_path: Path) -> dict[str, str]:
    """A runner-like environment with empty GITHUB_PATH/GITHUB_ENV files."""
    path_file = tmp_path / "github_path"
    env_file = tmp_path / "github_env"
    path_file.write_text("")
    env_file.write_text("")
    return {
        "PATH": "/usr/bin:/bin",
        "CI": "true",
        "GITHUB_PATH": str(path_file),
        "GITHUB_ENV": str(env_file),
    }
