"""Tests for the VHS subprocess executor (infra/executor.py).

``subprocess.run`` is mocked; VHS is never spawned.
"""

from __future__ import annotations

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from setup_vhs.exceptions import ExecutionFailedError
from setup_vhs.infra.executor import SubprocessExecutor


def _completed(code: int) -> subprocess.CompletedProcess[bytes]:
    return subprocess.CompletedProcess(args=[], returncode=code)


class TestSubprocessExecutor:
    @patch("setup_vhs.infra.executor.subprocess.run")
    def test_passes_tape_cwd_and_env(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        env = {"PATH": "/opt/vhs", "CI": "", "COLORTERM": "truecolor"}

        result = SubprocessExecutor().execute(
            "/opt/vhs/vhs", "demo.tape", cwd="docs", env=env,
        )

        mock_run.assert_called_once_with(
            ["/opt/vhs/vhs", "demo.tape"], cwd="docs", env=env, check=False,
        )
        assert result.exit_code == 0
        assert result.command == ("/opt/vhs/vhs", "demo.tape")

    @patch("setup_vhs.infra.executor.subprocess.run")
    def test_tape_with_spaces_is_one_argument(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(0)
        SubprocessExecutor().execute("/opt/vhs/vhs", "my demo.tape")

        argv = mock_run.call_args.args[0]
        assert argv == ["/opt/vhs/vhs", "my demo.tape"]

    @patch("setup_vhs.infra.executor.subprocess.run")
    def test_non_zero_exit_raises(self, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(3)

        with pytest.raises(ExecutionFailedError, match="failed with exit code 3") as exc_info:
            SubprocessExecutor().execute("/opt/vhs/vhs", "demo.tape")
        assert exc_info.value.exit_code == 3

    @patch("setup_vhs.infra.executor.subprocess.run")
    def test_spawn_failure_raises(self, mock_run: MagicMock) -> None:
        original = FileNotFoundError(2, "No such file or directory")
        mock_run.side_effect = original

        with pytest.raises(ExecutionFailedError, match="Unable to start") as exc_info:
            SubprocessExecutor().execute("/missing/vhs", "demo.tape")
        assert exc_info.value.__cause__ is original
