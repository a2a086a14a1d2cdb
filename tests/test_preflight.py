"""Tests for the tape-file preflight check (core/preflight.py).

Coverage:
* Missing file is reported, not raised.
* Working directory is joined onto the file path.
* Unreadable existing file raises ``TargetFileError``.
* Empty path skips the check.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from setup_vhs.core.models import ActionInputs
from setup_vhs.core.preflight import PreflightValidator
from setup_vhs.exceptions import TargetFileError


class TestResolvedPath:
    def test_without_working_directory(self) -> None:
        assert ActionInputs(path="script.tape").resolved_path == "script.tape"

    def test_with_working_directory(self) -> None:
        inputs = ActionInputs(path="demo.tape", working_directory="docs")
        assert inputs.resolved_path == os.path.join("docs", "demo.tape")


class TestValidate:
    def test_missing_file_reports_error(
        self, reporter, monkeypatch: pytest.MonkeyPatch, tmp_path: Path,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        PreflightValidator(reporter).validate("script.tape", "")

        assert reporter.at("error") == ["File script.tape does not exist"]

    def test_missing_file_in_working_directory_names_joined_path(
        self, reporter, tmp_path: Path,
    ) -> None:
        PreflightValidator(reporter).validate("demo.tape", str(tmp_path))

        expected = os.path.join(str(tmp_path), "demo.tape")
        assert reporter.at("error") == [f"File {expected} does not exist"]

    def test_readable_file_passes_silently(self, reporter, tmp_path: Path) -> None:
        (tmp_path / "demo.tape").write_text("Output demo.gif\n")
        PreflightValidator(reporter).validate("demo.tape", str(tmp_path))

        assert reporter.messages == []

    def test_unreadable_file_raises(self, reporter, tmp_path: Path) -> None:
        tape = tmp_path / "demo.tape"
        tape.write_text("Output demo.gif\n")

        def fake_access(path: str, mode: int) -> bool:
            return mode != os.R_OK

        with patch("setup_vhs.core.preflight.os.access", side_effect=fake_access):
            with pytest.raises(TargetFileError, match="not readable"):
                PreflightValidator(reporter).validate(str(tape))

    def test_empty_path_skips_check(self, reporter) -> None:
        with patch("setup_vhs.core.preflight.os.path.exists") as mock_exists:
            PreflightValidator(reporter).validate("", "anything")
        mock_exists.assert_not_called()
        assert reporter.messages == []
