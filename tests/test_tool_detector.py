"""Tests for tool detection (infra/tool_detector.py).

All tests mock :func:`shutil.which` — no system dependency.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from setup_vhs.infra.tool_detector import (
    ToolStatus,
    detect_tool,
    platform_install_commands,
)


# ---------------------------------------------------------------------------
# detect_tool
# ---------------------------------------------------------------------------

class TestDetectTool:
    @patch("setup_vhs.infra.tool_detector.shutil.which")
    def test_found(self, mock_which: object) -> None:
        mock_which.return_value = "/usr/bin/ttyd"  # type: ignore[union-attr]
        status = detect_tool("ttyd")

        assert status.found is True
        assert status.name == "ttyd"
        assert isinstance(status.path, Path)
        assert status.install_commands == ()

    @patch("setup_vhs.infra.tool_detector.platform.system", return_value="Linux")
    @patch("setup_vhs.infra.tool_detector.shutil.which", return_value=None)
    def test_not_found(self, _mock_which: object, _mock_sys: object) -> None:
        status = detect_tool("ffmpeg")

        assert status.found is False
        assert status.path is None
        assert "sudo apt-get install -y ffmpeg" in status.install_commands

    @patch("setup_vhs.infra.tool_detector.shutil.which", return_value=None)
    def test_custom_search_path(self, mock_which: object) -> None:
        detect_tool("vhs", path="/opt/vhs")
        mock_which.assert_called_once_with("vhs", path="/opt/vhs")  # type: ignore[union-attr]


# ---------------------------------------------------------------------------
# Platform install commands
# ---------------------------------------------------------------------------

class TestPlatformInstallCommands:
    @patch("setup_vhs.infra.tool_detector.platform.system", return_value="Windows")
    def test_windows(self, _mock_sys: object) -> None:
        assert platform_install_commands("ffmpeg") == ("choco install ffmpeg -y",)

    @patch("setup_vhs.infra.tool_detector.platform.system", return_value="Linux")
    def test_linux(self, _mock_sys: object) -> None:
        cmds = platform_install_commands("ttyd")
        assert cmds[0] == "sudo apt-get update"
        assert cmds[-1] == "sudo apt-get install -y ttyd"

    @patch("setup_vhs.infra.tool_detector.platform.system", return_value="Darwin")
    def test_darwin(self, _mock_sys: object) -> None:
        assert platform_install_commands("ttyd") == ("brew install ttyd",)

    @patch("setup_vhs.infra.tool_detector.platform.system", return_value="Linux")
    def test_linux_batches_tools(self, _mock_sys: object) -> None:
        assert platform_install_commands("ttyd", "ffmpeg") == (
            "sudo apt-get update",
            "sudo apt-get install -y ttyd ffmpeg",
        )

    @patch("setup_vhs.infra.tool_detector.platform.system", return_value="Windows")
    def test_windows_batches_tools(self, _mock_sys: object) -> None:
        assert platform_install_commands("ttyd", "ffmpeg") == ("choco install ttyd ffmpeg -y",)

    @patch("setup_vhs.infra.tool_detector.platform.system", return_value="Linux")
    def test_any_unknown_tool_yields_nothing(self, _mock_sys: object) -> None:
        assert platform_install_commands("ttyd", "vhs") == ()

    @patch("setup_vhs.infra.tool_detector.platform.system", return_value="Linux")
    def test_vhs_points_at_this_action(self, _mock_sys: object) -> None:
        assert platform_install_commands("vhs") == ("setup-vhs",)

    @patch("setup_vhs.infra.tool_detector.platform.system", return_value="Plan9")
    def test_unknown_platform(self, _mock_sys: object) -> None:
        assert platform_install_commands("ttyd") == ()


class TestToolStatus:
    def test_frozen(self) -> None:
        status = ToolStatus(name="vhs", found=True, path=Path("/bin/vhs"), install_commands=())
        with pytest.raises(AttributeError):
            status.found = False  # type: ignore[misc]
