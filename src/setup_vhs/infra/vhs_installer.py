"""Downloads a VHS release from GitHub and unpacks its binary.

Satisfies :class:`~setup_vhs.core.protocols.BinaryInstaller`.  This is
the only module that talks to the network; every ``httpx``, archive or
filesystem error is re-raised as
:class:`~setup_vhs.exceptions.BinaryInstallError`.
"""

from __future__ import annotations

import io
import os
import platform
import stat
import tarfile
import zipfile
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from setup_vhs.exceptions import BinaryInstallError, EnvironmentError

REPOSITORY = "charmbracelet/vhs"
API_URL = f"https://api.github.com/repos/{REPOSITORY}/releases"
DOWNLOAD_URL = f"https://github.com/{REPOSITORY}/releases/download"
REQUEST_TIMEOUT = 60.0

_ARCHES: dict[str, str] = {
    "x86_64": "x86_64",
    "amd64": "x86_64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "i386": "i386",
    "i686": "i386",
    "armv7l": "arm",
    "armv6l": "arm",
}

_SYSTEMS: dict[str, str] = {
    "linux": "Linux",
    "darwin": "Darwin",
    "windows": "Windows",
}


def _load_httpx() -> Any:
    try:
        import httpx
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "httpx is not installed. Install with: pip install httpx",
        ) from exc
    return httpx


def normalize_tag(version: str) -> str:
    """``"0.7.2"`` → ``"v0.7.2"``; already-prefixed tags pass through."""
    version = version.strip()
    return version if version.startswith("v") else f"v{version}"


def asset_name(tag: str, system: str | None = None, machine: str | None = None) -> str:
    """Return the release archive name for *tag* on the given platform.

    Raises
    ------
    BinaryInstallError
        When VHS publishes no build for the platform.
    """
    system_raw = (system or platform.system()).lower()
    machine_raw = (machine or platform.machine()).lower()
    os_name = _SYSTEMS.get(system_raw)
    arch = _ARCHES.get(machine_raw)
    if os_name is None or arch is None:
        raise BinaryInstallError(
            f"No VHS release is published for {system_raw}/{machine_raw}.",
        )
    ext = "zip" if os_name == "Windows" else "tar.gz"
    return f"vhs_{tag.lstrip('v')}_{os_name}_{arch}.{ext}"


class VhsReleaseInstaller:
    """Installs a VHS release into a per-version tool directory.

    Parameters
    ----------
    environ:
        Environment consulted for ``RUNNER_TOOL_CACHE`` and
        ``GITHUB_TOKEN``.  Defaults to :data:`os.environ`.
    transport:
        Optional ``httpx`` transport, used by tests to avoid the network.
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        *,
        transport: Any = None,
    ) -> None:
        self._environ: Mapping[str, str] = os.environ if environ is None else environ
        self._transport = transport

    # ------------------------------------------------------------------
    # Protocol method
    # ------------------------------------------------------------------

    def install(self, version: str) -> str:
        httpx = _load_httpx()
        try:
            with httpx.Client(
                timeout=REQUEST_TIMEOUT,
                follow_redirects=True,
                headers=self._headers(),
                transport=self._transport,
            ) as client:
                tag = self._resolve_tag(client, version)
                name = asset_name(tag)
                response = client.get(f"{DOWNLOAD_URL}/{tag}/{name}")
                response.raise_for_status()
                payload = response.content
        except httpx.HTTPStatusError as exc:
            raise BinaryInstallError(
                f"Failed to download VHS {version or 'latest'}: "
                f"HTTP {exc.response.status_code}",
                hint="Check that the requested version exists.",
            ) from exc
        except httpx.HTTPError as exc:
            raise BinaryInstallError(f"Failed to download VHS: {exc}") from exc
        except ValueError as exc:
            raise BinaryInstallError(f"Unexpected GitHub API response: {exc}") from exc

        target_dir = self.tool_dir(tag)
        return str(self._extract_binary(payload, name, target_dir))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def tool_dir(self, tag: str) -> Path:
        """Directory the binary for *tag* is unpacked into."""
        root = self._environ.get("RUNNER_TOOL_CACHE", "")
        base = Path(root) if root else Path.home() / ".cache" / "setup-vhs"
        return base / "vhs" / tag.lstrip("v")

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        token = self._environ.get("GITHUB_TOKEN", "")
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    @staticmethod
    def _resolve_tag(client: Any, version: str) -> str:
        if version and version != "latest":
            return normalize_tag(version)

        response = client.get(f"{API_URL}/latest")
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise BinaryInstallError(
                "GitHub returned an unexpected response for the latest VHS release.",
            )
        tag = payload.get("tag_name")
        if not isinstance(tag, str) or not tag:
            raise BinaryInstallError("GitHub returned no tag for the latest VHS release.")
        return tag

    @staticmethod
    def _extract_binary(payload: bytes, archive_name: str, target_dir: Path) -> Path:
        """Write the ``vhs`` executable from *payload* into *target_dir*."""
        wanted = {"vhs", "vhs.exe"}
        data: bytes | None = None
        binary_name = "vhs"

        try:
            if archive_name.endswith(".zip"):
                with zipfile.ZipFile(io.BytesIO(payload)) as archive:
                    for info in archive.infolist():
                        base = info.filename.rsplit("/", 1)[-1]
                        if base in wanted and not info.is_dir():
                            data = archive.read(info)
                            binary_name = base
                            break
            else:
                with tarfile.open(fileobj=io.BytesIO(payload), mode="r:gz") as archive:
                    for member in archive.getmembers():
                        base = member.name.rsplit("/", 1)[-1]
                        if base in wanted and member.isfile():
                            handle = archive.extractfile(member)
                            if handle is not None:
                                data = handle.read()
                                binary_name = base
                            break
        except (tarfile.TarError, zipfile.BadZipFile, OSError) as exc:
            raise BinaryInstallError(f"Unable to unpack {archive_name}: {exc}") from exc

        if data is None:
            raise BinaryInstallError(f"{archive_name} does not contain a vhs binary.")

        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            binary = target_dir / binary_name
            binary.write_bytes(data)
            binary.chmod(binary.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        except OSError as exc:
            raise BinaryInstallError(f"Unable to write VHS to {target_dir}: {exc}") from exc

        return binary.resolve()
