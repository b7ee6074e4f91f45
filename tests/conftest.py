from __future__ import annotations

import io
import shutil
import tarfile
import tempfile
from pathlib import Path
from typing import Callable, Iterator, Sequence

import pytest

from vcpkg_ce.core import messages
from vcpkg_ce.runtime.home import HostPaths

MAIN_JS = "console.log('vcpkg-artifacts');\n"


def _add_text(tar: tarfile.TarFile, name: str, text: str) -> None:
    data = text.encode("utf-8")
    info = tarfile.TarInfo(name)
    info.size = len(data)
    tar.addfile(info, io.BytesIO(data))


def build_bundle(path: Path, *, include_artifacts: bool = True, main_js: str = MAIN_JS) -> Path:
    """Write a standalone-bundle style tarball to *path*.

    Besides ``vcpkg-artifacts/`` the bundle carries sibling content
    (``scripts/``, ``triplets/``) that must never reach the vcpkg root.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with tarfile.open(path, "w:gz") as tar:
        if include_artifacts:
            _add_text(tar, "vcpkg-artifacts/main.js", main_js)
            _add_text(tar, "vcpkg-artifacts/package.json", '{"name": "vcpkg-artifacts"}')
        _add_text(tar, "scripts/bootstrap.sh", "#!/bin/sh\n")
        _add_text(tar, "triplets/x64-linux.cmake", "set(VCPKG_TARGET_ARCHITECTURE x64)\n")
    return path


class FakeDownloader:
    """Downloader double that copies a prepared archive into place."""

    def __init__(self, source: Path | None = None, succeed: bool = True) -> None:
        self.source = source
        self.succeed = succeed
        self.calls: list[tuple[list[str], Path, str | None]] = []

    def download(self, urls: Sequence[str], destination: Path, sha512: str | None = None) -> bool:
        self.calls.append((list(urls), destination, sha512))
        if not self.succeed:
            return False
        destination.parent.mkdir(parents=True, exist_ok=True)
        if self.source is not None:
            shutil.copyfile(self.source, destination)
        return True


@pytest.fixture()
def bundle_factory(tmp_path: Path) -> Callable[..., Path]:
    def factory(name: str = "bundle.tar.gz", **kwargs: object) -> Path:
        return build_bundle(tmp_path / "fixtures" / name, **kwargs)  # type: ignore[arg-type]

    return factory


@pytest.fixture()
def host_paths(tmp_path: Path) -> HostPaths:
    """HostPaths rooted entirely inside *tmp_path*."""
    root = tmp_path / "vcpkg"
    root.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    home = tmp_path / "home"
    return HostPaths(
        root=root,
        downloads=root / "downloads",
        artifacts=home / "artifacts",
        registries_cache=tmp_path / "cache" / "registries",
        global_config=home / "vcpkg-configuration.global.json",
        original_cwd=work,
        exe_path=tmp_path / "bin" / "vcpkg-ce",
    )


@pytest.fixture(autouse=True)
def fresh_catalog(monkeypatch: pytest.MonkeyPatch) -> Iterator[messages.MessageCatalog]:
    """Give every test its own message catalog."""
    catalog = messages.MessageCatalog()
    monkeypatch.setattr(messages, "catalog", catalog)
    yield catalog


@pytest.fixture()
def make_downloader() -> Callable[..., FakeDownloader]:
    return FakeDownloader


@pytest.fixture(autouse=True)
def isolated_tempdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``tempfile.gettempdir()`` at a per-test directory."""
    temp = tmp_path / "tmp"
    temp.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(temp))
    return temp
