"""Tests for vcpkg_ce.runtime.home: root discovery and host path resolution."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from vcpkg_ce.runtime import home
from vcpkg_ce.runtime.home import (
    HostPaths,
    get_vcpkg_home,
    load_bundle_config,
    resolve_host_paths,
    resolve_vcpkg_root,
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("VCPKG_ROOT", "VCPKG_DOWNLOADS", "VCPKG_CE_HOME", "X_VCPKG_REGISTRIES_CACHE"):
        monkeypatch.delenv(name, raising=False)


class TestResolveVcpkgRoot:
    def test_explicit_root_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VCPKG_ROOT", str(tmp_path / "env"))
        assert resolve_vcpkg_root(tmp_path / "explicit") == (tmp_path / "explicit").resolve()

    def test_environment_root(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VCPKG_ROOT", str(tmp_path / "env"))
        assert resolve_vcpkg_root() == (tmp_path / "env").resolve()

    def test_marker_search(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env) -> None:
        root = tmp_path / "vcpkg"
        nested = root / "ports" / "zlib"
        nested.mkdir(parents=True)
        (root / ".vcpkg-root").touch()
        monkeypatch.chdir(nested)

        assert resolve_vcpkg_root() == root.resolve()


class TestGetVcpkgHome:
    def test_environment_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VCPKG_CE_HOME", str(tmp_path / "custom"))
        assert get_vcpkg_home() == tmp_path / "custom"

    def test_posix_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env) -> None:
        monkeypatch.setattr(home, "_is_windows", lambda: False)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_vcpkg_home() == tmp_path / ".vcpkg"

    def test_windows_uses_platformdirs(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env) -> None:
        import platformdirs

        monkeypatch.setattr(home, "_is_windows", lambda: True)
        monkeypatch.setattr(platformdirs, "user_data_dir", lambda *a, **kw: str(tmp_path / "LocalAppData" / "vcpkg"))
        assert get_vcpkg_home() == tmp_path / "LocalAppData" / "vcpkg"


class TestBundleConfig:
    def test_absent_file_means_defaults(self, tmp_path: Path) -> None:
        config = load_bundle_config(tmp_path)
        assert config.readonly is False
        assert config.embeddedsha is None

    def test_readonly_bundle(self, tmp_path: Path) -> None:
        (tmp_path / "vcpkg-bundle.json").write_text(
            json.dumps({"readonly": True, "usegitregistry": True, "embeddedsha": "abc"}),
            encoding="utf-8",
        )
        config = load_bundle_config(tmp_path)
        assert config.readonly is True
        assert config.usegitregistry is True
        assert config.embeddedsha == "abc"

    def test_malformed_file_means_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "vcpkg-bundle.json").write_text("{not json", encoding="utf-8")
        assert load_bundle_config(tmp_path).readonly is False

    def test_undecodable_file_means_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "vcpkg-bundle.json").write_bytes(b"\xff\xfe{}")
        assert load_bundle_config(tmp_path).readonly is False


class TestResolveHostPaths:
    def test_defaults(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env) -> None:
        root = tmp_path / "vcpkg"
        root.mkdir()
        monkeypatch.setenv("VCPKG_CE_HOME", str(tmp_path / "home"))
        monkeypatch.setenv("X_VCPKG_REGISTRIES_CACHE", str(tmp_path / "registries"))

        paths = resolve_host_paths(root, original_cwd=tmp_path)

        assert paths.root == root.resolve()
        assert paths.downloads == root.resolve() / "downloads"
        assert paths.artifacts == tmp_path / "home" / "artifacts"
        assert paths.registries_cache == tmp_path / "registries"
        assert paths.global_config == tmp_path / "home" / "vcpkg-configuration.global.json"
        assert paths.original_cwd == tmp_path
        assert paths.readonly is False

    def test_downloads_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, clean_env) -> None:
        monkeypatch.setenv("VCPKG_DOWNLOADS", str(tmp_path / "dl"))
        paths = resolve_host_paths(tmp_path)
        assert paths.downloads == tmp_path / "dl"
        assert paths.tool_cache == tmp_path / "dl" / "tools"

    def test_readonly_from_bundle_config(self, tmp_path: Path, clean_env) -> None:
        (tmp_path / "vcpkg-bundle.json").write_text('{"readonly": true}', encoding="utf-8")
        paths = resolve_host_paths(tmp_path)
        assert paths.readonly is True
        assert paths.can_provision_artifacts is False


class TestHostPaths:
    def test_artifact_locations(self, host_paths: HostPaths) -> None:
        assert host_paths.artifacts_install == host_paths.root / "vcpkg-artifacts"
        assert host_paths.artifacts_entry_point == host_paths.root / "vcpkg-artifacts" / "main.js"
        assert host_paths.locales == host_paths.root / "locales"
        assert host_paths.can_provision_artifacts is True

    def test_temp_directory_is_created(self, host_paths: HostPaths, isolated_tempdir: Path) -> None:
        temp = host_paths.temp_directory()
        assert temp == isolated_tempdir / "vcpkg"
        assert temp.is_dir()
