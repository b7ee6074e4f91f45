"""Host path resolution.

Provides the canonical functions for locating:
- The vcpkg root (and whether it is a read-only bundle)
- The user-global ~/.vcpkg/ directory (cross-platform)
- Every directory the delegate process is told about
"""

from __future__ import annotations

import json
import logging
import os
import sys
import tempfile
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from vcpkg_ce.core.constants import (
    ARTIFACTS_DIR_NAME,
    ARTIFACTS_ENTRY_POINT,
    BUNDLE_CONFIG_NAME,
    GLOBAL_CONFIG_NAME,
    LOCALES_DIR,
    VCPKG_ROOT_MARKER,
)

logger = logging.getLogger(__name__)


def _is_windows() -> bool:
    """Return True when running on Windows."""
    return os.name == "nt"


class BundleConfig(BaseModel):
    """Contents of ``vcpkg-bundle.json`` placed next to a bundled vcpkg."""

    model_config = ConfigDict(extra="allow")

    readonly: bool = False
    usegitregistry: bool = False
    embeddedsha: str | None = None


def load_bundle_config(vcpkg_root: Path) -> BundleConfig:
    """Read ``vcpkg-bundle.json``; an absent or malformed file means defaults."""
    path = vcpkg_root / BUNDLE_CONFIG_NAME
    if not path.is_file():
        return BundleConfig()
    try:
        return BundleConfig.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as e:
        logger.warning("Ignoring unreadable %s: %s", path, e)
        return BundleConfig()


def locate_vcpkg_root(start: Path | None = None) -> Path | None:
    """Walk up from *start* looking for a ``.vcpkg-root`` marker file."""
    current = (start or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / VCPKG_ROOT_MARKER).exists():
            return candidate
    return None


def resolve_vcpkg_root(explicit: Path | None = None) -> Path:
    """Return the vcpkg root.

    Resolution order:
    1. *explicit* (the ``--vcpkg-root`` option)
    2. VCPKG_ROOT environment variable
    3. nearest ancestor of the current directory holding ``.vcpkg-root``
    4. the current directory
    """
    if explicit is not None:
        return explicit.resolve()
    if env_root := os.environ.get("VCPKG_ROOT"):
        return Path(env_root).resolve()
    return locate_vcpkg_root() or Path.cwd().resolve()


def get_vcpkg_home() -> Path:
    """Return the path to the user-global ~/.vcpkg/ directory.

    Resolution order:
    1. VCPKG_CE_HOME environment variable (all platforms)
    2. ~/.vcpkg/ on macOS/Linux
    3. %LOCALAPPDATA%\\vcpkg\\ on Windows (via platformdirs)
    """
    if env_home := os.environ.get("VCPKG_CE_HOME"):
        return Path(env_home)

    if _is_windows():
        from platformdirs import user_data_dir

        return Path(user_data_dir("vcpkg", appauthor=False))

    return Path.home() / ".vcpkg"


def get_registries_cache() -> Path:
    if env_cache := os.environ.get("X_VCPKG_REGISTRIES_CACHE"):
        return Path(env_cache)

    from platformdirs import user_cache_dir

    return Path(user_cache_dir("vcpkg", appauthor=False)) / "registries"


def get_current_executable() -> Path:
    """Return the path of the running host command."""
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return Path(argv0).resolve()


@dataclass(frozen=True)
class HostPaths:
    """Every location the host and its delegate need to know about."""

    root: Path
    downloads: Path
    artifacts: Path
    registries_cache: Path
    global_config: Path
    original_cwd: Path
    exe_path: Path
    readonly: bool = False

    @property
    def tool_cache(self) -> Path:
        return self.downloads / "tools"

    @property
    def artifacts_install(self) -> Path:
        """Directory holding the installed vcpkg-artifacts bundle."""
        return self.root / ARTIFACTS_DIR_NAME

    @property
    def artifacts_entry_point(self) -> Path:
        return self.artifacts_install / ARTIFACTS_ENTRY_POINT

    @property
    def locales(self) -> Path:
        return self.root / LOCALES_DIR

    @property
    def can_provision_artifacts(self) -> bool:
        return not self.readonly

    def temp_directory(self) -> Path:
        """Create (if needed) and return the per-user temp directory."""
        temp = Path(tempfile.gettempdir()) / "vcpkg"
        temp.mkdir(parents=True, exist_ok=True)
        return temp


def resolve_host_paths(
    vcpkg_root: Path | None = None,
    original_cwd: Path | None = None,
) -> HostPaths:
    """Build :class:`HostPaths` from the environment."""
    root = resolve_vcpkg_root(vcpkg_root)
    home = get_vcpkg_home()
    env_downloads = os.environ.get("VCPKG_DOWNLOADS")
    return HostPaths(
        root=root,
        downloads=Path(env_downloads) if env_downloads else root / "downloads",
        artifacts=home / "artifacts",
        registries_cache=get_registries_cache(),
        global_config=home / GLOBAL_CONFIG_NAME,
        original_cwd=original_cwd or Path.cwd(),
        exe_path=get_current_executable(),
        readonly=load_bundle_config(root).readonly,
    )


__all__ = [
    "BundleConfig",
    "HostPaths",
    "get_current_executable",
    "get_registries_cache",
    "get_vcpkg_home",
    "load_bundle_config",
    "locate_vcpkg_root",
    "resolve_host_paths",
    "resolve_vcpkg_root",
]
