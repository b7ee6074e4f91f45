"""Host settings stored in <vcpkg-root>/.vcpkg-ce/config.yaml.

Only the ``artifacts`` section is read. Each value may be overridden through
the environment, which always wins over the file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from ruamel.yaml import YAML

from vcpkg_ce.core.constants import HOST_CONFIG_DIR, HOST_CONFIG_NAME
from vcpkg_ce.core.errors import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}

# setting name -> environment variable
ENV_OVERRIDES: dict[str, str] = {
    "version": "VCPKG_BASE_VERSION",
    "sha512": "VCPKG_STANDALONE_BUNDLE_SHA",
    "node": "VCPKG_CE_NODE",
    "disable_metrics": "VCPKG_DISABLE_METRICS",
    "language": "VCPKG_CE_LANGUAGE",
    "asset_cache_url": "X_VCPKG_ASSET_SOURCES_URL",
    "block_origin": "X_VCPKG_BLOCK_ORIGIN",
}


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY


def _as_text(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(slots=True)
class HostSettings:
    """Settings controlling provisioning and delegation."""

    version: str | None = None
    sha512: str | None = None
    node: str | None = None
    disable_metrics: bool = False
    language: str | None = None
    asset_cache_url: str | None = None
    block_origin: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, object] | None) -> "HostSettings":
        if not isinstance(data, Mapping):
            return cls()

        sha512 = _as_text(data.get("sha512"))
        return cls(
            version=_as_text(data.get("version")),
            sha512=sha512.lower() if sha512 else None,
            node=_as_text(data.get("node")),
            disable_metrics=_as_bool(data.get("disable_metrics")),
            language=_as_text(data.get("language")),
            asset_cache_url=_as_text(data.get("asset_cache_url")),
            block_origin=_as_bool(data.get("block_origin")),
        )


def config_path(vcpkg_root: Path) -> Path:
    return vcpkg_root / HOST_CONFIG_DIR / HOST_CONFIG_NAME


def _read_config_section(path: Path) -> dict[str, object]:
    if not path.exists():
        return {}

    yaml = YAML(typ="safe")
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = yaml.load(handle) or {}
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigurationError(f"Invalid {path}: expected a mapping at the top level")

    section = payload.get("artifacts") or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Invalid artifacts section in {path}: expected a mapping")
    return dict(section)


def load_host_settings(
    vcpkg_root: Path,
    environ: Mapping[str, str] | None = None,
) -> HostSettings:
    """Load settings from the config file, then apply environment overrides."""
    env = os.environ if environ is None else environ
    merged = _read_config_section(config_path(vcpkg_root))
    for name, variable in ENV_OVERRIDES.items():
        value = env.get(variable)
        if value is not None and value != "":
            merged[name] = value
    return HostSettings.from_dict(merged)


__all__ = [
    "ENV_OVERRIDES",
    "HostSettings",
    "config_path",
    "load_host_settings",
]
