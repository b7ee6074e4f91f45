"""Process-wide state assembled once at startup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from vcpkg_ce.core.config import HostSettings, load_host_settings
from vcpkg_ce.core.messages import get_loaded_file, load_locale
from vcpkg_ce.core.metrics import MetricsCollector
from vcpkg_ce.runtime.download import AssetCacheSettings, Downloader
from vcpkg_ce.runtime.home import HostPaths, resolve_host_paths
from vcpkg_ce.runtime.mode import ProvisioningMode, select_mode

logger = logging.getLogger(__name__)


@dataclass
class HostSession:
    """Everything a command needs: paths, settings, the chosen mode and metrics."""

    paths: HostPaths
    settings: HostSettings
    mode: ProvisioningMode
    metrics: MetricsCollector
    debug: bool = False

    @property
    def loaded_messages(self) -> str:
        return get_loaded_file()

    def create_downloader(self) -> Downloader:
        return Downloader(
            asset_cache=AssetCacheSettings(
                read_url=self.settings.asset_cache_url,
                block_origin=self.settings.block_origin,
            )
        )


def create_session(
    vcpkg_root: Path | None = None,
    *,
    original_cwd: Path | None = None,
    debug: bool = False,
    disable_metrics: bool = False,
) -> HostSession:
    """Resolve paths, load settings and locale, and select the provisioning mode."""
    paths = resolve_host_paths(vcpkg_root, original_cwd=original_cwd)
    settings = load_host_settings(paths.root)
    if settings.language and not load_locale(paths.locales, settings.language):
        logger.debug("No usable locale file for %s", settings.language)

    metrics_enabled = not (disable_metrics or settings.disable_metrics)
    return HostSession(
        paths=paths,
        settings=settings,
        mode=select_mode(settings),
        metrics=MetricsCollector(enabled=metrics_enabled),
        debug=debug,
    )


__all__ = ["HostSession", "create_session"]
