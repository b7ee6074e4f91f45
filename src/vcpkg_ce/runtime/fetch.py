"""Resolve and download the vcpkg standalone bundle."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from rich.console import Console

from vcpkg_ce.core.constants import BUNDLE_ASSET_NAME, LATEST_TARBALL_NAME, RELEASES_URL
from vcpkg_ce.core.messages import format_message
from vcpkg_ce.runtime.mode import PinnedMode, ProvisioningMode

logger = logging.getLogger(__name__)

console = Console(stderr=True)


class BundleDownloader(Protocol):
    def download(self, urls: Sequence[str], destination: Path, sha512: str | None = None) -> bool: ...


@dataclass(frozen=True)
class BundleReference:
    """Where a bundle comes from and how it is checked."""

    tarball_name: str
    uri: str
    sha512: str | None = None


def bundle_reference(mode: ProvisioningMode) -> BundleReference:
    if isinstance(mode, PinnedMode):
        return BundleReference(
            tarball_name=f"vcpkg-standalone-bundle-{mode.version}.tar.gz",
            uri=f"{RELEASES_URL}/download/{mode.version}/{BUNDLE_ASSET_NAME}",
            sha512=mode.sha512,
        )
    # No hash is published for the latest channel, so this download is unverified.
    return BundleReference(
        tarball_name=LATEST_TARBALL_NAME,
        uri=f"{RELEASES_URL}/latest/download/{BUNDLE_ASSET_NAME}",
    )


def download_standalone_bundle(
    downloader: BundleDownloader,
    download_root: Path,
    mode: ProvisioningMode,
) -> Path | None:
    """Download the bundle for *mode* into *download_root*.

    Returns the archive path, or ``None`` after reporting why nothing usable
    was produced. Never raises for download or filesystem failures.
    """
    reference = bundle_reference(mode)
    bundle_tarball = download_root / reference.tarball_name

    if isinstance(mode, PinnedMode):
        console.print(format_message("DownloadingVcpkgStandaloneBundle", version=mode.version))
    else:
        console.print("[yellow]warning:[/yellow] " + format_message("DownloadingVcpkgStandaloneBundleLatest"))
        # A previous "latest" download may be any older release
        try:
            bundle_tarball.unlink(missing_ok=True)
        except OSError as e:
            console.print(
                "[red]error:[/red] "
                + format_message("FilesystemCallFailed", call="remove", path=bundle_tarball, reason=e)
            )
            return None

    if not downloader.download([reference.uri], bundle_tarball, reference.sha512):
        logger.debug("Bundle download from %s failed", reference.uri)
        return None

    return bundle_tarball


__all__ = ["BundleDownloader", "BundleReference", "bundle_reference", "download_standalone_bundle"]
