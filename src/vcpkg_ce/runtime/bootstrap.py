"""Runtime bootstrap: make sure vcpkg-artifacts is installed and current.

``provision_artifacts()`` is called before every delegated command.

**Fast path**: the installation passes the version gate (pinned version
marker matches, or a development copy is present) and is used as is.

**Slow path**: the bundle is downloaded and swapped in by
:func:`vcpkg_ce.runtime.install.install_bundle`.

Roots shipped read-only (for example inside an IDE) are never provisioned;
they must already carry an installation.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vcpkg_ce.core.errors import ProvisioningError, ReadOnlyRootError
from vcpkg_ce.core.messages import format_message
from vcpkg_ce.runtime.fetch import BundleDownloader, download_standalone_bundle
from vcpkg_ce.runtime.gate import is_out_of_date
from vcpkg_ce.runtime.home import HostPaths
from vcpkg_ce.runtime.install import install_bundle
from vcpkg_ce.runtime.mode import ProvisioningMode

logger = logging.getLogger(__name__)


def provision_artifacts(
    paths: HostPaths,
    mode: ProvisioningMode,
    downloader: BundleDownloader,
) -> Path:
    """Ensure the artifacts bundle is installed and return its entry point.

    Raises:
        ProvisioningError: Download, install, or the post-install check failed.
        ReadOnlyRootError: The root is read-only and has no installation.
    """
    install_dir = paths.artifacts_install

    if paths.can_provision_artifacts:
        if is_out_of_date(install_dir, mode):
            logger.debug("%s is out of date for %r", install_dir, mode)
            tarball = download_standalone_bundle(downloader, paths.downloads, mode)
            if tarball is None:
                raise ProvisioningError(format_message("ArtifactsBootstrapFailed"))
            install_bundle(tarball, install_dir, paths.tool_cache, mode)

        if not paths.artifacts_entry_point.exists():
            raise ProvisioningError(format_message("ArtifactsBootstrapFailed"))
    elif not install_dir.exists():
        raise ReadOnlyRootError(format_message("ArtifactsNotInstalledReadonlyRoot"))

    return paths.artifacts_entry_point


__all__ = ["provision_artifacts"]
