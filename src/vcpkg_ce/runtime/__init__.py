"""Provisioning of the vcpkg-artifacts bundle.

This subpackage resolves host paths, decides whether the installed bundle
is current, and downloads and installs a replacement when it is not.
"""

from vcpkg_ce.runtime.bootstrap import provision_artifacts
from vcpkg_ce.runtime.download import AssetCacheSettings, Downloader
from vcpkg_ce.runtime.gate import check_update_required, is_out_of_date
from vcpkg_ce.runtime.home import HostPaths, resolve_host_paths
from vcpkg_ce.runtime.mode import LatestMode, PinnedMode, ProvisioningMode, select_mode

__all__ = [
    "AssetCacheSettings",
    "Downloader",
    "HostPaths",
    "LatestMode",
    "PinnedMode",
    "ProvisioningMode",
    "check_update_required",
    "is_out_of_date",
    "provision_artifacts",
    "resolve_host_paths",
    "select_mode",
]
