"""Shared names for the vcpkg-artifacts bundle layout and delegate surface."""

from __future__ import annotations

ARTIFACTS_DIR_NAME = "vcpkg-artifacts"
ARTIFACTS_ENTRY_POINT = "main.js"
VERSION_MARKER_NAME = "version.txt"
DEVELOPMENT_SENTINEL_NAME = "artifacts-development.txt"

VCPKG_ROOT_MARKER = ".vcpkg-root"
BUNDLE_CONFIG_NAME = "vcpkg-bundle.json"
HOST_CONFIG_DIR = ".vcpkg-ce"
HOST_CONFIG_NAME = "config.yaml"
LOCALES_DIR = "locales"
GLOBAL_CONFIG_NAME = "vcpkg-configuration.global.json"

RELEASES_URL = "https://github.com/microsoft/vcpkg-tool/releases"
BUNDLE_ASSET_NAME = "vcpkg-standalone-bundle.tar.gz"
LATEST_TARBALL_NAME = "vcpkg-standalone-bundle-latest.tar.gz"

TELEMETRY_FILE_SUFFIX = "_artifacts_telemetry.txt"
PREVIOUS_ENVIRONMENT_SUFFIX = "_previous_environment.txt"
MESSAGES_FILE_SUFFIX = "_messages.json"

__all__ = [
    "ARTIFACTS_DIR_NAME",
    "ARTIFACTS_ENTRY_POINT",
    "BUNDLE_ASSET_NAME",
    "BUNDLE_CONFIG_NAME",
    "DEVELOPMENT_SENTINEL_NAME",
    "GLOBAL_CONFIG_NAME",
    "HOST_CONFIG_DIR",
    "HOST_CONFIG_NAME",
    "LATEST_TARBALL_NAME",
    "LOCALES_DIR",
    "MESSAGES_FILE_SUFFIX",
    "PREVIOUS_ENVIRONMENT_SUFFIX",
    "RELEASES_URL",
    "TELEMETRY_FILE_SUFFIX",
    "VCPKG_ROOT_MARKER",
    "VERSION_MARKER_NAME",
]
