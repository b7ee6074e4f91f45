"""User-facing message catalog with optional localized overrides.

Every diagnostic printed by the host is looked up here by message id. When a
locale file is loaded its raw text is kept as well, because the delegate
process receives the very same file through ``--language``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_MESSAGES: dict[str, str] = {
    "VcpkgCeIsExperimental": (
        "vcpkg-artifacts is experimental and may change at any time."
    ),
    "ArtifactsBootstrapFailed": (
        "vcpkg-artifacts is not installed and could not be bootstrapped."
    ),
    "ArtifactsNotInstalledReadonlyRoot": (
        "vcpkg-artifacts is not installed, and it can't be installed because "
        "VCPKG_ROOT is assumed to be readonly. Reinstalling vcpkg using the "
        "'one liner' may fix this problem."
    ),
    "ArtifactsSwitchOnlyOneOperatingSystem": (
        "Only one operating system (--windows, --osx, --linux, --freebsd) may be set."
    ),
    "ArtifactsSwitchOnlyOneHostPlatform": (
        "Only one host platform (--x64, --x86, --arm, --arm64) may be set."
    ),
    "ArtifactsSwitchOnlyOneTargetPlatform": (
        "Only one target platform (--target:x64, --target:x86, --target:arm, "
        "--target:arm64) may be set."
    ),
    "DownloadingVcpkgStandaloneBundle": "Downloading standalone bundle {version}.",
    "DownloadingVcpkgStandaloneBundleLatest": (
        "Downloading latest standalone bundle. The download is not verified "
        "against a known hash."
    ),
    "DownloadFailed": "Failed to download {url}: {reason}",
    "DownloadHashMismatch": (
        "File does not have the expected hash: url: {url}, "
        "expected: {expected}, actual: {actual}"
    ),
    "DownloadBlockedOrigin": (
        "Download of {file} was blocked because origin downloads are disabled "
        "and no asset cache entry was available."
    ),
    "FilesystemCallFailed": "{call}({path}) failed: {reason}",
    "NodeNotFound": (
        "Could not locate a Node.js executable. Install Node.js or set VCPKG_CE_NODE."
    ),
    "DelegateLaunchFailed": "Failed to launch {command}: {reason}",
}


class MessageCatalog:
    """Message lookup with localized overrides loaded from a JSON file."""

    def __init__(self, defaults: dict[str, str] | None = None) -> None:
        self._messages = dict(DEFAULT_MESSAGES if defaults is None else defaults)
        self._loaded_text = ""

    @property
    def loaded_file(self) -> str:
        """Raw text of the loaded locale file, or ``""`` if none was loaded."""
        return self._loaded_text

    def load_file(self, path: Path) -> bool:
        """Load localized messages from *path*.

        Returns ``False`` (leaving the catalog untouched) when the file is
        missing, unreadable or not a JSON object.
        """
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("Locale file %s couldn't be read: %s", path, e)
            return False

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            logger.debug("Locale file %s couldn't be parsed: %s", path, e)
            return False

        if not isinstance(data, dict):
            logger.debug("Locale file %s is not a JSON object", path)
            return False

        for key, value in data.items():
            if isinstance(value, str):
                self._messages[key] = value
        self._loaded_text = text
        return True

    def format(self, message_id: str, **kwargs: object) -> str:
        template = self._messages.get(message_id, message_id)
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            # Localized text with mismatched placeholders
            return DEFAULT_MESSAGES.get(message_id, message_id).format(**kwargs)


catalog = MessageCatalog()


def format_message(message_id: str, **kwargs: object) -> str:
    """Format *message_id* using the process-wide catalog."""
    return catalog.format(message_id, **kwargs)


def get_loaded_file() -> str:
    """Raw text of the loaded locale file, or ``""``."""
    return catalog.loaded_file


def load_locale(locales_dir: Path, language: str) -> bool:
    """Load ``messages.<language>.json`` from *locales_dir* into the catalog."""
    return catalog.load_file(locales_dir / f"messages.{language}.json")


__all__ = [
    "DEFAULT_MESSAGES",
    "MessageCatalog",
    "catalog",
    "format_message",
    "get_loaded_file",
    "load_locale",
]
