"""Decide whether the installed vcpkg-artifacts bundle must be replaced."""

from __future__ import annotations

import logging
from pathlib import Path

from vcpkg_ce.core.constants import DEVELOPMENT_SENTINEL_NAME, VERSION_MARKER_NAME
from vcpkg_ce.runtime.mode import PinnedMode, ProvisioningMode

logger = logging.getLogger(__name__)


def check_update_required(version_path: Path, expected_version: str) -> bool:
    """Return True unless *version_path* holds exactly *expected_version*.

    A missing or unreadable marker counts as out of date.
    """
    try:
        stored = version_path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Version marker %s unavailable: %s", version_path, e)
        return True
    return stored != expected_version


def is_out_of_date(install_dir: Path, mode: ProvisioningMode) -> bool:
    """Return True when *install_dir* must be (re)provisioned for *mode*.

    Pinned installs compare ``version.txt`` against the pinned version. Latest
    installs are always refreshed unless a hand-placed development copy is
    marked with ``artifacts-development.txt``.
    """
    if isinstance(mode, PinnedMode):
        return check_update_required(install_dir / VERSION_MARKER_NAME, mode.version)
    return not (install_dir / DEVELOPMENT_SENTINEL_NAME).exists()


__all__ = ["check_update_required", "is_out_of_date"]
