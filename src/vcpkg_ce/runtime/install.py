"""Swap a downloaded bundle into the live vcpkg-artifacts directory.

The standalone bundle also carries scripts, triplets and other files that
must not land on top of the vcpkg root, so the archive is extracted into a
staging directory and only its ``vcpkg-artifacts`` subtree is renamed into
place.

The sequence is not atomic: between removing the old installation and
renaming the new one in, a crash or a concurrent provisioning run can leave
no installation at all. The next successful run repairs it. No rollback is
attempted.
"""

from __future__ import annotations

import errno
import logging
import os
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, TypeVar

from vcpkg_ce.core.constants import ARTIFACTS_DIR_NAME, VERSION_MARKER_NAME
from vcpkg_ce.core.errors import ProvisioningError
from vcpkg_ce.core.messages import format_message
from vcpkg_ce.runtime.archive import extract_archive_to_temp_subdirectory
from vcpkg_ce.runtime.mode import PinnedMode, ProvisioningMode

logger = logging.getLogger(__name__)

T = TypeVar("T")

_RETRYABLE_ERRNOS = {errno.EACCES, errno.EPERM, errno.EBUSY}


@dataclass(frozen=True)
class StagingArea:
    """Temporary extraction root and the subtree that will be installed."""

    root: Path

    @property
    def subtree(self) -> Path:
        return self.root / ARTIFACTS_DIR_NAME


def _retry_transient(fn: Callable[[], T], attempts: int = 5, backoff_ms: int = 50) -> T:
    for attempt in range(attempts):
        try:
            return fn()
        except OSError as exc:
            if attempt == attempts - 1 or exc.errno not in _RETRYABLE_ERRNOS:
                raise
            time.sleep(backoff_ms / 1000.0)
    raise AssertionError("unreachable")


def _fs_error(call: str, path: Path, exc: OSError) -> ProvisioningError:
    return ProvisioningError(format_message("FilesystemCallFailed", call=call, path=path, reason=exc))


def _remove_tree(path: Path) -> None:
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink(missing_ok=True)
    except OSError as e:
        raise _fs_error("remove_all", path, e) from e


def _discard(staging: StagingArea | None, archive: Path) -> None:
    if staging is not None:
        shutil.rmtree(staging.root, ignore_errors=True)
    try:
        archive.unlink(missing_ok=True)
    except OSError as e:
        logger.warning("Failed to remove %s: %s", archive, e)


def install_bundle(
    archive: Path,
    install_dir: Path,
    tool_cache: Path,
    mode: ProvisioningMode,
) -> None:
    """Replace *install_dir* with the ``vcpkg-artifacts`` subtree of *archive*.

    The staging directory and *archive* are removed whether or not the
    install succeeds. In pinned mode the version marker is written last, so
    an interrupted install is retried on the next run.

    Raises:
        ProvisioningError: Any extraction or filesystem step failed.
    """
    staging: StagingArea | None = None
    try:
        staging = StagingArea(extract_archive_to_temp_subdirectory(tool_cache, archive, install_dir))
        if not staging.subtree.is_dir():
            raise ProvisioningError(f"{archive} does not contain a {ARTIFACTS_DIR_NAME} directory")

        _remove_tree(install_dir)
        subtree = staging.subtree
        try:
            install_dir.parent.mkdir(parents=True, exist_ok=True)
            _retry_transient(lambda: os.replace(subtree, install_dir))
        except OSError as e:
            raise _fs_error("rename", subtree, e) from e
    except BaseException:
        _discard(staging, archive)
        raise

    logger.debug("Installed %s from %s", install_dir, archive)
    try:
        _remove_tree(staging.root)
    finally:
        try:
            archive.unlink(missing_ok=True)
        except OSError as e:
            raise _fs_error("remove", archive, e) from e

    if isinstance(mode, PinnedMode):
        marker = install_dir / VERSION_MARKER_NAME
        try:
            marker.write_text(mode.version, encoding="utf-8")
        except OSError as e:
            raise _fs_error("write_contents", marker, e) from e


__all__ = ["StagingArea", "install_bundle"]
