"""Archive extraction into staging directories."""

from __future__ import annotations

import logging
import shutil
import tarfile
import tempfile
import zipfile
from pathlib import Path

from vcpkg_ce.core.errors import ProvisioningError

logger = logging.getLogger(__name__)

_TAR_SUFFIXES = (".tar.gz", ".tgz", ".tar")


def extract_archive(archive: Path, destination: Path) -> Path:
    """Extract *archive* into *destination* and return *destination*.

    Raises:
        ProvisioningError: The archive format is unknown or the archive is corrupt.
    """
    name = archive.name.lower()
    destination.mkdir(parents=True, exist_ok=True)
    try:
        if name.endswith(_TAR_SUFFIXES):
            with tarfile.open(archive) as tar:
                tar.extractall(destination, filter="data")
        elif name.endswith(".zip"):
            with zipfile.ZipFile(archive) as zip_ref:
                zip_ref.extractall(destination)
        else:
            raise ProvisioningError(f"Unsupported archive format: {archive}")
    except (tarfile.TarError, zipfile.BadZipFile, OSError) as e:
        raise ProvisioningError(f"Failed to extract {archive}: {e}") from e

    logger.debug("Extracted %s to %s", archive, destination)
    return destination


def extract_archive_to_temp_subdirectory(tool_cache: Path, archive: Path, target: Path) -> Path:
    """Extract *archive* into a fresh staging directory under *tool_cache*.

    The staging directory is named after *target* so that leftovers from a
    crashed process are recognisable. The caller owns (and must remove) the
    returned directory.
    """
    try:
        tool_cache.mkdir(parents=True, exist_ok=True)
        staging = Path(tempfile.mkdtemp(prefix=f".{target.name}_update_", dir=tool_cache))
    except OSError as e:
        raise ProvisioningError(f"Failed to create a staging directory in {tool_cache}: {e}") from e

    try:
        extract_archive(archive, staging)
    except BaseException:
        shutil.rmtree(staging, ignore_errors=True)
        raise
    return staging


__all__ = ["extract_archive", "extract_archive_to_temp_subdirectory"]
