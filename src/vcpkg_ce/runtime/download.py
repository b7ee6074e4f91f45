"""Asset-cached HTTP downloads with SHA-512 verification.

``Downloader.download()`` never raises for network or integrity problems: it
reports them and returns ``False``. A failed download never leaves anything at
the destination path; the body is streamed into a uniquely named ``.part``
file which is only moved into place once complete (and verified, when a hash
is known).
"""

from __future__ import annotations

import hashlib
import logging
import os
import ssl
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import httpx
import truststore
from rich.console import Console

from vcpkg_ce.core.messages import format_message

logger = logging.getLogger(__name__)

console = Console(stderr=True)

CHUNK_SIZE = 8192


def hash_file(file_path: Path) -> str:
    """Return the lowercase hex SHA-512 of *file_path*, read in chunks."""
    hasher = hashlib.sha512()
    with open(file_path, "rb") as f:
        while chunk := f.read(CHUNK_SIZE):
            hasher.update(chunk)
    return hasher.hexdigest()


@dataclass(frozen=True)
class AssetCacheSettings:
    """Read-only mirror consulted before origin URLs.

    Attributes:
        read_url: Base URL; an asset is looked up at ``<read_url>/<sha512>``.
        block_origin: Never contact origin URLs, only the mirror.
    """

    read_url: str | None = None
    block_origin: bool = False

    def mirror_url(self, sha512: str) -> str | None:
        if not self.read_url:
            return None
        return f"{self.read_url.rstrip('/')}/{sha512}"


class _DownloadFailure(Exception):
    pass


class Downloader:
    """Download files through an ``httpx.Client`` using the OS trust store."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        asset_cache: AssetCacheSettings | None = None,
        timeout: float = 60,
    ) -> None:
        if client is None:
            client = httpx.Client(verify=truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT))
        self._client = client
        self.asset_cache = asset_cache or AssetCacheSettings()
        self.timeout = timeout

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "Downloader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def download(
        self,
        urls: Sequence[str],
        destination: Path,
        sha512: str | None = None,
    ) -> bool:
        """Fetch the first URL that succeeds into *destination*.

        An existing *destination* whose hash already matches *sha512* is
        reused without touching the network.
        """
        expected = sha512.lower() if sha512 else None

        if expected and destination.is_file():
            try:
                if hash_file(destination) == expected:
                    logger.debug("Reusing cached download %s", destination)
                    return True
                destination.unlink()
            except OSError as e:
                console.print(
                    "[red]error:[/red] "
                    + format_message("FilesystemCallFailed", call="remove", path=destination, reason=e)
                )
                return False

        candidates: list[str] = []
        if expected and (mirror := self.asset_cache.mirror_url(expected)):
            candidates.append(mirror)
        if not self.asset_cache.block_origin:
            candidates.extend(urls)

        if not candidates:
            console.print("[red]error:[/red] " + format_message("DownloadBlockedOrigin", file=destination.name))
            return False

        destination.parent.mkdir(parents=True, exist_ok=True)
        failures: list[str] = []
        for url in candidates:
            try:
                self._fetch_one(url, destination, expected)
            except _DownloadFailure as e:
                logger.debug("Download attempt failed: %s", e)
                failures.append(str(e))
                continue
            logger.debug("Downloaded %s to %s", url, destination)
            return True

        for failure in failures:
            console.print(f"[red]error:[/red] {failure}")
        return False

    def _fetch_one(self, url: str, destination: Path, sha512: str | None) -> None:
        partial = destination.with_name(f"{destination.name}.{uuid.uuid4().hex}.part")
        hasher = hashlib.sha512()
        try:
            with self._client.stream(
                "GET",
                url,
                timeout=self.timeout,
                follow_redirects=True,
            ) as response:
                if response.status_code != 200:
                    raise _DownloadFailure(
                        format_message("DownloadFailed", url=url, reason=f"HTTP {response.status_code}")
                    )
                with open(partial, "wb") as f:
                    for chunk in response.iter_bytes(chunk_size=CHUNK_SIZE):
                        f.write(chunk)
                        hasher.update(chunk)

            if sha512 is not None:
                actual = hasher.hexdigest()
                if actual != sha512:
                    raise _DownloadFailure(
                        format_message("DownloadHashMismatch", url=url, expected=sha512, actual=actual)
                    )
            os.replace(partial, destination)
        except httpx.HTTPError as e:
            raise _DownloadFailure(format_message("DownloadFailed", url=url, reason=e)) from e
        except OSError as e:
            raise _DownloadFailure(format_message("DownloadFailed", url=url, reason=e)) from e
        finally:
            partial.unlink(missing_ok=True)


__all__ = ["AssetCacheSettings", "Downloader", "hash_file"]
