"""Provisioning strategies: a hash-pinned bundle version, or the latest release."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from vcpkg_ce.core.config import HostSettings


@dataclass(frozen=True)
class PinnedMode:
    """Install exactly *version*, verified against *sha512*."""

    version: str
    sha512: str


@dataclass(frozen=True)
class LatestMode:
    """Always install the newest published bundle, unverified."""


ProvisioningMode = Union[PinnedMode, LatestMode]


def select_mode(settings: HostSettings) -> ProvisioningMode:
    """Pick the strategy once at startup: pinned only when version and hash are both set."""
    if settings.version and settings.sha512:
        return PinnedMode(version=settings.version, sha512=settings.sha512)
    return LatestMode()


__all__ = ["LatestMode", "PinnedMode", "ProvisioningMode", "select_mode"]
