"""Exception hierarchy for provisioning and delegation failures."""

from __future__ import annotations


class VcpkgCeError(RuntimeError):
    """Base exception for fatal, user-visible errors.

    Raised anywhere below the CLI and converted into a diagnostic plus a
    non-zero exit status by the command that invoked the core.
    """


class ProvisioningError(VcpkgCeError):
    """The artifacts bundle could not be downloaded, extracted or installed."""


class ConfigurationError(VcpkgCeError):
    """The host configuration or command line is unusable."""


class ReadOnlyRootError(ConfigurationError):
    """The vcpkg root is read-only and carries no artifacts installation."""


class MutuallyExclusiveSwitchesError(ConfigurationError):
    """More than one switch of the same platform group was given."""

    def __init__(self, group: str, message: str | None = None):
        self.group = group
        super().__init__(message or f"Only one {group} switch may be specified.")


class DelegateLaunchError(VcpkgCeError):
    """The delegate process could not be started."""


__all__ = [
    "ConfigurationError",
    "DelegateLaunchError",
    "MutuallyExclusiveSwitchesError",
    "ProvisioningError",
    "ReadOnlyRootError",
    "VcpkgCeError",
]
