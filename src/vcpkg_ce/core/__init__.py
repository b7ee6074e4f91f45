"""Core configuration, errors, messages and metrics."""

from .config import HostSettings, load_host_settings
from .errors import (
    ConfigurationError,
    DelegateLaunchError,
    MutuallyExclusiveSwitchesError,
    ProvisioningError,
    ReadOnlyRootError,
    VcpkgCeError,
)
from .metrics import MetricsCollector, StringMetric

__all__ = [
    "ConfigurationError",
    "DelegateLaunchError",
    "HostSettings",
    "MetricsCollector",
    "MutuallyExclusiveSwitchesError",
    "ProvisioningError",
    "ReadOnlyRootError",
    "StringMetric",
    "VcpkgCeError",
    "load_host_settings",
]
