"""Invocation of the vcpkg-artifacts delegate process."""

from vcpkg_ce.delegate.command import InvocationSpec, build_invocation
from vcpkg_ce.delegate.configure_environment import ensure_artifacts, run_configure_environment_command
from vcpkg_ce.delegate.forward import ParsedArguments, forward_common_artifacts_arguments
from vcpkg_ce.delegate.process import clamp_exit_code, execute, find_node
from vcpkg_ce.delegate.telemetry import track_telemetry

__all__ = [
    "InvocationSpec",
    "ParsedArguments",
    "build_invocation",
    "clamp_exit_code",
    "ensure_artifacts",
    "execute",
    "find_node",
    "forward_common_artifacts_arguments",
    "run_configure_environment_command",
    "track_telemetry",
]
