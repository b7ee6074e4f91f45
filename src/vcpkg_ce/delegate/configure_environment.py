"""Run a vcpkg-artifacts subcommand in a Node.js child process.

The delegate is provisioned first (see :mod:`vcpkg_ce.runtime.bootstrap`),
then invoked with the forwarded arguments plus the context flags it expects.
Once it exits, its telemetry file (if any) is read back into the session's
metrics collector.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Sequence

from rich.console import Console

from vcpkg_ce.core.messages import format_message
from vcpkg_ce.delegate.command import InvocationSpec, build_invocation
from vcpkg_ce.delegate.process import execute, find_node
from vcpkg_ce.delegate.telemetry import track_telemetry
from vcpkg_ce.runtime.bootstrap import provision_artifacts
from vcpkg_ce.runtime.fetch import BundleDownloader
from vcpkg_ce.session import HostSession

logger = logging.getLogger(__name__)

console = Console(stderr=True)

Launcher = Callable[[InvocationSpec], int]


def _remove_quietly(path: Path | None) -> None:
    if path is None:
        return
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.debug("Failed to remove %s: %s", path, e)


def ensure_artifacts(session: HostSession, downloader: BundleDownloader | None = None) -> Path:
    """Provision the bundle for *session* and return its entry point."""
    if downloader is not None:
        return provision_artifacts(session.paths, session.mode, downloader)
    with session.create_downloader() as owned:
        return provision_artifacts(session.paths, session.mode, owned)


def run_configure_environment_command(
    session: HostSession,
    args: Sequence[str],
    *,
    downloader: BundleDownloader | None = None,
    launcher: Launcher = execute,
) -> int:
    """Provision, invoke the delegate with *args*, and return its exit code.

    Raises:
        VcpkgCeError: Provisioning failed or the delegate couldn't be started.
    """
    console.print("[yellow]warning:[/yellow] " + format_message("VcpkgCeIsExperimental"))

    entry_point = ensure_artifacts(session, downloader)
    node = find_node(session.settings.node)

    spec = build_invocation(
        node=node,
        entry_point=entry_point,
        paths=session.paths,
        forwarded_args=args,
        temp_directory=session.paths.temp_directory(),
        debug=session.debug,
        metrics_enabled=session.metrics.enabled,
        loaded_messages=session.loaded_messages,
    )

    try:
        exit_code = launcher(spec)
        track_telemetry(spec.telemetry_file, session.metrics)
    finally:
        _remove_quietly(spec.telemetry_file)
        _remove_quietly(spec.language_file)

    return exit_code


__all__ = ["ensure_artifacts", "run_configure_environment_command"]
