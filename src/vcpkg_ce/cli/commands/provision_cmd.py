"""Top-level ``vcpkg-ce provision`` command.

Installs or updates vcpkg-artifacts without running it, e.g. to warm a CI
image.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from vcpkg_ce.cli.state import fail, get_session
from vcpkg_ce.core.errors import VcpkgCeError
from vcpkg_ce.delegate.configure_environment import ensure_artifacts
from vcpkg_ce.runtime.mode import PinnedMode

console = Console()


def provision(ctx: typer.Context) -> None:
    """Install or update vcpkg-artifacts and show where it lives."""
    session = get_session(ctx)
    try:
        entry_point = ensure_artifacts(session)
    except VcpkgCeError as e:
        fail(e)

    mode = session.mode
    if isinstance(mode, PinnedMode):
        mode_display = f"[green]pinned[/green] {mode.version}"
    else:
        mode_display = "[yellow]latest[/yellow] (unverified)"

    table = Table(title="vcpkg-artifacts", show_header=False)
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_row("Mode", mode_display)
    table.add_row("Installation", str(session.paths.artifacts_install))
    table.add_row("Entry point", str(entry_point))
    table.add_row("Read-only root", "yes" if session.paths.readonly else "no")
    console.print(table)
