"""Per-invocation CLI state shared between the app callback and commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from vcpkg_ce.core.errors import VcpkgCeError
from vcpkg_ce.session import HostSession, create_session

console = Console(stderr=True)


@dataclass
class CliState:
    """Global options, turned into a :class:`HostSession` on first use."""

    vcpkg_root: Path | None = None
    debug: bool = False
    disable_metrics: bool = False
    original_cwd: Path = field(default_factory=Path.cwd)
    _session: HostSession | None = None

    def session(self) -> HostSession:
        if self._session is None:
            self._session = create_session(
                self.vcpkg_root,
                original_cwd=self.original_cwd,
                debug=self.debug,
                disable_metrics=self.disable_metrics,
            )
        return self._session

    def flush_metrics(self) -> None:
        if self._session is not None:
            self._session.metrics.flush()


def setup_logging(debug: bool) -> None:
    """Set up logging based on the debug flag."""
    log_level = logging.DEBUG if debug else logging.WARNING
    logging.basicConfig(level=log_level, format="%(name)s: %(message)s")
    logging.getLogger().setLevel(log_level)


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.find_object(CliState)
    if state is None:
        state = CliState()
        ctx.obj = state
    return state


def get_session(ctx: typer.Context) -> HostSession:
    """Return the session, exiting with status 1 on configuration errors."""
    try:
        return get_state(ctx).session()
    except VcpkgCeError as e:
        fail(e)


def fail(error: Exception) -> NoReturn:
    console.print(f"[red]error:[/red] {escape(str(error))}")
    raise typer.Exit(1)


__all__ = ["CliState", "console", "fail", "get_session", "get_state", "setup_logging"]
