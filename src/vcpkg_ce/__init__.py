"""
vcpkg-ce - provisions vcpkg-artifacts and runs its commands.

Usage:
    vcpkg-ce activate
    vcpkg-ce use cmake
    vcpkg-ce ce <args>...
    vcpkg-ce provision
"""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

try:
    __version__ = version("vcpkg-ce")
except PackageNotFoundError:
    __version__ = "0.0.0"

import typer
from rich.console import Console

from vcpkg_ce.cli.commands import activate, add, ce, deactivate, provision, use
from vcpkg_ce.cli.state import CliState, setup_logging

console = Console()

app = typer.Typer(
    name="vcpkg-ce",
    help="Provision vcpkg-artifacts and run its commands",
    add_completion=False,
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"vcpkg-ce {__version__}")
        raise typer.Exit()


@app.callback()
def callback(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Print internal debug information"),
    vcpkg_root: Optional[Path] = typer.Option(
        None,
        "--vcpkg-root",
        help="vcpkg root directory (defaults to VCPKG_ROOT or the nearest .vcpkg-root)",
        file_okay=False,
    ),
    disable_metrics: bool = typer.Option(False, "--disable-metrics", help="Do not collect metrics"),
    show_version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
):
    """Record global options; the session is created on first use."""
    setup_logging(debug)
    state = CliState(
        vcpkg_root=vcpkg_root,
        debug=debug,
        disable_metrics=disable_metrics,
        original_cwd=Path.cwd(),
    )
    ctx.obj = state
    ctx.call_on_close(state.flush_metrics)


_PASS_THROUGH = {"ignore_unknown_options": True, "allow_extra_args": True}

app.command()(activate)
app.command()(use)
app.command()(add)
app.command()(deactivate)
app.command(context_settings=_PASS_THROUGH)(ce)
app.command()(provision)


def main():
    app()


if __name__ == "__main__":
    main()
