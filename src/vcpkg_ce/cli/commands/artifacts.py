"""Commands delegated to vcpkg-artifacts.

Usage:
    vcpkg-ce activate [--windows|--osx|...] [--msbuild-props FILE] [--json FILE]
    vcpkg-ce use ARTIFACT... [switches] [--msbuild-props FILE] [--json FILE]
    vcpkg-ce add ARTIFACT [--version VERSION] [switches]
    vcpkg-ce deactivate
    vcpkg-ce ce ARGS...          # raw pass-through
"""

from __future__ import annotations

from typing import List, Optional

import typer
from typing_extensions import Annotated

from vcpkg_ce.cli.state import fail, get_session
from vcpkg_ce.core.errors import VcpkgCeError
from vcpkg_ce.delegate.configure_environment import run_configure_environment_command
from vcpkg_ce.delegate.forward import ParsedArguments, forward_common_artifacts_arguments

Windows = Annotated[bool, typer.Option("--windows", help="Target Windows")]
Osx = Annotated[bool, typer.Option("--osx", help="Target macOS")]
Linux = Annotated[bool, typer.Option("--linux", help="Target Linux")]
FreeBsd = Annotated[bool, typer.Option("--freebsd", help="Target FreeBSD")]
X86 = Annotated[bool, typer.Option("--x86", help="Host architecture x86")]
X64 = Annotated[bool, typer.Option("--x64", help="Host architecture x64")]
Arm = Annotated[bool, typer.Option("--arm", help="Host architecture arm")]
Arm64 = Annotated[bool, typer.Option("--arm64", help="Host architecture arm64")]
TargetX86 = Annotated[bool, typer.Option("--target:x86", help="Target architecture x86")]
TargetX64 = Annotated[bool, typer.Option("--target:x64", help="Target architecture x64")]
TargetArm = Annotated[bool, typer.Option("--target:arm", help="Target architecture arm")]
TargetArm64 = Annotated[bool, typer.Option("--target:arm64", help="Target architecture arm64")]
MsbuildProps = Annotated[
    Optional[str],
    typer.Option("--msbuild-props", help="Write MSBuild properties for the activation to this file"),
]
JsonOut = Annotated[
    Optional[str],
    typer.Option("--json", help="Write a JSON description of the activation to this file"),
]


def platform_switches(
    *,
    windows: bool = False,
    osx: bool = False,
    linux: bool = False,
    freebsd: bool = False,
    x86: bool = False,
    x64: bool = False,
    arm: bool = False,
    arm64: bool = False,
    target_x86: bool = False,
    target_x64: bool = False,
    target_arm: bool = False,
    target_arm64: bool = False,
) -> set[str]:
    """Return the delegate names of the switches that are set."""
    flags = {
        "windows": windows,
        "osx": osx,
        "linux": linux,
        "freebsd": freebsd,
        "x86": x86,
        "x64": x64,
        "arm": arm,
        "arm64": arm64,
        "target:x86": target_x86,
        "target:x64": target_x64,
        "target:arm": target_arm,
        "target:arm64": target_arm64,
    }
    return {name for name, enabled in flags.items() if enabled}


def _settings(**values: str | None) -> dict[str, str]:
    return {name.replace("_", "-"): value for name, value in values.items() if value is not None}


def _delegate(ctx: typer.Context, args: list[str], parsed: ParsedArguments | None = None) -> None:
    session = get_session(ctx)
    try:
        if parsed is not None:
            forward_common_artifacts_arguments(args, parsed)
        exit_code = run_configure_environment_command(session, args)
    except VcpkgCeError as e:
        fail(e)
    raise typer.Exit(exit_code)


def activate(
    ctx: typer.Context,
    windows: Windows = False,
    osx: Osx = False,
    linux: Linux = False,
    freebsd: FreeBsd = False,
    x86: X86 = False,
    x64: X64 = False,
    arm: Arm = False,
    arm64: Arm64 = False,
    target_x86: TargetX86 = False,
    target_x64: TargetX64 = False,
    target_arm: TargetArm = False,
    target_arm64: TargetArm64 = False,
    msbuild_props: MsbuildProps = None,
    json_file: JsonOut = None,
) -> None:
    """Activate the artifacts from the project manifest."""
    switches = platform_switches(
        windows=windows, osx=osx, linux=linux, freebsd=freebsd,
        x86=x86, x64=x64, arm=arm, arm64=arm64,
        target_x86=target_x86, target_x64=target_x64,
        target_arm=target_arm, target_arm64=target_arm64,
    )
    parsed = ParsedArguments(switches, _settings(msbuild_props=msbuild_props, json=json_file))
    _delegate(ctx, ["activate"], parsed)


def use(
    ctx: typer.Context,
    artifacts: Annotated[List[str], typer.Argument(help="Artifacts to activate in this shell")],
    windows: Windows = False,
    osx: Osx = False,
    linux: Linux = False,
    freebsd: FreeBsd = False,
    x86: X86 = False,
    x64: X64 = False,
    arm: Arm = False,
    arm64: Arm64 = False,
    target_x86: TargetX86 = False,
    target_x64: TargetX64 = False,
    target_arm: TargetArm = False,
    target_arm64: TargetArm64 = False,
    msbuild_props: MsbuildProps = None,
    json_file: JsonOut = None,
) -> None:
    """Activate a single artifact without modifying the manifest."""
    switches = platform_switches(
        windows=windows, osx=osx, linux=linux, freebsd=freebsd,
        x86=x86, x64=x64, arm=arm, arm64=arm64,
        target_x86=target_x86, target_x64=target_x64,
        target_arm=target_arm, target_arm64=target_arm64,
    )
    parsed = ParsedArguments(switches, _settings(msbuild_props=msbuild_props, json=json_file))
    _delegate(ctx, ["use", *artifacts], parsed)


def add(
    ctx: typer.Context,
    artifact: Annotated[str, typer.Argument(help="Artifact to add to the project manifest")],
    version: Annotated[Optional[str], typer.Option("--version", help="Version of the artifact")] = None,
    windows: Windows = False,
    osx: Osx = False,
    linux: Linux = False,
    freebsd: FreeBsd = False,
    x86: X86 = False,
    x64: X64 = False,
    arm: Arm = False,
    arm64: Arm64 = False,
    target_x86: TargetX86 = False,
    target_x64: TargetX64 = False,
    target_arm: TargetArm = False,
    target_arm64: TargetArm64 = False,
) -> None:
    """Add an artifact to the project manifest."""
    switches = platform_switches(
        windows=windows, osx=osx, linux=linux, freebsd=freebsd,
        x86=x86, x64=x64, arm=arm, arm64=arm64,
        target_x86=target_x86, target_x64=target_x64,
        target_arm=target_arm, target_arm64=target_arm64,
    )
    parsed = ParsedArguments(switches, _settings(version=version))
    _delegate(ctx, ["add", artifact], parsed)


def deactivate(ctx: typer.Context) -> None:
    """Deactivate the artifacts activated in this shell."""
    _delegate(ctx, ["deactivate"])


def ce(
    ctx: typer.Context,
    args: Annotated[Optional[List[str]], typer.Argument(help="Arguments passed verbatim to vcpkg-artifacts")] = None,
) -> None:
    """Run vcpkg-artifacts with the given arguments."""
    _delegate(ctx, list(args or []))
