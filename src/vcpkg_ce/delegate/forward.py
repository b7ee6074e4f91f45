"""Translate host-parsed switches and settings into delegate arguments."""

from __future__ import annotations

from dataclasses import dataclass, field

from vcpkg_ce.core.errors import MutuallyExclusiveSwitchesError
from vcpkg_ce.core.messages import format_message

OPERATING_SYSTEM_SWITCHES = ("windows", "osx", "linux", "freebsd")
HOST_PLATFORM_SWITCHES = ("x86", "x64", "arm", "arm64")
TARGET_PLATFORM_SWITCHES = ("target:x86", "target:x64", "target:arm", "target:arm64")

# (group name, members, message id)
SWITCH_GROUPS: tuple[tuple[str, tuple[str, ...], str], ...] = (
    ("operating system", OPERATING_SYSTEM_SWITCHES, "ArtifactsSwitchOnlyOneOperatingSystem"),
    ("host platform", HOST_PLATFORM_SWITCHES, "ArtifactsSwitchOnlyOneHostPlatform"),
    ("target platform", TARGET_PLATFORM_SWITCHES, "ArtifactsSwitchOnlyOneTargetPlatform"),
)


@dataclass
class ParsedArguments:
    """Switches and settings as parsed by the host CLI.

    Attributes:
        switches: Names of boolean switches that were set.
        settings: Option name to value, in the order given.
    """

    switches: set[str] = field(default_factory=set)
    settings: dict[str, str] = field(default_factory=dict)


def more_than_one_mapped(candidates: tuple[str, ...], switches: set[str]) -> bool:
    return sum(1 for candidate in candidates if candidate in switches) > 1


def validate_switch_groups(switches: set[str]) -> None:
    """Raise if two switches of the same platform group are set."""
    for group, members, message_id in SWITCH_GROUPS:
        if more_than_one_mapped(members, switches):
            raise MutuallyExclusiveSwitchesError(group, format_message(message_id))


def forward_common_artifacts_arguments(appended_to: list[str], parsed: ParsedArguments) -> None:
    """Append ``--<switch>`` and ``--<name> <value>`` pairs to *appended_to*.

    Switches are emitted in sorted order so the command line is stable.
    *appended_to* is left untouched when validation fails.
    """
    forwarded = [f"--{name}" for name in sorted(parsed.switches)]
    for name, value in parsed.settings.items():
        forwarded.append(f"--{name}")
        forwarded.append(value)
    validate_switch_groups(parsed.switches)
    appended_to.extend(forwarded)


__all__ = [
    "HOST_PLATFORM_SWITCHES",
    "OPERATING_SYSTEM_SWITCHES",
    "ParsedArguments",
    "SWITCH_GROUPS",
    "TARGET_PLATFORM_SWITCHES",
    "forward_common_artifacts_arguments",
    "more_than_one_mapped",
    "validate_switch_groups",
]
