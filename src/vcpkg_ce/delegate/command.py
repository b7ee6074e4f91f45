"""Build the command line handed to the vcpkg-artifacts delegate."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from vcpkg_ce.core.constants import (
    MESSAGES_FILE_SUFFIX,
    PREVIOUS_ENVIRONMENT_SUFFIX,
    TELEMETRY_FILE_SUFFIX,
)
from vcpkg_ce.core.errors import ProvisioningError
from vcpkg_ce.core.messages import format_message
from vcpkg_ce.runtime.home import HostPaths


@dataclass(frozen=True)
class InvocationSpec:
    """A fully resolved delegate invocation, executed exactly once."""

    executable: Path
    arguments: tuple[str, ...]
    working_directory: Path
    previous_environment_file: Path
    telemetry_file: Path | None = None
    language_file: Path | None = None

    @property
    def command_line(self) -> list[str]:
        return [str(self.executable), *self.arguments]


def _unique_temp_path(temp_directory: Path, suffix: str) -> Path:
    return temp_directory / f"{uuid.uuid4()}{suffix}"


def build_invocation(
    *,
    node: Path,
    entry_point: Path,
    paths: HostPaths,
    forwarded_args: Sequence[str],
    temp_directory: Path,
    debug: bool = False,
    metrics_enabled: bool = False,
    loaded_messages: str = "",
) -> InvocationSpec:
    """Assemble the delegate invocation.

    Arguments appear in this order: the entry point, *forwarded_args*
    verbatim, ``--debug`` when debugging, ``--z-telemetry-file`` when metrics
    are enabled, the fixed context flags, and ``--language`` when localized
    messages were loaded. *loaded_messages* is written to a uniquely named
    file in *temp_directory* for the delegate to read.

    The delegate runs in the directory the user invoked the host from.
    """
    args: list[str] = [str(entry_point), *forwarded_args]
    if debug:
        args.append("--debug")

    telemetry_file: Path | None = None
    if metrics_enabled:
        telemetry_file = _unique_temp_path(temp_directory, TELEMETRY_FILE_SUFFIX)
        args += ["--z-telemetry-file", str(telemetry_file)]

    previous_environment = _unique_temp_path(temp_directory, PREVIOUS_ENVIRONMENT_SUFFIX)
    args += [
        "--vcpkg-root", str(paths.root),
        "--z-vcpkg-command", str(paths.exe_path),
        "--z-vcpkg-artifacts-root", str(paths.artifacts),
        "--z-vcpkg-downloads", str(paths.downloads),
        "--z-vcpkg-registries-cache", str(paths.registries_cache),
        "--z-next-previous-environment", str(previous_environment),
        "--z-global-config", str(paths.global_config),
    ]

    language_file: Path | None = None
    if loaded_messages:
        language_file = _unique_temp_path(temp_directory, MESSAGES_FILE_SUFFIX)
        try:
            language_file.write_text(loaded_messages, encoding="utf-8")
        except OSError as e:
            raise ProvisioningError(
                format_message("FilesystemCallFailed", call="write_contents", path=language_file, reason=e)
            ) from e
        args += ["--language", str(language_file)]

    return InvocationSpec(
        executable=node,
        arguments=tuple(args),
        working_directory=paths.original_cwd,
        previous_environment_file=previous_environment,
        telemetry_file=telemetry_file,
        language_file=language_file,
    )


__all__ = ["InvocationSpec", "build_invocation"]
