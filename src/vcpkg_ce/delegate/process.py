"""Locate Node.js and run the delegate process."""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from vcpkg_ce.core.errors import DelegateLaunchError, ProvisioningError
from vcpkg_ce.core.messages import format_message
from vcpkg_ce.delegate.command import InvocationSpec

logger = logging.getLogger(__name__)


def find_node(configured: str | None = None) -> Path:
    """Return the Node.js executable, preferring an explicitly configured one."""
    if configured:
        candidate = Path(configured)
        if candidate.is_file():
            return candidate
        found = shutil.which(configured)
        if found:
            return Path(found)
        raise ProvisioningError(format_message("NodeNotFound"))

    found = shutil.which("node")
    if found is None:
        raise ProvisioningError(format_message("NodeNotFound"))
    return Path(found)


def clamp_exit_code(code: int) -> int:
    """Map codes outside ``[0, 127]`` to 1.

    Some platforms only keep the low 7 bits, and a negative code means the
    child was killed by a signal.
    """
    if code < 0 or code > 127:
        return 1
    return code


def execute(spec: InvocationSpec) -> int:
    """Run *spec* to completion and return its clamped exit code.

    Raises:
        DelegateLaunchError: The process could not be started.
    """
    command = spec.command_line
    logger.debug("Running %s in %s", command, spec.working_directory)
    try:
        completed = subprocess.run(command, cwd=spec.working_directory, check=False)
    except OSError as e:
        raise DelegateLaunchError(
            format_message("DelegateLaunchFailed", command=command[0], reason=e)
        ) from e
    logger.debug("Delegate exited with %s", completed.returncode)
    return clamp_exit_code(completed.returncode)


__all__ = ["clamp_exit_code", "execute", "find_node"]
