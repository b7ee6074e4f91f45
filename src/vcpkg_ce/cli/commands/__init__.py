"""CLI command modules for vcpkg-ce."""

from .artifacts import activate, add, ce, deactivate, use
from .provision_cmd import provision

__all__ = ["activate", "add", "ce", "deactivate", "provision", "use"]
