"""CLI helpers exposed for other modules."""

from .state import CliState, get_session, setup_logging

__all__ = ["CliState", "get_session", "setup_logging"]
