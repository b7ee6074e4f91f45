"""In-process metrics collector.

One collector is created when the CLI starts and handed to whatever needs to
record metrics. Transport is out of scope: ``flush()`` is the single hand-off
point and only returns and logs what was gathered.
"""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class StringMetric(str, Enum):
    ACQUIRED_ARTIFACTS = "acquired_artifacts"
    ACTIVATED_ARTIFACTS = "activated_artifacts"


class MetricsCollector:
    """Fire-and-forget store of string metrics.

    Args:
        enabled: When ``False`` every ``track_string`` call is dropped.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._strings: dict[StringMetric, str] = {}

    def track_string(self, metric: StringMetric, value: str) -> None:
        if not self.enabled:
            return
        self._strings[metric] = value

    def snapshot(self) -> dict[str, str]:
        return {metric.value: value for metric, value in self._strings.items()}

    def flush(self) -> dict[str, str]:
        """Return the collected metrics and clear the buffer."""
        payload = self.snapshot()
        if payload:
            logger.debug("Flushing metrics: %s", payload)
        self._strings.clear()
        return payload


__all__ = ["MetricsCollector", "StringMetric"]
