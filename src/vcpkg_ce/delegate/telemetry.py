"""Read back the telemetry file written by the delegate.

Telemetry is best effort: every problem is logged at debug level and
otherwise ignored, so it can never change the command's outcome.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from vcpkg_ce.core.metrics import MetricsCollector, StringMetric

logger = logging.getLogger(__name__)

_TRACKED_FIELDS: tuple[tuple[StringMetric, str, str], ...] = (
    (StringMetric.ACQUIRED_ARTIFACTS, "No artifacts acquired.", "Acquired artifacts was not a string."),
    (StringMetric.ACTIVATED_ARTIFACTS, "No artifacts activated.", "Activated artifacts was not a string."),
)


def track_telemetry(telemetry_file: Path | None, collector: MetricsCollector) -> None:
    """Forward ``acquired_artifacts`` / ``activated_artifacts`` to *collector*."""
    if telemetry_file is None:
        return

    try:
        text = telemetry_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Telemetry file couldn't be read: %s", e)
        return

    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Telemetry file couldn't be parsed: %s", e)
        return

    if not isinstance(parsed, dict):
        logger.debug("Telemetry file couldn't be parsed: expected a JSON object")
        return

    for metric, missing_message, wrong_type_message in _TRACKED_FIELDS:
        if metric.value not in parsed:
            logger.debug(missing_message)
            continue
        value = parsed[metric.value]
        if isinstance(value, str):
            collector.track_string(metric, value)
        else:
            logger.debug(wrong_type_message)


__all__ = ["track_telemetry"]
