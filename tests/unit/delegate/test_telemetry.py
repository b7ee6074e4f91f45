"""Tests for reading the delegate's telemetry file back into metrics."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from vcpkg_ce.core.metrics import MetricsCollector
from vcpkg_ce.delegate.telemetry import track_telemetry


def _write(tmp_path: Path, payload: object) -> Path:
    target = tmp_path / "telemetry.txt"
    target.write_text(json.dumps(payload), encoding="utf-8")
    return target


class TestTrackTelemetry:
    def test_both_fields(self, tmp_path: Path) -> None:
        collector = MetricsCollector()
        telemetry = _write(tmp_path, {"acquired_artifacts": "cmake", "activated_artifacts": "cmake,ninja"})

        track_telemetry(telemetry, collector)

        assert collector.snapshot() == {
            "acquired_artifacts": "cmake",
            "activated_artifacts": "cmake,ninja",
        }

    def test_no_file_configured(self) -> None:
        collector = MetricsCollector()
        track_telemetry(None, collector)
        assert collector.snapshot() == {}

    def test_file_never_written(self, tmp_path: Path) -> None:
        collector = MetricsCollector()
        track_telemetry(tmp_path / "absent.txt", collector)
        assert collector.snapshot() == {}

    def test_invalid_json(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        telemetry = tmp_path / "telemetry.txt"
        telemetry.write_text("{oops", encoding="utf-8")
        collector = MetricsCollector()

        with caplog.at_level(logging.DEBUG, logger="vcpkg_ce.delegate.telemetry"):
            track_telemetry(telemetry, collector)

        assert collector.snapshot() == {}
        assert "couldn't be parsed" in caplog.text

    def test_not_an_object(self, tmp_path: Path) -> None:
        collector = MetricsCollector()
        track_telemetry(_write(tmp_path, ["cmake"]), collector)
        assert collector.snapshot() == {}

    def test_fields_are_independent(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        collector = MetricsCollector()
        telemetry = _write(tmp_path, {"acquired_artifacts": 3, "activated_artifacts": "ninja"})

        with caplog.at_level(logging.DEBUG, logger="vcpkg_ce.delegate.telemetry"):
            track_telemetry(telemetry, collector)

        assert collector.snapshot() == {"activated_artifacts": "ninja"}
        assert "Acquired artifacts was not a string." in caplog.text

    def test_missing_field(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        collector = MetricsCollector()
        telemetry = _write(tmp_path, {"acquired_artifacts": "cmake"})

        with caplog.at_level(logging.DEBUG, logger="vcpkg_ce.delegate.telemetry"):
            track_telemetry(telemetry, collector)

        assert collector.snapshot() == {"acquired_artifacts": "cmake"}
        assert "No artifacts activated." in caplog.text

    def test_disabled_collector(self, tmp_path: Path) -> None:
        collector = MetricsCollector(enabled=False)
        track_telemetry(_write(tmp_path, {"acquired_artifacts": "cmake"}), collector)
        assert collector.snapshot() == {}

    def test_undecodable_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        telemetry = tmp_path / "telemetry.txt"
        telemetry.write_bytes(b"\xff")
        collector = MetricsCollector()

        with caplog.at_level(logging.DEBUG, logger="vcpkg_ce.delegate.telemetry"):
            track_telemetry(telemetry, collector)

        assert collector.snapshot() == {}
        assert "couldn't be read" in caplog.text
