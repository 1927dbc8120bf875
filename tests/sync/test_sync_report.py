"""
Tests for the sync report.
"""

import os
import json
import tempfile
from unittest.mock import patch

from texsync.sync.sync_report import SyncReport

class TestSyncReport:
    """
    Tests for the SyncReport class.
    """

    def setup_method(self):
        """
        Set up test environment.
        """
        self.temp_dir = tempfile.TemporaryDirectory()
        self.report = SyncReport()

    def teardown_method(self):
        """
        Clean up test environment.
        """
        self.temp_dir.cleanup()

    def test_empty_report(self):
        """
        Test a report with nothing recorded.
        """
        summary = self.report.get_summary()

        assert summary["succeeded"] is True
        assert summary["counts"] == {"converted": 0, "skipped": 0, "planned": 0, "errors": 0}

    def test_record_entries(self):
        """
        Test recording conversions, skips and planned conversions.
        """
        self.report.record_conversion("vector", "rasterize", "master/a.svg", "master/a.png")
        self.report.record_skip("raster", "master/b.png", "b.png")
        self.report.record_planned("raster", "scale", "master/a.png", "a.png")

        summary = self.report.get_summary()

        assert summary["counts"]["converted"] == 1
        assert summary["counts"]["skipped"] == 1
        assert summary["counts"]["planned"] == 1
        assert summary["converted"][0] == {
            "stage": "vector",
            "action": "rasterize",
            "source": "master/a.svg",
            "target": "master/a.png"
        }
        assert summary["skipped"][0]["target"] == "b.png"

    def test_record_error(self):
        """
        Test that an error marks the report as failed.
        """
        self.report.record_error("raster", "convert failed", source="master/a.png", returncode=1)

        assert not self.report.is_successful()
        error = self.report.errors[0]
        assert error["stage"] == "raster"
        assert error["message"] == "convert failed"
        assert error["returncode"] == 1
        assert "timestamp" in error

    @patch("texsync.sync.sync_report.time.time")
    def test_timing(self, mock_time):
        """
        Test stage timings.
        """
        mock_time.side_effect = [100.0, 102.5, 102.5]

        self.report.start_timing("vector")
        elapsed = self.report.end_timing("vector")

        assert elapsed == 2.5
        assert self.report.timings["vector"]["elapsed"] == 2.5

    def test_end_timing_without_start(self):
        """
        Test ending a timing that was never started.
        """
        assert self.report.end_timing("raster") == 0.0

    def test_save(self):
        """
        Test saving the report as JSON.
        """
        self.report.record_conversion("raster", "scale", "master/a.png", "a.png")
        report_path = os.path.join(self.temp_dir.name, "reports", "sync.json")

        saved_path = self.report.save(report_path)

        assert saved_path == report_path
        with open(report_path, "r") as f:
            data = json.load(f)
        assert data["counts"]["converted"] == 1
        assert data["converted"][0]["action"] == "scale"
