"""
Sync report module.

This module records what a sync run did: which targets were converted, which
were skipped as fresh, which were only planned (dry run), per-stage timings,
and the error that stopped the run, if any.
"""

import os
import json
import time
import logging
import datetime
from typing import Dict, Any, List, Optional

logger = logging.getLogger(__name__)

class SyncReport:
    """
    Record of a single sync run.
    """

    def __init__(self):
        """
        Initialize an empty report.
        """
        self.converted = []
        self.skipped = []
        self.planned = []
        self.errors = []
        self.timings = {}

    def record_conversion(self, stage: str, action: str, source: str, target: str) -> None:
        """
        Record a target that was (re)generated.

        Args:
            stage: "vector" or "raster".
            action: "rasterize" or "scale".
            source: Source path.
            target: Target path.
        """
        self.converted.append(self._entry(stage, action, source, target))

    def record_skip(self, stage: str, source: str, target: str) -> None:
        """
        Record a target that was already fresh.
        """
        self.skipped.append({"stage": stage, "source": source, "target": target})

    def record_planned(self, stage: str, action: str, source: str, target: str) -> None:
        """
        Record a conversion that a dry run would have performed.
        """
        self.planned.append(self._entry(stage, action, source, target))

    def record_error(self, stage: str, message: str, source: Optional[str] = None,
                     returncode: Optional[int] = None) -> None:
        """
        Record the error that aborted the run.

        Args:
            stage: Stage in which the error occurred.
            message: Error message.
            source: Source being converted when the error occurred.
            returncode: Exit status of the failing tool.
        """
        self.errors.append({
            "stage": stage,
            "message": message,
            "source": source,
            "returncode": returncode,
            "timestamp": datetime.datetime.now().isoformat()
        })

    def start_timing(self, label: str) -> None:
        """
        Start timing a stage.

        Args:
            label: Label for the timing.
        """
        self.timings.setdefault(label, {})["start"] = time.time()

    def end_timing(self, label: str) -> float:
        """
        End timing a stage.

        Args:
            label: Label for the timing.

        Returns:
            Elapsed time in seconds (0.0 if the timing was never started).
        """
        timing = self.timings.setdefault(label, {})
        elapsed = time.time() - timing["start"] if "start" in timing else 0.0
        timing["end"] = time.time()
        timing["elapsed"] = elapsed
        return elapsed

    def is_successful(self) -> bool:
        return not self.errors

    def get_summary(self) -> Dict[str, Any]:
        """
        Get the report as a dictionary.

        Returns:
            Counts, entries, timings and errors.
        """
        return {
            "succeeded": self.is_successful(),
            "counts": {
                "converted": len(self.converted),
                "skipped": len(self.skipped),
                "planned": len(self.planned),
                "errors": len(self.errors),
            },
            "converted": self.converted,
            "skipped": self.skipped,
            "planned": self.planned,
            "errors": self.errors,
            "timings": self.timings,
        }

    def save(self, report_path: str) -> str:
        """
        Save the report as JSON.

        Args:
            report_path: Path of the JSON file.

        Returns:
            Path to the saved report.
        """
        report_dir = os.path.dirname(report_path)
        if report_dir:
            os.makedirs(report_dir, exist_ok=True)

        with open(report_path, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        logger.info(f"Saved sync report to {report_path}")

        return report_path

    @staticmethod
    def _entry(stage: str, action: str, source: str, target: str) -> Dict[str, str]:
        return {"stage": stage, "action": action, "source": source, "target": target}
