"""Progress tracking for sequential fetch loops."""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

FETCHED = "fetched"
SKIPPED = "skipped"
FAILED = "failed"


class FetchProgress:
    """Tracks per-item outcomes of a sequential fetch loop.

    Every recorded item produces one log line so operators can follow a run
    item by item, and :meth:`log_summary` reports the totals at the end.

    Example:
        progress = FetchProgress(total=32, stage="rosters")

        for team in teams:
            try:
                payload = client.get_json(url, key=team.code)
            except FetchError as exc:
                progress.failed(team.code, exc.message)
                continue
            progress.fetched(team.code, "12 skill position players")

        progress.log_summary()
    """

    def __init__(self, total: int, stage: str, *, log: Optional[logging.Logger] = None):
        """Initialize progress tracker.

        Args:
            total: Number of items the loop will visit
            stage: Stage name used as the log prefix
            log: Logger to write to (defaults to this module's logger)
        """
        self.total = total
        self.stage = stage
        self.start_time = time.monotonic()
        self.fetched_count = 0
        self.skipped_count = 0
        self.failed_count = 0
        self.failures: List[Dict[str, str]] = []
        self._log = log or logger

    @property
    def processed_count(self) -> int:
        return self.fetched_count + self.skipped_count + self.failed_count

    def fetched(self, key: str, detail: str = "") -> None:
        self.fetched_count += 1
        self._emit(logging.INFO, FETCHED, key, detail)

    def skipped(self, key: str, reason: str = "") -> None:
        self.skipped_count += 1
        self._emit(logging.INFO, SKIPPED, key, reason)

    def failed(self, key: str, error: str = "") -> None:
        self.failed_count += 1
        self.failures.append({"key": key, "error": error})
        self._emit(logging.ERROR, FAILED, key, error)

    def _emit(self, level: int, outcome: str, key: str, detail: str) -> None:
        position = f"{self.processed_count}/{self.total}"
        if detail:
            self._log.log(level, "[%s %s] %s %s: %s", self.stage, position, outcome, key, detail)
        else:
            self._log.log(level, "[%s %s] %s %s", self.stage, position, outcome, key)

    def log_summary(self) -> None:
        """Log final summary."""
        elapsed = time.monotonic() - self.start_time
        summary_parts = [
            f"Total: {self.total}",
            f"Fetched: {self.fetched_count}",
            f"Skipped: {self.skipped_count}",
            f"Failed: {self.failed_count}",
            f"Time: {elapsed:.1f}s",
        ]
        self._log.info("%s complete:\n  %s", self.stage.capitalize(), "\n  ".join(summary_parts))

    def get_stats(self) -> Dict[str, Any]:
        """Get current progress statistics."""
        return {
            "stage": self.stage,
            "total": self.total,
            "fetched": self.fetched_count,
            "skipped": self.skipped_count,
            "failed": self.failed_count,
            "failures": list(self.failures),
        }
