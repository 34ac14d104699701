"""Weather sync pipeline: week schedule -> venue resolution -> forecasts."""

from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime
from typing import Any, Dict, Optional

from ..config import WEATHER_FILE, GamedaySyncSettings
from ..contracts import WeatherSnapshot
from ..data.fetch import HttpJsonClient
from ..data.reference import load_schedule, load_stadiums
from ..errors import FatalLoadError
from ..snapshots import build_weather_snapshot, format_timestamp
from ..weather.matcher import WeatherMatcher
from ..week import calculate_week
from .base import PipelineResult, Writer
from .injuries import Clock, utc_now
from .writers import NullWriter
from src.shared.batch import DelayStrategy, FixedDelay, RateLimiter
from src.shared.utils.logging import get_logger


class WeatherSyncPipeline:
    """Coordinates schedule filtering, forecast matching and emission."""

    name = "weather"

    def __init__(
        self,
        settings: GamedaySyncSettings,
        *,
        client: Optional[HttpJsonClient] = None,
        writer: Optional[Writer] = None,
        delay: Optional[DelayStrategy] = None,
        clock: Clock = utc_now,
        week: Optional[int] = None,
    ) -> None:
        self.settings = settings
        self._client = client
        self._writer = writer
        self._delay = delay if delay is not None else FixedDelay(settings.forecast_delay_seconds)
        self._clock = clock
        self._week = week
        self._logger = get_logger(f"WeatherSyncPipeline[{self.name}]")

    def current_week(self, now: datetime) -> int:
        if self._week is not None:
            return self._week
        return calculate_week(now, self.settings.season_start, self.settings.max_week)

    def prepare(self) -> WeatherSnapshot:
        """Build the weather snapshot for the current week without writing.

        Raises:
            FatalLoadError: If the stadium table or schedule cannot be loaded.
        """
        stadiums = load_stadiums(self.settings.stadiums_path)
        schedule = load_schedule(self.settings.schedule_path)

        now = self._clock()
        week = self.current_week(now)
        games = schedule.games_for_week(week)
        self._logger.info("Current NFL week: %d", week)
        self._logger.info("Found %d games in week %d", len(games), week)

        client_context = (
            nullcontext(self._client)
            if self._client is not None
            else HttpJsonClient(timeout=self.settings.http_timeout_seconds)
        )
        with client_context as client:
            matcher = WeatherMatcher(
                client,
                stadiums,
                self.settings,
                limiter=RateLimiter(self._delay, name="weather.gov"),
            )
            entries = matcher.match_games(games)

        snapshot = build_weather_snapshot(entries, week=week, timestamp=format_timestamp(now))
        stats = matcher.progress.get_stats() if matcher.progress else {}
        self._logger.info(
            "Weather summary (week %d): %d games, %d fetched, %d skipped, %d failed, %d emitted",
            week,
            len(games),
            stats.get("fetched", 0),
            stats.get("skipped", 0),
            stats.get("failed", 0),
            len(snapshot.games),
        )
        return snapshot

    @staticmethod
    def documents(snapshot: WeatherSnapshot) -> Dict[str, Dict[str, Any]]:
        return {WEATHER_FILE: snapshot.to_dict()}

    def run(self, *, dry_run: bool = False) -> PipelineResult:
        """Execute the full pipeline and return a structured result."""
        try:
            snapshot = self.prepare()
        except FatalLoadError as exc:
            self._logger.error("Pipeline '%s' aborted: %s", self.name, exc)
            return PipelineResult(False, 0, error=str(exc))

        processed = len(snapshot.games)
        documents = self.documents(snapshot)
        if dry_run:
            message = f"Dry run: {processed} games ready for week {snapshot.week}"
            self._logger.info(message)
            return PipelineResult(True, processed, messages=[message])

        writer = self._writer or NullWriter()
        try:
            result = writer.write(documents)
        except OSError as exc:
            self._logger.exception("Failed to write weather snapshot")
            return PipelineResult(False, processed, error=str(exc))
        result.processed = processed
        return result
