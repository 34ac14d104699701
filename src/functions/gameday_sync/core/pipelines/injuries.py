"""Injury sync pipeline: rosters -> mapped skill players -> bucketed snapshots."""

from __future__ import annotations

from contextlib import nullcontext
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..classification import classify_all
from ..config import ACTIVE_INJURIES_FILE, LONG_TERM_INJURIES_FILE, GamedaySyncSettings
from ..contracts import InjurySnapshot, NormalizedInjuryRecord
from ..data.fetch import HttpJsonClient, fetch_team_roster
from ..data.reference import load_player_mapping
from ..data.teams import NFL_TEAMS, NflTeam
from ..data.transformers.injury import (
    InjuryRecordNormalizer,
    RosterTransformer,
    UnmappedCallback,
    normalize_team_roster,
)
from ..errors import FatalLoadError, FetchError
from ..snapshots import build_injury_snapshot, format_timestamp
from ..week import resolve_current_week
from .base import PipelineResult, Writer
from .writers import NullWriter
from src.shared.batch import DelayStrategy, FetchProgress, FixedDelay, RateLimiter, iter_rate_limited
from src.shared.utils.logging import get_logger

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InjurySyncPipeline:
    """Coordinates roster fetch, normalization, classification and emission."""

    name = "injuries"

    def __init__(
        self,
        settings: GamedaySyncSettings,
        *,
        client: Optional[HttpJsonClient] = None,
        writer: Optional[Writer] = None,
        delay: Optional[DelayStrategy] = None,
        teams: Sequence[NflTeam] = NFL_TEAMS,
        clock: Clock = utc_now,
        on_unmapped: Optional[UnmappedCallback] = None,
    ) -> None:
        self.settings = settings
        self._client = client
        self._writer = writer
        self._delay = delay if delay is not None else FixedDelay(settings.roster_delay_seconds)
        self.teams = tuple(teams)
        self._clock = clock
        self._on_unmapped = on_unmapped
        self._logger = get_logger(f"InjurySyncPipeline[{self.name}]")

    def prepare(self) -> InjurySnapshot:
        """Fetch every roster and build the snapshot without writing.

        Raises:
            FatalLoadError: If the identifier mapping cannot be loaded.
        """
        mapping = load_player_mapping(self.settings.mapping_path)
        normalizer = InjuryRecordNormalizer(mapping, on_unmapped=self._on_unmapped)

        client_context = (
            nullcontext(self._client)
            if self._client is not None
            else HttpJsonClient(timeout=self.settings.http_timeout_seconds)
        )
        with client_context as client:
            records = self._collect_records(client, normalizer)
            now = self._clock()
            week = resolve_current_week(client, self.settings, now)

        snapshot = build_injury_snapshot(
            classify_all(records),
            week=week,
            timestamp=format_timestamp(now),
        )
        self._log_summary(snapshot, normalizer.unmapped_count)
        return snapshot

    def _collect_records(
        self,
        client: HttpJsonClient,
        normalizer: InjuryRecordNormalizer,
    ) -> List[NormalizedInjuryRecord]:
        limiter = RateLimiter(self._delay, name="roster")
        progress = FetchProgress(total=len(self.teams), stage="rosters", log=self._logger)
        transformer = RosterTransformer()
        records: List[NormalizedInjuryRecord] = []

        for team in iter_rate_limited(self.teams, limiter):
            try:
                payload = fetch_team_roster(client, self.settings.roster_url, team)
            except FetchError as exc:
                progress.failed(team.code, exc.message)
                continue
            try:
                team_records = normalize_team_roster(payload, team.code, normalizer, transformer)
            except (AttributeError, KeyError, TypeError, ValueError) as exc:
                progress.failed(team.code, f"malformed roster payload: {exc}")
                continue
            progress.fetched(team.code, f"{len(team_records)} mapped skill position players")
            records.extend(team_records)

        progress.log_summary()
        self._logger.info(
            "Successfully fetched from %d/%d teams", progress.fetched_count, len(self.teams)
        )
        return records

    def _log_summary(self, snapshot: InjurySnapshot, unmapped: int) -> None:
        self._logger.info(
            "Injury summary (week %s): %d players, %d unmapped\n"
            "  Active: questionable=%d doubtful=%d out=%d\n"
            "  Long-term: ir=%d suspended=%d",
            snapshot.week,
            snapshot.total_players,
            unmapped,
            len(snapshot.questionable),
            len(snapshot.doubtful),
            len(snapshot.out),
            len(snapshot.ir),
            len(snapshot.suspended),
        )

    @staticmethod
    def documents(snapshot: InjurySnapshot) -> Dict[str, Dict[str, Any]]:
        return {
            ACTIVE_INJURIES_FILE: snapshot.active_view(),
            LONG_TERM_INJURIES_FILE: snapshot.long_term_view(),
        }

    def run(self, *, dry_run: bool = False) -> PipelineResult:
        """Execute the full pipeline and return a structured result."""
        try:
            snapshot = self.prepare()
        except FatalLoadError as exc:
            self._logger.error("Pipeline '%s' aborted: %s", self.name, exc)
            return PipelineResult(False, 0, error=str(exc))

        processed = snapshot.total_players
        documents = self.documents(snapshot)
        if dry_run:
            message = f"Dry run: {processed} players classified, {len(documents)} snapshots ready"
            self._logger.info(message)
            return PipelineResult(True, processed, messages=[message])

        writer = self._writer or NullWriter()
        try:
            result = writer.write(documents)
        except OSError as exc:
            self._logger.exception("Failed to write injury snapshots")
            return PipelineResult(False, processed, error=str(exc))
        result.processed = processed
        return result
