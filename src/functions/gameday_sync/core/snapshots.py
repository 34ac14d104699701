"""Assemble the emitted snapshots from classified records and weather entries.

Everything here is pure: counts are derived from list lengths and the only
input that varies between identical runs is the timestamp.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from .contracts import (
    ACTIVE_BUCKETS,
    LONG_TERM_BUCKETS,
    Classification,
    InjuryBucket,
    InjurySnapshot,
    NormalizedInjuryRecord,
    WeatherEntry,
    WeatherSnapshot,
)


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def build_injury_snapshot(
    classifications: Iterable[Classification],
    *,
    week: Optional[int],
    timestamp: str,
) -> InjurySnapshot:
    classifications = list(classifications)
    buckets: Dict[InjuryBucket, List[NormalizedInjuryRecord]] = {
        bucket: [] for bucket in ACTIVE_BUCKETS + LONG_TERM_BUCKETS
    }
    for classification in classifications:
        if classification.bucket in buckets:
            buckets[classification.bucket].append(classification.record)

    return InjurySnapshot(
        timestamp=timestamp,
        week=week,
        total_players=len(classifications),
        questionable=tuple(buckets[InjuryBucket.QUESTIONABLE]),
        doubtful=tuple(buckets[InjuryBucket.DOUBTFUL]),
        out=tuple(buckets[InjuryBucket.OUT]),
        ir=tuple(buckets[InjuryBucket.IR]),
        suspended=tuple(buckets[InjuryBucket.SUSPENDED]),
    )


def build_weather_snapshot(
    entries: Iterable[WeatherEntry],
    *,
    week: int,
    timestamp: str,
) -> WeatherSnapshot:
    return WeatherSnapshot(week=week, timestamp=timestamp, games=tuple(entries))
