"""Injury records and the snapshot they are aggregated into."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

SKILL_POSITIONS: Tuple[str, ...] = ("QB", "RB", "WR", "TE")


class InjuryBucket(str, Enum):
    QUESTIONABLE = "questionable"
    DOUBTFUL = "doubtful"
    OUT = "out"
    IR = "ir"
    SUSPENDED = "suspended"
    UNCLASSIFIED = "unclassified"


ACTIVE_BUCKETS: Tuple[InjuryBucket, ...] = (
    InjuryBucket.QUESTIONABLE,
    InjuryBucket.DOUBTFUL,
    InjuryBucket.OUT,
)
LONG_TERM_BUCKETS: Tuple[InjuryBucket, ...] = (
    InjuryBucket.IR,
    InjuryBucket.SUSPENDED,
)


@dataclass(frozen=True)
class RosterEntry:
    """A skill position athlete as read from one team roster payload."""

    external_id: str
    name: Optional[str]
    position: str
    team: str
    status_text: str = "Active"
    injury: Optional[Mapping[str, Any]] = None

    @property
    def designation(self) -> Optional[str]:
        if not self.injury:
            return None
        status = self.injury.get("status")
        return status if isinstance(status, str) and status else None

    @property
    def description(self) -> Any:
        if not self.injury:
            return None
        return self.injury.get("details") or None


@dataclass(frozen=True)
class NormalizedInjuryRecord:
    internal_id: str
    external_id: str
    name: Optional[str]
    position: str
    team: str
    status_text: str
    designation: Optional[str] = None
    description: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_id": self.internal_id,
            "source_id": self.external_id,
            "player_name": self.name,
            "position": self.position,
            "team_abbr": self.team,
            "injury_status": self.status_text,
            "injury_designation": self.designation,
            "injury_description": self.description,
        }


@dataclass(frozen=True)
class Classification:
    bucket: InjuryBucket
    record: NormalizedInjuryRecord


@dataclass(frozen=True)
class InjurySnapshot:
    """All five buckets for one run plus the shared player total.

    ``total_players`` counts every normalized record considered, including the
    unclassified ones that appear in neither view.
    """

    timestamp: str
    week: Optional[int]
    total_players: int
    questionable: Tuple[NormalizedInjuryRecord, ...] = ()
    doubtful: Tuple[NormalizedInjuryRecord, ...] = ()
    out: Tuple[NormalizedInjuryRecord, ...] = ()
    ir: Tuple[NormalizedInjuryRecord, ...] = ()
    suspended: Tuple[NormalizedInjuryRecord, ...] = ()

    def bucket(self, bucket: InjuryBucket) -> Tuple[NormalizedInjuryRecord, ...]:
        if bucket is InjuryBucket.UNCLASSIFIED:
            return ()
        return getattr(self, bucket.value)

    def _summary(self, buckets: Tuple[InjuryBucket, ...]) -> Dict[str, int]:
        summary = {"total_players": self.total_players}
        for bucket in buckets:
            summary[bucket.value] = len(self.bucket(bucket))
        return summary

    def _view(self, buckets: Tuple[InjuryBucket, ...]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "lastUpdated": self.timestamp,
            "week": self.week,
            "summary": self._summary(buckets),
        }
        for bucket in buckets:
            payload[bucket.value] = [record.to_dict() for record in self.bucket(bucket)]
        return payload

    def active_view(self) -> Dict[str, Any]:
        """Questionable, doubtful and out players."""
        return self._view(ACTIVE_BUCKETS)

    def long_term_view(self) -> Dict[str, Any]:
        """Injured reserve and suspended players."""
        return self._view(LONG_TERM_BUCKETS)
