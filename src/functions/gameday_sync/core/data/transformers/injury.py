"""Transform ESPN roster payloads into normalized injury records."""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

import pandas as pd  # type: ignore

from ...contracts import (
    SKILL_POSITIONS,
    IdentifierMapping,
    NormalizedInjuryRecord,
    RosterEntry,
)
from ...errors import MappingMissError
from ..transform import BaseDataTransformer, is_missing
from src.shared.utils.logging import get_logger

logger = get_logger(__name__)

ROSTER_COLUMNS = ["external_id", "name", "position", "team", "status_text", "injury"]
DEFAULT_STATUS = "Active"

UnmappedCallback = Callable[[MappingMissError, RosterEntry], None]


def flatten_roster(payload: Mapping[str, Any], team_code: str) -> pd.DataFrame:
    """Flatten ``athletes[].items[]`` from one roster payload into rows.

    Every athlete is kept here; position filtering happens in the transformer.
    """
    rows: List[Dict[str, Any]] = []
    for group in payload.get("athletes") or []:
        if not isinstance(group, dict):
            continue
        for athlete in group.get("items") or []:
            if not isinstance(athlete, dict):
                continue
            position = athlete.get("position")
            status = athlete.get("status")
            injuries = athlete.get("injuries")
            rows.append(
                {
                    "external_id": athlete.get("id"),
                    "name": athlete.get("displayName"),
                    "position": position.get("abbreviation") if isinstance(position, dict) else None,
                    "team": team_code,
                    "status_text": status.get("type") if isinstance(status, dict) else None,
                    "injury": injuries[0] if isinstance(injuries, list) and injuries else None,
                }
            )
    return pd.DataFrame(rows, columns=ROSTER_COLUMNS, dtype=object)


class RosterTransformer(BaseDataTransformer):
    """Keep skill position athletes and shape them as :class:`RosterEntry`."""

    required_fields = ["external_id", "position", "team"]

    def __init__(self, positions: Iterable[str] = SKILL_POSITIONS) -> None:
        self.positions = frozenset(positions)

    def sanitize_record(self, record: Dict[str, Any]) -> Dict[str, Any]:
        external_id = record.get("external_id")
        position = record.get("position")
        status_text = record.get("status_text")
        injury = record.get("injury")
        name = record.get("name")
        return {
            "external_id": None if is_missing(external_id) else str(external_id),
            "name": None if is_missing(name) else name,
            "position": None if is_missing(position) else str(position).strip(),
            "team": record.get("team"),
            "status_text": status_text if isinstance(status_text, str) and status_text else DEFAULT_STATUS,
            "injury": injury if isinstance(injury, dict) else None,
        }

    def validate_record(self, record: Dict[str, Any]) -> bool:
        if not super().validate_record(record):
            return False
        return record["position"] in self.positions

    def build_record(self, record: Dict[str, Any]) -> RosterEntry:
        return RosterEntry(**record)


class InjuryRecordNormalizer:
    """Join roster entries against the identifier mapping.

    Entries whose external id is not mapped are dropped. Each drop is logged
    and, when ``on_unmapped`` is given, reported to it with the error.
    """

    def __init__(
        self,
        mapping: IdentifierMapping,
        *,
        on_unmapped: Optional[UnmappedCallback] = None,
    ) -> None:
        self.mapping = mapping
        self.on_unmapped = on_unmapped
        self.unmapped_count = 0

    def normalize(self, entries: Iterable[RosterEntry]) -> List[NormalizedInjuryRecord]:
        records: List[NormalizedInjuryRecord] = []
        for entry in entries:
            mapped = self.mapping.resolve(entry.external_id)
            if mapped is None:
                self._report_miss(entry)
                continue
            records.append(
                NormalizedInjuryRecord(
                    internal_id=mapped.internal_id,
                    external_id=entry.external_id,
                    name=entry.name,
                    position=entry.position,
                    team=entry.team,
                    status_text=entry.status_text,
                    designation=entry.designation,
                    description=entry.description,
                )
            )
        return records

    def _report_miss(self, entry: RosterEntry) -> None:
        self.unmapped_count += 1
        error = MappingMissError(entry.external_id, name=entry.name, team=entry.team)
        logger.info(str(error))
        if self.on_unmapped is not None:
            self.on_unmapped(error, entry)


def normalize_team_roster(
    payload: Mapping[str, Any],
    team_code: str,
    normalizer: InjuryRecordNormalizer,
    transformer: Optional[RosterTransformer] = None,
) -> List[NormalizedInjuryRecord]:
    """Run one roster payload through flatten, filter and mapping."""
    transformer = transformer or RosterTransformer()
    entries = transformer.transform(flatten_roster(payload, team_code))
    logger.debug("Found %d skill position players for %s", len(entries), team_code)
    return normalizer.normalize(entries)
