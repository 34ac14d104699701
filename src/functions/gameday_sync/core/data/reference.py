"""Loaders for the static reference tables used by both pipelines.

Every loader either returns a fully built, immutable table or raises
:class:`FatalLoadError`; a run cannot continue without its reference data.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from ..contracts import (
    IdentifierMapping,
    PlayerMappingEntry,
    Schedule,
    ScheduledGame,
    Stadium,
    StadiumDirectory,
)
from ..errors import FatalLoadError
from src.shared.utils.logging import get_logger

logger = get_logger(__name__)


def _read_json(path: Path, source: str) -> Dict[str, Any]:
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise FatalLoadError(source, f"file not found: {path}") from exc
    except OSError as exc:
        raise FatalLoadError(source, f"unable to read {path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise FatalLoadError(source, f"invalid JSON in {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise FatalLoadError(source, f"expected a JSON object in {path}")
    return payload


def _require_list(payload: Dict[str, Any], key: str, source: str) -> List[Any]:
    items = payload.get(key)
    if not isinstance(items, list):
        raise FatalLoadError(source, f"missing '{key}' list")
    return items


def load_player_mapping(path: Path) -> IdentifierMapping:
    """Load ``{mapping: [{source_id, player_id, ...}]}`` keyed by ``source_id``."""
    source = "player mapping"
    rows = _require_list(_read_json(path, source), "mapping", source)

    entries: Dict[str, PlayerMappingEntry] = {}
    for row in rows:
        if not isinstance(row, dict):
            raise FatalLoadError(source, f"mapping entries must be objects, got {type(row).__name__}")
        source_id = row.get("source_id")
        player_id = row.get("player_id")
        if source_id in (None, "") or player_id in (None, ""):
            logger.warning("Skipping mapping entry without source_id/player_id: %s", row)
            continue
        external_id = str(source_id)
        if external_id in entries:
            logger.warning(
                "Duplicate mapping for source_id %s; keeping player_id %s",
                external_id,
                player_id,
            )
        entries[external_id] = PlayerMappingEntry(
            external_id=external_id,
            internal_id=str(player_id),
            display_name=row.get("player_name") or row.get("name"),
        )

    mapping = IdentifierMapping.from_entries(entries.values())
    logger.info("Loaded mapping for %d players", len(mapping))
    return mapping


def load_stadiums(path: Path) -> StadiumDirectory:
    """Load ``{stadiums: [...]}`` keyed by ``team_code``."""
    source = "stadium table"
    rows = _require_list(_read_json(path, source), "stadiums", source)

    stadiums: List[Stadium] = []
    for row in rows:
        try:
            stadiums.append(
                Stadium(
                    team_code=str(row["team_code"]),
                    name=str(row["name"]),
                    city=str(row.get("city") or ""),
                    latitude=float(row["latitude"]),
                    longitude=float(row["longitude"]),
                    is_dome=bool(row.get("is_dome", False)),
                    is_international=bool(row.get("is_international", False)),
                )
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise FatalLoadError(source, f"malformed stadium entry {row!r}: {exc}") from exc

    directory = StadiumDirectory.from_stadiums(stadiums)
    logger.info("Loaded %d stadiums", len(directory))
    return directory


def load_schedule(path: Path) -> Schedule:
    """Load ``{games: [{espn_event_id, week, date, home: {team}, away: {team}}]}``."""
    source = "schedule"
    rows = _require_list(_read_json(path, source), "games", source)

    games: List[ScheduledGame] = []
    for row in rows:
        try:
            games.append(
                ScheduledGame(
                    event_id=str(row["espn_event_id"]),
                    week=int(row["week"]),
                    date=str(row["date"]),
                    home_team=str(row["home"]["team"]),
                    away_team=str(row["away"]["team"]),
                )
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise FatalLoadError(source, f"malformed game entry {row!r}: {exc}") from exc

    schedule = Schedule(tuple(games))
    logger.info("Loaded %d games", len(schedule))
    return schedule
