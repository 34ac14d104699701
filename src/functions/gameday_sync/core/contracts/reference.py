"""Read-only reference tables shared by one sync run."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional, Tuple


@dataclass(frozen=True)
class PlayerMappingEntry:
    external_id: str
    internal_id: str
    display_name: Optional[str] = None


@dataclass(frozen=True)
class IdentifierMapping:
    """Lookup of roster-source player ids to internal player ids."""

    entries: Mapping[str, PlayerMappingEntry] = field(default_factory=dict)

    @classmethod
    def from_entries(cls, entries: Iterable[PlayerMappingEntry]) -> "IdentifierMapping":
        return cls(MappingProxyType({entry.external_id: entry for entry in entries}))

    def resolve(self, external_id: str) -> Optional[PlayerMappingEntry]:
        return self.entries.get(external_id)

    def __contains__(self, external_id: object) -> bool:
        return external_id in self.entries

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Stadium:
    team_code: str
    name: str
    city: str
    latitude: float
    longitude: float
    is_dome: bool = False
    is_international: bool = False


@dataclass(frozen=True)
class StadiumDirectory:
    """Home stadiums keyed by team code."""

    stadiums: Mapping[str, Stadium] = field(default_factory=dict)

    @classmethod
    def from_stadiums(cls, stadiums: Iterable[Stadium]) -> "StadiumDirectory":
        return cls(MappingProxyType({stadium.team_code: stadium for stadium in stadiums}))

    def for_team(self, team_code: str) -> Optional[Stadium]:
        return self.stadiums.get(team_code)

    def __len__(self) -> int:
        return len(self.stadiums)


@dataclass(frozen=True)
class ScheduledGame:
    event_id: str
    week: int
    date: str
    home_team: str
    away_team: str


@dataclass(frozen=True)
class Schedule:
    games: Tuple[ScheduledGame, ...] = ()

    def games_for_week(self, week: int) -> Tuple[ScheduledGame, ...]:
        """Return the week's games in schedule order."""
        return tuple(game for game in self.games if game.week == week)

    def __iter__(self) -> Iterator[ScheduledGame]:
        return iter(self.games)

    def __len__(self) -> int:
        return len(self.games)
