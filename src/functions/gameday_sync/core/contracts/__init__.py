"""Contract exports."""

from .injury import (
    ACTIVE_BUCKETS,
    LONG_TERM_BUCKETS,
    SKILL_POSITIONS,
    Classification,
    InjuryBucket,
    InjurySnapshot,
    NormalizedInjuryRecord,
    RosterEntry,
)
from .reference import (
    IdentifierMapping,
    PlayerMappingEntry,
    Schedule,
    ScheduledGame,
    Stadium,
    StadiumDirectory,
)
from .weather import ForecastPeriod, GameWeather, WeatherEntry, WeatherSnapshot

__all__ = [
    "ACTIVE_BUCKETS",
    "LONG_TERM_BUCKETS",
    "SKILL_POSITIONS",
    "Classification",
    "ForecastPeriod",
    "GameWeather",
    "IdentifierMapping",
    "InjuryBucket",
    "InjurySnapshot",
    "NormalizedInjuryRecord",
    "PlayerMappingEntry",
    "RosterEntry",
    "Schedule",
    "ScheduledGame",
    "Stadium",
    "StadiumDirectory",
    "WeatherEntry",
    "WeatherSnapshot",
]
