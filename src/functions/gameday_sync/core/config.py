"""Runtime settings for the gameday sync pipelines.

Values come from environment variables (optionally loaded from a ``.env``
file) with production defaults, so a bare checkout runs against the public
upstream APIs and the reference files under ``data/`` and ``mappings/``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import pandas as pd  # type: ignore

from src.shared.utils import (
    ConfigurationError,
    get_env_or_default,
    load_env,
    validate_float_env,
    validate_int_env,
)

ESPN_ROSTER_URL = "https://site.web.api.espn.com/apis/site/v2/sports/football/nfl/teams/{team_id}/roster"
SLEEPER_STATE_URL = "https://api.sleeper.app/v1/state/nfl"
WEATHER_GOV_POINTS_URL = "https://api.weather.gov/points/{latitude},{longitude}"
WEATHER_GOV_FORECAST_URL = "https://api.weather.gov/gridpoints/{grid_id}/{grid_x},{grid_y}/forecast"

DEFAULT_USER_AGENT = "gameday-sync (weather snapshot job; contact via repository issues)"
DEFAULT_SEASON_START = "2025-09-03T00:00:00Z"
REGULAR_SEASON_WEEKS = 18

ACTIVE_INJURIES_FILE = "injuries-active.json"
LONG_TERM_INJURIES_FILE = "injuries-longterm.json"
WEATHER_FILE = "weather-current.json"


@dataclass(frozen=True)
class GamedaySyncSettings:
    """Configuration shared by the injury and weather pipelines."""

    data_dir: Path = Path("data")
    mapping_path: Path = Path("mappings") / "player-mapping.json"
    output_dir: Path = Path("data")
    season_start: datetime = datetime(2025, 9, 3, tzinfo=timezone.utc)
    max_week: int = REGULAR_SEASON_WEEKS
    roster_delay_seconds: float = 1.0
    forecast_delay_seconds: float = 1.5
    http_timeout_seconds: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    roster_url: str = ESPN_ROSTER_URL
    nfl_state_url: str = SLEEPER_STATE_URL
    points_url: str = WEATHER_GOV_POINTS_URL
    forecast_url: str = WEATHER_GOV_FORECAST_URL

    @property
    def stadiums_path(self) -> Path:
        return self.data_dir / "stadiums.json"

    @property
    def schedule_path(self) -> Path:
        return self.data_dir / "schedule.json"

    def with_output_dir(self, output_dir: Optional[Path]) -> "GamedaySyncSettings":
        if output_dir is None:
            return self
        return replace(self, output_dir=Path(output_dir))

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "GamedaySyncSettings":
        """Build settings from the environment.

        Raises:
            ConfigurationError: If a variable is set to an invalid value.
        """
        load_env(env_file)

        data_dir = Path(get_env_or_default("GAMEDAY_DATA_DIR", "data"))
        return cls(
            data_dir=data_dir,
            mapping_path=Path(
                get_env_or_default("GAMEDAY_MAPPING_PATH", str(Path("mappings") / "player-mapping.json"))
            ),
            output_dir=Path(get_env_or_default("GAMEDAY_OUTPUT_DIR", str(data_dir))),
            season_start=parse_season_start(
                get_env_or_default("GAMEDAY_SEASON_START", DEFAULT_SEASON_START)
            ),
            max_week=validate_int_env("GAMEDAY_MAX_WEEK", default=REGULAR_SEASON_WEEKS, min_value=1),
            roster_delay_seconds=validate_float_env(
                "GAMEDAY_ROSTER_DELAY_SECONDS", default=1.0, min_value=0.0
            ),
            forecast_delay_seconds=validate_float_env(
                "GAMEDAY_FORECAST_DELAY_SECONDS", default=1.5, min_value=0.0
            ),
            http_timeout_seconds=validate_float_env(
                "GAMEDAY_HTTP_TIMEOUT_SECONDS", default=30.0, min_value=1.0
            ),
            user_agent=get_env_or_default("GAMEDAY_USER_AGENT", DEFAULT_USER_AGENT),
        )


def parse_season_start(value: str) -> datetime:
    try:
        timestamp = pd.Timestamp(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(
            f"Invalid GAMEDAY_SEASON_START value: '{value}'\n"
            f"Expected an ISO-8601 timestamp such as {DEFAULT_SEASON_START}."
        ) from exc
    if timestamp is pd.NaT:
        raise ConfigurationError("GAMEDAY_SEASON_START must not be empty")
    if timestamp.tzinfo is None:
        timestamp = timestamp.tz_localize("UTC")
    return timestamp.tz_convert("UTC").to_pydatetime()
