"""
Match scheduled games to weather.gov forecasts.

Per game, in schedule order:

1. Resolve the home team's stadium; games without one are skipped.
2. Domes are emitted with ``weather: null`` and cost no network calls.
3. International venues are skipped and produce no entry.
4. Outdoor domestic venues go through the two-stage lookup
   (``points`` then ``gridpoints/.../forecast``) and the kickoff is matched
   against the returned periods.

Any failure during a lookup affects only that game, which is left out of the
snapshot. Consecutive outdoor lookups are spaced by the rate limiter.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from ..config import GamedaySyncSettings
from ..contracts import GameWeather, ScheduledGame, Stadium, StadiumDirectory, WeatherEntry
from ..data.fetch import HttpJsonClient, fetch_forecast_periods, fetch_grid_point
from ..errors import FetchError, ResolutionGapError
from .forecast import format_forecast, parse_timestamp, select_forecast_period
from src.shared.batch import FetchProgress, RateLimiter
from src.shared.utils.logging import get_logger

logger = get_logger(__name__)


class WeatherMatcher:
    """Resolve venues and forecasts for one week of games."""

    def __init__(
        self,
        client: HttpJsonClient,
        stadiums: StadiumDirectory,
        settings: GamedaySyncSettings,
        *,
        limiter: Optional[RateLimiter] = None,
    ) -> None:
        self.client = client
        self.stadiums = stadiums
        self.settings = settings
        self.limiter = limiter or RateLimiter(name="weather.gov")
        self.headers: Dict[str, str] = {
            "User-Agent": settings.user_agent,
            "Accept": "application/json",
        }
        self.progress: Optional[FetchProgress] = None

    def match_games(self, games: Iterable[ScheduledGame]) -> List[WeatherEntry]:
        """Return weather entries for ``games`` in input order."""
        games = list(games)
        self.progress = FetchProgress(total=len(games), stage="weather", log=logger)
        entries: List[WeatherEntry] = []
        for game in games:
            entry = self.match_game(game)
            if entry is not None:
                entries.append(entry)
        self.progress.log_summary()
        return entries

    def match_game(self, game: ScheduledGame) -> Optional[WeatherEntry]:
        progress = self.progress or FetchProgress(total=1, stage="weather", log=logger)
        label = f"{game.away_team} @ {game.home_team}"

        stadium = self.stadiums.for_team(game.home_team)
        if stadium is None:
            gap = ResolutionGapError(game.event_id, f"no stadium found for team {game.home_team}")
            logger.warning(str(gap))
            progress.skipped(label, "no stadium")
            return None

        if stadium.is_dome:
            progress.skipped(label, f"{stadium.name} is a dome")
            return _entry(game, stadium)

        if stadium.is_international:
            progress.skipped(label, f"{stadium.name} is an international venue")
            return None

        self.limiter.space()
        try:
            entry = self._lookup(game, stadium)
        except (FetchError, ResolutionGapError) as exc:
            logger.error("Weather lookup failed for game %s: %s", game.event_id, exc)
            progress.failed(label, str(exc))
            return None

        weather = entry.weather
        progress.fetched(label, f"{weather.temp}F, {weather.conditions}")
        return entry

    def _lookup(self, game: ScheduledGame, stadium: Stadium) -> WeatherEntry:
        kickoff = parse_timestamp(game.date)
        if kickoff is None:
            raise ResolutionGapError(game.event_id, f"unparseable kickoff {game.date!r}")

        logger.debug("Fetching weather for %s (%s)", stadium.name, stadium.city)
        grid_point = fetch_grid_point(
            self.client,
            self.settings.points_url,
            stadium,
            key=game.event_id,
            headers=self.headers,
        )
        periods = fetch_forecast_periods(
            self.client,
            self.settings.forecast_url,
            grid_point,
            key=game.event_id,
            headers=self.headers,
        )

        period = select_forecast_period(periods, kickoff)
        if period is None:
            raise ResolutionGapError(game.event_id, "no forecast period found")
        return _entry(game, stadium, format_forecast(period))


def _entry(
    game: ScheduledGame,
    stadium: Stadium,
    weather: Optional[GameWeather] = None,
) -> WeatherEntry:
    return WeatherEntry(
        game_id=game.event_id,
        home_team=game.home_team,
        away_team=game.away_team,
        stadium_name=stadium.name,
        is_dome=stadium.is_dome,
        weather=weather,
    )
