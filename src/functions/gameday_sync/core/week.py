"""Current NFL week resolution.

The injury pipeline asks the Sleeper state endpoint first and falls back to
the calendar calculation. The weather pipeline only uses the calculation.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from .config import GamedaySyncSettings, REGULAR_SEASON_WEEKS
from .data.fetch import HttpJsonClient, fetch_nfl_state
from .errors import FetchError
from src.shared.utils.logging import get_logger

logger = get_logger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def calculate_week(
    now: datetime,
    season_start: datetime,
    max_week: int = REGULAR_SEASON_WEEKS,
) -> int:
    """Return ``min(floor(days_since_start / 7) + 1, max_week)``.

    Whole days are floored before dividing by seven. There is no lower clamp,
    so dates before the season start produce week 0 or below.
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    if season_start.tzinfo is None:
        season_start = season_start.replace(tzinfo=timezone.utc)
    days_since_start = int((now - season_start).total_seconds() // SECONDS_PER_DAY)
    return min(days_since_start // 7 + 1, max_week)


def resolve_current_week(
    client: HttpJsonClient,
    settings: GamedaySyncSettings,
    now: Optional[datetime] = None,
) -> int:
    """Return the week reported by the state source, or the calculated week."""
    now = now or datetime.now(timezone.utc)
    logger.info("Fetching current NFL week from %s", settings.nfl_state_url)
    try:
        state = fetch_nfl_state(client, settings.nfl_state_url)
    except FetchError as exc:
        logger.warning("Error fetching NFL week: %s", exc)
        week = calculate_week(now, settings.season_start, settings.max_week)
        logger.info("Falling back to calculated week %d", week)
        return week

    logger.info("NFL Season: %s, Week: %s, Type: %s", state.season, state.week, state.season_type)
    return state.week
