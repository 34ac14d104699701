"""
Forecast period selection and formatting.

Given the ordered ``properties.periods`` of a gridpoint forecast and a game
kickoff, pick the period covering the kickoff (bounds inclusive). When no
period covers it, fall back to the period whose nearest edge is closest to
the kickoff; the first such period wins ties.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

import pandas as pd  # type: ignore

from ..contracts import ForecastPeriod, GameWeather
from src.shared.utils.logging import get_logger

logger = get_logger(__name__)


def parse_timestamp(value: Any) -> Optional[pd.Timestamp]:
    """Parse an ISO timestamp to a UTC ``pd.Timestamp``; ``None`` if unparseable."""
    if value is None or value == "":
        return None
    timestamp = pd.to_datetime(value, utc=True, errors="coerce")
    if pd.isna(timestamp):
        return None
    return timestamp


def select_forecast_period(
    periods: Sequence[ForecastPeriod],
    kickoff: pd.Timestamp,
) -> Optional[ForecastPeriod]:
    closest: Optional[ForecastPeriod] = None
    closest_gap: Optional[pd.Timedelta] = None

    for period in periods:
        start = parse_timestamp(period.start_time)
        end = parse_timestamp(period.end_time)
        if start is None or end is None:
            logger.debug("Ignoring forecast period with unparseable bounds: %s", period)
            continue

        if start <= kickoff <= end:
            return period

        gap = min(abs(kickoff - start), abs(kickoff - end))
        if closest_gap is None or gap < closest_gap:
            closest_gap = gap
            closest = period

    return closest


def _coalesce_precip(value: Any) -> float:
    """Coalesce precipitation probability to 0 if absent or null."""
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if pd.isna(number) else number


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def _coerce_temperature(value: Any) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(round(float(value)))
    except (TypeError, ValueError):
        return None


def format_forecast(period: ForecastPeriod) -> GameWeather:
    """Shape one period as ``{temp, wind, conditions, precipitation}``."""
    wind = " ".join(
        str(part) for part in (period.wind_speed, period.wind_direction) if part not in (None, "")
    )
    precipitation = _coalesce_precip(period.precipitation_probability)
    return GameWeather(
        temp=_coerce_temperature(period.temperature),
        wind=wind,
        conditions=period.short_forecast,
        precipitation=f"{_format_number(precipitation)}%",
    )
