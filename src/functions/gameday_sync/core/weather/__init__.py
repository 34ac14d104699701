"""Forecast matching for scheduled games."""

from .forecast import format_forecast, parse_timestamp, select_forecast_period
from .matcher import WeatherMatcher

__all__ = [
    "WeatherMatcher",
    "format_forecast",
    "parse_timestamp",
    "select_forecast_period",
]
