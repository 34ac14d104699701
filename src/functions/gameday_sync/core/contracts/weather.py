"""Forecast periods and the weather snapshot built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple


@dataclass(frozen=True)
class ForecastPeriod:
    start_time: str
    end_time: str
    temperature: Any = None
    wind_speed: Optional[str] = None
    wind_direction: Optional[str] = None
    short_forecast: Optional[str] = None
    precipitation_probability: Optional[float] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ForecastPeriod":
        precipitation = payload.get("probabilityOfPrecipitation") or {}
        if not isinstance(precipitation, dict):
            raise ValueError(f"malformed probabilityOfPrecipitation: {precipitation!r}")
        return cls(
            start_time=payload.get("startTime"),
            end_time=payload.get("endTime"),
            temperature=payload.get("temperature"),
            wind_speed=payload.get("windSpeed"),
            wind_direction=payload.get("windDirection"),
            short_forecast=payload.get("shortForecast"),
            precipitation_probability=precipitation.get("value"),
        )


@dataclass(frozen=True)
class GameWeather:
    temp: Optional[int]
    wind: str
    conditions: Optional[str]
    precipitation: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "temp": self.temp,
            "wind": self.wind,
            "conditions": self.conditions,
            "precipitation": self.precipitation,
        }


@dataclass(frozen=True)
class WeatherEntry:
    game_id: str
    home_team: str
    away_team: str
    stadium_name: str
    is_dome: bool
    weather: Optional[GameWeather] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_id": self.game_id,
            "home_team": self.home_team,
            "away_team": self.away_team,
            "stadium": self.stadium_name,
            "is_dome": self.is_dome,
            "weather": self.weather.to_dict() if self.weather else None,
        }


@dataclass(frozen=True)
class WeatherSnapshot:
    week: int
    timestamp: str
    games: Tuple[WeatherEntry, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "week": self.week,
            "lastUpdated": self.timestamp,
            "games": [entry.to_dict() for entry in self.games],
        }
