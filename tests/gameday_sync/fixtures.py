"""
Sample upstream payloads and fakes for gameday sync tests.

Nothing here touches the network: ``FakeJsonClient`` serves canned
responses keyed by URL and records every request it receives.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.functions.gameday_sync.core.config import GamedaySyncSettings
from src.functions.gameday_sync.core.errors import FetchError
from src.functions.gameday_sync.core.pipelines.base import PipelineResult

ROSTER_URL = "https://roster.test/teams/{team_id}/roster"
STATE_URL = "https://state.test/nfl"
POINTS_URL = "https://wx.test/points/{latitude},{longitude}"
FORECAST_URL = "https://wx.test/gridpoints/{grid_id}/{grid_x},{grid_y}/forecast"


class FakeJsonClient:
    """Stands in for ``HttpJsonClient``; unknown URLs fail like an HTTP 404."""

    def __init__(self, responses: Optional[Dict[str, Any]] = None):
        self.responses = dict(responses or {})
        self.calls: List[Dict[str, Any]] = []

    def get_json(self, url, *, key, headers=None):
        self.calls.append({"url": url, "key": key, "headers": dict(headers or {})})
        if url not in self.responses:
            raise FetchError(key, "HTTP 404", url=url, status_code=404)
        response = self.responses[url]
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def urls(self) -> List[str]:
        return [call["url"] for call in self.calls]


class RecordingWriter:
    def __init__(self):
        self.documents: List[Dict[str, Any]] = []

    def write(self, documents):
        self.documents.append(dict(documents))
        return PipelineResult(True, len(documents), written=len(documents))


def make_settings(root: Path) -> GamedaySyncSettings:
    return GamedaySyncSettings(
        data_dir=root / "data",
        mapping_path=root / "mappings" / "player-mapping.json",
        output_dir=root / "out",
        roster_delay_seconds=0.0,
        forecast_delay_seconds=0.0,
        roster_url=ROSTER_URL,
        nfl_state_url=STATE_URL,
        points_url=POINTS_URL,
        forecast_url=FORECAST_URL,
    )


def write_json(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def athlete(
    athlete_id: Any,
    name: str,
    position: str,
    status: Optional[str] = "Active",
    injury_status: Optional[str] = None,
    injury_details: Any = None,
) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": athlete_id,
        "displayName": name,
        "position": {"abbreviation": position},
    }
    if status is not None:
        payload["status"] = {"type": status}
    if injury_status is not None:
        payload["injuries"] = [{"status": injury_status, "details": injury_details}]
    return payload


def roster_payload(*groups: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {"athletes": [{"position": "group", "items": list(items)} for items in groups]}


def stadium_row(
    team_code: str,
    name: str,
    *,
    latitude: float = 40.0,
    longitude: float = -75.0,
    is_dome: bool = False,
    is_international: bool = False,
) -> Dict[str, Any]:
    return {
        "team_code": team_code,
        "name": name,
        "city": "Somewhere",
        "latitude": latitude,
        "longitude": longitude,
        "is_dome": is_dome,
        "is_international": is_international,
    }


def game_row(event_id: str, week: int, date: str, home: str, away: str) -> Dict[str, Any]:
    return {
        "espn_event_id": event_id,
        "week": week,
        "date": date,
        "home": {"team": home},
        "away": {"team": away},
    }


def forecast_period(
    start: str,
    end: str,
    *,
    temperature: Any = 55,
    wind_speed: str = "10 mph",
    wind_direction: str = "NW",
    short_forecast: str = "Sunny",
    precipitation: Any = None,
) -> Dict[str, Any]:
    return {
        "startTime": start,
        "endTime": end,
        "temperature": temperature,
        "windSpeed": wind_speed,
        "windDirection": wind_direction,
        "shortForecast": short_forecast,
        "probabilityOfPrecipitation": {"unitCode": "wmoUnit:percent", "value": precipitation},
    }
