"""
Data fetching utilities for the upstream JSON APIs.

All outbound HTTP goes through :class:`HttpJsonClient`, a thin wrapper around
a ``requests.Session`` that turns every failure mode (transport error,
non-2xx status, unparseable body) into a :class:`FetchError` tagged with the
key of the item being fetched. Callers decide whether an error skips the
item or aborts the run; nothing in this module sleeps or retries.

The ``fetch_<dataset>`` helpers below encode the URL shape and the minimal
payload checks for each upstream source:

* ESPN team roster (injury pipeline)
* Sleeper NFL state (week resolution)
* weather.gov points and gridpoint forecast (weather pipeline)

Examples
--------
>>> with HttpJsonClient(timeout=30) as client:
...     payload = fetch_team_roster(client, ESPN_ROSTER_URL, team)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, NamedTuple, Optional

import requests

from ..contracts import ForecastPeriod, Stadium
from ..errors import FetchError
from .teams import NflTeam
from src.shared.utils.logging import get_logger

logger = get_logger(__name__)


class HttpJsonClient:
    """Sequential JSON GET client with per-call error isolation."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        timeout: float = 30.0,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._session = session or requests.Session()
        self._owns_session = session is None
        self.timeout = timeout
        self.headers: Dict[str, str] = dict(headers or {})

    def get_json(self, url: str, *, key: str, headers: Optional[Mapping[str, str]] = None) -> Any:
        """GET ``url`` and return the decoded JSON body.

        Raises:
            FetchError: On transport errors, non-2xx responses or invalid JSON.
        """
        merged = {**self.headers, **(headers or {})}
        logger.debug("GET %s (%s)", url, key)
        try:
            response = self._session.get(url, headers=merged or None, timeout=self.timeout)
        except requests.RequestException as exc:
            raise FetchError(key, str(exc), url=url) from exc

        status = response.status_code
        if not 200 <= status < 300:
            raise FetchError(key, f"HTTP {status}", url=url, status_code=status)

        try:
            return response.json()
        except ValueError as exc:
            raise FetchError(key, f"invalid JSON response: {exc}", url=url, status_code=status) from exc

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "HttpJsonClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class GridPoint(NamedTuple):
    grid_id: str
    grid_x: int
    grid_y: int


@dataclass(frozen=True)
class NflState:
    season: Optional[str]
    week: int
    season_type: Optional[str]


def fetch_team_roster(client: HttpJsonClient, url_template: str, team: NflTeam) -> Dict[str, Any]:
    """Fetch the raw roster payload for one team."""
    url = url_template.format(team_id=team.espn_id)
    payload = client.get_json(url, key=team.code)
    if not isinstance(payload, dict):
        raise FetchError(team.code, "roster payload is not a JSON object", url=url)
    return payload


def fetch_nfl_state(client: HttpJsonClient, url: str) -> NflState:
    """Fetch the current season state (season, week, season type)."""
    payload = client.get_json(url, key="nfl_state")
    if not isinstance(payload, dict):
        raise FetchError("nfl_state", "state payload is not a JSON object", url=url)
    week = payload.get("week")
    if isinstance(week, bool) or not isinstance(week, int):
        raise FetchError("nfl_state", f"state payload has no integer week: {week!r}", url=url)
    season = payload.get("season")
    return NflState(
        season=str(season) if season is not None else None,
        week=week,
        season_type=payload.get("season_type"),
    )


def fetch_grid_point(
    client: HttpJsonClient,
    url_template: str,
    stadium: Stadium,
    *,
    key: str,
    headers: Optional[Mapping[str, str]] = None,
) -> GridPoint:
    """Resolve stadium coordinates to a forecast grid cell."""
    url = url_template.format(latitude=stadium.latitude, longitude=stadium.longitude)
    payload = client.get_json(url, key=key, headers=headers)
    properties = payload.get("properties") if isinstance(payload, dict) else None
    if not isinstance(properties, dict):
        raise FetchError(key, "points payload has no properties", url=url)
    try:
        return GridPoint(
            grid_id=str(properties["gridId"]),
            grid_x=int(properties["gridX"]),
            grid_y=int(properties["gridY"]),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise FetchError(key, f"points payload missing grid reference: {exc}", url=url) from exc


def fetch_forecast_periods(
    client: HttpJsonClient,
    url_template: str,
    grid_point: GridPoint,
    *,
    key: str,
    headers: Optional[Mapping[str, str]] = None,
) -> List[ForecastPeriod]:
    """Fetch the ordered forecast periods for a grid cell."""
    url = url_template.format(
        grid_id=grid_point.grid_id,
        grid_x=grid_point.grid_x,
        grid_y=grid_point.grid_y,
    )
    payload = client.get_json(url, key=key, headers=headers)
    properties = payload.get("properties") if isinstance(payload, dict) else None
    periods = properties.get("periods") if isinstance(properties, dict) else None
    if not isinstance(periods, list):
        raise FetchError(key, "forecast payload has no periods list", url=url)
    try:
        return [ForecastPeriod.from_payload(period) for period in periods if isinstance(period, dict)]
    except (AttributeError, TypeError, ValueError) as exc:
        raise FetchError(key, f"malformed forecast period: {exc}", url=url) from exc
