from datetime import datetime, timezone

import pytest

from src.functions.gameday_sync.core.errors import FetchError
from src.functions.gameday_sync.core.week import calculate_week, resolve_current_week
from tests.gameday_sync.fixtures import STATE_URL, FakeJsonClient

SEASON_START = datetime(2025, 9, 3, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2025, 9, 3, 0, 0, tzinfo=timezone.utc), 1),
        (datetime(2025, 9, 9, 23, 59, tzinfo=timezone.utc), 1),
        (datetime(2025, 9, 10, 0, 0, tzinfo=timezone.utc), 2),
        (datetime(2025, 10, 5, 17, 0, tzinfo=timezone.utc), 5),
        (datetime(2026, 2, 1, tzinfo=timezone.utc), 18),
        (datetime(2025, 8, 20, tzinfo=timezone.utc), -1),
    ],
)
def test_calculate_week(now, expected):
    assert calculate_week(now, SEASON_START) == expected


def test_calculate_week_respects_max_week():
    assert calculate_week(datetime(2026, 2, 1, tzinfo=timezone.utc), SEASON_START, max_week=22) == 22


def test_resolve_current_week_prefers_state_source(settings, caplog):
    caplog.set_level("INFO")
    client = FakeJsonClient({STATE_URL: {"season": "2025", "week": 7, "season_type": "regular"}})

    week = resolve_current_week(client, settings, datetime(2025, 9, 4, tzinfo=timezone.utc))

    assert week == 7
    assert "NFL Season: 2025, Week: 7, Type: regular" in caplog.text


def test_resolve_current_week_falls_back_on_fetch_error(settings):
    client = FakeJsonClient({STATE_URL: FetchError("nfl_state", "HTTP 503", status_code=503)})

    week = resolve_current_week(client, settings, datetime(2025, 10, 5, tzinfo=timezone.utc))

    assert week == 5


def test_resolve_current_week_falls_back_on_missing_week(settings):
    client = FakeJsonClient({STATE_URL: {"season": "2025", "week": None}})

    assert resolve_current_week(client, settings, datetime(2025, 9, 11, tzinfo=timezone.utc)) == 2
