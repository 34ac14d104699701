import pandas as pd

from src.functions.gameday_sync.core.contracts import ForecastPeriod
from src.functions.gameday_sync.core.weather.forecast import (
    format_forecast,
    parse_timestamp,
    select_forecast_period,
)
from tests.gameday_sync.fixtures import forecast_period


def _periods(*bounds):
    return [
        ForecastPeriod.from_payload(forecast_period(start, end, short_forecast=f"P{index}"))
        for index, (start, end) in enumerate(bounds)
    ]


def _kickoff(value):
    return pd.Timestamp(value)


def test_period_containing_kickoff_is_selected():
    periods = _periods(
        ("2025-10-05T10:00:00-00:00", "2025-10-05T13:00:00-00:00"),
        ("2025-10-05T13:00:00-00:00", "2025-10-05T16:00:00-00:00"),
    )

    selected = select_forecast_period(periods, _kickoff("2025-10-05T12:30:00Z"))

    assert selected.short_forecast == "P0"


def test_shared_boundary_goes_to_first_period():
    periods = _periods(
        ("2025-10-05T10:00:00Z", "2025-10-05T13:00:00Z"),
        ("2025-10-05T13:00:00Z", "2025-10-05T16:00:00Z"),
    )

    assert select_forecast_period(periods, _kickoff("2025-10-05T13:00:00Z")).short_forecast == "P0"


def test_offsets_are_compared_in_utc():
    periods = _periods(
        ("2025-10-05T06:00:00-04:00", "2025-10-05T09:00:00-04:00"),
        ("2025-10-05T09:00:00-04:00", "2025-10-05T18:00:00-04:00"),
    )

    # 17:00Z is 13:00 EDT
    assert select_forecast_period(periods, _kickoff("2025-10-05T17:00:00Z")).short_forecast == "P1"


def test_nearest_edge_when_kickoff_outside_all_periods():
    periods = _periods(
        ("2025-10-05T00:00:00Z", "2025-10-05T06:00:00Z"),
        ("2025-10-05T18:00:00Z", "2025-10-06T06:00:00Z"),
    )

    # 16:00 is 2h from the second period's start and 10h from the first's end
    assert select_forecast_period(periods, _kickoff("2025-10-05T16:00:00Z")).short_forecast == "P1"


def test_nearest_edge_tie_goes_to_first_encountered():
    periods = _periods(
        ("2025-10-05T00:00:00Z", "2025-10-05T10:00:00Z"),
        ("2025-10-05T14:00:00Z", "2025-10-05T20:00:00Z"),
    )

    assert select_forecast_period(periods, _kickoff("2025-10-05T12:00:00Z")).short_forecast == "P0"


def test_unparseable_periods_are_ignored():
    periods = _periods(
        ("not a time", "2025-10-05T13:00:00Z"),
        ("2025-10-05T20:00:00Z", "2025-10-05T23:00:00Z"),
    )

    assert select_forecast_period(periods, _kickoff("2025-10-05T12:00:00Z")).short_forecast == "P1"
    assert select_forecast_period([], _kickoff("2025-10-05T12:00:00Z")) is None


def test_parse_timestamp_handles_blank_and_garbage():
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("garbage") is None
    assert parse_timestamp("2025-10-05T17:00Z") == pd.Timestamp("2025-10-05T17:00:00Z")


def test_format_forecast_shapes_weather():
    period = ForecastPeriod.from_payload(
        forecast_period(
            "2025-10-05T10:00:00Z",
            "2025-10-05T13:00:00Z",
            temperature=61,
            wind_speed="5 to 10 mph",
            wind_direction="SW",
            short_forecast="Chance Rain Showers",
            precipitation=40,
        )
    )

    weather = format_forecast(period)

    assert weather.to_dict() == {
        "temp": 61,
        "wind": "5 to 10 mph SW",
        "conditions": "Chance Rain Showers",
        "precipitation": "40%",
    }


def test_format_forecast_defaults_missing_precipitation_to_zero():
    payload = forecast_period("2025-10-05T10:00:00Z", "2025-10-05T13:00:00Z", precipitation=None)
    assert format_forecast(ForecastPeriod.from_payload(payload)).precipitation == "0%"

    payload.pop("probabilityOfPrecipitation")
    assert format_forecast(ForecastPeriod.from_payload(payload)).precipitation == "0%"
