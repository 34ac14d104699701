import json
from datetime import datetime, timezone

import pytest

from src.functions.gameday_sync.core.config import (
    ACTIVE_INJURIES_FILE,
    LONG_TERM_INJURIES_FILE,
    WEATHER_FILE,
)
from src.functions.gameday_sync.core.data.teams import find_team
from src.functions.gameday_sync.core.errors import FatalLoadError
from src.functions.gameday_sync.core.pipelines import (
    InjurySyncPipeline,
    JsonFileWriter,
    WeatherSyncPipeline,
)
from src.shared.batch import FixedDelay, no_delay
from tests.gameday_sync.fixtures import (
    STATE_URL,
    FakeJsonClient,
    RecordingWriter,
    athlete,
    game_row,
    roster_payload,
    stadium_row,
    write_json,
)

DAL_ROSTER_URL = "https://roster.test/teams/6/roster"
OCT_5 = datetime(2025, 10, 5, 12, 0, tzinfo=timezone.utc)


def _clock(moment=OCT_5):
    return lambda: moment


@pytest.fixture
def injury_inputs(settings):
    write_json(settings.mapping_path, {"mapping": [{"source_id": "123", "player_id": "P1"}]})
    return {
        DAL_ROSTER_URL: roster_payload(
            [
                athlete(123, "Dak Prescott", "QB", status="Active", injury_status="Questionable"),
                athlete(555, "Unmapped WR", "WR", injury_status="Out"),
                athlete(777, "Some Tackle", "OT", injury_status="Out"),
            ]
        ),
        STATE_URL: {"season": "2025", "week": 5, "season_type": "regular"},
    }


@pytest.fixture
def weather_inputs(settings):
    write_json(
        settings.stadiums_path,
        {"stadiums": [stadium_row("DAL", "AT&T Stadium", is_dome=True)]},
    )
    write_json(
        settings.schedule_path,
        {
            "games": [
                game_row("401772", 5, "2025-10-05T20:25Z", "DAL", "NYJ"),
                game_row("401780", 6, "2025-10-12T20:25Z", "DAL", "CAR"),
            ]
        },
    )


def test_injury_pipeline_single_questionable_player(settings, injury_inputs):
    client = FakeJsonClient(injury_inputs)
    writer = RecordingWriter()
    pipeline = InjurySyncPipeline(
        settings,
        client=client,
        writer=writer,
        delay=no_delay,
        teams=[find_team("DAL")],
        clock=_clock(),
    )

    result = pipeline.run()

    assert result.success
    assert result.processed == 1
    (documents,) = writer.documents
    active = documents[ACTIVE_INJURIES_FILE]
    long_term = documents[LONG_TERM_INJURIES_FILE]
    assert active["week"] == 5
    assert active["lastUpdated"] == "2025-10-05T12:00:00.000Z"
    assert active["summary"] == {"total_players": 1, "questionable": 1, "doubtful": 0, "out": 0}
    assert [item["player_id"] for item in active["questionable"]] == ["P1"]
    assert active["doubtful"] == [] and active["out"] == []
    assert long_term["summary"] == {"total_players": 1, "ir": 0, "suspended": 0}
    assert client.urls == [DAL_ROSTER_URL, STATE_URL]


def test_injury_pipeline_reports_unmapped_players(settings, injury_inputs):
    misses = []
    pipeline = InjurySyncPipeline(
        settings,
        client=FakeJsonClient(injury_inputs),
        delay=no_delay,
        teams=[find_team("DAL")],
        clock=_clock(),
        on_unmapped=lambda error, entry: misses.append(error.external_id),
    )

    snapshot = pipeline.prepare()

    assert misses == ["555"]
    assert snapshot.out == ()


def test_injury_pipeline_skips_failed_teams_and_spaces_calls(settings, injury_inputs):
    sleeps = []
    client = FakeJsonClient(injury_inputs)
    pipeline = InjurySyncPipeline(
        settings,
        client=client,
        delay=FixedDelay(1.0, sleep=sleeps.append),
        clock=_clock(),
    )

    snapshot = pipeline.prepare()

    roster_calls = [url for url in client.urls if url != STATE_URL]
    assert len(roster_calls) == 32
    assert roster_calls[0] == "https://roster.test/teams/22/roster"
    assert sleeps == [1.0] * 31
    assert snapshot.total_players == 1


def test_injury_pipeline_falls_back_to_calculated_week(settings, injury_inputs):
    del injury_inputs[STATE_URL]
    pipeline = InjurySyncPipeline(
        settings,
        client=FakeJsonClient(injury_inputs),
        delay=no_delay,
        teams=[find_team("DAL")],
        clock=_clock(),
    )

    assert pipeline.prepare().week == 5


def test_injury_pipeline_missing_mapping_is_fatal(settings):
    pipeline = InjurySyncPipeline(settings, client=FakeJsonClient(), delay=no_delay, clock=_clock())

    with pytest.raises(FatalLoadError):
        pipeline.prepare()

    result = pipeline.run()
    assert result.success is False
    assert "player mapping" in result.error


def test_injury_pipeline_dry_run_writes_nothing(settings, injury_inputs):
    writer = RecordingWriter()
    pipeline = InjurySyncPipeline(
        settings,
        client=FakeJsonClient(injury_inputs),
        writer=writer,
        delay=no_delay,
        teams=[find_team("DAL")],
        clock=_clock(),
    )

    result = pipeline.run(dry_run=True)

    assert result.success
    assert writer.documents == []
    assert "Dry run" in result.messages[0]


def test_injury_snapshots_are_identical_apart_from_timestamp(tmp_path, settings, injury_inputs):
    outputs = []
    for index, moment in enumerate([OCT_5, datetime(2025, 10, 5, 13, 30, 15, 250000, tzinfo=timezone.utc)]):
        output_dir = tmp_path / f"run{index}"
        InjurySyncPipeline(
            settings,
            client=FakeJsonClient(injury_inputs),
            writer=JsonFileWriter(output_dir),
            delay=no_delay,
            teams=[find_team("DAL")],
            clock=_clock(moment),
        ).run()
        outputs.append(
            {
                name: (output_dir / name).read_text(encoding="utf-8")
                for name in (ACTIVE_INJURIES_FILE, LONG_TERM_INJURIES_FILE)
            }
        )

    first, second = outputs
    for name in first:
        assert json.loads(first[name])["lastUpdated"] == "2025-10-05T12:00:00.000Z"
        assert json.loads(second[name])["lastUpdated"] == "2025-10-05T13:30:15.250Z"
        assert first[name].replace("2025-10-05T12:00:00.000Z", "2025-10-05T13:30:15.250Z") == second[name]


def test_weather_pipeline_dome_game(settings, weather_inputs):
    client = FakeJsonClient()
    writer = RecordingWriter()
    pipeline = WeatherSyncPipeline(settings, client=client, writer=writer, delay=no_delay, clock=_clock())

    result = pipeline.run()

    assert result.success
    (documents,) = writer.documents
    weather = documents[WEATHER_FILE]
    assert list(weather) == ["week", "lastUpdated", "games"]
    assert weather["week"] == 5
    assert weather["games"] == [
        {
            "game_id": "401772",
            "home_team": "DAL",
            "away_team": "NYJ",
            "stadium": "AT&T Stadium",
            "is_dome": True,
            "weather": None,
        }
    ]
    assert client.calls == []


def test_weather_pipeline_week_override(settings, weather_inputs):
    writer = RecordingWriter()
    pipeline = WeatherSyncPipeline(
        settings, client=FakeJsonClient(), writer=writer, delay=no_delay, clock=_clock(), week=6
    )

    pipeline.run()

    games = writer.documents[0][WEATHER_FILE]["games"]
    assert [game["game_id"] for game in games] == ["401780"]


def test_weather_pipeline_week_without_games(settings, weather_inputs):
    pipeline = WeatherSyncPipeline(
        settings,
        client=FakeJsonClient(),
        delay=no_delay,
        clock=_clock(datetime(2025, 11, 20, tzinfo=timezone.utc)),
    )

    snapshot = pipeline.prepare()

    assert snapshot.week == 12
    assert snapshot.games == ()


def test_weather_pipeline_missing_schedule_is_fatal(settings):
    write_json(settings.stadiums_path, {"stadiums": []})
    pipeline = WeatherSyncPipeline(settings, client=FakeJsonClient(), delay=no_delay, clock=_clock())

    result = pipeline.run()

    assert result.success is False
    assert "schedule" in result.error


ARI_ROSTER_URL = "https://roster.test/teams/22/roster"


def test_injury_pipeline_tolerates_odd_status_shapes(settings, injury_inputs):
    write_json(
        settings.mapping_path,
        {"mapping": [{"source_id": "123", "player_id": "P1"}, {"source_id": "124", "player_id": "P2"}]},
    )
    odd = athlete(124, "Odd Shape QB", "QB")
    odd["status"] = {"type": {"name": "active"}}
    odd["injuries"] = [{"status": {"abbreviation": "Q"}, "details": ""}]
    injury_inputs[ARI_ROSTER_URL] = roster_payload([odd])
    writer = RecordingWriter()
    pipeline = InjurySyncPipeline(
        settings,
        client=FakeJsonClient(injury_inputs),
        writer=writer,
        delay=no_delay,
        teams=[find_team("ARI"), find_team("DAL")],
        clock=_clock(),
    )

    result = pipeline.run()

    assert result.success
    active = writer.documents[0][ACTIVE_INJURIES_FILE]
    assert active["summary"]["questionable"] == 1
    assert active["summary"]["total_players"] == 2
    assert [item["player_id"] for item in active["questionable"]] == ["P1"]


def test_injury_pipeline_fails_team_with_malformed_roster(settings, injury_inputs, caplog):
    injury_inputs[ARI_ROSTER_URL] = {"athletes": 5}
    pipeline = InjurySyncPipeline(
        settings,
        client=FakeJsonClient(injury_inputs),
        delay=no_delay,
        teams=[find_team("ARI"), find_team("DAL")],
        clock=_clock(),
    )

    snapshot = pipeline.prepare()

    assert [record.internal_id for record in snapshot.questionable] == ["P1"]
    assert "failed ARI: malformed roster payload" in caplog.text
