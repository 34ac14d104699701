"""Command-line interface for the injury snapshot sync."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[4]))

from src.functions.gameday_sync.core.config import GamedaySyncSettings  # noqa: E402
from src.functions.gameday_sync.core.data.teams import NFL_TEAMS, find_team  # noqa: E402
from src.functions.gameday_sync.core.pipelines import (  # noqa: E402
    InjurySyncPipeline,
    JsonFileWriter,
)
from src.functions.gameday_sync.core.utils.cli import (  # noqa: E402
    handle_cli_errors,
    print_results,
    setup_cli_logging,
    setup_cli_parser,
)


@handle_cli_errors
def main() -> bool:
    parser: argparse.ArgumentParser = setup_cli_parser(
        description="Fetch ESPN rosters and write the active and long-term injury snapshots.",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Optional .env file to load settings from",
    )
    parser.add_argument(
        "--team",
        action="append",
        default=None,
        help="Only fetch this team (abbreviation, repeatable); defaults to all 32 teams",
    )
    args = parser.parse_args()
    setup_cli_logging(args)

    settings = GamedaySyncSettings.from_env(args.env_file).with_output_dir(args.output_dir)
    teams = NFL_TEAMS
    if args.team:
        teams = []
        for code in args.team:
            team = find_team(code)
            if team is None:
                parser.error(f"unknown team: {code}")
            teams.append(team)

    pipeline = InjurySyncPipeline(
        settings,
        writer=JsonFileWriter(settings.output_dir),
        teams=teams,
    )
    result = pipeline.run(dry_run=args.dry_run)
    print_results(result, operation="injury sync", dry_run=args.dry_run)
    return result.success


if __name__ == "__main__":
    sys.exit(main())
