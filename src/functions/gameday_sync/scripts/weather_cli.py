"""Command-line interface for the weather snapshot sync."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[4]))

from src.functions.gameday_sync.core.config import GamedaySyncSettings  # noqa: E402
from src.functions.gameday_sync.core.pipelines import (  # noqa: E402
    JsonFileWriter,
    WeatherSyncPipeline,
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
        description="Fetch weather.gov forecasts for this week's games and write the weather snapshot.",
    )
    parser.add_argument(
        "--week",
        type=int,
        default=None,
        help="Override the calculated week (1-18)",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Optional .env file to load settings from",
    )
    args = parser.parse_args()
    setup_cli_logging(args)

    settings = GamedaySyncSettings.from_env(args.env_file).with_output_dir(args.output_dir)
    pipeline = WeatherSyncPipeline(
        settings,
        writer=JsonFileWriter(settings.output_dir),
        week=args.week,
    )
    result = pipeline.run(dry_run=args.dry_run)
    print_results(result, operation="weather sync", dry_run=args.dry_run)
    return result.success


if __name__ == "__main__":
    sys.exit(main())
