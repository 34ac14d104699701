#!/usr/bin/env python3
"""Print the calculated NFL week for today.

Uses GAMEDAY_SEASON_START (default 2025-09-03T00:00:00Z) and
GAMEDAY_MAX_WEEK from the environment. Update the season start at the
beginning of each season.
"""

import json
import sys
from datetime import datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[4]))

from src.functions.gameday_sync.core.config import GamedaySyncSettings  # noqa: E402
from src.functions.gameday_sync.core.week import calculate_week  # noqa: E402


if __name__ == "__main__":
    settings = GamedaySyncSettings.from_env()
    week = calculate_week(datetime.now(timezone.utc), settings.season_start, settings.max_week)

    # Output format for GitHub Actions or command line
    if len(sys.argv) > 1 and sys.argv[1] == "--json":
        print(json.dumps({"week": week, "season_start": settings.season_start.isoformat()}))
    else:
        print(week)
