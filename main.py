"""Deployment wrapper for the gameday sync Cloud Functions.

Deploy with ``--entry-point injuries_handler`` or
``--entry-point weather_handler``.
"""

from __future__ import annotations

import sys
from pathlib import Path

project_root = Path(__file__).resolve().parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.functions.gameday_sync.functions.main import (  # noqa: E402
    injuries_handler,
    weather_handler,
)

__all__ = ["injuries_handler", "weather_handler"]
