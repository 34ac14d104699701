"""Error taxonomy for the gameday sync pipelines.

Only :class:`FatalLoadError` aborts a run. The remaining errors describe a
single skipped item; pipelines log them and keep going.
"""

from __future__ import annotations

from typing import Optional


class GamedaySyncError(Exception):
    """Base class for all gameday sync errors."""


class FatalLoadError(GamedaySyncError):
    """Reference data could not be read or parsed."""

    def __init__(self, source: str, message: str) -> None:
        self.source = source
        self.message = message
        super().__init__(f"Failed to load {source}: {message}")


class FetchError(GamedaySyncError):
    """A single upstream call failed."""

    def __init__(
        self,
        key: str,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        self.key = key
        self.message = message
        self.url = url
        self.status_code = status_code
        super().__init__(f"[{key}] {message}")


class MappingMissError(GamedaySyncError):
    """An external player id has no internal mapping."""

    def __init__(self, external_id: str, name: Optional[str] = None, team: Optional[str] = None) -> None:
        self.external_id = external_id
        self.name = name
        self.team = team
        label = name or "unknown player"
        super().__init__(f"No mapping found for {label} (ESPN ID: {external_id})")


class ResolutionGapError(GamedaySyncError):
    """A game could not be resolved to a stadium or a forecast period."""

    def __init__(self, game_id: str, message: str) -> None:
        self.game_id = game_id
        self.message = message
        super().__init__(f"Game {game_id}: {message}")
