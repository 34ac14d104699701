"""Convenience exports for data transformer classes."""

from .injury import InjuryRecordNormalizer, RosterTransformer, flatten_roster, normalize_team_roster

__all__ = [
    "InjuryRecordNormalizer",
    "RosterTransformer",
    "flatten_roster",
    "normalize_team_roster",
]
