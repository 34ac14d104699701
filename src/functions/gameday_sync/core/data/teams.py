"""
NFL team codes and the team ids used by the ESPN roster endpoint.

The roster source addresses teams by a numeric id while every snapshot uses
the team abbreviation, so the pipeline iterates this table in order and
stamps each athlete with the abbreviation. Iteration order is the output
order of the injury lists.
"""

from typing import Optional, Tuple, NamedTuple


class NflTeam(NamedTuple):
    code: str
    espn_id: int


NFL_TEAMS: Tuple[NflTeam, ...] = (
    NflTeam('ARI', 22), NflTeam('ATL', 1), NflTeam('BAL', 33), NflTeam('BUF', 2),
    NflTeam('CAR', 29), NflTeam('CHI', 3), NflTeam('CIN', 4), NflTeam('CLE', 5),
    NflTeam('DAL', 6), NflTeam('DEN', 7), NflTeam('DET', 8), NflTeam('GB', 9),
    NflTeam('HOU', 34), NflTeam('IND', 11), NflTeam('JAX', 30), NflTeam('KC', 12),
    NflTeam('LV', 13), NflTeam('LAC', 24), NflTeam('LAR', 14), NflTeam('MIA', 15),
    NflTeam('MIN', 16), NflTeam('NE', 17), NflTeam('NO', 18), NflTeam('NYG', 19),
    NflTeam('NYJ', 20), NflTeam('PHI', 21), NflTeam('PIT', 23), NflTeam('SF', 25),
    NflTeam('SEA', 26), NflTeam('TB', 27), NflTeam('TEN', 10), NflTeam('WAS', 28),
)


def find_team(code: str) -> Optional[NflTeam]:
    """Return the team for ``code`` (case-insensitive) or ``None`` if unknown."""
    if not code:
        return None
    wanted = str(code).upper().strip()
    for team in NFL_TEAMS:
        if team.code == wanted:
            return team
    return None
