"""Team-level context for bonus comparisons.

Players are judged against their own side: a batter's strike rate against
the team's, a bowler's economy against the team's. Team membership is not
supplied up front; it is derived from the roles each player fills in the
delivery records.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Optional, Sequence, Set

from .errors import NoDeliveriesError, PlayerNotFoundError
from .models import Delivery, Player

TWO_PLACES = Decimal("0.01")


def rate(runs: int, balls: int) -> Decimal:
    """runs / balls rounded half-up to 2 decimal places."""
    return (Decimal(runs) / Decimal(balls)).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def build_team_composition(deliveries: Sequence[Delivery]) -> Dict[str, Set[Player]]:
    """Map team name -> players seen for that side.

    Batsman and non-striker belong to the batting side; bowler and any
    assisting fielder belong to the bowling side.
    """
    teams: Dict[str, Set[Player]] = {}
    for d in deliveries:
        batting = teams.setdefault(d.batting_team, set())
        batting.add(d.batsman)
        batting.add(d.non_striker)

        bowling = teams.setdefault(d.bowling_team, set())
        bowling.add(d.bowler)
        if d.assisting_player is not None:
            bowling.add(d.assisting_player)
    return teams


def find_team(teams: Dict[str, Set[Player]], player: Player) -> str:
    for name, members in teams.items():
        if player in members:
            return name
    raise PlayerNotFoundError(f"No team found for {player}")


# ── Batting side ──

def team_runs(deliveries: Sequence[Delivery], team: Optional[str] = None) -> int:
    """Runs off the bat plus extras. ``team=None`` counts the whole match."""
    return sum(
        d.total_runs for d in deliveries
        if team is None or d.batting_team == team
    )


def team_balls(deliveries: Sequence[Delivery], team: Optional[str] = None) -> int:
    return sum(
        1 for d in deliveries
        if d.is_non_extra_delivery and (team is None or d.batting_team == team)
    )


def team_strike_rate(deliveries: Sequence[Delivery], team: Optional[str] = None) -> Decimal:
    balls = team_balls(deliveries, team)
    if balls == 0:
        raise NoDeliveriesError(f"{team or 'Match'} has not faced a ball")
    return rate(team_runs(deliveries, team), balls)


# ── Bowling side ──

def team_runs_given(deliveries: Sequence[Delivery], team: Optional[str] = None) -> int:
    return sum(
        d.total_runs for d in deliveries
        if team is None or d.bowling_team == team
    )


def team_balls_bowled(deliveries: Sequence[Delivery], team: Optional[str] = None) -> int:
    return sum(
        1 for d in deliveries
        if d.is_non_extra_delivery and (team is None or d.bowling_team == team)
    )


def team_economy_rate(deliveries: Sequence[Delivery], team: Optional[str] = None) -> Decimal:
    balls = team_balls_bowled(deliveries, team)
    if balls == 0:
        raise NoDeliveriesError(f"{team or 'Match'} has not bowled a ball")
    return rate(team_runs_given(deliveries, team), balls)


def is_markedly_different(diff: Decimal, team_rate: Decimal, factor: Decimal) -> bool:
    """True when |diff| is strictly beyond ``factor`` of the team rate."""
    return abs(diff) > abs(team_rate * factor)
