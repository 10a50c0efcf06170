"""Bowling points.

Each wicket a bowler takes is worth the full non-assist value when nobody
else touched the ball (bowled, lbw, caught and bowled); a wicket completed
by a different fielder earns the bowler the assist value instead. The
bonus compares the bowler's economy with the team's: cheaper than the team
is rewarded, more expensive is penalised.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from .config import ScoringRules
from .context import is_markedly_different, rate
from .models import Delivery, Player


def base_bowling_points(
    deliveries: Sequence[Delivery],
    player: Player,
    rules: ScoringRules,
) -> Decimal:
    total = Decimal(0)
    for d in deliveries:
        if d.bowler != player or not d.is_dismissal_delivery:
            continue
        if d.assisting_player is None or d.assisting_player == player:
            total += rules.non_assist_bowling_points
        else:
            total += rules.assist_bowling_points
    return total


def runs_conceded(deliveries: Sequence[Delivery], player: Player) -> int:
    return sum(d.total_runs for d in deliveries if d.bowler == player)


def deliveries_bowled(deliveries: Sequence[Delivery], player: Player) -> int:
    return sum(1 for d in deliveries if d.is_non_extra_delivery and d.bowler == player)


def player_economy_rate(deliveries: Sequence[Delivery], player: Player) -> Decimal:
    """Runs conceded per counted ball, or exactly 0 when the player bowled none."""
    balls = deliveries_bowled(deliveries, player)
    if balls == 0:
        return Decimal(0)
    return rate(runs_conceded(deliveries, player), balls)


def bowling_bonus(
    player_rate: Decimal,
    team_rate: Decimal,
    base_points: Decimal,
    factor: Decimal,
) -> Decimal:
    diff = team_rate - player_rate  # positive = bowler was cheaper
    if not is_markedly_different(diff, team_rate, factor):
        return Decimal(0)

    bonus = base_points * factor
    if diff > 0:
        return bonus
    return -bonus
