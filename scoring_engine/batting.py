"""Batting points.

Base points are the runs a player scored off the bat. The bonus rewards
(or penalises) a strike rate that sits more than the bonus factor away
from the team's strike rate.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from .context import is_markedly_different, rate
from .models import Delivery, Player


def base_batting_points(deliveries: Sequence[Delivery], player: Player) -> int:
    """Runs off the bat on every delivery the player faced, counted ball or not."""
    return sum(d.runs for d in deliveries if d.batsman == player)


def balls_faced(deliveries: Sequence[Delivery], player: Player) -> int:
    return sum(1 for d in deliveries if d.is_non_extra_delivery and d.batsman == player)


def player_strike_rate(deliveries: Sequence[Delivery], player: Player) -> Decimal:
    """Runs per counted ball, or exactly 0 when the player faced none."""
    balls = balls_faced(deliveries, player)
    if balls == 0:
        return Decimal(0)
    return rate(base_batting_points(deliveries, player), balls)


def batting_bonus(
    player_rate: Decimal,
    team_rate: Decimal,
    base_points: int,
    factor: Decimal,
) -> Decimal:
    """Signed bonus of ``base_points * factor`` once the gap passes the threshold."""
    diff = player_rate - team_rate
    if not is_markedly_different(diff, team_rate, factor):
        return Decimal(0)

    bonus = Decimal(base_points) * factor
    if diff > 0:  # outscored the team
        return bonus
    return -bonus
