"""Fielding points.

A fielder who completes someone else's wicket (catch, run out, stumping)
shares the credit with the bowler. When the fielder is the bowler the
wicket is already paid in full as bowling points, so it earns nothing here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from .config import ScoringRules
from .models import Delivery, Player


def base_fielding_points(
    deliveries: Sequence[Delivery],
    player: Player,
    rules: ScoringRules,
) -> Decimal:
    total = Decimal(0)
    for d in deliveries:
        if d.assisting_player != player or not d.is_dismissal_delivery:
            continue
        if not d.is_self_assisted:
            total += rules.assist_bowling_points
    return total
