"""Match points calculator that combines batting, bowling, and fielding points.

Match points = base points (batting + bowling + fielding)
             + bonus points (batting + bowling)

Bonus comparisons are made against the player's own team, resolved from the
roles the player fills in the delivery records.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from . import batting, bowling, context, fielding
from .config import DEFAULT_RULES, ScoringRules
from .models import Delivery, Player, PlayerPoints

logger = logging.getLogger(__name__)


class ScoreBoard:
    """Read-only view over the deliveries of one match.

    The delivery sequence is copied on construction and never mutated, so a
    ScoreBoard can be shared between threads without locking.
    """

    def __init__(self, deliveries: Iterable[Delivery], rules: ScoringRules = DEFAULT_RULES):
        self.deliveries: Tuple[Delivery, ...] = tuple(deliveries)
        self.rules = rules
        self._teams: Dict[str, Set[Player]] = context.build_team_composition(self.deliveries)
        logger.debug(
            "ScoreBoard built from %d deliveries, teams=%s",
            len(self.deliveries), list(self._teams),
        )

    # ───── Teams ─────

    @property
    def teams(self) -> List[str]:
        return list(self._teams)

    def team_players(self, team: str) -> FrozenSet[Player]:
        return frozenset(self._teams.get(team, ()))

    def team_of(self, player: Player) -> str:
        return context.find_team(self._teams, player)

    def team_runs(self, team: Optional[str] = None) -> int:
        return context.team_runs(self.deliveries, team)

    def team_balls(self, team: Optional[str] = None) -> int:
        return context.team_balls(self.deliveries, team)

    def team_strike_rate(self, team: Optional[str] = None) -> Decimal:
        return context.team_strike_rate(self.deliveries, team)

    def team_runs_given(self, team: Optional[str] = None) -> int:
        return context.team_runs_given(self.deliveries, team)

    def team_balls_bowled(self, team: Optional[str] = None) -> int:
        return context.team_balls_bowled(self.deliveries, team)

    def team_economy_rate(self, team: Optional[str] = None) -> Decimal:
        return context.team_economy_rate(self.deliveries, team)

    # ───── Batting ─────

    def base_batting_points(self, player: Player) -> int:
        return batting.base_batting_points(self.deliveries, player)

    def player_runs(self, player: Player) -> int:
        return self.base_batting_points(player)

    def balls_faced(self, player: Player) -> int:
        return batting.balls_faced(self.deliveries, player)

    def player_strike_rate(self, player: Player) -> Decimal:
        return batting.player_strike_rate(self.deliveries, player)

    def bonus_batting_points(self, player: Player) -> Decimal:
        if self.balls_faced(player) == 0:
            return Decimal(0)
        team_rate = self.team_strike_rate(self.team_of(player))
        return batting.batting_bonus(
            self.player_strike_rate(player),
            team_rate,
            self.base_batting_points(player),
            self.rules.batting_bonus_factor,
        )

    # ───── Bowling ─────

    def base_bowling_points(self, player: Player) -> Decimal:
        return bowling.base_bowling_points(self.deliveries, player, self.rules)

    def runs_conceded(self, player: Player) -> int:
        return bowling.runs_conceded(self.deliveries, player)

    def deliveries_bowled(self, player: Player) -> int:
        return bowling.deliveries_bowled(self.deliveries, player)

    def player_economy_rate(self, player: Player) -> Decimal:
        return bowling.player_economy_rate(self.deliveries, player)

    def bonus_bowling_points(self, player: Player) -> Decimal:
        # Bonus is a share of wicket points
        base = self.base_bowling_points(player)
        if base == 0:
            return Decimal(0)
        team_rate = self.team_economy_rate(self.team_of(player))
        return bowling.bowling_bonus(
            self.player_economy_rate(player),
            team_rate,
            base,
            self.rules.bowling_bonus_factor,
        )

    # ───── Fielding ─────

    def base_fielding_points(self, player: Player) -> Decimal:
        return fielding.base_fielding_points(self.deliveries, player, self.rules)

    # ───── Totals ─────

    def base_points(self, player: Player) -> Decimal:
        return (
            Decimal(self.base_batting_points(player))
            + self.base_bowling_points(player)
            + self.base_fielding_points(player)
        )

    def bonus_points(self, player: Player) -> Decimal:
        return self.bonus_batting_points(player) + self.bonus_bowling_points(player)

    def match_points(self, player: Player) -> Decimal:
        return self.base_points(player) + self.bonus_points(player)

    def players(self) -> List[Player]:
        """Distinct participating players, in order of first appearance."""
        seen: Dict[Player, None] = {}
        for d in self.deliveries:
            for p in (d.batsman, d.non_striker, d.bowler, d.assisting_player):
                if p is not None:
                    seen.setdefault(p, None)
        return list(seen)

    def player_points(self, player: Player) -> PlayerPoints:
        return PlayerPoints(
            name=player.name,
            team=self.team_of(player),
            batting_points=self.base_batting_points(player),
            bowling_points=self.base_bowling_points(player),
            fielding_points=self.base_fielding_points(player),
            batting_bonus=self.bonus_batting_points(player),
            bowling_bonus=self.bonus_bowling_points(player),
        )

    def points_table(self) -> List[PlayerPoints]:
        """Every participant's points, highest first (name breaks ties)."""
        table = [self.player_points(p) for p in self.players()]
        table.sort(key=lambda pp: (-pp.match_points, pp.name))
        return table

    def man_of_match(self) -> FrozenSet[Player]:
        """All players sharing the highest match points."""
        points = {p: self.match_points(p) for p in self.players()}
        if not points:
            return frozenset()

        best = max(points.values())
        winners = frozenset(p for p, pts in points.items() if pts == best)
        logger.info(
            "Man of the match: %s (%s points)",
            ", ".join(sorted(p.name for p in winners)), best,
        )
        return winners


def calculate_match_points(
    deliveries: Iterable[Delivery],
    rules: Optional[ScoringRules] = None,
) -> dict:
    """Score a whole match.

    Returns:
        {
            "teams": [str, ...],
            "players": [PlayerPoints, ...],   # highest first
            "man_of_match": [str, ...],       # sorted names
        }
    """
    board = ScoreBoard(deliveries, rules or DEFAULT_RULES)
    return {
        "teams": board.teams,
        "players": board.points_table(),
        "man_of_match": sorted(p.name for p in board.man_of_match()),
    }
