"""Data models for the CricPoints scoring engine."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import FrozenSet, Optional

from .errors import ParseError


@dataclass(frozen=True)
class Player:
    """A player, identified by display name (exact match)."""
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Delivery:
    """One ball bowled."""
    innings_number: int
    over_number: int
    ball_number: int
    batting_team: str
    bowling_team: str
    batsman: Player
    non_striker: Player
    bowler: Player
    runs: int = 0
    extra_code: str = ""
    kind_of_wicket: str = ""
    dismissed_player: Optional[Player] = None
    assisting_player: Optional[Player] = None

    def __post_init__(self):
        if self.extra_code and self.extra_code[0] not in "0123456789":
            raise ParseError(f"Extra code must start with a digit: {self.extra_code!r}")

    @property
    def extra_runs(self) -> int:
        if not self.extra_code:
            return 0
        return int(self.extra_code[0])

    @property
    def total_runs(self) -> int:
        return self.runs + self.extra_runs

    @property
    def is_dismissal_delivery(self) -> bool:
        return bool(self.kind_of_wicket)

    @property
    def is_extra_delivery(self) -> bool:
        return len(self.extra_code) > 0

    @property
    def is_non_extra_delivery(self) -> bool:
        """True for deliveries counted as balls faced/bowled.

        A bare one-digit code (e.g. "0", "1") is a counted ball; any typed
        extra such as "1wd" is not, and neither is an empty code.
        """
        return len(self.extra_code) == 1

    @property
    def players(self) -> FrozenSet[Player]:
        involved = {self.batsman, self.non_striker, self.bowler}
        if self.assisting_player is not None:
            involved.add(self.assisting_player)
        return frozenset(involved)

    @property
    def is_self_assisted(self) -> bool:
        """Wicket where the bowler is also the fielder (e.g. caught and bowled)."""
        return self.assisting_player is not None and self.assisting_player == self.bowler


@dataclass
class PlayerPoints:
    """Final computed points for a player."""
    name: str
    team: str
    batting_points: int = 0
    bowling_points: Decimal = Decimal(0)
    fielding_points: Decimal = Decimal(0)
    batting_bonus: Decimal = Decimal(0)
    bowling_bonus: Decimal = Decimal(0)

    @property
    def base_points(self) -> Decimal:
        return Decimal(self.batting_points) + self.bowling_points + self.fielding_points

    @property
    def bonus_points(self) -> Decimal:
        return self.batting_bonus + self.bowling_bonus

    @property
    def match_points(self) -> Decimal:
        return self.base_points + self.bonus_points
