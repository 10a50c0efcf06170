"""CricPoints Scoring Engine - fantasy points and man of the match from ball-by-ball data."""

from .calculator import ScoreBoard, calculate_match_points
from .config import DEFAULT_RULES, ScoringRules, load_rules
from .errors import NoDeliveriesError, ParseError, PlayerNotFoundError, ScoringError
from .models import Delivery, Player, PlayerPoints
from .reader import load_deliveries, parse_delivery, read_deliveries

__all__ = [
    "ScoreBoard",
    "calculate_match_points",
    "DEFAULT_RULES",
    "ScoringRules",
    "load_rules",
    "NoDeliveriesError",
    "ParseError",
    "PlayerNotFoundError",
    "ScoringError",
    "Delivery",
    "Player",
    "PlayerPoints",
    "load_deliveries",
    "parse_delivery",
    "read_deliveries",
]
