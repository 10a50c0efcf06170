# scoring_engine/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root
load_dotenv()


def _get_env(name: str, default: str = "") -> str:
    return os.getenv(name, default).strip()


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, str(default))
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_decimal(name: str, default: Decimal) -> Decimal:
    raw = _get_env(name, str(default))
    try:
        return Decimal(raw)
    except InvalidOperation:
        return default


# -------------------------
# Scoring constants
# -------------------------
BATTING_BONUS_FACTOR = Decimal("0.1")
BOWLING_BONUS_FACTOR = Decimal("0.1")
NON_ASSIST_BOWLING_POINTS = Decimal("25")
ASSIST_BOWLING_POINTS = Decimal("12.5")


@dataclass(frozen=True)
class ScoringRules:
    """Point values and bonus factors applied by the ScoreBoard."""

    batting_bonus_factor: Decimal = BATTING_BONUS_FACTOR
    bowling_bonus_factor: Decimal = BOWLING_BONUS_FACTOR
    non_assist_bowling_points: Decimal = NON_ASSIST_BOWLING_POINTS
    # Also the fielder's share when a different player assisted the wicket
    assist_bowling_points: Decimal = ASSIST_BOWLING_POINTS

    def to_dict(self) -> dict:
        return {
            "batting_bonus_factor": str(self.batting_bonus_factor),
            "bowling_bonus_factor": str(self.bowling_bonus_factor),
            "non_assist_bowling_points": str(self.non_assist_bowling_points),
            "assist_bowling_points": str(self.assist_bowling_points),
        }


DEFAULT_RULES = ScoringRules()


def load_rules() -> ScoringRules:
    """Build scoring rules from CRICPOINTS_* env vars, falling back to the defaults."""
    return ScoringRules(
        batting_bonus_factor=_get_env_decimal("CRICPOINTS_BATTING_BONUS_FACTOR", BATTING_BONUS_FACTOR),
        bowling_bonus_factor=_get_env_decimal("CRICPOINTS_BOWLING_BONUS_FACTOR", BOWLING_BONUS_FACTOR),
        non_assist_bowling_points=_get_env_decimal(
            "CRICPOINTS_NON_ASSIST_BOWLING_POINTS", NON_ASSIST_BOWLING_POINTS
        ),
        assist_bowling_points=_get_env_decimal("CRICPOINTS_ASSIST_BOWLING_POINTS", ASSIST_BOWLING_POINTS),
    )


# -------------------------
# Web app settings
# -------------------------
HOST: str = _get_env("CRICPOINTS_HOST", "127.0.0.1")
PORT: int = _get_env_int("CRICPOINTS_PORT", 5050)
DEBUG: bool = _get_env("CRICPOINTS_DEBUG", "0") == "1"
LOG_LEVEL: str = _get_env("CRICPOINTS_LOG_LEVEL", "INFO").upper()


def validate_config(rules: Optional[ScoringRules] = None) -> None:
    rules = rules or load_rules()

    for name, value in rules.to_dict().items():
        if Decimal(value) < 0:
            raise RuntimeError(f"{name} must not be negative (got {value})")

    if PORT <= 0:
        raise RuntimeError("CRICPOINTS_PORT must be positive")
