"""Loads delivery records from comma separated text.

Each non-blank line holds one delivery:

    innings, over.ball, batting team, bowling team, batsman, non-striker,
    bowler, runs, extra code[, kind of wicket[, dismissed[, assisting]]]

Fields are trimmed. Trailing dismissal fields may be left off entirely.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import ParseError
from .models import Delivery, Player

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = 9


def parse_delivery(line: str) -> Delivery:
    """Build a Delivery from a single line of text."""
    tokens = [t.strip() for t in line.split(",")]
    if len(tokens) < REQUIRED_FIELDS:
        raise ParseError(f"Expected at least {REQUIRED_FIELDS} fields, got {len(tokens)}: {line!r}")

    over_number, ball_number = _parse_over_ball(tokens[1])

    def _optional(index: int) -> str:
        return tokens[index] if len(tokens) > index else ""

    return Delivery(
        innings_number=_parse_int(tokens[0], "innings"),
        over_number=over_number,
        ball_number=ball_number,
        batting_team=tokens[2],
        bowling_team=tokens[3],
        batsman=Player(tokens[4]),
        non_striker=Player(tokens[5]),
        bowler=Player(tokens[6]),
        runs=_parse_int(tokens[7], "runs"),
        extra_code=tokens[8],
        kind_of_wicket=_optional(9),
        dismissed_player=_optional_player(_optional(10)),
        assisting_player=_optional_player(_optional(11)),
    )


def read_deliveries(lines: Iterable[str]) -> List[Delivery]:
    """Parse every non-blank line, keeping file order."""
    deliveries: List[Delivery] = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            deliveries.append(parse_delivery(line.strip()))
        except ParseError as e:
            raise ParseError(f"line {line_no}: {e}") from e
    logger.debug("Parsed %d deliveries", len(deliveries))
    return deliveries


def load_deliveries(path: Union[str, Path]) -> List[Delivery]:
    """Read a delivery file from disk."""
    path = Path(path)
    with path.open(encoding="utf-8") as fh:
        deliveries = read_deliveries(fh)
    logger.info("Loaded %d deliveries from %s", len(deliveries), path)
    return deliveries


# ───── Helpers ─────

def _parse_int(raw: str, field_name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ParseError(f"Invalid {field_name}: {raw!r}") from None


def _parse_over_ball(raw: str) -> tuple[int, int]:
    """Split "12.4" into (12, 4)."""
    over_part, sep, ball_part = raw.partition(".")
    if not sep:
        raise ParseError(f"Invalid over.ball: {raw!r}")
    return _parse_int(over_part, "over"), _parse_int(ball_part, "ball")


def _optional_player(name: str) -> Optional[Player]:
    return Player(name) if name else None
