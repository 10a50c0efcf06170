"""Shared fixtures for the scoring engine tests."""

from pathlib import Path

import pytest

from scoring_engine.calculator import ScoreBoard
from scoring_engine.models import Delivery, Player
from scoring_engine.reader import load_deliveries

SCORES_FILE = Path(__file__).parent / "data" / "scores.txt"

KKR = "Kolkata Knight Riders"
RCB = "Royal Challengers Bangalore"


def make_delivery(**overrides) -> Delivery:
    """Create a plain dot ball, overriding any field by keyword.

    Player fields may be given as plain names.
    """
    fields = {
        "innings_number": 1,
        "over_number": 0,
        "ball_number": 1,
        "batting_team": "Team A",
        "bowling_team": "Team B",
        "batsman": "Batter",
        "non_striker": "Partner",
        "bowler": "Bowler",
        "runs": 0,
        "extra_code": "0",
        "kind_of_wicket": "",
        "dismissed_player": None,
        "assisting_player": None,
    }
    fields.update(overrides)
    for key in ("batsman", "non_striker", "bowler", "dismissed_player", "assisting_player"):
        if isinstance(fields[key], str):
            fields[key] = Player(fields[key])
    return Delivery(**fields)


@pytest.fixture
def deliveries():
    return load_deliveries(SCORES_FILE)


@pytest.fixture
def board(deliveries):
    return ScoreBoard(deliveries)


@pytest.fixture
def mccullum():
    return Player("BB McCullum")


@pytest.fixture
def ganguly():
    return Player("SC Ganguly")


@pytest.fixture
def dravid():
    return Player("Rahul Dravid")


@pytest.fixture
def zaheer():
    return Player("Z Khan")


@pytest.fixture
def kumar():
    return Player("P Kumar")


@pytest.fixture
def kohli():
    return Player("Virat Kohli")
