"""Tests for team composition and team-level aggregates."""

from decimal import Decimal

import pytest

from scoring_engine import context
from scoring_engine.errors import NoDeliveriesError, PlayerNotFoundError
from scoring_engine.models import Player

from conftest import KKR, RCB, make_delivery


def test_rate_rounds_half_up():
    assert context.rate(21, 11) == Decimal("1.91")
    assert str(context.rate(17, 8)) == "2.13"  # 2.125
    assert str(context.rate(18, 10)) == "1.80"


class TestTeamComposition:

    def test_members_by_role(self, deliveries):
        teams = context.build_team_composition(deliveries)
        assert list(teams) == [KKR, RCB]
        assert teams[KKR] == {Player("BB McCullum"), Player("SC Ganguly"), Player("Rahul Dravid")}
        assert teams[RCB] == {Player("P Kumar"), Player("Z Khan"), Player("Virat Kohli")}

    def test_dismissed_player_alone_is_not_a_member(self):
        teams = context.build_team_composition([
            make_delivery(kind_of_wicket="run out", dismissed_player="Ghost"),
        ])
        with pytest.raises(PlayerNotFoundError):
            context.find_team(teams, Player("Ghost"))

    def test_fielder_joins_bowling_side(self, board, kohli):
        assert board.team_of(kohli) == RCB

    def test_team_players(self, board, kohli):
        assert kohli in board.team_players(RCB)
        assert len(board.team_players(KKR)) == 3
        assert board.team_players("Mumbai Indians") == frozenset()

    def test_unknown_player(self, board):
        with pytest.raises(PlayerNotFoundError):
            board.team_of(Player("Nobody"))


class TestTeamAggregates:

    def test_team_runs(self, board):
        assert board.team_runs(KKR) == 21
        assert board.team_runs() == 21
        assert board.team_runs(RCB) == 0

    def test_team_balls(self, board):
        assert board.team_balls(KKR) == 11
        assert board.team_balls() == 11

    def test_team_strike_rate(self, board):
        assert str(board.team_strike_rate(KKR)) == "1.91"

    def test_team_runs_given(self, board):
        assert board.team_runs_given(RCB) == 21
        assert board.team_balls_bowled(RCB) == 11
        assert str(board.team_economy_rate(RCB)) == "1.91"

    def test_side_that_never_batted(self, board):
        with pytest.raises(NoDeliveriesError):
            board.team_strike_rate(RCB)

    def test_side_that_never_bowled(self, board):
        with pytest.raises(NoDeliveriesError):
            board.team_economy_rate(KKR)

    def test_aggregates_are_scoped_by_team(self):
        deliveries = [
            make_delivery(batting_team="A", bowling_team="B", runs=4),
            make_delivery(batting_team="A", bowling_team="B", runs=0, extra_code="1wd"),
            make_delivery(batting_team="B", bowling_team="A", runs=1,
                          batsman="B1", non_striker="B2", bowler="A1"),
        ]
        assert context.team_runs(deliveries, "A") == 5
        assert context.team_balls(deliveries, "A") == 1
        assert context.team_runs(deliveries, "B") == 1
        assert context.team_runs_given(deliveries, "B") == 5
        assert context.team_balls_bowled(deliveries, "A") == 1
        assert context.team_runs(deliveries) == 6
        assert context.team_balls(deliveries) == 2


class TestMarkedlyDifferent:

    def test_strictly_greater(self):
        assert not context.is_markedly_different(Decimal("-0.20"), Decimal("2.00"), Decimal("0.1"))
        assert context.is_markedly_different(Decimal("-0.21"), Decimal("2.00"), Decimal("0.1"))
        assert context.is_markedly_different(Decimal("0.21"), Decimal("2.00"), Decimal("0.1"))
