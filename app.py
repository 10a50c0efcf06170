"""CricPoints - fantasy cricket Player of the Match.

Flask web application that scores a match from ball-by-ball delivery
records and reports the man of the match.
"""

import logging

from flask import Flask, jsonify, request

from scoring_engine import config
from scoring_engine.calculator import ScoreBoard
from scoring_engine.config import load_rules
from scoring_engine.errors import ParseError, PlayerNotFoundError, ScoringError
from scoring_engine.models import Player, PlayerPoints
from scoring_engine.reader import read_deliveries

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ───── API Endpoints ─────

@app.route("/rules")
def rules():
    """Return the active scoring rules."""
    return jsonify(load_rules().to_dict())


@app.route("/calculate", methods=["POST"])
def calculate():
    """Score every player in the posted deliveries."""
    try:
        board = _board_from_request()
        players = [_points_to_dict(pp) for pp in board.points_table()]
        man_of_match = sorted(p.name for p in board.man_of_match())
    except ScoringError as e:
        logger.warning("Rejected /calculate request: %s", e)
        return jsonify({"success": False, "error": str(e)}), 400

    return jsonify({
        "success": True,
        "teams": [_team_to_dict(board, team) for team in board.teams],
        "players": players,
        "man_of_match": man_of_match,
    })


@app.route("/player/<name>", methods=["POST"])
def player_points(name):
    """Return one player's points breakdown."""
    try:
        board = _board_from_request()
        points = board.player_points(Player(name))
    except PlayerNotFoundError as e:
        return jsonify({"success": False, "error": str(e)}), 404
    except ScoringError as e:
        logger.warning("Rejected /player request: %s", e)
        return jsonify({"success": False, "error": str(e)}), 400

    return jsonify({"success": True, "player": _points_to_dict(points)})


# ───── Helpers ─────

def _board_from_request() -> ScoreBoard:
    """Parse deliveries from the request body into a ScoreBoard.

    Accepts JSON {"deliveries": "<text>"} or {"deliveries": [line, ...]},
    or a plain-text body with one delivery per line.
    """
    data = request.get_json(silent=True)
    if data is not None:
        raw = data.get("deliveries", "") if isinstance(data, dict) else data
    else:
        raw = request.get_data(as_text=True)

    if isinstance(raw, str):
        lines = raw.splitlines()
    elif isinstance(raw, list):
        lines = [str(line) for line in raw]
    else:
        raise ParseError("deliveries must be text or a list of lines")
    deliveries = read_deliveries(lines)
    logger.debug("Scoring %d posted deliveries", len(deliveries))
    return ScoreBoard(deliveries, load_rules())


def _team_to_dict(board: ScoreBoard, team: str) -> dict:
    summary = {
        "name": team,
        "players": sorted(p.name for p in board.team_players(team)),
        "runs": board.team_runs(team),
        "balls": board.team_balls(team),
        "runs_given": board.team_runs_given(team),
        "balls_bowled": board.team_balls_bowled(team),
    }
    summary["strike_rate"] = str(board.team_strike_rate(team)) if summary["balls"] else None
    summary["economy_rate"] = str(board.team_economy_rate(team)) if summary["balls_bowled"] else None
    return summary


def _points_to_dict(pp: PlayerPoints) -> dict:
    return {
        "name": pp.name, "team": pp.team,
        "batting_points": pp.batting_points,
        "bowling_points": str(pp.bowling_points),
        "fielding_points": str(pp.fielding_points),
        "batting_bonus": str(pp.batting_bonus),
        "bowling_bonus": str(pp.bowling_bonus),
        "base_points": str(pp.base_points),
        "bonus_points": str(pp.bonus_points),
        "match_points": str(pp.match_points),
    }


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config.validate_config()
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
