"""Exceptions raised by the scoring engine."""


class ScoringError(Exception):
    """Base class for every error the engine raises."""


class ParseError(ScoringError, ValueError):
    """A delivery record could not be built from its raw fields."""


class PlayerNotFoundError(ScoringError, LookupError):
    """The player never appears in the match."""


class NoDeliveriesError(ScoringError, ZeroDivisionError):
    """A team rate was requested for a side that never batted or bowled."""
