class WhistError(Exception):
    """Base class for every error raised by the scoring engine."""


class UnknownBid(WhistError):
    """The bid label is not part of the catalogue."""


class InvalidTeamComposition(WhistError):
    """Seats do not split into declarers and opponents, or the team kind does not fit the bid."""


class OutOfRangeTricks(WhistError):
    """Tricks achieved must be an integer between 0 and 13."""


class DiffOutOfRange(WhistError):
    """A per-round diff was requested beyond the recorded history."""


class InvalidPlayers(WhistError):
    """A game needs 4 to 7 distinct, non-empty player names."""


class UnknownPlayer(WhistError):
    """A player name does not match any seat in the game."""
