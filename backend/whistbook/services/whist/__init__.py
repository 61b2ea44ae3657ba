"""Whist scoring engine.

Pure domain logic: the bid catalogue, the point table, how a deal's points
are spread over the seats, and the per-game score ledger. HTTP routes and
the storage model import from here; nothing in this package touches the
database, the request or the logger.
"""
from .bids import Bid, BidKind, duo_bids, parse, solo_bids
from .deal import Deal, Team, TeamKind, distribute
from .errors import (
    DiffOutOfRange,
    InvalidPlayers,
    InvalidTeamComposition,
    OutOfRangeTricks,
    UnknownBid,
    UnknownPlayer,
    WhistError,
)
from .game import Game
from .points import Points
from .scoring import points
from .seating import build_team, seat_index
