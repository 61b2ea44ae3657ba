"""Score ledger of a single game.

`scores` holds the cumulative score after every deal and starts with an
all-zero snapshot, so there is always one more snapshot than there are
deals and `scores[n] - scores[n - 1]` is what deal n brought in.
"""
from typing import List, Sequence

from .deal import Deal
from .errors import DiffOutOfRange, InvalidPlayers
from .points import Points
from .seating import seat_index

MIN_SEATS = 4
MAX_SEATS = 7


def check_players(players: Sequence[str]) -> List[str]:
    names = [p.strip() if isinstance(p, str) else p for p in players]
    if not MIN_SEATS <= len(names) <= MAX_SEATS:
        raise InvalidPlayers(f'A game needs {MIN_SEATS} to {MAX_SEATS} players, got {len(names)}')
    if any(not isinstance(n, str) or not n for n in names):
        raise InvalidPlayers('Player names must be non-empty')
    if len({n.lower() for n in names}) != len(names):
        raise InvalidPlayers('Player names must be distinct')
    return names


class Game:

    def __init__(self, name: str, players: Sequence[str]):
        self.name = name
        self.players = check_players(players)
        self.deals: List[Deal] = []
        self.scores: List[Points] = [Points.zeros(len(self.players))]

    @property
    def num_seats(self) -> int:
        return len(self.players)

    def seat(self, name: str) -> int:
        return seat_index(self.players, name)

    def add_deal(self, deal: Deal) -> Points:
        """Record a deal and return the points it brought each seat."""
        delta = deal.to_points(self.num_seats)
        self.deals.append(deal)
        self.scores.append(self.last_score() + delta)
        return delta

    def last_score(self) -> Points:
        return self.scores[-1]

    def diff(self, n: int) -> Points:
        """Points gained in the round that led up to the n'th score."""
        if not 0 <= n < len(self.scores):
            raise DiffOutOfRange(f'No score {n}; the game has {len(self.scores)} scores')
        if n == 0:
            return self.scores[0]
        return self.scores[n] - self.scores[n - 1]

    def last_diff(self) -> Points:
        return self.diff(len(self.scores) - 1)

    def rounds(self) -> List[Points]:
        return [self.diff(n) for n in range(1, len(self.scores))]

    def to_dict(self):
        return {
            'name': self.name,
            'players': list(self.players),
            'deals': [d.to_dict() for d in self.deals],
            'scores': [s.to_list() for s in self.scores],
        }

    @classmethod
    def from_dict(cls, data) -> 'Game':
        game = cls(data['name'], data['players'])
        for raw in data.get('deals', []):
            game.add_deal(Deal.from_dict(raw))
        stored = data.get('scores')
        if stored is not None and [s.to_list() for s in game.scores] != [list(s) for s in stored]:
            raise ValueError(f'Stored scores of {game.name!r} do not match its deals')
        return game

    def __repr__(self):
        return f'<Game {self.name!r} players={self.players} deals={len(self.deals)}>'
