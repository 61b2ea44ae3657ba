"""Teams, deals and how a deal's team point is spread over the seats."""
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .bids import Bid, parse
from .errors import InvalidTeamComposition
from .points import Points
from .scoring import check_tricks, points as team_points

PLAYING_SEATS = 4


class TeamKind(Enum):
    SOLO = 'solo'
    DUO = 'duo'


# (declarers, opponents) per kind
_SIZES = {TeamKind.SOLO: (1, 3), TeamKind.DUO: (2, 2)}


def _seats(values: Iterable[int]) -> Tuple[int, ...]:
    seats = tuple(values)
    for seat in seats:
        if isinstance(seat, bool) or not isinstance(seat, int) or seat < 0:
            raise InvalidTeamComposition(f'Invalid seat index: {seat!r}')
    return seats


@dataclass(frozen=True)
class Team:
    """Seat indices of the declaring side and of their opponents."""

    kind: TeamKind
    declarers: Tuple[int, ...]
    opponents: Tuple[int, ...]

    def __post_init__(self):
        object.__setattr__(self, 'declarers', _seats(self.declarers))
        object.__setattr__(self, 'opponents', _seats(self.opponents))
        want_declarers, want_opponents = _SIZES[self.kind]
        if len(self.declarers) != want_declarers or len(self.opponents) != want_opponents:
            raise InvalidTeamComposition(
                f'A {self.kind.value} team needs {want_declarers} declarer(s) '
                f'and {want_opponents} opponents'
            )
        seats = self.declarers + self.opponents
        if len(set(seats)) != len(seats):
            raise InvalidTeamComposition(f'Seats appear more than once: {list(seats)}')

    @classmethod
    def solo(cls, declarer: int, opponents: Iterable[int], num_seats: Optional[int] = None) -> 'Team':
        """One declarer against three opponents.

        Seats are only checked against the table when `num_seats` is given;
        otherwise `Game.add_deal` does it when the deal is recorded.
        """
        team = cls(TeamKind.SOLO, (declarer,), tuple(opponents))
        if num_seats is not None:
            team.check_seats(num_seats)
        return team

    @classmethod
    def duo(cls, declarers: Iterable[int], opponents: Iterable[int], num_seats: Optional[int] = None) -> 'Team':
        """Two declarers against two opponents; seats checked as in `solo`."""
        team = cls(TeamKind.DUO, tuple(declarers), tuple(opponents))
        if num_seats is not None:
            team.check_seats(num_seats)
        return team

    @property
    def seats(self) -> frozenset:
        return frozenset(self.declarers + self.opponents)

    def check_seats(self, num_seats: int) -> None:
        """Raise unless the team fits a table of `num_seats` seats.

        With four seats every seat plays, so the team must cover all of them.
        Larger tables sit the remaining players out for the deal.
        """
        out_of_range = sorted(s for s in self.seats if s >= num_seats)
        if out_of_range:
            raise InvalidTeamComposition(f'Seats {out_of_range} do not exist in a {num_seats}-seat game')
        if num_seats == PLAYING_SEATS and self.seats != frozenset(range(num_seats)):
            raise InvalidTeamComposition('Declarers and opponents must cover every seat exactly once')

    def to_dict(self):
        return {
            'kind': self.kind.value,
            'declarers': list(self.declarers),
            'opponents': list(self.opponents),
        }

    @classmethod
    def from_dict(cls, data) -> 'Team':
        try:
            kind = TeamKind(data['kind'])
        except (KeyError, ValueError):
            raise InvalidTeamComposition(f'Unknown team kind in {data!r}') from None
        return cls(kind, tuple(data.get('declarers', ())), tuple(data.get('opponents', ())))


@dataclass(frozen=True)
class Deal:
    team: Team
    bid: Bid
    achieved: int

    def __post_init__(self):
        check_tricks(self.achieved)
        expected = TeamKind.SOLO if self.bid.is_solo else TeamKind.DUO
        if self.team.kind is not expected:
            raise InvalidTeamComposition(
                f'{self.bid.label} is played by a {expected.value} team, not a {self.team.kind.value} team'
            )

    @property
    def team_point(self) -> int:
        return team_points(self.bid, self.achieved)

    def to_points(self, num_seats: int) -> Points:
        return distribute(self, num_seats)

    def to_dict(self):
        return {
            'team': self.team.to_dict(),
            'bid': self.bid.label,
            'achieved': self.achieved,
        }

    @classmethod
    def from_dict(cls, data) -> 'Deal':
        return cls(Team.from_dict(data['team']), parse(data['bid']), data['achieved'])


def distribute(deal: Deal, num_seats: int) -> Points:
    """Spread the deal's team point over the seats so that the result sums to zero."""
    deal.team.check_seats(num_seats)
    tp = deal.team_point
    # a solo declarer collects from three opponents
    share = 3 * tp if deal.team.kind is TeamKind.SOLO else tp
    values = [0] * num_seats
    for seat in deal.team.declarers:
        values[seat] = share
    for seat in deal.team.opponents:
        values[seat] = -tp
    return Points(values)
