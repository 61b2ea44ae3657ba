"""Turn player names from a deal submission into a Team."""
from typing import Optional, Sequence

from .deal import Team
from .errors import InvalidTeamComposition, UnknownPlayer


def seat_index(players: Sequence[str], name: str) -> int:
    """Seat of `name` in `players`, compared case-insensitively."""
    if not isinstance(name, str):
        raise UnknownPlayer(f'{name!r} is not a player name')
    wanted = name.strip().lower()
    for index, player in enumerate(players):
        if player.lower() == wanted:
            return index
    raise UnknownPlayer(f'{name!r} is not playing in this game')


def build_team(players: Sequence[str], team: Sequence[str], opponents: Optional[Sequence[str]] = None) -> Team:
    """Build a Team from names.

    One team name makes a solo team, two make a duo team. When no opponents
    are given, every other seat is taken as an opponent.
    """
    declarers = [seat_index(players, name) for name in team]
    if opponents:
        others = [seat_index(players, name) for name in opponents]
    else:
        others = [i for i in range(len(players)) if i not in declarers]

    if len(declarers) == 1:
        if len(others) != 3:
            raise InvalidTeamComposition('need three opponents')
        return Team.solo(declarers[0], others, num_seats=len(players))
    if len(declarers) == 2:
        if len(others) != 2:
            raise InvalidTeamComposition('need two opponents')
        return Team.duo(declarers, others, num_seats=len(players))
    raise InvalidTeamComposition(f'A team has one or two players, got {len(declarers)}')
