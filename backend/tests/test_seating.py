import pytest

from whistbook.services.whist import (
    InvalidTeamComposition,
    Team,
    UnknownPlayer,
    build_team,
    seat_index,
)

PLAYERS = ['Anna', 'Bram', 'Cis', 'Dirk']


def test_seat_index_ignores_case():
    assert seat_index(PLAYERS, 'anna') == 0
    assert seat_index(PLAYERS, 'DIRK') == 3
    with pytest.raises(UnknownPlayer):
        seat_index(PLAYERS, 'Eva')
    with pytest.raises(UnknownPlayer):
        seat_index(PLAYERS, 1)
    with pytest.raises(UnknownPlayer):
        seat_index(PLAYERS, None)


def test_opponents_default_to_everyone_else():
    assert build_team(PLAYERS, ['Cis']) == Team.solo(2, (0, 1, 3))
    assert build_team(PLAYERS, ['bram', 'dirk']) == Team.duo((1, 3), (0, 2))


def test_explicit_opponents():
    players = PLAYERS + ['Eva']
    assert build_team(players, ['Eva'], ['Anna', 'Bram', 'Cis']) == Team.solo(4, (0, 1, 2))


def test_larger_table_needs_explicit_opponents():
    with pytest.raises(InvalidTeamComposition):
        build_team(PLAYERS + ['Eva'], ['Eva'])


@pytest.mark.parametrize('team', [[], ['Anna', 'Bram', 'Cis']])
def test_team_size(team):
    with pytest.raises(InvalidTeamComposition):
        build_team(PLAYERS, team)


def test_duplicate_names_are_rejected():
    with pytest.raises(InvalidTeamComposition):
        build_team(PLAYERS, ['Anna'], ['anna', 'Bram', 'Cis'])
