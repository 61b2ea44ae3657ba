import pytest

from whistbook.services.whist import (
    Deal,
    DiffOutOfRange,
    Game,
    InvalidPlayers,
    InvalidTeamComposition,
    Points,
    Team,
    parse,
)


def _scenario(game):
    game.add_deal(Deal(Team.solo(0, (1, 2, 3)), parse('Solo 5'), 6))
    game.add_deal(Deal(Team.duo((1, 2), (0, 3)), parse('Samen 8'), 9))
    return game


def test_new_game_is_zero_seeded(four_players):
    game = Game('friday', four_players)
    assert game.deals == []
    assert game.scores == [Points.zeros(4)]
    assert game.last_score() == [0, 0, 0, 0]
    assert game.diff(0) == [0, 0, 0, 0]
    assert game.last_diff() == [0, 0, 0, 0]
    assert game.rounds() == []


def test_scenario(four_players):
    game = _scenario(Game('friday', four_players))
    assert len(game.scores) == len(game.deals) + 1
    assert game.scores[1] == [12, -4, -4, -4]
    assert game.last_score() == [1, 7, 7, -15]
    assert game.diff(1) == [12, -4, -4, -4]
    assert game.diff(2) == [-11, 11, 11, -11]
    assert game.last_diff() == game.diff(2)
    assert game.rounds() == [game.diff(1), game.diff(2)]


def test_add_deal_returns_delta(four_players):
    game = Game('friday', four_players)
    delta = game.add_deal(Deal(Team.solo(1, (0, 2, 3)), parse('Solo Slim'), 13))
    assert delta == [-60, 180, -60, -60]
    assert game.last_diff() == delta


def test_diff_inversion(four_players):
    game = _scenario(Game('friday', four_players))
    game.add_deal(Deal(Team.solo(3, (0, 1, 2)), parse('Open Miserie'), 2))
    for n in range(1, len(game.scores)):
        assert game.scores[n - 1] + game.diff(n) == game.scores[n]


@pytest.mark.parametrize('n', [3, 10, -1])
def test_diff_out_of_range(four_players, n):
    game = _scenario(Game('friday', four_players))
    with pytest.raises(DiffOutOfRange):
        game.diff(n)


def test_replay_is_deterministic(four_players):
    assert _scenario(Game('a', four_players)).scores == _scenario(Game('b', four_players)).scores


def test_rejected_deal_leaves_ledger_untouched():
    game = Game('six', ['A', 'B', 'C', 'D', 'E', 'F'])
    with pytest.raises(InvalidTeamComposition):
        game.add_deal(Deal(Team.solo(0, (1, 2, 6)), parse('Solo 6'), 6))
    assert game.deals == []
    assert len(game.scores) == 1


def test_larger_table():
    game = Game('seven', ['A', 'B', 'C', 'D', 'E', 'F', 'G'])
    game.add_deal(Deal(Team.solo(6, (0, 2, 4)), parse('Abondance 10'), 11))
    assert game.last_score() == [-20, 0, -20, 0, -20, 0, 60]
    assert game.last_score().total == 0


@pytest.mark.parametrize('players', [
    ['A', 'B', 'C'],
    ['A', 'B', 'C', 'D', 'E', 'F', 'G', 'H'],
    ['A', 'B', 'C', ''],
    ['A', 'B', 'C', 'a'],
    ['A', 'B', 'C', None],
])
def test_invalid_players(players):
    with pytest.raises(InvalidPlayers):
        Game('bad', players)


def test_seat_lookup(four_players):
    game = Game('friday', four_players)
    assert game.seat('c') == 2


def test_dict_round_trip(four_players):
    game = _scenario(Game('friday', four_players))
    data = game.to_dict()
    assert data['scores'] == [[0, 0, 0, 0], [12, -4, -4, -4], [1, 7, 7, -15]]
    restored = Game.from_dict(data)
    assert restored.players == game.players
    assert restored.deals == game.deals
    assert restored.scores == game.scores


def test_from_dict_detects_tampered_scores(four_players):
    data = _scenario(Game('friday', four_players)).to_dict()
    data['scores'][-1] = [0, 0, 0, 0]
    with pytest.raises(ValueError):
        Game.from_dict(data)
