from flask import Blueprint, jsonify, request, current_app
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm.exc import StaleDataError
from whistbook import db, socketio
from whistbook.models import GameRecord
from whistbook.services.whist import (
    Deal,
    DiffOutOfRange,
    Game,
    WhistError,
    build_team,
    duo_bids,
    parse,
    solo_bids,
)


games = Blueprint('games', __name__)


def _room(game_id: int) -> str:
    return f"game:{game_id}"


def _names(value):
    """A single name or a list of names from a request body, else None."""
    if value is None:
        return []
    if isinstance(value, str):
        value = [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        # blank entries come from unused form fields
        return [v for v in value if v.strip()]
    return None


@games.route('/bids', methods=['GET'])
def list_bids():
    return jsonify({'solo': solo_bids(), 'duo': duo_bids()})


@games.route('/create', methods=['POST'])
def create_game():
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400
    name = data.get('name') or ''
    if not isinstance(name, str):
        return jsonify({'error': 'Game name must be a string'}), 400
    name = name.strip()
    if not name:
        return jsonify({'error': 'Game name is required'}), 400
    players = data.get('players')
    if not isinstance(players, list):
        return jsonify({'error': 'players must be a list of names'}), 400
    # Optional seats (5th to 7th player) may come in blank
    players = [p for p in players if not (isinstance(p, str) and not p.strip())]

    try:
        game = Game(name, players)
    except WhistError as exc:
        return jsonify({'error': str(exc)}), 400

    if GameRecord.query.filter_by(name=name).first():
        return jsonify({'error': f'A game named {name!r} already exists'}), 409

    record = GameRecord()
    record.store(game)
    db.session.add(record)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        return jsonify({'error': f'A game named {name!r} already exists'}), 409

    current_app.logger.info(f"[game-created] game={record.id} name={name!r} players={len(game.players)}")
    return jsonify(record.to_dict(game)), 201


@games.route('', methods=['GET'])
def list_games():
    records = GameRecord.query.order_by(GameRecord.created_at.desc(), GameRecord.id.desc()).all()
    return jsonify([r.summary() for r in records])


@games.route('/<int:game_id>/state', methods=['GET'])
def get_game_state(game_id):
    record = GameRecord.query.filter_by(id=game_id).first_or_404()
    return jsonify(record.to_dict())


@games.route('/<int:game_id>/deals', methods=['POST'])
def add_deal(game_id):
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400
    record = GameRecord.query.filter_by(id=game_id).first_or_404()
    game = record.load()

    team = _names(data.get('team'))
    opponents = _names(data.get('opp', data.get('opponents')))
    if team is None or opponents is None:
        return jsonify({'error': 'team and opp must be a name or a list of names'}), 400
    achieved = data.get('slagen', data.get('achieved'))
    if isinstance(achieved, str) and achieved.strip().isdigit():
        achieved = int(achieved)

    try:
        deal = Deal(build_team(game.players, team, opponents), parse(data.get('bid')), achieved)
        points = game.add_deal(deal)
    except WhistError as exc:
        current_app.logger.info(f"[deal-rejected] game={game_id} reason={exc}")
        return jsonify({'error': str(exc)}), 400

    record.store(game)
    db.session.add(record)
    try:
        db.session.commit()
    except StaleDataError:
        db.session.rollback()
        current_app.logger.warning(f"[deal-conflict] game={game_id} concurrent update")
        return jsonify({'error': 'The game was changed by someone else, reload and try again'}), 409

    scores = game.last_score().to_list()
    current_app.logger.info(
        f"[deal-added] game={game_id} bid={deal.bid.label} achieved={deal.achieved} points={points.to_list()}"
    )
    socketio.emit('score_update', {
        'game_id': game_id,
        'points': points.to_list(),
        'scores': scores,
        'deal_count': len(game.deals),
    }, to=_room(game_id), namespace='/ws')

    return jsonify({
        'deal': len(game.deals),
        'points': points.to_list(),
        'scores': scores,
        'players': game.players,
    }), 201


@games.route('/<int:game_id>/diff/<int:n>', methods=['GET'])
def get_diff(game_id, n):
    record = GameRecord.query.filter_by(id=game_id).first_or_404()
    try:
        points = record.load().diff(n)
    except DiffOutOfRange as exc:
        return jsonify({'error': str(exc)}), 404
    return jsonify({'n': n, 'points': points.to_list()})


@games.route('/<int:game_id>', methods=['DELETE'])
def delete_game(game_id):
    record = GameRecord.query.filter_by(id=game_id).first_or_404()
    db.session.delete(record)
    try:
        db.session.commit()
    except StaleDataError:
        db.session.rollback()
        current_app.logger.warning(f"[delete-conflict] game={game_id} concurrent update")
        return jsonify({'error': 'The game was changed by someone else, reload and try again'}), 409
    current_app.logger.info(f"[game-deleted] game={game_id}")
    socketio.emit('game_deleted', {'game_id': game_id}, to=_room(game_id), namespace='/ws')
    return jsonify({'message': f'Game {game_id} deleted'})
