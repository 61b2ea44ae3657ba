from flask_socketio import join_room, leave_room, emit
from whistbook import socketio


def _room_for(data):
    game_id = (data or {}).get('game_id')
    if game_id is None:
        return None
    return f"game:{game_id}"


def handle_connect():
    emit('connected', {'message': 'Connected to /ws'})


def handle_join_game(data):
    # Clients watching a scoreboard join the game's room to get score_update pushes
    room = _room_for(data)
    if not room:
        emit('error', {'message': 'game_id is required'})
        return
    join_room(room)
    emit('joined', {'room': room})


def handle_leave_game(data):
    room = _room_for(data)
    if not room:
        emit('error', {'message': 'game_id is required'})
        return
    leave_room(room)
    emit('left', {'room': room})


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on namespace '/ws'."""
    socketio.on_event('connect', handle_connect, namespace='/ws')
    socketio.on_event('join_game', handle_join_game, namespace='/ws')
    socketio.on_event('leave_game', handle_leave_game, namespace='/ws')
    socketio.on_event('ping', handle_ping, namespace='/ws')
