from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from flask_socketio import SocketIO
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()
socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = flask_app.config.get('CORS_ORIGINS', [])

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    CORS(flask_app, origins=allowed_origins)

    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    from whistbook.main import main
    flask_app.register_blueprint(main)

    from whistbook.api.games import games
    flask_app.register_blueprint(games, url_prefix='/api/games')

    from whistbook.socketio_events import register_socketio_handlers
    register_socketio_handlers()

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database with a demo game."""
        from whistbook.models import GameRecord
        from whistbook.services.whist import Deal, Game, Team, parse
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            game = Game('Demo', ['Anna', 'Bram', 'Cis', 'Dirk'])
            game.add_deal(Deal(Team.solo(0, (1, 2, 3)), parse('Solo 5'), 6))
            game.add_deal(Deal(Team.duo((1, 2), (0, 3)), parse('Samen 8'), 9))
            record = GameRecord(name=game.name)
            record.store(game)
            db.session.add(record)

            db.session.commit()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
