from whistbook import db
from whistbook.services.whist import Game
from datetime import datetime, timezone
import json


def _now():
    return datetime.now(timezone.utc)


class GameRecord(db.Model):
    """A stored game. The whole score ledger lives in `state` as JSON."""
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(128), unique=True, nullable=False, index=True)
    state = db.Column(db.Text, nullable=False)
    # Bumped on every update; a write based on a stale read fails
    version_id = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=_now, nullable=False)
    updated_at = db.Column(db.DateTime(timezone=True), default=_now, onupdate=_now, nullable=False)

    __mapper_args__ = {'version_id_col': version_id}

    def load(self) -> Game:
        return Game.from_dict(json.loads(self.state))

    def store(self, game: Game) -> None:
        self.name = game.name
        self.state = json.dumps(game.to_dict())

    def summary(self, game=None):
        game = game or self.load()
        return {
            'id': self.id,
            'name': game.name,
            'players': game.players,
            'totals': game.last_score().to_list(),
            'deal_count': len(game.deals),
        }

    def to_dict(self, game=None):
        game = game or self.load()
        deals = []
        for n, deal in enumerate(game.deals, start=1):
            deals.append({
                'number': n,
                'team': [game.players[i] for i in deal.team.declarers],
                'opponents': [game.players[i] for i in deal.team.opponents],
                'bid': deal.bid.label,
                'achieved': deal.achieved,
                'points': game.diff(n).to_list(),
            })
        payload = self.summary(game)
        payload.update({
            'deals': deals,
            'scores': [s.to_list() for s in game.scores],
            'version': self.version_id,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        })
        return payload
