import logging

from flask import Blueprint, Flask, jsonify, request
from werkzeug.exceptions import BadRequest

from ..domain.models.game import Game, parse_game_id
from ..domain.store import Store
from ..extensions import socketio
from ..sockets import notify_deleted, notify_saved

logger = logging.getLogger(__name__)


def _path_id(raw: str) -> int:
    try:
        return parse_game_id(raw)
    except ValueError as e:
        raise BadRequest(str(e)) from e


def register_game_routes(app: Flask, store: Store[Game]) -> None:
    bp = Blueprint("games", __name__)

    @bp.get("/games")
    def get_games():
        return jsonify([g.to_dict() for g in store.get_all()])

    @bp.get("/games/<game_id>")
    def get_game_by_id(game_id: str):
        gid = _path_id(game_id)
        game = store.get(gid)
        if game is None:
            logger.debug("game %d not found", gid)
            return "", 404
        return jsonify(game.to_dict())

    @bp.put("/games")
    def update_game():
        # force: клиенты часто забывают Content-Type
        try:
            raw = request.get_json(force=True, silent=True)
        except RecursionError as e:
            raise BadRequest("request body is nested too deeply") from e
        if raw is None:
            raise BadRequest("request body must be valid JSON")
        try:
            game = Game.from_raw(raw)
        except ValueError as e:
            raise BadRequest(str(e)) from e

        created = store.save(game) is None
        logger.info("game %d %s", game.id, "created" if created else "updated")
        notify_saved(socketio, game, created)
        return "", 201 if created else 200

    @bp.delete("/games/<game_id>")
    def delete_game_by_id(game_id: str):
        gid = _path_id(game_id)
        if store.delete(gid) is None:
            logger.debug("game %d not found", gid)
            return "", 404
        logger.info("game %d deleted", gid)
        notify_deleted(socketio, gid)
        return "", 200

    @bp.get("/health")
    def health():
        return jsonify({"status": "ok", "games": len(store)})

    app.register_blueprint(bp)
