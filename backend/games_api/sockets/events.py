import logging

from flask import request
from flask_socketio import SocketIO

from ..domain.models.game import Game
from ..extensions import socketio

logger = logging.getLogger(__name__)

GAME_SAVED = "game_saved"
GAME_DELETED = "game_deleted"


# ── outgoing ────────────────────────────────────────────────
def notify_saved(sio: SocketIO, game: Game, created: bool) -> None:
    sio.emit(GAME_SAVED, {"game": game.to_dict(), "created": created})


def notify_deleted(sio: SocketIO, game_id: int) -> None:
    sio.emit(GAME_DELETED, {"id": game_id})


# ───────────────── events ──────────────────────────────────
# registered once on the shared SocketIO; init_app re-binds them per app
@socketio.event
def connect(*_args):
    logger.info("[connect] %s", request.sid)


@socketio.event
def disconnect(*_args):
    logger.info("[disconnect] %s", request.sid)
