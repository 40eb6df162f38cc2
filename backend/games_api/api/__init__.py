from flask import Flask

from ..domain.models.game import Game
from ..domain.store import Store
from .error_handlers import register_error_handlers
from .games import register_game_routes


def register_routes(app: Flask, store: Store[Game]) -> None:
    register_game_routes(app, store)
    register_error_handlers(app)
